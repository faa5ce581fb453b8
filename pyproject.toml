[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eszett"
version = "0.1.0"
description = "Vocabulary reference tools: lexeme files, languages and parts of speech"
requires-python = ">=3.10"
keywords = ["vocabulary", "lexeme", "lemma", "dictionary", "yaml", "language"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]
dependencies = [
    "pyyaml",
    "regex",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
eszett-reference = "eszett.reference:main"

[tool.hatch.build.targets.wheel]
packages = ["eszett"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
