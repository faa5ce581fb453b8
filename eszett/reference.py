"""Reading reference lexeme files and sorting them into per-letter files."""

from __future__ import annotations

import argparse
import sys
import unicodedata
from collections.abc import Sequence
from enum import IntEnum, auto
from pathlib import Path

import regex
import yaml

from eszett.language import Language
from eszett.lexeme import LexemeError, LexemeMap, LexemeMeta


class LatinCharacterClass(IntEnum):
    """The initial letter a lemma is filed under; HASH holds everything else."""

    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()
    HASH = auto()


_FILED_LETTERS = {
    LatinCharacterClass.A: "a",
    LatinCharacterClass.B: "b",
    LatinCharacterClass.C: "c",
    LatinCharacterClass.D: "d",
    LatinCharacterClass.E: "e",
}

_DIRECTORIES = {
    Language.ENGLISH: Path("data/en"),
    Language.SPANISH: Path("data/es"),
    Language.FRENCH: Path("data/fr"),
    Language.ITALIAN: Path("data/it"),
}

_GRAPHEME = regex.compile(r"\X")


def get_directory(language: Language) -> Path:
    """Return the directory, relative to a root, that holds a language's files."""
    return _DIRECTORIES.get(language, Path("."))


def read_files(root: Path) -> LexemeMap:
    """Read and merge every `*.yaml` file directly inside root."""
    maps = [
        LexemeMap.from_yaml(yaml.safe_load(path.read_text(encoding="utf-8")))
        for path in sorted(Path(root).glob("*.yaml"))
    ]
    return LexemeMap.merge(maps)


def read_lexemes(language: Language, root: Path) -> LexemeMap:
    """Read the lexemes of a language from its directory under root."""
    return read_files(Path(root) / get_directory(language))


def _collates_as(grapheme: str, letter: str) -> bool:
    """Whether grapheme equals letter at tertiary strength: same base, accents and case."""
    decomposed = unicodedata.normalize("NFD", grapheme)
    significant = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Cf")
    return significant == letter


def _classify(lemma: str) -> LatinCharacterClass:
    first = _GRAPHEME.match(lemma)
    if first is None:
        raise LexemeError("Lemma is empty")
    grapheme = first.group()
    return next(
        (key for key, letter in _FILED_LETTERS.items() if _collates_as(grapheme, letter)),
        LatinCharacterClass.HASH,
    )


def categorize(lexemes: LexemeMap) -> dict[LatinCharacterClass, LexemeMap]:
    """Split a map by the first letter of each lemma, in class order."""
    groups: dict[LatinCharacterClass, dict[str, list[LexemeMeta]]] = {}
    for lemma, entries in lexemes.items():
        groups.setdefault(_classify(lemma), {})[lemma] = list(entries)
    return {key: LexemeMap(groups[key]) for key in sorted(groups)}


def format_files(path: Path, lexemes: LexemeMap) -> None:
    """Write one file per letter class into `data/en` under path."""
    for key, group in categorize(lexemes).items():
        name = _FILED_LETTERS.get(key, "#")
        output_path = Path(path) / "data" / "en" / f"{name}.yaml"
        output_path.write_text(str(group), encoding="utf-8")


def format_lexemes(language: Language, root: Path) -> None:
    """Read a language's lexemes under root and rewrite them as per-letter files."""
    format_files(Path(root), read_lexemes(language, root))


def _project_root() -> Path:
    cwd = Path.cwd()
    for candidate in (cwd, *cwd.parents):
        if (candidate / "pyproject.toml").is_file():
            return candidate
    raise FileNotFoundError("Could not find the project root")


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the English reference lexemes into per-letter files."""
    parser = argparse.ArgumentParser(
        prog="eszett-reference",
        description="Sort the English reference lexemes into per-letter files.",
    )
    parser.add_argument(
        "root",
        nargs="?",
        type=Path,
        help="directory holding data/en (default: the project root)",
    )
    args = parser.parse_args(argv)
    try:
        root = args.root if args.root is not None else _project_root()
        format_lexemes(Language.ENGLISH, root)
    except (OSError, ValueError, yaml.YAMLError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0