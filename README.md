# eszett

Tools for keeping a vocabulary reference as YAML files: reading lexeme
entries per language, merging them, and writing them back out sorted into
one file per initial letter.

## Installation

```
pip install eszett
```

## Reference files

Each language has its own directory below a root directory:
`data/en`, `data/es`, `data/fr` and `data/it` for English, Spanish, French
and Italian (`eszett.reference.get_directory`). Every `*.yaml` file directly
inside that directory maps a lemma to a list of lexemes, each written as
`[part-of-speech, [indicators...], comment]`, the comment being optional:

```yaml
"cat":
- [noun, ["animal"], "a small feline"]
- [verb, []]
```

Parts of speech are `noun`, `verb`, `adj` and `adv`; any prefix of
`adjective` or `adverb` of at least three letters is accepted as well.
A lemma with an empty value has no lexemes.

## Reformatting the English data

```
eszett-reference [ROOT]
```

This reads every YAML file in `ROOT/data/en`, merges the entries (lexemes of
a lemma that appears in several files are appended in file-name order) and
writes them back into `ROOT/data/en`, grouped by the first letter of each
lemma: `a.yaml` to `e.yaml`, and `#.yaml` for every other lemma. A first
letter counts only when it is that lower-case letter without accents.
Existing files of those names are overwritten; other files are left alone.

Without `ROOT`, the command looks for the nearest directory, starting from
the current one and going up, that holds a `pyproject.toml`. It exits with
status 1 and a message on standard error if a file cannot be read or written
or holds malformed entries.

## Using the library

```python
from pathlib import Path

from eszett.language import Language, LanguageDao, LanguageDto
from eszett.lexeme import LexemeMap
from eszett.part_of_speech import PartOfSpeechDto
from eszett.reference import categorize, read_lexemes

lexemes = read_lexemes(Language.ENGLISH, Path("."))
print(lexemes)  # the YAML text that the files are written with

for letter, group in categorize(lexemes).items():
    print(letter.name, len(group))

LanguageDto.parse("fr")          # LanguageDto.FRENCH
LanguageDao.from_id(2)           # LanguageDao.SPANISH
PartOfSpeechDto.parse("adject")  # PartOfSpeechDto.ADJECTIVE
PartOfSpeechDto.ADJECTIVE.to_json()  # '"adj"'
```

Modules:

- `eszett.language`: `Language`, `Script`, `LanguageDto` (two-letter
  codes), `LanguageDao` (database row ids 1 to 4).
- `eszett.part_of_speech`: `PartOfSpeech` and `PartOfSpeechDto`.
- `eszett.lexeme`: `LexemeMeta` and `LexemeMap`, with `from_yaml`,
  `LexemeMap.merge` and their text form.
- `eszett.reference`: `get_directory`, `read_files`, `read_lexemes`,
  `categorize`, `format_files`, `format_lexemes` and the command's `main`.
- `eszett.models`: identifier and value types (`TermId`, `Term`, `LemmaId`,
  `Lemma`, `LexemeId`, `PartOfSpeechId`).
- `eszett.client`: tagged shape dictionaries (`shape_from_dict`,
  `shape_to_dict`), a `Counter` and `greet`.
- `eszett.user`: `User` and `create_user`.

Invalid codes raise `InvalidLanguageCode` or `InvalidPartOfSpeechCode`,
unknown ids raise `InvalidLanguageId`, and malformed YAML entries raise
`LexemeError`; all of them are `ValueError`s.

## What it does not do

There is no database layer and no web server: the types in `eszett.models`
and `LanguageDao` only describe stored values, nothing here stores terms or
lemmas or serves them over HTTP, and nothing here queries a remote service.