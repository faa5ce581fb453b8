"""Lexeme metadata and maps from lemmas to their lexemes."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from eszett.part_of_speech import PartOfSpeechDto


class LexemeError(ValueError):
    """Raised when lexeme data does not have the expected shape."""


_MISSING = object()


def _json_string(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


@dataclass
class LexemeMeta:
    """The part of speech, indicators and optional comment of one lexeme."""

    part_of_speech: PartOfSpeechDto
    indicators: list[str] = field(default_factory=list)
    comment: str | None = None

    @classmethod
    def from_yaml(cls, value: Any) -> LexemeMeta:
        """Read a lexeme from a `[part_of_speech, [indicators...], comment?]` sequence."""
        if not isinstance(value, list):
            raise LexemeError("Expected a sequence")
        if len(value) > 3:
            raise LexemeError("Too many values in meta array")

        raw_part, raw_indicators, raw_comment = [*value, *[_MISSING] * (3 - len(value))]

        if raw_part is _MISSING or raw_indicators is _MISSING:
            raise LexemeError("Invalid values lexeme meta")
        if not isinstance(raw_part, str):
            raise LexemeError("Expected a string as part-of-speech")
        part_of_speech = PartOfSpeechDto.parse(raw_part)

        if not isinstance(raw_indicators, list):
            raise LexemeError("Expected a sequence of indicators")
        if not all(isinstance(item, str) for item in raw_indicators):
            raise LexemeError("Expected a string as indicator")

        comment = None
        if raw_comment is not _MISSING:
            if not isinstance(raw_comment, str):
                raise LexemeError("Expected a string as comment")
            comment = raw_comment

        return cls(part_of_speech, list(raw_indicators), comment)

    def __str__(self) -> str:
        indicators = ", ".join(_json_string(item) for item in self.indicators)
        comment = "" if self.comment is None else f", {_json_string(self.comment)}"
        return f"[{self.part_of_speech}, [{indicators}]{comment}]"


@dataclass
class LexemeMap:
    """Lexemes grouped by lemma, kept in lemma order."""

    entries: dict[str, list[LexemeMeta]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.entries = dict(sorted(self.entries.items()))

    def items(self) -> Iterator[tuple[str, list[LexemeMeta]]]:
        """Yield (lemma, lexemes) pairs in lemma order."""
        return iter(sorted(self.entries.items()))

    def __len__(self) -> int:
        return len(self.entries)

    @classmethod
    def from_yaml(cls, value: Any) -> LexemeMap:
        """Read a map from a YAML mapping of lemmas to sequences of lexemes."""
        if not isinstance(value, dict):
            raise LexemeError("Value is not a mapping")

        entries: dict[str, list[LexemeMeta]] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise LexemeError("Key is not a string")
            if isinstance(item, list):
                try:
                    lexemes = [LexemeMeta.from_yaml(raw) for raw in item]
                except ValueError as error:
                    raise LexemeError(f"Could not convert value to vec: {key}") from error
            else:
                lexemes = []
            entries[key] = lexemes
        return cls(entries)

    @classmethod
    def merge(cls, maps: Iterable[LexemeMap]) -> LexemeMap:
        """Combine maps, appending the lexemes of lemmas that occur more than once."""
        merged: dict[str, list[LexemeMeta]] = {}
        for lexeme_map in maps:
            for lemma, lexemes in lexeme_map.entries.items():
                merged.setdefault(lemma, []).extend(lexemes)
        return cls(merged)

    def __str__(self) -> str:
        lines: list[str] = []
        for lemma, lexemes in self.items():
            lines.append(f"{_json_string(lemma)}:")
            lines.extend(f"- {lexeme}" for lexeme in lexemes)
        return "".join(f"{line}\n" for line in lines)