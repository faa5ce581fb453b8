"""Identifiers and values stored in the database."""

from __future__ import annotations

from dataclasses import dataclass

from eszett.language import IdType


@dataclass(frozen=True, order=True)
class LemmaId:
    """The row id of a lemma."""

    id: IdType


@dataclass(frozen=True, order=True)
class Lemma:
    """A lemma, the dictionary form of a word."""

    term: str


@dataclass(frozen=True, order=True)
class LexemeId:
    """The row id of a lexeme."""

    id: IdType


@dataclass(frozen=True, order=True)
class PartOfSpeechId:
    """The row id of a part of speech."""

    id: IdType


@dataclass(frozen=True)
class Term:
    """A written term in some language."""

    term: str

    def __str__(self) -> str:
        return self.term


@dataclass(frozen=True, order=True)
class TermId:
    """The row id of a term."""

    id: IdType