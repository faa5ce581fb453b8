"""Parts of speech, with their short codes."""

from __future__ import annotations

import json
from enum import Enum


class PartOfSpeech(Enum):
    """A grammatical category of a word."""

    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"


class InvalidPartOfSpeechCode(ValueError):
    """Raised when a part-of-speech code is not recognised."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Invalid part-of-speech: {code}")
        self.code = code


class PartOfSpeechDto(Enum):
    """A part of speech as exchanged with clients, by its short code."""

    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adj"
    ADVERB = "adv"

    @classmethod
    def parse(cls, code: str) -> PartOfSpeechDto:
        """Parse a code; adjectives and adverbs accept any prefix of three or more letters."""
        if code == "noun":
            return cls.NOUN
        if code == "verb":
            return cls.VERB
        if len(code) >= 3 and "adjective".startswith(code):
            return cls.ADJECTIVE
        if len(code) >= 3 and "adverb".startswith(code):
            return cls.ADVERB
        raise InvalidPartOfSpeechCode(code)

    def to_json(self) -> str:
        """Return the JSON text of this part of speech."""
        return json.dumps(self.value)

    def __str__(self) -> str:
        return self.value