"""Languages and scripts, with their code and database-id forms."""

from __future__ import annotations

from enum import Enum, IntEnum

IdType = int


class Language(Enum):
    """A natural language handled by the library."""

    ENGLISH = "english"
    FRENCH = "french"
    SPANISH = "spanish"
    ITALIAN = "italian"
    GERMAN = "german"
    MANDARIN = "mandarin"
    JAPANESE = "japanese"
    ARABIC = "arabic"


class Script(Enum):
    """A writing system, after ISO 15924."""

    LATIN = "latin"
    ARABIC = "arabic"
    TRADITIONAL_CHINESE = "traditional_chinese"
    SIMPLIFIED_CHINESE = "simplified_chinese"


class InvalidLanguageCode(ValueError):
    """Raised when a language code is not recognised."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Invalid language: {code}")
        self.code = code


class LanguageDto(Enum):
    """A language as exchanged with clients, identified by a two-letter code."""

    ENGLISH = "en"
    FRENCH = "fr"
    SPANISH = "es"
    ITALIAN = "it"
    GERMAN = "de"
    MANDARIN = "zh"
    JAPANESE = "ja"
    ARABIC = "ar"

    @classmethod
    def parse(cls, code: str) -> LanguageDto:
        """Return the language for a two-letter code."""
        try:
            return cls(code)
        except ValueError:
            raise InvalidLanguageCode(code) from None

    def __str__(self) -> str:
        return _DISPLAY_CODES[self]


_DISPLAY_CODES = {
    LanguageDto.ENGLISH: "en",
    LanguageDto.FRENCH: "fr",
    LanguageDto.SPANISH: "es",
    LanguageDto.ITALIAN: "it",
    LanguageDto.GERMAN: "de",
    LanguageDto.MANDARIN: "zh",
    LanguageDto.JAPANESE: "zh",
    LanguageDto.ARABIC: "zh",
}


class InvalidLanguageId(ValueError):
    """Raised when a database id names no language."""

    def __init__(self, value: IdType) -> None:
        super().__init__(f"Invalid language id: {value}")
        self.value = value


class LanguageDao(IntEnum):
    """A language as stored in the database, by its row id."""

    ENGLISH = 1
    SPANISH = 2
    FRENCH = 3
    ITALIAN = 4

    @classmethod
    def from_id(cls, value: IdType) -> LanguageDao:
        """Return the language stored under a database id."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidLanguageId(value)
        try:
            return cls(value)
        except ValueError:
            raise InvalidLanguageId(value) from None