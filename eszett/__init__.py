"""Vocabulary reference tools: languages, parts of speech and lexeme files."""

__version__ = "0.1.0"