"""Users of the library."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class User:
    """A named user."""

    name: str


def create_user(name: str) -> User:
    """Create a user with the given name."""
    return User(name=name)