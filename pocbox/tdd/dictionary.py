"""A word dictionary with explicit add, update and delete semantics."""

from __future__ import annotations


class DictionaryError(Exception):
    """Base error for dictionary operations."""

    default_message = "dictionary error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class NotFoundError(DictionaryError):
    default_message = "could not find the word you were looking for"


class WordExistsError(DictionaryError):
    default_message = "cannot add word because it already exists"


class WordDoesNotExistError(DictionaryError):
    default_message = "cannot perform operation on word because it does not exist"


class Dictionary(dict):
    """A mapping of words to definitions."""

    def search(self, word: str) -> str:
        """Return the definition of ``word``."""
        try:
            return self[word]
        except KeyError:
            raise NotFoundError() from None

    def add(self, word: str, definition: str) -> None:
        """Add a new word; raise if it already exists."""
        if word in self:
            raise WordExistsError()
        self[word] = definition

    def update(self, word: str, definition: str) -> None:
        """Change the definition of an existing word."""
        if word not in self:
            raise WordDoesNotExistError()
        self[word] = definition

    def delete(self, word: str) -> None:
        """Remove an existing word."""
        if word not in self:
            raise WordDoesNotExistError()
        del self[word]