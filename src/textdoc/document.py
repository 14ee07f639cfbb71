from __future__ import annotations

import sys
from typing import TextIO

from .clean import obscure_times, split_words
from .profiles import DocumentProfile


class EmptyDocumentError(ZeroDivisionError):
    """Raised for per-word averages over a document with no words."""


class Document:
    """A titled, authored block of text.

    ``words`` and everything built on it are recomputed from ``content`` on
    every call, so they always match the current body text.

    Assigning ``title`` only takes effect while ``writable`` is true; on a
    non-writable document the assignment is silently dropped and callers have
    no way to tell it was ignored. ``read_only`` is stored but nothing checks it.
    """

    def __init__(
        self,
        title: str,
        author: str,
        content: str,
        writable: bool = False,
        read_only: bool = False,
        profile: DocumentProfile | None = None,
    ) -> None:
        # bypass the guarded setter: the initial title is always kept
        self._title = title
        self.author = author
        self.content = content
        self.writable = writable
        self.read_only = read_only
        self.profile = profile or DocumentProfile()

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, new_title: str) -> None:
        if self.writable:
            self._title = new_title

    def words(self) -> list[str]:
        return split_words(self.content)

    def word_count(self) -> int:
        return len(self.words())

    def add_authors(self, *names: str) -> str:
        """Append ``names`` to ``author``, space separated, and return the result."""
        self.author += " " + " ".join(names)
        return self.author

    def index_for(self, word: str) -> int | None:
        """Position of the first word equal to ``word`` (case-sensitive), else None."""
        for i, w in enumerate(self.words()):
            if w == word:
                return i
        return None

    def average_word_length(self) -> float:
        words = self.words()
        if not words:
            policy = self.profile.empty_average
            if policy == "zero":
                return 0.0
            if policy == "nan":
                return float("nan")
            raise EmptyDocumentError(f"Document {self.title!r} has no words to average")
        total = sum(len(w) for w in words)
        return total / len(words)

    def obscure_times(self) -> str | None:
        """Redact clock times ("10:30 AM") in place.

        Returns the new content, or None when nothing matched.
        """
        new_content, n = obscure_times(self.content, self.profile.time_mask)
        if n == 0:
            return None
        self.content = new_content
        return self.content

    def describe(self, out: TextIO | None = None) -> None:
        out = out or sys.stdout
        print(f"I am {self!r}", file=out)
        print(f"My title is {self.title}", file=out)
        print(f"I have {self.word_count()} words", file=out)

    def clone(self) -> Document:
        copy = Document(self.title, self.author, self.content, profile=self.profile)
        if self.profile.clone_flags:
            copy.writable = self.writable
            copy.read_only = self.read_only
        return copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return (
            self.title == other.title
            and self.author == other.author
            and self.content == other.content
            and self.writable == other.writable
            and self.read_only == other.read_only
        )

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return self.title

    def __repr__(self) -> str:
        return (
            f"Document(title={self.title!r}, author={self.author!r}, "
            f"words={self.word_count()}, writable={self.writable}, read_only={self.read_only})"
        )
