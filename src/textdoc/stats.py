from __future__ import annotations

from dataclasses import dataclass

from .document import Document


@dataclass
class DocumentStats:
    title: str
    word_count: int
    unique_words: int
    average_word_length: float
    longest_word: str | None


def compute_stats(doc: Document) -> DocumentStats:
    words = doc.words()

    longest: str | None = None
    for w in words:
        if longest is None or len(w) > len(longest):
            longest = w

    return DocumentStats(
        title=doc.title,
        word_count=len(words),
        unique_words=len(set(words)),
        # goes through the document so its empty-content policy applies
        average_word_length=doc.average_word_length(),
        longest_word=longest,
    )
