from __future__ import annotations

import re


DEFAULT_TIME_MASK = "**:** **"

# Clock times like "10:30 AM" / "09:15 PM"; ASCII digits only
TIME_RE = re.compile(r"\d\d:\d\d (AM|PM)", re.ASCII)


def split_words(text: str) -> list[str]:
    """Split on whitespace runs; leading/trailing whitespace yields no empty words."""
    return text.split()


def obscure_times(text: str, mask: str = DEFAULT_TIME_MASK) -> tuple[str, int]:
    """Replace every clock time in ``text`` with ``mask``.

    Returns the new text and the number of replacements made.
    """
    if not text:
        return text, 0
    # lambda keeps backslashes in a custom mask literal
    return TIME_RE.subn(lambda _m: mask, text)
