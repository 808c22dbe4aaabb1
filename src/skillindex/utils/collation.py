"""Locale-aware ordering for skill names."""

from __future__ import annotations

import unicodedata


def collation_key(text: str) -> tuple[str, str, str]:
    """Return a sort key approximating default Unicode collation.

    Letters compare first ignoring accents and case, then accents break ties,
    then lowercase sorts before uppercase (``"apple" < "Apple" < "banana"``).
    """
    folded = unicodedata.normalize("NFKD", text).casefold()
    base = "".join(char for char in folded if not unicodedata.combining(char))
    return base, folded, text.swapcase()
