from __future__ import annotations

import logging

# Keywords recognised by every build of the language.
BASE_KEYWORDS: tuple[str, ...] = ("+", "fn", "let", "print")

# Only a keyword when macro support is switched on; otherwise a plain name.
MACRO_KEYWORD = "macro"

# Numbers are unsigned 32-bit.
U32_MAX = 2**32 - 1

DEFAULT_LOG_LEVEL = "WARNING"


def keywords(macros_enabled: bool = True) -> frozenset[str]:
    if macros_enabled:
        return frozenset(BASE_KEYWORDS + (MACRO_KEYWORD,))
    return frozenset(BASE_KEYWORDS)


KEYWORDS = keywords(True)


def resolve_log_level(name: str | None) -> int:
    """Map a level name such as ``debug`` to a logging level.

    Unknown or empty names fall back to DEFAULT_LOG_LEVEL.
    """
    if name:
        level = getattr(logging, name.upper(), None)
        if isinstance(level, int):
            return level
    return getattr(logging, DEFAULT_LOG_LEVEL)
