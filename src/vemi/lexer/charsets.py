"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Safe handling of the empty-string END sentinel (``"" in "abc"`` is True,
  ``"" in frozenset("abc")`` is False)

Usage:
    from vemi.lexer.charsets import INLINE_DELIMITERS

    if char in INLINE_DELIMITERS:  # O(1) lookup
        ...
"""

# Characters that end an inline text run
INLINE_DELIMITERS: frozenset[str] = frozenset("*_`[]")

# Fence literals, exactly three characters each
FENCES: tuple[str, ...] = ("```", "~~~")

# Fence characters
FENCE_CHARS: frozenset[str] = frozenset("`~")

# Unordered list markers
UNORDERED_LIST_MARKERS: frozenset[str] = frozenset("-*+")

# ASCII digits for ordered list detection (no Unicode digits)
DIGITS: frozenset[str] = frozenset("0123456789")

# Maximum ATX heading level
MAX_HEADING_LEVEL = 6
