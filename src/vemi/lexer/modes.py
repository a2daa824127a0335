"""Block lexer operating modes."""

from __future__ import annotations

from enum import Enum, auto


class LexerMode(Enum):
    """Block lexer operating modes.

    The block lexer switches between modes based on context:
    - BLOCK: Between blocks, classifying each line
    - CODE_FENCE: Inside a fenced code block, until the matching fence

    """

    BLOCK = auto()
    CODE_FENCE = auto()
