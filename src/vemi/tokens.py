"""Token vocabulary shared by the block and inline lexers.

The lexers produce lists of token objects that the parser consumes.
Each token is a frozen dataclass with a class-level ``type`` tag and a
``position`` marking where it begins in the source.

Two disjoint, closed sets of variants exist:
- Block tokens (BlockLexer): one per source line, or a
  start/content/end run for fenced code
- Inline tokens (InlineLexer): text runs interleaved with
  emphasis, strong, code span and link delimiters

Thread Safety:
Tokens are frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Usage:
    >>> from vemi import HeadingToken, tokenize_blocks
    >>> for token in tokenize_blocks("# Title"):
    ...     match token:
    ...         case HeadingToken(level=level, content=content):
    ...             print(level, content)
    1 Title

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, Literal

from vemi.location import SourcePosition

type EmphasisMarker = Literal["*", "_"]
type StrongMarker = Literal["**", "__"]


class TokenType(StrEnum):
    """Type tags for every token variant.

    Values are the wire names used in serialized token streams.
    """

    # Block tokens
    TEXT_LINE = "textLine"
    BLANK_LINE = "blankLine"
    HEADING = "heading"
    CODE_BLOCK_START = "codeBlockStart"
    CODE_BLOCK_CONTENT = "codeBlockContent"
    CODE_BLOCK_END = "codeBlockEnd"
    LIST_ITEM = "listItem"
    ORDERED_LIST_ITEM = "orderedListItem"
    BLOCKQUOTE = "blockquote"

    # Inline tokens
    TEXT = "text"
    EMPHASIS_START = "emphasisStart"
    EMPHASIS_END = "emphasisEnd"
    STRONG_START = "strongStart"
    STRONG_END = "strongEnd"
    CODE_START = "codeStart"
    CODE_END = "codeEnd"
    LINK_START = "linkStart"
    LINK_TEXT_END = "linkTextEnd"
    LINK_URL = "linkUrl"
    LINK_END = "linkEnd"


@dataclass(frozen=True, slots=True)
class BaseToken:
    """Fields common to every token.

    Attributes:
        position: Where the token begins in the source

    """

    type: ClassVar[TokenType]

    position: SourcePosition


# =============================================================================
# Block tokens
# =============================================================================


@dataclass(frozen=True, slots=True)
class TextLineToken(BaseToken):
    """A line with no block syntax. Content is the line verbatim."""

    type: ClassVar[TokenType] = TokenType.TEXT_LINE

    content: str


@dataclass(frozen=True, slots=True)
class BlankLineToken(BaseToken):
    """A line that is empty after trimming whitespace."""

    type: ClassVar[TokenType] = TokenType.BLANK_LINE


@dataclass(frozen=True, slots=True)
class HeadingToken(BaseToken):
    """ATX-style heading: 1-6 ``#``, whitespace, then content."""

    type: ClassVar[TokenType] = TokenType.HEADING

    level: int
    content: str


@dataclass(frozen=True, slots=True)
class CodeBlockStartToken(BaseToken):
    """Opening fence of a fenced code block.

    Attributes:
        fence: The exact fence literal (``` or ~~~)
        language: First word of the info string, or None

    """

    type: ClassVar[TokenType] = TokenType.CODE_BLOCK_START

    fence: str
    language: str | None = None


@dataclass(frozen=True, slots=True)
class CodeBlockContentToken(BaseToken):
    """One raw line between an opening and closing fence.

    Attributes:
        content: The line, untouched
        line_in_block: 1 for the first line after the opening fence

    """

    type: ClassVar[TokenType] = TokenType.CODE_BLOCK_CONTENT

    content: str
    line_in_block: int


@dataclass(frozen=True, slots=True)
class CodeBlockEndToken(BaseToken):
    """Closing fence. Always equal to the opening fence literal."""

    type: ClassVar[TokenType] = TokenType.CODE_BLOCK_END

    fence: str


@dataclass(frozen=True, slots=True)
class ListItemToken(BaseToken):
    """Unordered list item (``-``, ``*`` or ``+`` marker)."""

    type: ClassVar[TokenType] = TokenType.LIST_ITEM

    marker: str
    content: str


@dataclass(frozen=True, slots=True)
class OrderedListItemToken(BaseToken):
    """Ordered list item. ``number`` is the parsed digit run."""

    type: ClassVar[TokenType] = TokenType.ORDERED_LIST_ITEM

    number: int
    content: str


@dataclass(frozen=True, slots=True)
class BlockquoteToken(BaseToken):
    """Block quote line with the ``>`` and one optional space removed."""

    type: ClassVar[TokenType] = TokenType.BLOCKQUOTE

    content: str


# =============================================================================
# Inline tokens
# =============================================================================


@dataclass(frozen=True, slots=True)
class TextToken(BaseToken):
    """Literal text run. Never empty."""

    type: ClassVar[TokenType] = TokenType.TEXT

    content: str


@dataclass(frozen=True, slots=True)
class EmphasisStartToken(BaseToken):
    type: ClassVar[TokenType] = TokenType.EMPHASIS_START

    marker: EmphasisMarker


@dataclass(frozen=True, slots=True)
class EmphasisEndToken(BaseToken):
    type: ClassVar[TokenType] = TokenType.EMPHASIS_END

    marker: EmphasisMarker


@dataclass(frozen=True, slots=True)
class StrongStartToken(BaseToken):
    type: ClassVar[TokenType] = TokenType.STRONG_START

    marker: StrongMarker


@dataclass(frozen=True, slots=True)
class StrongEndToken(BaseToken):
    type: ClassVar[TokenType] = TokenType.STRONG_END

    marker: StrongMarker


@dataclass(frozen=True, slots=True)
class CodeStartToken(BaseToken):
    type: ClassVar[TokenType] = TokenType.CODE_START

    marker: str = "`"


@dataclass(frozen=True, slots=True)
class CodeEndToken(BaseToken):
    type: ClassVar[TokenType] = TokenType.CODE_END

    marker: str = "`"


@dataclass(frozen=True, slots=True)
class LinkStartToken(BaseToken):
    """``[`` opening link text."""

    type: ClassVar[TokenType] = TokenType.LINK_START


@dataclass(frozen=True, slots=True)
class LinkTextEndToken(BaseToken):
    """``]`` closing link text, with or without a following URL."""

    type: ClassVar[TokenType] = TokenType.LINK_TEXT_END


@dataclass(frozen=True, slots=True)
class LinkUrlToken(BaseToken):
    """Destination read verbatim between ``(`` and ``)``."""

    type: ClassVar[TokenType] = TokenType.LINK_URL

    url: str


@dataclass(frozen=True, slots=True)
class LinkEndToken(BaseToken):
    """``)`` closing the destination."""

    type: ClassVar[TokenType] = TokenType.LINK_END


# PEP 695 type aliases for the two closed variant sets
type BlockToken = (
    TextLineToken
    | BlankLineToken
    | HeadingToken
    | CodeBlockStartToken
    | CodeBlockContentToken
    | CodeBlockEndToken
    | ListItemToken
    | OrderedListItemToken
    | BlockquoteToken
)

type InlineToken = (
    TextToken
    | EmphasisStartToken
    | EmphasisEndToken
    | StrongStartToken
    | StrongEndToken
    | CodeStartToken
    | CodeEndToken
    | LinkStartToken
    | LinkTextEndToken
    | LinkUrlToken
    | LinkEndToken
)

type Token = BlockToken | InlineToken

BLOCK_TOKEN_CLASSES: tuple[type[BaseToken], ...] = (
    TextLineToken,
    BlankLineToken,
    HeadingToken,
    CodeBlockStartToken,
    CodeBlockContentToken,
    CodeBlockEndToken,
    ListItemToken,
    OrderedListItemToken,
    BlockquoteToken,
)

INLINE_TOKEN_CLASSES: tuple[type[BaseToken], ...] = (
    TextToken,
    EmphasisStartToken,
    EmphasisEndToken,
    StrongStartToken,
    StrongEndToken,
    CodeStartToken,
    CodeEndToken,
    LinkStartToken,
    LinkTextEndToken,
    LinkUrlToken,
    LinkEndToken,
)

BLOCK_TOKEN_TYPES: frozenset[TokenType] = frozenset(cls.type for cls in BLOCK_TOKEN_CLASSES)
INLINE_TOKEN_TYPES: frozenset[TokenType] = frozenset(cls.type for cls in INLINE_TOKEN_CLASSES)


__all__ = [
    "BLOCK_TOKEN_CLASSES",
    "BLOCK_TOKEN_TYPES",
    "INLINE_TOKEN_CLASSES",
    "INLINE_TOKEN_TYPES",
    "BaseToken",
    "BlankLineToken",
    "BlockToken",
    "BlockquoteToken",
    "CodeBlockContentToken",
    "CodeBlockEndToken",
    "CodeBlockStartToken",
    "CodeEndToken",
    "CodeStartToken",
    "EmphasisEndToken",
    "EmphasisMarker",
    "EmphasisStartToken",
    "HeadingToken",
    "InlineToken",
    "LinkEndToken",
    "LinkStartToken",
    "LinkTextEndToken",
    "LinkUrlToken",
    "ListItemToken",
    "OrderedListItemToken",
    "StrongEndToken",
    "StrongMarker",
    "StrongStartToken",
    "TextLineToken",
    "TextToken",
    "Token",
    "TokenType",
]
