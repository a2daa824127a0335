"""Character-oriented inline lexer.

Scans the content of a text span for inline formatting delimiters and
emits literal text runs interleaved with start/end markers.

Delimiter state is a single slot per family rather than a stack:
- strong: which of ** or __ is open, if any
- emphasis: which of * or _ is open, if any
- code span: open or closed

A closer whose spelling differs from the open marker is emitted as
literal text. Strong is always tried before emphasis so ** is never
split into two emphasis markers.

Usage:
    >>> [str(t.type) for t in InlineLexer("*hi*").tokenize()]
    ['emphasisStart', 'text', 'emphasisEnd']

Thread Safety:
InlineLexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from vemi.lexer.charsets import INLINE_DELIMITERS
from vemi.lexer.cursor import Cursor
from vemi.location import SourcePosition
from vemi.tokens import (
    CodeEndToken,
    CodeStartToken,
    EmphasisEndToken,
    EmphasisMarker,
    EmphasisStartToken,
    InlineToken,
    LinkEndToken,
    LinkStartToken,
    LinkTextEndToken,
    LinkUrlToken,
    StrongEndToken,
    StrongMarker,
    StrongStartToken,
    TextToken,
)
from vemi.utils.logger import get_logger

logger = get_logger(__name__)

STRONG_MARKERS: tuple[StrongMarker, ...] = ("**", "__")
EMPHASIS_MARKERS: tuple[EmphasisMarker, ...] = ("*", "_")
CODE_MARKER = "`"


class InlineLexer(Cursor[InlineToken]):
    """Inline lexer producing text runs and delimiter tokens.

    Recognition order at each position:
    1. Strong (** or __)
    2. Emphasis (* or _)
    3. Code span (`)
    4. Link start ([)
    5. Link text end (]), plus (url) when ( follows immediately
    6. Text run up to the next delimiter character

    """

    __slots__ = (
        "_in_code_span",
        "_emphasis_marker",
        "_strong_marker",
    )

    def __init__(self, source: str) -> None:
        """Initialize lexer with inline source text.

        Args:
            source: Content of a text span
        """
        super().__init__(source)
        self._in_code_span: bool = False
        self._emphasis_marker: EmphasisMarker | None = None
        self._strong_marker: StrongMarker | None = None

    def _scan_token(self) -> None:
        position = self._position()

        if self._try_strong(position):
            return
        if self._try_emphasis(position):
            return
        if self._try_code_span(position):
            return
        if self._try_link(position):
            return

        content = self._read_until_delimiter()
        if content:
            self._emit(TextToken(position=position, content=content))

    def _finish(self) -> None:
        if self._in_code_span:
            logger.debug("Code span still open at end of input")

    # =========================================================================
    # Delimiters
    # =========================================================================

    def _try_strong(self, position: SourcePosition) -> bool:
        """Handle ** or __. Returns True if a marker was consumed."""
        for marker in STRONG_MARKERS:
            if not self._match_string(marker):
                continue
            if self._strong_marker is None:
                self._emit(StrongStartToken(position=position, marker=marker))
                self._strong_marker = marker
            elif self._strong_marker == marker:
                self._emit(StrongEndToken(position=position, marker=marker))
                self._strong_marker = None
            else:
                # Spellings are not interchangeable closers
                self._emit(TextToken(position=position, content=marker))
            return True
        return False

    def _try_emphasis(self, position: SourcePosition) -> bool:
        """Handle * or _. Tracked independently of strong."""
        for marker in EMPHASIS_MARKERS:
            if not self._match(marker):
                continue
            if self._emphasis_marker is None:
                self._emit(EmphasisStartToken(position=position, marker=marker))
                self._emphasis_marker = marker
            elif self._emphasis_marker == marker:
                self._emit(EmphasisEndToken(position=position, marker=marker))
                self._emphasis_marker = None
            else:
                self._emit(TextToken(position=position, content=marker))
            return True
        return False

    def _try_code_span(self, position: SourcePosition) -> bool:
        """Toggle the code span on a backtick. No nesting."""
        if not self._match(CODE_MARKER):
            return False

        if self._in_code_span:
            self._emit(CodeEndToken(position=position, marker=CODE_MARKER))
        else:
            self._emit(CodeStartToken(position=position, marker=CODE_MARKER))
        self._in_code_span = not self._in_code_span
        return True

    def _try_link(self, position: SourcePosition) -> bool:
        """Handle [ and ], reading a (url) destination after ].

        A ] not followed by ( leaves the link dangling: only LINK_START and
        LINK_TEXT_END are emitted, for the parser to interpret. A
        destination that runs to end of input still gets LINK_END, placed
        at the end-of-input position.
        """
        if self._match("["):
            self._emit(LinkStartToken(position=position))
            return True

        if not self._match("]"):
            return False

        self._emit(LinkTextEndToken(position=position))

        if self._peek() == "(":
            self._advance()
            url_position = self._position()
            url = self._read_until(")")
            end_position = self._position()
            self._advance()
            self._emit(LinkUrlToken(position=url_position, url=url))
            self._emit(LinkEndToken(position=end_position))

        return True

    # =========================================================================
    # Runs
    # =========================================================================

    def _read_until(self, terminator: str) -> str:
        """Consume characters up to (excluding) terminator or end of input."""
        chars: list[str] = []
        while not self._is_at_end() and self._peek() != terminator:
            chars.append(self._advance())
        return "".join(chars)

    def _read_until_delimiter(self) -> str:
        """Consume a run of characters that are not inline delimiters."""
        chars: list[str] = []
        while not self._is_at_end() and self._peek() not in INLINE_DELIMITERS:
            chars.append(self._advance())
        return "".join(chars)
