"""Source positions for tokens.

Provides SourcePosition, the 1-indexed (line, column) pair every token
carries. Used by both lexers and by the serialization layer.

Thread Safety:
SourcePosition is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True, order=True)
class SourcePosition:
    """Where a token begins in the source.

    Line and column are 1-indexed. The absolute offset is kept for
    slicing the source but does not take part in equality or ordering,
    so positions compare by (line, column) only.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        offset: Absolute 0-indexed offset into the source

    Examples:
            >>> pos = SourcePosition(line=2, column=5)
            >>> str(pos)
            '2:5'
            >>> SourcePosition(1, 1) < SourcePosition(1, 2) < SourcePosition(2, 1)
            True

    """

    line: int
    column: int
    offset: int = field(default=0, compare=False)

    def __str__(self) -> str:
        """Format position for messages, e.g. "10:5"."""
        return f"{self.line}:{self.column}"

    @classmethod
    def start(cls) -> SourcePosition:
        """Position of the first character of any source."""
        return cls(line=1, column=1, offset=0)
