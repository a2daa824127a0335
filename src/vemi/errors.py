"""Exception classes for vemi.

Tokenization itself never raises: every input string produces a token
sequence. These exceptions signal misuse of the API instead.
"""

from __future__ import annotations


class VemiError(Exception):
    """Base exception for all vemi errors.

    Subclass this for specific error categories.
    """

    pass


class LexerReuseError(VemiError, RuntimeError):
    """A lexer instance was asked to tokenize a second time.

    Lexers are single-use: create a new instance per source string.
    """

    def __init__(self, lexer_name: str) -> None:
        """Initialize reuse error.

        Args:
            lexer_name: Class name of the lexer that was reused
        """
        self.lexer_name = lexer_name
        super().__init__(
            f"{lexer_name} instances are single-use; create a new lexer for each source"
        )


class SerializationError(VemiError, ValueError):
    """Serialized token data could not be turned back into a token.

    Raised for a missing or unknown ``type`` tag, or for fields that do
    not fit the token class.
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        """Initialize serialization error.

        Args:
            message: Description of the problem
            index: Position of the offending entry in a token list (optional)
        """
        self.message = message
        self.index = index

        location = f"token {index}: " if index is not None else ""
        super().__init__(f"{location}{message}")
