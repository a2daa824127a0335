"""
vemi — lexical front end for a lightweight markdown-like format.

Turns source text into typed token streams for a document parser. Two
independent lexers share one character cursor:

- BlockLexer: one token per line (headings, lists, quotes, fenced code, text)
- InlineLexer: text runs and emphasis, strong, code span and link delimiters

Both are total: every input produces a token sequence and no input raises.

Quick Start:
    >>> from vemi import tokenize_blocks, tokenize_inline
    >>> [str(t.type) for t in tokenize_blocks("# Title\\n- item")]
    ['heading', 'listItem']
    >>> [str(t.type) for t in tokenize_inline("**bold**")]
    ['strongStart', 'text', 'strongEnd']

Installation:
    pip install vemi               # Zero runtime dependencies
    pip install vemi[test]         # + pytest and hypothesis
"""

from vemi.config import (
    LexerConfig,
    get_lexer_config,
    lexer_config_context,
    reset_lexer_config,
    set_lexer_config,
)
from vemi.errors import LexerReuseError, SerializationError, VemiError
from vemi.lexer import END, BlockLexer, Cursor, InlineLexer, LexerMode
from vemi.location import SourcePosition
from vemi.serialization import from_dict, from_json, to_dict, to_json
from vemi.tokens import (
    BLOCK_TOKEN_TYPES,
    INLINE_TOKEN_TYPES,
    BaseToken,
    BlankLineToken,
    BlockquoteToken,
    BlockToken,
    CodeBlockContentToken,
    CodeBlockEndToken,
    CodeBlockStartToken,
    CodeEndToken,
    CodeStartToken,
    EmphasisEndToken,
    EmphasisStartToken,
    HeadingToken,
    InlineToken,
    LinkEndToken,
    LinkStartToken,
    LinkTextEndToken,
    LinkUrlToken,
    ListItemToken,
    OrderedListItemToken,
    StrongEndToken,
    StrongStartToken,
    TextLineToken,
    TextToken,
    Token,
    TokenType,
)

__version__ = "0.1.0"


def tokenize_blocks(source: str) -> list[BlockToken]:
    """Split source into lines and classify each into a block token.

    Args:
        source: Block-level source text

    Returns:
        Block tokens in source order

    Example:
        >>> tokens = tokenize_blocks("```py\\nx = 1\\n```")
        >>> [str(t.type) for t in tokens]
        ['codeBlockStart', 'codeBlockContent', 'codeBlockEnd']
    """
    return BlockLexer(source).tokenize()


def tokenize_inline(source: str) -> list[InlineToken]:
    """Scan a text span into inline tokens.

    Args:
        source: Text content, typically a block token's content

    Returns:
        Inline tokens in source order

    Example:
        >>> [str(t.type) for t in tokenize_inline("[home](/)")]
        ['linkStart', 'text', 'linkTextEnd', 'linkUrl', 'linkEnd']
    """
    return InlineLexer(source).tokenize()


__all__ = [
    # Lexing
    "tokenize_blocks",
    "tokenize_inline",
    "BlockLexer",
    "InlineLexer",
    "Cursor",
    "LexerMode",
    "END",
    # Tokens
    "SourcePosition",
    "TokenType",
    "BaseToken",
    "Token",
    "BlockToken",
    "InlineToken",
    "BLOCK_TOKEN_TYPES",
    "INLINE_TOKEN_TYPES",
    "TextLineToken",
    "BlankLineToken",
    "HeadingToken",
    "CodeBlockStartToken",
    "CodeBlockContentToken",
    "CodeBlockEndToken",
    "ListItemToken",
    "OrderedListItemToken",
    "BlockquoteToken",
    "TextToken",
    "EmphasisStartToken",
    "EmphasisEndToken",
    "StrongStartToken",
    "StrongEndToken",
    "CodeStartToken",
    "CodeEndToken",
    "LinkStartToken",
    "LinkTextEndToken",
    "LinkUrlToken",
    "LinkEndToken",
    # Configuration
    "LexerConfig",
    "get_lexer_config",
    "set_lexer_config",
    "reset_lexer_config",
    "lexer_config_context",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Errors
    "VemiError",
    "LexerReuseError",
    "SerializationError",
    "__version__",
]
