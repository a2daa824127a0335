"""Lexers for the vemi document format.

Two independent lexers share one character cursor. The block lexer
classifies whole lines; the inline lexer classifies delimiters and text
runs within a span of text.

Architecture:
lexer/
├── __init__.py          # Re-exports BlockLexer, InlineLexer, Cursor, LexerMode
├── cursor.py            # Cursor base class (navigation + tokenize loop)
├── block.py             # BlockLexer (mixin composition + line reading)
├── inline.py            # InlineLexer (delimiter toggle state)
├── charsets.py          # Frozenset character classes
├── modes.py             # LexerMode enum
├── classifiers/         # Block line classification mixins
│   ├── heading.py       # # Heading
│   ├── fence.py         # ``` / ~~~ fences
│   ├── list.py          # Ordered and unordered items
│   └── quote.py         # > Block quote
└── scanners/            # Mode-specific scanners
    ├── block.py         # Block mode (classifier dispatch)
    └── fence.py         # Code fence mode

Usage:
    >>> from vemi.lexer import BlockLexer
    >>> for token in BlockLexer("# Hello\\n\\nWorld").tokenize():
    ...     print(token)
HeadingToken(position=SourcePosition(line=1, column=1, offset=0), level=1, content='Hello')
BlankLineToken(position=SourcePosition(line=2, column=1, offset=8))
TextLineToken(position=SourcePosition(line=3, column=1, offset=9), content='World')

"""

from vemi.lexer.block import BlockLexer
from vemi.lexer.cursor import END, Cursor
from vemi.lexer.inline import InlineLexer
from vemi.lexer.modes import LexerMode

__all__ = ["END", "BlockLexer", "Cursor", "InlineLexer", "LexerMode"]
