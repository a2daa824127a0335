"""Block-level line classifiers for the vemi block lexer.

Each classifier is a mixin that provides classification logic for
a specific block type. Classifiers inspect one complete line and return
a token or None; only the fence classifier touches lexer state.
"""

from vemi.lexer.classifiers.fence import (
    FenceClassifierMixin,
)
from vemi.lexer.classifiers.heading import (
    HeadingClassifierMixin,
)
from vemi.lexer.classifiers.list import (
    ListClassifierMixin,
)
from vemi.lexer.classifiers.quote import (
    QuoteClassifierMixin,
)

__all__ = [
    "FenceClassifierMixin",
    "HeadingClassifierMixin",
    "ListClassifierMixin",
    "QuoteClassifierMixin",
]
