"""Mode-specific scanners for the vemi block lexer.

Each scanner is a mixin that provides scanning logic for a specific
lexer mode (BLOCK, CODE_FENCE).
"""

from __future__ import annotations

from vemi.lexer.scanners.block import BlockScannerMixin
from vemi.lexer.scanners.fence import FenceScannerMixin

__all__ = [
    "BlockScannerMixin",
    "FenceScannerMixin",
]
