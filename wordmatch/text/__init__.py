"""Text normalization and boundary scanning components.

This package provides the confusable table, the normalizer, and the
single-pass boundary scanner used to build a `Sentence`.
"""

from .boundaries import BoundaryScanner, is_filler
from .confusables import DEFAULT_CONFUSABLES, ConfusableTable
from .normalizer import DEFAULT_NORMALIZER, TextNormalizer, normalize

__all__ = [
    "BoundaryScanner",
    "ConfusableTable",
    "DEFAULT_CONFUSABLES",
    "DEFAULT_NORMALIZER",
    "TextNormalizer",
    "is_filler",
    "normalize",
]
