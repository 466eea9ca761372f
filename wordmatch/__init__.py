"""Top-level package for wordmatch.

This package normalizes raw text into a canonical, confusable-free form and
annotates every character with its word boundary, producing the `Sentence`
model consumed by word matchers.
"""

from .models.datatypes import Boundary
from .sentence import Sentence
from .text.confusables import DEFAULT_CONFUSABLES, ConfusableTable
from .text.normalizer import TextNormalizer, normalize

__all__ = [
    "Boundary",
    "ConfusableTable",
    "DEFAULT_CONFUSABLES",
    "Sentence",
    "TextNormalizer",
    "normalize",
    "__version__",
]

__version__ = "0.1.0"
