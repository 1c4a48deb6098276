"""Text normalization stages for pasted name lists.

This package provides the preprocessing rules, segmentation, per-token
normalization, and deduplication used by the splitting pipeline.
"""

from .dedupe import dedupe, dedupe_key
from .normalizer import TokenNormalizer
from .rules import Preprocessor, RewriteRule, default_preprocess_rules
from .segmenter import Segmenter

__all__ = [
    "Preprocessor",
    "RewriteRule",
    "Segmenter",
    "TokenNormalizer",
    "dedupe",
    "dedupe_key",
    "default_preprocess_rules",
]
