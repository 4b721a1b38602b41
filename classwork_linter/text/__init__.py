"""Source text normalization components.

This package provides the rewrite rules and the normalizer applied to raw
source before it is handed to the analysis engine.
"""

from .normalizer import SourceNormalizer, coerce_source, normalize_source, terminate_closing_braces
from .rules import (
    DEFAULT_REWRITE_RULES,
    AnyRewriteRule,
    BoundedRule,
    DirectRule,
    RewriteRule,
    rule_from_mapping,
    rule_to_mapping,
)

__all__ = [
    "DEFAULT_REWRITE_RULES",
    "AnyRewriteRule",
    "BoundedRule",
    "DirectRule",
    "RewriteRule",
    "SourceNormalizer",
    "coerce_source",
    "normalize_source",
    "rule_from_mapping",
    "rule_to_mapping",
    "terminate_closing_braces",
]
