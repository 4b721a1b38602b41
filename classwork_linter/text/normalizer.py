"""Source normalization stage.

Responsibilities:
- Coerce line sequences into a single text blob.
- Apply rewrite rules in order, each seeing the output of the previous rule.
- Append a statement terminator after every closing brace so the analysis
  engine's language heuristics accept the cleaned text.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .rules import DEFAULT_REWRITE_RULES, RewriteRule

CLOSING_BRACE = "}"
STATEMENT_TERMINATOR = ";"


def coerce_source(source: str | Sequence[str]) -> str:
    """Return `source` as text, joining line sequences with newlines.

    Falls back to `str(source)` when the sequence cannot be joined.
    """

    if isinstance(source, str):
        return source
    try:
        return "\n".join(source)
    except TypeError:
        return str(source)


def terminate_closing_braces(text: str) -> str:
    """Append a statement terminator after every closing brace."""

    return text.replace(CLOSING_BRACE, CLOSING_BRACE + STATEMENT_TERMINATOR)


class SourceNormalizer:
    """Apply a sequence of rewrite rules followed by the brace touch-up."""

    def __init__(self, rules: Iterable[RewriteRule] | None = None) -> None:
        """Initialize with custom rules or the default rule sequence."""

        self.rules: tuple[RewriteRule, ...] = (
            tuple(rules) if rules is not None else DEFAULT_REWRITE_RULES
        )

    def normalize(self, source: str | Sequence[str]) -> str:
        """Normalize source text for downstream analysis.

        Raises:
            re.error: If a rule carries a pattern that does not compile.
        """

        current = coerce_source(source)
        for rule in self.rules:
            current = rule.apply(current)
        return terminate_closing_braces(current)


def normalize_source(
    source: str | Sequence[str],
    rules: Iterable[RewriteRule] | None = None,
) -> str:
    """Normalize `source` with `rules` (defaults when omitted)."""

    return SourceNormalizer(rules).normalize(source)
