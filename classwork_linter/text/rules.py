"""Pattern-based rewrite rules applied to source text before analysis.

Responsibilities:
- Represent each rewrite rule as a tagged variant (`DirectRule` or `BoundedRule`).
- Compile rule patterns and apply them globally, left to right.
- Build rules from the public `{startWith, endWith, replace, direct}` mapping.

Quote-delimited bounded rules use a greedy `(.+)` body, so on a line with
several literals the span from the first opening delimiter to the last
closing delimiter collapses. Escaped delimiters are not recognized.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Any, Mapping, Protocol, Union

from ..errors import RuleConfigError


class RewriteRule(Protocol):
    """Protocol for source rewrite rules."""

    replace: str

    def pattern(self) -> str:
        """Return the regular expression this rule matches."""

    def apply(self, text: str) -> str:
        """Apply a single rewrite transformation."""


def _substitute(pattern: str, replacement: str, text: str) -> str:
    """Replace every match of `pattern` with the literal `replacement`."""

    return re.compile(pattern).sub(lambda _match: replacement, text)


@dataclass(frozen=True, slots=True)
class DirectRule:
    """Remove or replace every match of a pattern used as-is."""

    direct: str
    replace: str = ""

    def pattern(self) -> str:
        """Return the pattern unchanged."""

        return self.direct

    def apply(self, text: str) -> str:
        """Apply the direct pattern globally."""

        return _substitute(self.pattern(), self.replace, text)

    def validate(self) -> None:
        """Reject empty or syntactically invalid patterns."""

        if not self.direct:
            raise RuleConfigError("Direct rule requires a non-empty `direct` pattern.")
        _ensure_compiles(self.pattern())


@dataclass(frozen=True, slots=True)
class BoundedRule:
    """Remove or replace the span between a start and an optional end pattern.

    With an end pattern the compiled expression is `(start)(.+)(end)`; without
    one only the start pattern itself is matched.
    """

    start_with: str
    end_with: str | None = None
    replace: str = ""

    def pattern(self) -> str:
        """Return the compiled bounded-span pattern."""

        if self.end_with:
            return f"({self.start_with})(.+)({self.end_with})"
        return f"({self.start_with})"

    def apply(self, text: str) -> str:
        """Apply the bounded pattern globally."""

        return _substitute(self.pattern(), self.replace, text)

    def validate(self) -> None:
        """Reject an empty start pattern or a pattern that does not compile."""

        if not self.start_with:
            raise RuleConfigError("Bounded rule requires a non-empty `startWith` pattern.")
        _ensure_compiles(self.pattern())


AnyRewriteRule = Union[DirectRule, BoundedRule]

DEFAULT_REWRITE_RULES: tuple[AnyRewriteRule, ...] = (
    DirectRule(direct=r"\/\*{1,2}[\s\S]*?\*\/"),
    BoundedRule(start_with='"', end_with='"', replace='""'),
    BoundedRule(start_with="'", end_with="'", replace="''"),
    BoundedRule(start_with="//", end_with=r"\n"),
    DirectRule(direct=r"(?m)^\s*(?:\n|\Z)"),
    BoundedRule(start_with=r" \{", replace="{"),
)

_RULE_KEYS = frozenset({"startWith", "endWith", "replace", "direct"})


def _ensure_compiles(pattern: str) -> None:
    """Raise `RuleConfigError` when `pattern` is not a valid expression."""

    try:
        re.compile(pattern)
    except re.error as exc:
        raise RuleConfigError(f"Invalid rewrite pattern `{pattern}`: {exc}.") from exc


def _optional_text(payload: Mapping[str, Any], key: str) -> str | None:
    """Read an optional string field, rejecting non-string values."""

    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise RuleConfigError(f"Rewrite rule field `{key}` must be a string.")
    return value


def rule_from_mapping(payload: Mapping[str, Any]) -> AnyRewriteRule:
    """Build and validate a rewrite rule from its public mapping form.

    Raises:
        RuleConfigError: If the mapping has unknown keys, mixes `direct` with
            `startWith`/`endWith`, or yields an invalid pattern.
    """

    if not isinstance(payload, Mapping):
        raise RuleConfigError("Each rewrite rule must be a mapping/object.")

    unknown = sorted(set(payload).difference(_RULE_KEYS))
    if unknown:
        raise RuleConfigError(
            f"Rewrite rule includes unsupported key(s): {', '.join(unknown)}."
        )

    direct = _optional_text(payload, "direct")
    start_with = _optional_text(payload, "startWith")
    end_with = _optional_text(payload, "endWith")
    replace = _optional_text(payload, "replace") or ""

    rule: AnyRewriteRule
    if direct is not None:
        if start_with is not None or end_with is not None:
            raise RuleConfigError(
                "Rewrite rule cannot combine `direct` with `startWith`/`endWith`."
            )
        rule = DirectRule(direct=direct, replace=replace)
    elif start_with is not None:
        rule = BoundedRule(start_with=start_with, end_with=end_with or None, replace=replace)
    elif end_with is not None:
        raise RuleConfigError("Rewrite rule with `endWith` requires `startWith`.")
    else:
        raise RuleConfigError("Rewrite rule requires either `direct` or `startWith`.")

    rule.validate()
    return rule


def rule_to_mapping(rule: AnyRewriteRule) -> dict[str, str]:
    """Return the public mapping form of a rewrite rule."""

    if isinstance(rule, DirectRule):
        payload = {"direct": rule.direct}
    else:
        payload = {"startWith": rule.start_with}
        if rule.end_with:
            payload["endWith"] = rule.end_with
    if rule.replace:
        payload["replace"] = rule.replace
    return payload
