"""Unit tests for rewrite rule variants and their mapping form."""

from __future__ import annotations

import pytest

from classwork_linter.errors import RuleConfigError
from classwork_linter.text.rules import (
    DEFAULT_REWRITE_RULES,
    BoundedRule,
    DirectRule,
    rule_from_mapping,
    rule_to_mapping,
)


def test_bounded_rule_with_end_pattern_builds_start_body_end_expression() -> None:
    """Bounded rules with an end pattern should match start, content, and end."""

    rule = BoundedRule(start_with="//", end_with=r"\n")

    assert rule.pattern() == r"(//)(.+)(\n)"
    assert rule.apply("int a; // note\nint b;") == "int a; int b;"


def test_bounded_rule_without_end_pattern_matches_start_token_only() -> None:
    """Bounded rules without an end pattern should replace only the start token."""

    rule = BoundedRule(start_with=r" \{", replace="{")

    assert rule.pattern() == r"( \{)"
    assert rule.apply("if (x) {\n} else {") == "if (x){\n} else{"


def test_direct_rule_replaces_every_match_left_to_right() -> None:
    """Direct rules should apply their pattern globally."""

    rule = DirectRule(direct=r"\d+", replace="N")

    assert rule.apply("a1 b22 c333") == "aN bN cN"


def test_replacement_is_inserted_literally() -> None:
    """Replacement text should not be interpreted as a group reference."""

    rule = DirectRule(direct=r"(x)", replace=r"\1$1")

    assert rule.apply("axb") == r"a\1$1b"


def test_quote_rule_is_greedy_within_a_line() -> None:
    """Several literals on one line collapse from the first to the last quote."""

    rule = BoundedRule(start_with='"', end_with='"', replace='""')

    assert rule.apply('f("a", "b");\ng("c");') == 'f("");\ng("");'


def test_rule_from_mapping_builds_tagged_variants() -> None:
    """Public mapping keys should select the matching rule variant."""

    assert rule_from_mapping({"direct": "x"}) == DirectRule(direct="x")
    assert rule_from_mapping({"startWith": "'", "endWith": "'", "replace": "''"}) == BoundedRule(
        start_with="'", end_with="'", replace="''"
    )
    assert rule_from_mapping({"startWith": "a"}) == BoundedRule(start_with="a")


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({}, r"requires either `direct` or `startWith`"),
        ({"endWith": "x"}, r"`endWith` requires `startWith`"),
        ({"direct": "x", "startWith": "y"}, r"cannot combine `direct`"),
        ({"startWith": ""}, r"non-empty `startWith`"),
        ({"direct": ""}, r"non-empty `direct`"),
        ({"direct": "("}, r"Invalid rewrite pattern"),
        ({"direct": 3}, r"must be a string"),
        ({"direct": "x", "flags": "g"}, r"unsupported key\(s\): flags"),
    ],
)
def test_rule_from_mapping_rejects_invalid_definitions(
    payload: dict[str, object], message: str
) -> None:
    """Invalid rule definitions should fail at load time."""

    with pytest.raises(RuleConfigError, match=message):
        rule_from_mapping(payload)


def test_default_rules_round_trip_through_public_mapping() -> None:
    """Default rules should keep their order and fields in mapping form."""

    mappings = [rule_to_mapping(rule) for rule in DEFAULT_REWRITE_RULES]

    assert mappings[0] == {"direct": r"\/\*{1,2}[\s\S]*?\*\/"}
    assert mappings[1] == {"startWith": '"', "endWith": '"', "replace": '""'}
    assert mappings[3] == {"startWith": "//", "endWith": r"\n"}
    assert mappings[5] == {"startWith": r" \{", "replace": "{"}
    assert tuple(rule_from_mapping(mapping) for mapping in mappings) == DEFAULT_REWRITE_RULES
