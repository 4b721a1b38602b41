"""Configuration model and loaders for classwork-linter.

Responsibilities:
- Define linter configuration as typed frozen dataclasses.
- Merge caller configuration over the immutable defaults.
- Provide loader entry points for mapping- and YAML-based configuration.

Key types:
- `IgnoreFilesFilter`: upstream file-skip filter honored by callers.
- `LinterConfig`: normalized settings for one lint call.
- `ConfigLoader`: static construction helpers for `LinterConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Mapping, Union

import yaml

from .errors import RuleConfigError
from .parsing import normalize_optional_string, parse_non_negative_int, parse_permissive_boolean
from .text.rules import DEFAULT_REWRITE_RULES, AnyRewriteRule, rule_from_mapping, rule_to_mapping


@dataclass(frozen=True, slots=True)
class IgnoreFilesFilter:
    """Filter describing files the caller should skip before linting.

    Attributes:
        includes_in_name: Substrings; a file whose name contains one is skipped.
        max_size: Byte threshold above which a file is skipped.
    """

    includes_in_name: frozenset[str] = field(default_factory=frozenset)
    max_size: int | None = None


IgnoreFiles = Union[Literal[False], IgnoreFilesFilter]


@dataclass(frozen=True, slots=True)
class LinterConfig:
    """Settings for one lint call.

    Attributes:
        ignore_files: `False` to disable file skipping, or a filter.
        ignore_chars: Ordered rewrite rules applied before analysis.
    """

    ignore_files: IgnoreFiles = False
    ignore_chars: tuple[AnyRewriteRule, ...] = DEFAULT_REWRITE_RULES

    def validate(self) -> None:
        """Validate every rewrite rule and the file filter."""

        for rule in self.ignore_chars:
            rule.validate()
        if self.ignore_files is not False:
            if not isinstance(self.ignore_files, IgnoreFilesFilter):
                raise ValueError("`ignoreFiles` must be `false` or a filter object.")
            if self.ignore_files.max_size is not None and self.ignore_files.max_size < 0:
                raise ValueError("`maxSize` must be a non-negative integer.")

    def as_mapping(self) -> dict[str, object]:
        """Return the public camelCase mapping form of this configuration."""

        ignore_files: object = False
        if self.ignore_files is not False:
            ignore_files = {"includesInName": sorted(self.ignore_files.includes_in_name)}
            if self.ignore_files.max_size is not None:
                ignore_files["maxSize"] = self.ignore_files.max_size
        return {
            "ignoreFiles": ignore_files,
            "ignoreChars": [rule_to_mapping(rule) for rule in self.ignore_chars],
        }


DEFAULT_LINTER_CONFIG = LinterConfig()

_UNSET = object()


def merge_config(
    overrides: LinterConfig | Mapping[str, Any] | None = None,
    defaults: LinterConfig = DEFAULT_LINTER_CONFIG,
) -> LinterConfig:
    """Merge caller configuration over defaults.

    Precedence is caller over defaults for every field. `ignoreChars`, when
    supplied, replaces the default rule list entirely; there is no
    element-wise merge.
    """

    if overrides is None:
        return defaults
    if isinstance(overrides, LinterConfig):
        return overrides

    supplied = ConfigLoader.fields_from_mapping(overrides, source_label="config")
    ignore_files = supplied.get("ignore_files", _UNSET)
    ignore_chars = supplied.get("ignore_chars", _UNSET)
    return LinterConfig(
        ignore_files=defaults.ignore_files if ignore_files is _UNSET else ignore_files,
        ignore_chars=defaults.ignore_chars if ignore_chars is _UNSET else ignore_chars,
    )


class ConfigLoader:
    """Factory methods for creating `LinterConfig` from external sources."""

    _SUPPORTED_KEYS = frozenset({"ignoreFiles", "ignoreChars"})
    _SUPPORTED_IGNORE_FILES_KEYS = frozenset({"includesInName", "maxSize"})

    @staticmethod
    def from_yaml(path: Path) -> LinterConfig:
        """Create a validated config from a YAML file, merged over defaults."""

        path_text = path.read_text(encoding="utf-8")
        payload = yaml.safe_load(path_text)
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")

        fields = ConfigLoader.fields_from_mapping(payload, source_label=f"YAML `{path}`")
        return ConfigLoader._build_config(fields)

    @staticmethod
    def from_mapping(payload: Mapping[str, Any]) -> LinterConfig:
        """Create a validated config from a public-vocabulary mapping."""

        fields = ConfigLoader.fields_from_mapping(payload, source_label="config")
        return ConfigLoader._build_config(fields)

    @staticmethod
    def fields_from_mapping(payload: Mapping[str, Any], source_label: str) -> dict[str, Any]:
        """Parse only the fields present in `payload` into typed values.

        Raises:
            ValueError: If keys are unknown or values are malformed.
            RuleConfigError: If a rewrite rule is invalid.
        """

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_KEYS))
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        fields: dict[str, Any] = {}
        if "ignoreFiles" in payload:
            fields["ignore_files"] = ConfigLoader._parse_ignore_files(
                payload["ignoreFiles"], source_label
            )
        if "ignoreChars" in payload and payload["ignoreChars"] is not None:
            fields["ignore_chars"] = ConfigLoader._parse_ignore_chars(
                payload["ignoreChars"], source_label
            )
        return fields

    @staticmethod
    def _build_config(fields: Mapping[str, Any]) -> LinterConfig:
        """Build a validated config from parsed fields over defaults."""

        config = LinterConfig(
            ignore_files=fields.get("ignore_files", DEFAULT_LINTER_CONFIG.ignore_files),
            ignore_chars=fields.get("ignore_chars", DEFAULT_LINTER_CONFIG.ignore_chars),
        )
        config.validate()
        return config

    @staticmethod
    def _parse_ignore_files(value: Any, source_label: str) -> IgnoreFiles:
        """Parse the `ignoreFiles` value (`false` or a filter mapping)."""

        if isinstance(value, IgnoreFilesFilter):
            return value
        if value is None or parse_permissive_boolean(value) is False:
            return False
        if not isinstance(value, Mapping):
            raise ValueError(f"{source_label} `ignoreFiles` must be `false` or a mapping/object.")

        unknown = sorted(set(value).difference(ConfigLoader._SUPPORTED_IGNORE_FILES_KEYS))
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(
                f"{source_label} `ignoreFiles` includes unsupported key(s): {key_list}."
            )

        includes_raw = value.get("includesInName") or []
        if isinstance(includes_raw, str) or not isinstance(includes_raw, (list, tuple, set, frozenset)):
            raise ValueError(f"{source_label} `includesInName` must be a list of strings.")
        includes: set[str] = set()
        for item in includes_raw:
            normalized = normalize_optional_string(item)
            if normalized is None:
                raise ValueError(f"{source_label} `includesInName` entries must be non-empty.")
            includes.add(normalized)

        max_size = None
        if value.get("maxSize") is not None:
            max_size = parse_non_negative_int(value["maxSize"], "maxSize")

        return IgnoreFilesFilter(includes_in_name=frozenset(includes), max_size=max_size)

    @staticmethod
    def _parse_ignore_chars(value: Any, source_label: str) -> tuple[AnyRewriteRule, ...]:
        """Parse the ordered `ignoreChars` rule list."""

        if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
            raise ValueError(f"{source_label} `ignoreChars` must be a list of rule objects.")

        rules: list[AnyRewriteRule] = []
        for index, item in enumerate(value):
            if not isinstance(item, Mapping):
                rules.append(ConfigLoader._ensure_rule(item, index, source_label))
                continue
            try:
                rules.append(rule_from_mapping(item))
            except RuleConfigError as exc:
                raise RuleConfigError(f"{source_label} `ignoreChars[{index}]`: {exc}") from exc
        return tuple(rules)

    @staticmethod
    def _ensure_rule(item: Any, index: int, source_label: str) -> AnyRewriteRule:
        """Accept already-built rule objects and reject anything else."""

        validate = getattr(item, "validate", None)
        if validate is None or not hasattr(item, "apply"):
            raise RuleConfigError(
                f"{source_label} `ignoreChars[{index}]` must be a rule mapping/object."
            )
        validate()
        return item
