"""Core datatypes shared across classwork-linter modules.

Responsibilities:
- Represent immutable records exchanged between pipeline stages.
- Provide the stable public vocabulary used when results are serialized.

Key types:
- `RawFunctionRecord`, `RawEngineReport`: engine-side report records.
- `MethodSummary`, `SummaryResult`: caller-facing summary records.
- `LintSuccess`, `LintFailure`: explicit outcome of one lint call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

ERROR_SOURCE_PREFIX = "[error]: "


@dataclass(frozen=True, slots=True)
class RawFunctionRecord:
    """Function-level metrics as reported by the analysis engine.

    Attributes:
        name: Short function name.
        long_name: Qualified name including the parameter list.
        cyclomatic_complexity: Cyclomatic complexity of the function.
        nloc: Non-comment lines of code in the function.
        token_count: Lexical token count of the function.
        start_line: 1-based first line of the function.
        end_line: 1-based last line of the function.
        parameters: Ordered parameter names.
        filename: Filename the engine analyzed.
        top_nesting_level: Nesting depth at which the function is declared.
        length: Line span of the function.
        fan_in: Count of callers.
        fan_out: Count of distinct callees.
        general_fan_out: Count of callees outside the analyzed set.
    """

    name: str
    long_name: str
    cyclomatic_complexity: int
    nloc: int
    token_count: int
    start_line: int
    end_line: int
    parameters: tuple[str, ...] = field(default_factory=tuple)
    filename: str = ""
    top_nesting_level: int = 0
    length: int = 0
    fan_in: int = 0
    fan_out: int = 0
    general_fan_out: int = 0


@dataclass(frozen=True, slots=True)
class RawEngineReport:
    """File-level report returned by the analysis engine.

    Attributes:
        filename: Filename the engine analyzed.
        nloc: Total non-comment lines of the file.
        token_count: Total token count of the file.
        function_list: Ordered function records.
    """

    filename: str
    nloc: int
    token_count: int
    function_list: tuple[RawFunctionRecord, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class MethodSummary:
    """Caller-facing summary of one analyzed function."""

    name: str
    long_name: str
    cyclomatic_complexity: int
    start_line: int
    end_line: int
    parameters: tuple[str, ...]
    filename: str
    top_nesting_level: int
    length: int
    fan_in: int
    fan_out: int
    general_fan_out: int

    def as_dict(self) -> dict[str, object]:
        """Return the public camelCase payload for this method."""

        return {
            "name": self.name,
            "longName": self.long_name,
            "cyclomaticComplexity": self.cyclomatic_complexity,
            "startLine": self.start_line,
            "endLine": self.end_line,
            "parameters": list(self.parameters),
            "filename": self.filename,
            "topNestingLevel": self.top_nesting_level,
            "length": self.length,
            "fanIn": self.fan_in,
            "fanOut": self.fan_out,
            "generalFanOut": self.general_fan_out,
        }


@dataclass(frozen=True, slots=True)
class SummaryResult:
    """Aggregated lint result for one source file.

    On failure every numeric field is zero, `methods` is empty, and `source`
    carries the error description prefixed with `[error]: `.

    Attributes:
        qtd_lines: Total non-comment lines reported by the engine.
        qtd_methods: Number of analyzed functions.
        cyclomatic_complexity: Sum of per-method cyclomatic complexity.
        token: Total token count reported by the engine.
        methods: Ordered per-method summaries.
        source: Cleaned source text, or the tagged error description.
    """

    qtd_lines: int
    qtd_methods: int
    cyclomatic_complexity: int
    token: int
    methods: tuple[MethodSummary, ...]
    source: str

    @classmethod
    def failed(cls, error: BaseException | str) -> SummaryResult:
        """Build the zeroed result that embeds an error description."""

        return cls(
            qtd_lines=0,
            qtd_methods=0,
            cyclomatic_complexity=0,
            token=0,
            methods=(),
            source=f"{ERROR_SOURCE_PREFIX}{error}",
        )

    @property
    def is_error(self) -> bool:
        """Return whether this result encodes a failed lint call."""

        return (
            self.source.startswith(ERROR_SOURCE_PREFIX)
            and self.qtd_lines == 0
            and not self.methods
        )

    def as_dict(self) -> dict[str, object]:
        """Return the public camelCase payload for this result."""

        return {
            "qtdLines": self.qtd_lines,
            "qtdMethods": self.qtd_methods,
            "cyclomaticComplexity": self.cyclomatic_complexity,
            "token": self.token,
            "methods": [method.as_dict() for method in self.methods],
            "source": self.source,
        }


@dataclass(frozen=True, slots=True)
class LintSuccess:
    """Successful lint outcome."""

    summary: SummaryResult

    ok: bool = field(default=True, init=False)

    def to_summary(self) -> SummaryResult:
        """Return the summary unchanged."""

        return self.summary


@dataclass(frozen=True, slots=True)
class LintFailure:
    """Failed lint outcome.

    Attributes:
        stage: Pipeline stage that raised.
        error: Exception raised by that stage.
    """

    stage: str
    error: Exception

    ok: bool = field(default=False, init=False)

    @property
    def description(self) -> str:
        """Return the textual error description."""

        return str(self.error)

    def to_summary(self) -> SummaryResult:
        """Flatten the failure into the zeroed, error-tagged summary."""

        return SummaryResult.failed(self.error)


LintOutcome = Union[LintSuccess, LintFailure]
