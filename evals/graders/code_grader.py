"""
Code-Based Graders -- deterministic evaluation of pipeline outputs.

Use for: result shape checks, severity ordering, fallback tagging.
Fast, cheap, reproducible. No backend needed.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

logger = logging.getLogger(__name__)


@dataclass
class CodeGraderResult:
    """Result from code-based grading."""

    eval_name: str
    passed: bool
    checks_passed: int = 0
    checks_total: int = 0
    failures: list[str] = field(default_factory=list)

    def report(self) -> str:
        """One line per failure, for assertion messages."""
        header = f"{self.eval_name}: {self.checks_passed}/{self.checks_total} checks passed"
        return "\n".join([header, *self.failures])


class CodeGrader:
    """Deterministic grader that runs a list of named checks.

    Usage:
        grader = CodeGrader("fallback_paragraphs")
        grader.add_check("three_paragraphs", lambda r: len(r.paragraphs) == 3)
        grader.add_check("tagged_builtin", lambda r: r.provider == "builtin")
        result = grader.grade(paragraphs_result)
        assert result.passed, result.report()
    """

    def __init__(self, eval_name: str):
        self.eval_name = eval_name
        self._checks: list[tuple[str, Callable[[Any], bool]]] = []

    def add_check(self, name: str, check_fn: Callable[[Any], bool]) -> "CodeGrader":
        """Add a named check function. Returns self for chaining."""
        self._checks.append((name, check_fn))
        return self

    def grade(self, output: Any, label: str = "") -> CodeGraderResult:
        """Run all checks against one output."""
        failures = []
        passed_count = 0
        prefix = f"[{label}] " if label else ""

        for name, check_fn in self._checks:
            try:
                if check_fn(output):
                    passed_count += 1
                else:
                    failures.append(f"{prefix}FAIL: {name}")
            except Exception as e:
                failures.append(f"{prefix}ERROR: {name} -- {e}")

        return CodeGraderResult(
            eval_name=self.eval_name,
            passed=len(failures) == 0,
            checks_passed=passed_count,
            checks_total=len(self._checks),
            failures=failures,
        )

    def grade_all(self, outputs: Iterable[tuple[str, Any]]) -> CodeGraderResult:
        """Run all checks against many labelled outputs (fuzz-style evals)."""
        failures: list[str] = []
        passed_count = 0
        total = 0
        for label, output in outputs:
            result = self.grade(output, label=label)
            passed_count += result.checks_passed
            total += result.checks_total
            failures.extend(result.failures)

        if failures:
            logger.info(f"[CodeGrader] {self.eval_name}: {len(failures)} failures")

        return CodeGraderResult(
            eval_name=self.eval_name,
            passed=len(failures) == 0,
            checks_passed=passed_count,
            checks_total=total,
            failures=failures,
        )
