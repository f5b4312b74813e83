"""Tests for severity ordering and report models."""

from dataclasses import FrozenInstanceError

import pytest

from content_intel.moderation import (
    Severity,
    Violation,
    ViolationCategory,
    ViolationReport,
    ViolationSource,
    max_severity,
    severity_color,
    sort_by_severity,
)


class TestSeverity:

    def test_priorities(self):
        assert [s.priority for s in Severity] == [0, 1, 2, 3, 4]

    def test_max(self):
        assert max_severity(Severity.LOW, Severity.HIGH, Severity.MEDIUM) == Severity.HIGH
        assert max_severity() == Severity.NONE

    def test_parse(self):
        assert Severity.parse(" HIGH ") == Severity.HIGH
        assert Severity.parse("bogus") == Severity.NONE
        assert Severity.parse("severe-ish", default=Severity.LOW) == Severity.LOW
        assert Severity.parse(Severity.MEDIUM) == Severity.MEDIUM

    def test_sort_most_severe_first_and_stable(self):
        items = [("a", "low"), ("b", "critical"), ("c", "low"), ("d", "none"), ("e", "high")]
        ordered = sort_by_severity(items, key=lambda item: item[1])
        assert [name for name, _ in ordered] == ["b", "e", "a", "c", "d"]

    def test_colors(self):
        assert severity_color("critical") == "red"
        assert severity_color(Severity.NONE) == "green"


class TestViolation:

    def test_contributors_default_to_source(self):
        v = Violation(ViolationCategory.SPAM, "spam", source=ViolationSource.AI)
        assert v.contributors == (ViolationSource.AI,)

    def test_immutable(self):
        v = Violation(ViolationCategory.SPAM, "spam")
        with pytest.raises(FrozenInstanceError):
            v.excerpt = "changed"


class TestViolationReport:

    def test_empty_report_is_clean(self):
        report = ViolationReport()
        assert report.is_clean
        assert not report.has_violations
        data = report.to_dict()
        assert data["severity"] == "none"
        assert data["violations"] == []
        assert data["aiProvider"] is None
