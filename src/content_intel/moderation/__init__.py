"""
Moderation -- rule-based and backend-assisted violation detection.

Usage:
    from content_intel.moderation import ViolationAggregator

    report = await ViolationAggregator(orchestrator).analyze(title, content)
    report.to_dict()
"""

from .aggregator import ViolationAggregator, map_flag_to_category
from .models import (
    SEVERITY_PRIORITY,
    Severity,
    SourcesUsed,
    Violation,
    ViolationCategory,
    ViolationReport,
    ViolationSource,
    max_severity,
    severity_color,
    sort_by_severity,
)
from .rules import CATEGORY_SEVERITY, PatternRuleEngine, RuleResult
