# SPDX-License-Identifier: Apache-2.0

"""
Compliance report assembly.

This module runs every statutory evaluator over a family aggregate and
assembles section results, issue counts and recommendations into a single
report. All functions are pure apart from reading the clock when the caller
does not pin the evaluation time.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Sequence
from ..models.enums import IssueSeverity
from ..models.snapshots import FamilySnapshot, HouseSnapshot, MarriageSnapshot
from ..models.compliance import (
    ComplianceIssue,
    ComplianceReport,
    LegalAdvisor,
    LegalDocumentation,
    ReportOptions,
    SectionComplianceResult
)
from .statutes import (
    evaluate_section_40,
    evaluate_section_29,
    evaluate_section_70,
    evaluate_children_act,
    evaluate_marriage_act
)
from .scoring import aggregate_score


MAINTAIN_PRACTICES_RECOMMENDATION = "Maintain current compliance practices"

LAW_SOCIETY_OF_KENYA = LegalAdvisor(
    name="Law Society of Kenya",
    phone="+254202222222",
    email="info@lsk.or.ke",
    website="https://lsk.or.ke"
)

DOCUMENTATION_DISCLAIMER = (
    "This report is for informational purposes only and does not constitute legal advice."
)

ACTIONABLE_SEVERITIES = (IssueSeverity.HIGH, IssueSeverity.CRITICAL)


def build_compliance_report(
    family: FamilySnapshot,
    houses: Optional[Sequence[HouseSnapshot]] = None,
    marriages: Optional[Sequence[MarriageSnapshot]] = None,
    options: Optional[ReportOptions] = None
) -> ComplianceReport:
    """
    Build the full compliance report for a family.

    Args:
        family: Family snapshot
        houses: Polygamous houses of the family
        marriages: All marriages of the family
        options: Report options, defaults apply when omitted

    Returns:
        ComplianceReport with section results, counts and recommendations
    """
    options = options or ReportOptions()
    houses = list(houses or [])
    marriages = list(marriages or [])

    checked_at = options.checked_at or datetime.now(timezone.utc)
    next_check_due = checked_at + timedelta(days=options.next_check_interval_days)

    polygamous_marriages = [marriage for marriage in marriages if marriage.is_polygamous]

    section40 = evaluate_section_40(family, houses, polygamous_marriages)
    section29 = evaluate_section_29(family)
    section70 = evaluate_section_70(family)
    children_act = evaluate_children_act(family)
    marriage_act = evaluate_marriage_act(marriages)

    all_issues = collect_issues([section29, section40, section70, children_act, marriage_act])
    counts = count_issues(all_issues)
    score = aggregate_score(section40)

    recommendations = (
        generate_recommendations(all_issues) if options.include_recommendations else []
    )

    legal_documentation = None
    if options.legal_documentation_format:
        legal_documentation = build_legal_documentation(family, checked_at)

    return ComplianceReport(
        family_id=family.id,
        family_name=family.name,
        overall_score=score.overall_score,
        overall_status=score.overall_status,
        last_checked=checked_at,
        next_check_due=next_check_due,
        section29=section29,
        section40=section40,
        section70=section70,
        children_act=children_act,
        marriage_act=marriage_act,
        all_issues=all_issues,
        history=list(options.history) if options.include_history else [],
        recommendations=recommendations,
        legal_advisor=LAW_SOCIETY_OF_KENYA,
        legal_documentation=legal_documentation,
        **counts
    )


def collect_issues(sections: Sequence[SectionComplianceResult]) -> List[ComplianceIssue]:
    """Flatten issues from all section results, preserving section order."""
    return [issue for section in sections for issue in section.issues]


def count_issues(issues: Sequence[ComplianceIssue]) -> Dict[str, int]:
    """
    Count issues by severity and resolution state.

    Args:
        issues: Issues across all sections

    Returns:
        Dictionary of report counter fields
    """
    def by_severity(severity: IssueSeverity) -> int:
        return sum(1 for issue in issues if issue.severity == severity)

    return {
        "total_issues": len(issues),
        "critical_issues": by_severity(IssueSeverity.CRITICAL),
        "high_issues": by_severity(IssueSeverity.HIGH),
        "medium_issues": by_severity(IssueSeverity.MEDIUM),
        "low_issues": by_severity(IssueSeverity.LOW),
        "resolved_issues": sum(1 for issue in issues if issue.is_resolved),
    }


def generate_recommendations(issues: Sequence[ComplianceIssue]) -> List[str]:
    """
    Produce one recommendation per unresolved HIGH or CRITICAL issue.

    A family without any issue gets the generic maintenance recommendation.
    """
    if not issues:
        return [MAINTAIN_PRACTICES_RECOMMENDATION]

    return [
        issue.recommendation
        for issue in issues
        if issue.severity in ACTIONABLE_SEVERITIES and not issue.is_resolved
    ]


def build_legal_documentation(family: FamilySnapshot, prepared_at: datetime) -> LegalDocumentation:
    """Build the legal review documentation block for a report."""
    return LegalDocumentation(
        prepared_for="Legal Review",
        prepared_by="Family Service System",
        date_prepared=prepared_at,
        reference_number=f"COMP-{family.id}-{int(prepared_at.timestamp() * 1000)}",
        disclaimer=DOCUMENTATION_DISCLAIMER
    )
