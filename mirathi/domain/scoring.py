# SPDX-License-Identifier: Apache-2.0

"""
Overall compliance scoring.

Only the S.40 result drives the score; the remaining sections are
informational.
"""

from dataclasses import dataclass
from ..models.enums import ComplianceStatus, OverallStatus
from ..models.compliance import SectionComplianceResult


S40_STATUS_SCORES = {
    ComplianceStatus.COMPLIANT: 85,
    ComplianceStatus.PARTIAL: 65,
    ComplianceStatus.NOT_APPLICABLE: 90,
    ComplianceStatus.NON_COMPLIANT: 40,
}

DEFAULT_SCORE = 40


@dataclass(frozen=True)
class ScoreResult:
    """Overall score and the status it maps to."""
    overall_score: int
    overall_status: OverallStatus


def calculate_overall_score(section40: SectionComplianceResult) -> int:
    """
    Map the S.40 section status to an overall score.

    Args:
        section40: S.40 section result

    Returns:
        Score from the fixed status table
    """
    return S40_STATUS_SCORES.get(ComplianceStatus(section40.status), DEFAULT_SCORE)


def determine_overall_status(score: float) -> OverallStatus:
    """
    Map a score to an overall status.

    Args:
        score: Overall score (0-100)

    Returns:
        OverallStatus band for the score
    """
    if score >= 80:
        return OverallStatus.COMPLIANT
    if score >= 60:
        return OverallStatus.PARTIAL
    if score >= 40:
        return OverallStatus.NON_COMPLIANT
    return OverallStatus.CRITICAL


def aggregate_score(section40: SectionComplianceResult) -> ScoreResult:
    """Combine the S.40 result into an overall score and status."""
    score = calculate_overall_score(section40)
    return ScoreResult(overall_score=score, overall_status=determine_overall_status(score))
