# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Tests for statutory rule evaluators.
"""

import pytest

from mirathi.domain.statutes import (
    evaluate_section_40, evaluate_section_29, evaluate_section_70,
    evaluate_children_act, evaluate_marriage_act, find_duplicate_house_orders,
    determine_section_40_status,
    S40_NO_HOUSES, S40_NO_CERTIFICATE, S40_NO_CONSENT, S40_MARRIAGE_NO_HOUSE, DATA_INTEGRITY
)
from mirathi.models import (
    ComplianceIssue, FamilySnapshot, HouseSnapshot, MarriageSnapshot, MarriageType,
    ComplianceStatus, IssueSeverity
)


def make_house(house_id, order, certified=True, consent=True, share=None):
    return HouseSnapshot(
        id=house_id,
        house_name=f"House {house_id}",
        house_order=order,
        court_recognized=certified,
        wives_consent_obtained=consent,
        house_share_percentage=share
    )


class TestSection40Evaluator:
    """Test S.40 polygamy rules."""

    def test_non_polygamous_family_not_applicable(self, monogamous_family, uncertified_house):
        """Test non-polygamous families skip S.40 regardless of houses."""
        result = evaluate_section_40(monogamous_family, [uncertified_house], [])

        assert result.status == ComplianceStatus.NOT_APPLICABLE
        assert result.issues == []
        assert result.is_polygamous is False

    def test_polygamous_without_houses(self, polygamous_family):
        """Test missing houses is a critical issue."""
        result = evaluate_section_40(polygamous_family, [], [])

        assert result.status == ComplianceStatus.NON_COMPLIANT
        assert [issue.code for issue in result.issues] == [S40_NO_HOUSES]
        assert result.issues[0].severity == IssueSeverity.CRITICAL
        assert result.total_houses == 0

    def test_none_collections_treated_as_empty(self, polygamous_family):
        """Test absent collections behave like empty ones."""
        result = evaluate_section_40(polygamous_family, None, None)

        assert result.status == ComplianceStatus.NON_COMPLIANT
        assert len(result.issues) == 1

    def test_senior_house_only_is_compliant(self, polygamous_family, senior_house):
        """Test a single certified senior house is compliant."""
        result = evaluate_section_40(polygamous_family, [senior_house], [])

        assert result.status == ComplianceStatus.COMPLIANT
        assert result.issues == []
        assert result.certified_houses == 1
        assert result.houses_with_consent == 1

    def test_senior_house_exempt_from_certificate_and_consent(self, polygamous_family):
        """Test the first house needs neither certificate nor consent."""
        house = make_house("h1", 1, certified=False, consent=False)

        result = evaluate_section_40(polygamous_family, [house], [])

        assert result.status == ComplianceStatus.COMPLIANT
        assert result.issues == []

    def test_subsequent_house_without_certificate_or_consent(
        self, polygamous_family, senior_house, uncertified_house
    ):
        """Test subsequent houses need certificate and consent."""
        result = evaluate_section_40(polygamous_family, [senior_house, uncertified_house], [])

        assert result.status == ComplianceStatus.PARTIAL
        assert [issue.code for issue in result.issues] == [S40_NO_CERTIFICATE, S40_NO_CONSENT]
        assert all(issue.severity == IssueSeverity.HIGH for issue in result.issues)
        assert all(issue.affected_id == "house-2" for issue in result.issues)
        assert result.issues[0].law_reference.endswith("Section 40(1)")
        assert result.issues[1].law_reference.endswith("Section 40(2)")

    def test_certificate_issues_precede_consent_issues(self, polygamous_family):
        """Test issues are grouped by rule, houses in seniority order."""
        houses = [
            make_house("h3", 3, certified=False, consent=False),
            make_house("h1", 1),
            make_house("h2", 2, certified=False, consent=False),
        ]

        result = evaluate_section_40(polygamous_family, houses, [])

        assert [(issue.code, issue.affected_id) for issue in result.issues] == [
            (S40_NO_CERTIFICATE, "h2"),
            (S40_NO_CERTIFICATE, "h3"),
            (S40_NO_CONSENT, "h2"),
            (S40_NO_CONSENT, "h3"),
        ]

    def test_unassigned_polygamous_marriage(self, polygamous_family, senior_house):
        """Test polygamous marriages must belong to a house."""
        marriage = MarriageSnapshot(id="mar-3", is_polygamous=True, type=MarriageType.ISLAMIC)

        result = evaluate_section_40(polygamous_family, [senior_house], [marriage])

        assert result.status == ComplianceStatus.PARTIAL
        assert len(result.issues) == 1
        assert result.issues[0].code == S40_MARRIAGE_NO_HOUSE
        assert result.issues[0].severity == IssueSeverity.MEDIUM
        assert result.issues[0].affected_id == "mar-3"

    def test_critical_with_other_issues_is_non_compliant(self, polygamous_family):
        """Test rules do not short-circuit after a critical issue."""
        marriage = MarriageSnapshot(id="mar-3", is_polygamous=True, type=MarriageType.CUSTOMARY)

        result = evaluate_section_40(polygamous_family, [], [marriage])

        assert result.status == ComplianceStatus.NON_COMPLIANT
        assert [issue.code for issue in result.issues] == [S40_NO_HOUSES, S40_MARRIAGE_NO_HOUSE]

    def test_counters(self, polygamous_family, senior_house, uncertified_house):
        """Test S.40 counters."""
        extra = make_house("h3", 3, certified=True, consent=False)

        result = evaluate_section_40(polygamous_family, [senior_house, uncertified_house, extra], [])

        assert result.total_houses == 3
        assert result.certified_houses == 2
        assert result.houses_with_consent == 1
        assert result.total_shares_percentage == 80

    def test_duplicate_senior_house_reported_as_data_integrity(self, polygamous_family):
        """Test two senior houses yield a LOW data-integrity issue."""
        houses = [make_house("h1", 1), make_house("h1b", 1)]

        result = evaluate_section_40(polygamous_family, houses, [])

        assert [issue.code for issue in result.issues] == [DATA_INTEGRITY]
        assert result.issues[0].severity == IssueSeverity.LOW
        assert result.status == ComplianceStatus.COMPLIANT

    def test_input_not_mutated(self, polygamous_family, senior_house, uncertified_house):
        """Test evaluator leaves the caller's list untouched."""
        houses = [uncertified_house, senior_house]

        evaluate_section_40(polygamous_family, houses, [])

        assert houses == [uncertified_house, senior_house]


class TestDuplicateHouseOrders:
    """Test house order integrity check."""

    def test_no_duplicates(self):
        """Test unique orders produce no issues."""
        assert find_duplicate_house_orders([make_house("a", 1), make_house("b", 2)]) == []

    def test_one_issue_per_duplicated_order(self):
        """Test each duplicated order is reported once."""
        houses = [make_house("a", 1), make_house("b", 2), make_house("c", 2), make_house("d", 2)]

        issues = find_duplicate_house_orders(houses)

        assert len(issues) == 1
        assert "3 houses claim house order 2" in issues[0].description



def make_issue(severity):
    return ComplianceIssue(
        code=f"TEST_{severity}",
        severity=severity,
        title="Test issue",
        description="Test issue",
        law_reference="Law of Succession Act, Cap 160",
        recommendation="None"
    )


class TestSection40Status:
    """Test S.40 status derivation from issue severities."""

    def test_no_issues_is_compliant(self):
        """Test an empty issue list is compliant."""
        assert determine_section_40_status([]) == ComplianceStatus.COMPLIANT

    def test_low_only_is_compliant(self):
        """Test informational issues never degrade the status."""
        issues = [make_issue(IssueSeverity.LOW), make_issue(IssueSeverity.LOW)]

        assert determine_section_40_status(issues) == ComplianceStatus.COMPLIANT

    @pytest.mark.parametrize("severity", [IssueSeverity.HIGH, IssueSeverity.MEDIUM])
    def test_high_or_medium_is_partial(self, severity):
        """Test HIGH or MEDIUM issues give PARTIAL."""
        issues = [make_issue(severity), make_issue(IssueSeverity.LOW)]

        assert determine_section_40_status(issues) == ComplianceStatus.PARTIAL

    def test_mixed_severities_without_critical_is_partial(self):
        """Test HIGH, MEDIUM and LOW together give PARTIAL."""
        issues = [make_issue(s) for s in (IssueSeverity.LOW, IssueSeverity.MEDIUM, IssueSeverity.HIGH)]

        assert determine_section_40_status(issues) == ComplianceStatus.PARTIAL

    def test_critical_takes_precedence(self):
        """Test one CRITICAL issue makes the section non-compliant."""
        issues = [make_issue(s) for s in (IssueSeverity.LOW, IssueSeverity.MEDIUM, IssueSeverity.HIGH)]

        status = determine_section_40_status(issues + [make_issue(IssueSeverity.CRITICAL)])

        assert status == ComplianceStatus.NON_COMPLIANT


class TestInformationalSections:
    """Test S.29, S.70 and Children Act evaluators."""

    def test_section_29_requires_review_with_dependants(self, polygamous_family):
        """Test dependants trigger a review."""
        result = evaluate_section_29(polygamous_family)

        assert result.status == ComplianceStatus.REQUIRES_REVIEW
        assert result.potential_dependants == 3
        assert result.issues == []

    def test_section_29_compliant_without_dependants(self, monogamous_family):
        """Test no dependants is compliant."""
        assert evaluate_section_29(monogamous_family).status == ComplianceStatus.COMPLIANT

    @pytest.mark.parametrize("minors,expected", [
        (0, ComplianceStatus.COMPLIANT),
        (1, ComplianceStatus.REQUIRES_REVIEW),
        (4, ComplianceStatus.REQUIRES_REVIEW),
    ])
    def test_section_70_keyed_on_minors(self, minors, expected):
        """Test guardianship review depends on minors."""
        family = FamilySnapshot(id="f", name="F", minor_count=minors)

        result = evaluate_section_70(family)

        assert result.status == expected
        assert result.minor_children == minors
        assert result.issues == []

    def test_children_act(self, polygamous_family):
        """Test Children Act counts children in need."""
        result = evaluate_children_act(polygamous_family)

        assert result.status == ComplianceStatus.COMPLIANT
        assert result.children_in_need == 2
        assert result.adopted_children == 0


class TestMarriageActEvaluator:
    """Test Marriage Act evaluator."""

    def test_no_marriages_compliant(self):
        """Test families without marriages are compliant."""
        result = evaluate_marriage_act([])

        assert result.status == ComplianceStatus.COMPLIANT
        assert result.total_marriages == 0
        assert result.marriages_by_type["CIVIL"] == 0

    def test_counts_by_type_and_registration(self, sample_marriages):
        """Test counts by type and registration."""
        marriages = sample_marriages + [
            MarriageSnapshot(id="mar-4", type=MarriageType.TRADITIONAL),
            MarriageSnapshot(id="mar-5", type=MarriageType.ISLAMIC, registration_number="KADHI-9"),
        ]

        result = evaluate_marriage_act(marriages)

        assert result.status == ComplianceStatus.REQUIRES_REVIEW
        assert result.total_marriages == 4
        assert result.registered_marriages == 2
        assert result.unregistered_marriages == 2
        assert result.customary_marriages == 2
        assert result.islamic_marriages == 1
        assert result.marriages_by_type == {
            "CIVIL": 1, "CUSTOMARY": 1, "TRADITIONAL": 1, "ISLAMIC": 1, "CHRISTIAN": 0
        }
