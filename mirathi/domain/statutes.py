# SPDX-License-Identifier: Apache-2.0

"""
Statutory rule evaluators for Kenyan succession law.

This module contains pure functions, one per statutory section, that turn
family aggregate snapshots into section compliance results. Evaluators never
raise for well-typed input and never mutate their arguments.
"""

from collections import Counter
from typing import List, Optional, Sequence
from ..models.enums import ComplianceStatus, IssueSeverity, MarriageType
from ..models.snapshots import FamilySnapshot, HouseSnapshot, MarriageSnapshot
from ..models.compliance import (
    ComplianceIssue,
    Section40Compliance,
    Section29Compliance,
    Section70Compliance,
    ChildrenActCompliance,
    MarriageActCompliance
)


S40_NO_HOUSES = "S40_NO_HOUSES"
S40_NO_CERTIFICATE = "S40_NO_CERTIFICATE"
S40_NO_CONSENT = "S40_NO_CONSENT"
S40_MARRIAGE_NO_HOUSE = "S40_MARRIAGE_NO_HOUSE"
DATA_INTEGRITY = "DATA_INTEGRITY"

LSA_S40_1 = "Law of Succession Act, Section 40(1)"
LSA_S40_2 = "Law of Succession Act, Section 40(2)"


def evaluate_section_40(
    family: FamilySnapshot,
    houses: Optional[Sequence[HouseSnapshot]] = None,
    polygamous_marriages: Optional[Sequence[MarriageSnapshot]] = None
) -> Section40Compliance:
    """
    Evaluate S.40 polygamous estate compliance.

    Every rule is applied and every applicable issue collected; houses are
    walked in seniority order so the issue list is deterministic.

    Args:
        family: Family snapshot
        houses: Polygamous houses of the family
        polygamous_marriages: Marriages flagged as polygamous

    Returns:
        Section40Compliance with status, counters and issues
    """
    houses = sorted(houses or [], key=lambda house: house.house_order)
    polygamous_marriages = list(polygamous_marriages or [])

    counters = {
        "is_polygamous": family.is_polygamous,
        "total_houses": len(houses),
        "certified_houses": sum(1 for house in houses if house.court_recognized),
        "houses_with_consent": sum(1 for house in houses if house.wives_consent_obtained),
        "total_shares_percentage": sum(house.share_percentage for house in houses),
    }

    if not family.is_polygamous:
        return Section40Compliance(status=ComplianceStatus.NOT_APPLICABLE, issues=[], **counters)

    issues: List[ComplianceIssue] = []

    if not houses:
        issues.append(ComplianceIssue(
            code=S40_NO_HOUSES,
            severity=IssueSeverity.CRITICAL,
            title="Polygamous Family Without Houses",
            description="Family is marked as polygamous but has no houses defined.",
            law_reference=LSA_S40_1,
            affected_id=family.id,
            affected_name=family.name,
            recommendation="Define the polygamous houses of the family and assign each wife to her house."
        ))

    subsequent_houses = [house for house in houses if not house.is_senior]

    for house in subsequent_houses:
        if not house.court_recognized:
            issues.append(ComplianceIssue(
                code=S40_NO_CERTIFICATE,
                severity=IssueSeverity.HIGH,
                title=f'House "{house.house_name}" Lacks Court Certification',
                description=(
                    f'House "{house.house_name}" (Order: {house.house_order}) lacks the S.40 '
                    f'court certificate required by the Law of Succession Act.'
                ),
                law_reference=LSA_S40_1,
                affected_id=house.id,
                affected_name=house.house_name,
                recommendation=f'Obtain an S.40 court certificate for {house.house_name}.'
            ))

    for house in subsequent_houses:
        if not house.wives_consent_obtained:
            issues.append(ComplianceIssue(
                code=S40_NO_CONSENT,
                severity=IssueSeverity.HIGH,
                title=f'House "{house.house_name}" Lacks Wives Consent',
                description=(
                    f'No documented consent from existing wives for house '
                    f'"{house.house_name}" (Order: {house.house_order}).'
                ),
                law_reference=LSA_S40_2,
                affected_id=house.id,
                affected_name=house.house_name,
                recommendation=f"Document the existing wives' consent for {house.house_name}."
            ))

    for marriage in polygamous_marriages:
        if not marriage.polygamous_house_id:
            issues.append(ComplianceIssue(
                code=S40_MARRIAGE_NO_HOUSE,
                severity=IssueSeverity.MEDIUM,
                title="Polygamous Marriage Unassigned",
                description="Marriage flagged as polygamous but not assigned to a house.",
                law_reference=LSA_S40_1,
                affected_id=marriage.id,
                recommendation=f"Assign marriage {marriage.id} to its polygamous house."
            ))

    issues.extend(find_duplicate_house_orders(houses))

    return Section40Compliance(
        status=determine_section_40_status(issues),
        issues=issues,
        **counters
    )


def find_duplicate_house_orders(houses: Sequence[HouseSnapshot]) -> List[ComplianceIssue]:
    """
    Report house orders claimed by more than one house.

    Args:
        houses: Houses sorted by seniority

    Returns:
        One LOW severity data-integrity issue per duplicated order
    """
    order_counts = Counter(house.house_order for house in houses)
    issues = []

    for order in sorted(order for order, count in order_counts.items() if count > 1):
        claimants = [house for house in houses if house.house_order == order]
        names = ", ".join(house.house_name for house in claimants)
        issues.append(ComplianceIssue(
            code=DATA_INTEGRITY,
            severity=IssueSeverity.LOW,
            title=f"Duplicate House Order {order}",
            description=f"{len(claimants)} houses claim house order {order}: {names}.",
            law_reference=LSA_S40_1,
            affected_id=claimants[0].id,
            affected_name=claimants[0].house_name,
            recommendation=f"Correct the seniority order of houses {names}."
        ))

    return issues


def determine_section_40_status(issues: Sequence[ComplianceIssue]) -> ComplianceStatus:
    """
    Derive S.40 status from the collected issues.

    LOW severity issues are informational and never degrade the status.
    """
    severities = {IssueSeverity(issue.severity) for issue in issues}

    if IssueSeverity.CRITICAL in severities:
        return ComplianceStatus.NON_COMPLIANT

    if IssueSeverity.HIGH in severities or IssueSeverity.MEDIUM in severities:
        return ComplianceStatus.PARTIAL

    return ComplianceStatus.COMPLIANT


def evaluate_section_29(family: FamilySnapshot) -> Section29Compliance:
    """
    Evaluate S.29 dependants' provision.

    Any potential dependant requires a review of reasonable provision.
    """
    return Section29Compliance(
        status=_review_if(family.dependant_count > 0),
        issues=[],
        potential_dependants=family.dependant_count
    )


def evaluate_section_70(family: FamilySnapshot) -> Section70Compliance:
    """Evaluate S.70 guardianship of minors."""
    return Section70Compliance(
        status=_review_if(family.minor_count > 0),
        issues=[],
        minor_children=family.minor_count
    )


def evaluate_children_act(family: FamilySnapshot) -> ChildrenActCompliance:
    """Evaluate Children Act obligations."""
    return ChildrenActCompliance(
        status=ComplianceStatus.COMPLIANT,
        issues=[],
        children_in_need=family.minor_count
    )


def evaluate_marriage_act(marriages: Optional[Sequence[MarriageSnapshot]] = None) -> MarriageActCompliance:
    """
    Evaluate Marriage Act registration status.

    Args:
        marriages: All marriages of the family

    Returns:
        MarriageActCompliance with counts by type and registration
    """
    marriages = list(marriages or [])
    type_counts = Counter(marriage.type for marriage in marriages)
    registered = sum(1 for marriage in marriages if marriage.is_registered)

    return MarriageActCompliance(
        status=_review_if(len(marriages) > 0),
        issues=[],
        total_marriages=len(marriages),
        registered_marriages=registered,
        unregistered_marriages=len(marriages) - registered,
        customary_marriages=sum(1 for marriage in marriages if marriage.is_customary),
        islamic_marriages=sum(1 for marriage in marriages if marriage.is_islamic),
        marriages_by_type={
            marriage_type.value: type_counts.get(marriage_type.value, 0)
            for marriage_type in MarriageType
        }
    )


def _review_if(condition: bool) -> ComplianceStatus:
    return ComplianceStatus.REQUIRES_REVIEW if condition else ComplianceStatus.COMPLIANT
