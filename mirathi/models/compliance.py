# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Compliance result models: issues, per-section results and the family report.
"""

from datetime import datetime
from typing import List, Optional, Dict
from pydantic import BaseModel, Field, ConfigDict
from .base import BaseResult
from .enums import ComplianceStatus, OverallStatus, IssueSeverity


class ComplianceIssue(BaseResult):
    """A single statutory compliance finding."""

    code: str = Field(..., description="Stable issue identifier")
    severity: IssueSeverity = Field(..., description="Issue severity")
    title: str = Field(..., description="Short issue title")
    description: str = Field(..., description="Human-readable issue description")
    law_reference: str = Field(..., description="Statutory provision the issue relates to")
    affected_id: Optional[str] = Field(None, description="ID of the affected house or marriage")
    affected_name: Optional[str] = Field(None, description="Name of the affected record")
    recommendation: str = Field(..., description="Suggested remediation")
    is_resolved: bool = Field(default=False, description="Whether the issue has been resolved")
    resolved_at: Optional[datetime] = Field(None, description="Resolution timestamp")
    resolved_by: Optional[str] = Field(None, description="User ID who resolved the issue")


class SectionComplianceResult(BaseResult):
    """Result of evaluating one statutory section."""

    status: ComplianceStatus = Field(..., description="Section compliance status")
    issues: List[ComplianceIssue] = Field(default_factory=list, description="Issues found")


class Section40Compliance(SectionComplianceResult):
    """S.40 polygamous estate compliance."""

    is_polygamous: bool = Field(..., description="Whether the family is polygamous")
    total_houses: int = Field(default=0, description="Number of polygamous houses")
    certified_houses: int = Field(default=0, description="Houses with a court certificate")
    houses_with_consent: int = Field(default=0, description="Houses with documented wives' consent")
    total_shares_percentage: float = Field(default=0.0, description="Sum of house share percentages")


class Section29Compliance(SectionComplianceResult):
    """S.29 dependants' provision compliance."""

    potential_dependants: int = Field(default=0, description="Potential dependants")
    verified_dependants: int = Field(default=0, description="Verified dependants")
    claims_filed: int = Field(default=0, description="Dependency claims filed")
    court_provisions: int = Field(default=0, description="Court-ordered provisions")
    total_dependency_value: float = Field(default=0.0, description="Total value provided to dependants")


class Section70Compliance(SectionComplianceResult):
    """S.70 guardianship of minors compliance."""

    minor_children: int = Field(default=0, description="Minor children")
    appointed_guardians: int = Field(default=0, description="Appointed guardians")
    guardians_with_bonds: int = Field(default=0, description="Guardians with S.72 bonds")
    pending_annual_reports: int = Field(default=0, description="Overdue S.73 annual reports")


class ChildrenActCompliance(SectionComplianceResult):
    """Children Act compliance."""

    adopted_children: int = Field(default=0, description="Adopted children")
    valid_adoption_orders: int = Field(default=0, description="Adoptions with valid orders")
    children_in_need: int = Field(default=0, description="Children requiring care and protection")


class MarriageActCompliance(SectionComplianceResult):
    """Marriage Act registration compliance."""

    total_marriages: int = Field(default=0, description="Total marriages")
    registered_marriages: int = Field(default=0, description="Marriages with a registration number")
    unregistered_marriages: int = Field(default=0, description="Marriages without a registration number")
    customary_marriages: int = Field(default=0, description="Customary or traditional marriages")
    islamic_marriages: int = Field(default=0, description="Islamic marriages")
    marriages_by_type: Dict[str, int] = Field(default_factory=dict, description="Marriage count per type")
    marriages_with_bride_price: int = Field(default=0, description="Marriages with bride price settled")
    marriages_with_settled_property: int = Field(default=0, description="Marriages with settled property")


class ComplianceHistoryEntry(BaseResult):
    """A previous compliance check result."""

    date: datetime = Field(..., description="Check timestamp")
    score: float = Field(..., ge=0, le=100, description="Overall score at the time")
    status: OverallStatus = Field(..., description="Overall status at the time")
    checked_by: Optional[str] = Field(None, description="User or system that ran the check")


class LegalAdvisor(BaseResult):
    """Contact details of the recommended legal advisor."""

    name: str
    phone: str
    email: str
    website: str


class LegalDocumentation(BaseResult):
    """Formal documentation block attached for legal review."""

    prepared_for: str
    prepared_by: str
    date_prepared: datetime
    reference_number: str
    disclaimer: str


class ReportOptions(BaseModel):
    """Options controlling what a compliance report includes."""

    model_config = ConfigDict(frozen=True)

    include_recommendations: bool = Field(default=True, description="Generate recommendations")
    include_history: bool = Field(default=False, description="Attach previous check results")
    history: List[ComplianceHistoryEntry] = Field(default_factory=list, description="Previous check results")
    legal_documentation_format: bool = Field(default=False, description="Attach legal documentation block")
    checked_at: Optional[datetime] = Field(None, description="Evaluation time, defaults to now")
    next_check_interval_days: int = Field(default=90, ge=1, description="Days until the next check")


class ComplianceReport(BaseResult):
    """Kenyan succession-law compliance report for one family."""

    family_id: str = Field(..., description="Family identifier")
    family_name: str = Field(..., description="Family display name")
    overall_score: int = Field(..., ge=0, le=100, description="Overall compliance score")
    overall_status: OverallStatus = Field(..., description="Overall compliance status")
    last_checked: datetime = Field(..., description="Evaluation timestamp")
    next_check_due: datetime = Field(..., description="Next scheduled compliance check")

    section29: Section29Compliance
    section40: Section40Compliance
    section70: Section70Compliance
    children_act: ChildrenActCompliance
    marriage_act: MarriageActCompliance

    total_issues: int = Field(default=0, description="Total issues across all sections")
    critical_issues: int = Field(default=0)
    high_issues: int = Field(default=0)
    medium_issues: int = Field(default=0)
    low_issues: int = Field(default=0)
    resolved_issues: int = Field(default=0)
    all_issues: List[ComplianceIssue] = Field(default_factory=list)

    history: List[ComplianceHistoryEntry] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    legal_advisor: LegalAdvisor
    legal_documentation: Optional[LegalDocumentation] = None
