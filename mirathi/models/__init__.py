# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Models package - Pydantic snapshots and compliance result models.
"""

# Base models
from .base import BaseSnapshot, BaseResult

# Enumerations
from .enums import (
    ComplianceStatus,
    OverallStatus,
    IssueSeverity,
    MarriageType
)

# Family aggregate snapshots
from .snapshots import (
    FamilySnapshot,
    HouseSnapshot,
    MarriageSnapshot
)

# Compliance results
from .compliance import (
    ComplianceIssue,
    SectionComplianceResult,
    Section40Compliance,
    Section29Compliance,
    Section70Compliance,
    ChildrenActCompliance,
    MarriageActCompliance,
    ComplianceHistoryEntry,
    LegalAdvisor,
    LegalDocumentation,
    ReportOptions,
    ComplianceReport
)

__all__ = [
    # Base models
    "BaseSnapshot",
    "BaseResult",

    # Enumerations
    "ComplianceStatus",
    "OverallStatus",
    "IssueSeverity",
    "MarriageType",

    # Snapshots
    "FamilySnapshot",
    "HouseSnapshot",
    "MarriageSnapshot",

    # Compliance results
    "ComplianceIssue",
    "SectionComplianceResult",
    "Section40Compliance",
    "Section29Compliance",
    "Section70Compliance",
    "ChildrenActCompliance",
    "MarriageActCompliance",
    "ComplianceHistoryEntry",
    "LegalAdvisor",
    "LegalDocumentation",
    "ReportOptions",
    "ComplianceReport"
]
