# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Enumeration types for the Mirathi succession compliance engine.
"""

from enum import Enum


class ComplianceStatus(str, Enum):
    """Status of a single statutory section evaluation."""
    COMPLIANT = "COMPLIANT"
    PARTIAL = "PARTIAL"
    NON_COMPLIANT = "NON_COMPLIANT"
    NOT_APPLICABLE = "NOT_APPLICABLE"
    # Informational sections that need a human look but carry no issues
    REQUIRES_REVIEW = "REQUIRES_REVIEW"


class OverallStatus(str, Enum):
    """Overall family compliance status derived from the score."""
    COMPLIANT = "COMPLIANT"
    PARTIAL = "PARTIAL"
    NON_COMPLIANT = "NON_COMPLIANT"
    CRITICAL = "CRITICAL"


class IssueSeverity(str, Enum):
    """Compliance issue severity levels."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class MarriageType(str, Enum):
    """Marriage regimes recognized under the Marriage Act, 2014."""
    CIVIL = "CIVIL"
    CUSTOMARY = "CUSTOMARY"
    TRADITIONAL = "TRADITIONAL"
    ISLAMIC = "ISLAMIC"
    CHRISTIAN = "CHRISTIAN"
