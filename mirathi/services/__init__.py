# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Services package - Repository access and compliance orchestration.
"""

from .family_store import FamilyRepository, InMemoryFamilyRepository
from .compliance import (
    ComplianceService,
    ComplianceError,
    FamilyNotFoundError,
    BatchComplianceResult,
    create_compliance_service
)

__all__ = [
    "FamilyRepository",
    "InMemoryFamilyRepository",
    "ComplianceService",
    "ComplianceError",
    "FamilyNotFoundError",
    "BatchComplianceResult",
    "create_compliance_service"
]
