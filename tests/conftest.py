# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Pytest configuration and fixtures.
"""

import os
import pytest
from datetime import datetime, timezone

from mirathi.models import (
    FamilySnapshot, HouseSnapshot, MarriageSnapshot, MarriageType, ReportOptions
)
from mirathi.services import InMemoryFamilyRepository

# Set test environment
os.environ['ENVIRONMENT'] = 'test'
os.environ['OTEL_ENABLED'] = 'false'


@pytest.fixture
def checked_at():
    """Fixed evaluation time."""
    return datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def report_options(checked_at):
    """Report options pinned to a fixed clock."""
    return ReportOptions(checked_at=checked_at)


@pytest.fixture
def sample_family_data():
    """Sample family record as delivered by storage (camelCase)."""
    return {
        "id": "fam-001",
        "name": "Kamau Family",
        "isPolygamous": True,
        "dependantCount": 3,
        "minorCount": 2
    }


@pytest.fixture
def polygamous_family(sample_family_data):
    """Polygamous family snapshot."""
    return FamilySnapshot.model_validate(sample_family_data)


@pytest.fixture
def monogamous_family():
    """Non-polygamous family snapshot without dependants or minors."""
    return FamilySnapshot(id="fam-002", name="Otieno Family", is_polygamous=False)


@pytest.fixture
def senior_house():
    """Fully compliant first house."""
    return HouseSnapshot(
        id="house-1",
        house_name="House of Wanjiru",
        house_order=1,
        court_recognized=True,
        wives_consent_obtained=True,
        house_share_percentage=50
    )


@pytest.fixture
def uncertified_house():
    """Second house with neither certificate nor consent."""
    return HouseSnapshot(
        id="house-2",
        house_name="House of Amina",
        house_order=2,
        court_recognized=False,
        wives_consent_obtained=False,
        house_share_percentage=30
    )


@pytest.fixture
def sample_marriages():
    """Marriages of the polygamous family."""
    return [
        MarriageSnapshot(
            id="mar-1",
            is_polygamous=True,
            polygamous_house_id="house-1",
            type=MarriageType.CIVIL,
            registration_number="CR-2001-0042"
        ),
        MarriageSnapshot(
            id="mar-2",
            is_polygamous=True,
            polygamous_house_id="house-2",
            type=MarriageType.CUSTOMARY
        )
    ]


@pytest.fixture
def family_repository(polygamous_family, senior_house, uncertified_house, sample_marriages):
    """In-memory repository holding one polygamous family."""
    repository = InMemoryFamilyRepository()
    repository.add_family(polygamous_family)
    repository.add_house(polygamous_family.id, senior_house)
    repository.add_house(polygamous_family.id, uncertified_house)
    for marriage in sample_marriages:
        repository.add_marriage(polygamous_family.id, marriage)
    return repository
