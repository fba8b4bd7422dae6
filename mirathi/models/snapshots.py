# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Family aggregate snapshots consumed by the compliance engine.

Storage adapters translate their rows into these models; the engine only
ever reads them.
"""

from typing import Optional
from pydantic import Field, field_validator
from .base import BaseSnapshot
from .enums import MarriageType


class FamilySnapshot(BaseSnapshot):
    """Family record as fetched by the storage layer."""

    id: str = Field(..., min_length=1, description="Family identifier")
    name: str = Field(..., description="Family display name")
    is_polygamous: bool = Field(default=False, description="Whether the family is polygamous")
    dependant_count: int = Field(default=0, ge=0, description="Potential S.29 dependants")
    minor_count: int = Field(default=0, ge=0, description="Minor children in the family")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Normalize family name."""
        return v.strip()


class HouseSnapshot(BaseSnapshot):
    """Polygamous house (S.40 sub-unit) belonging to a family."""

    id: str = Field(..., min_length=1, description="House identifier")
    house_name: str = Field(..., description="House display name")
    house_order: int = Field(..., ge=1, description="Seniority order, 1 is the senior house")
    court_recognized: bool = Field(default=False, description="Whether a S.40 court certificate exists")
    wives_consent_obtained: bool = Field(default=False, description="Whether existing wives consented")
    house_share_percentage: Optional[float] = Field(
        None, ge=0, le=100, description="Share of the estate allotted to the house"
    )

    @property
    def is_senior(self) -> bool:
        """Check if this is the first (senior) house."""
        return self.house_order == 1

    @property
    def share_percentage(self) -> float:
        """House share with absent values counted as zero."""
        return self.house_share_percentage or 0.0


class MarriageSnapshot(BaseSnapshot):
    """Marriage record relevant to S.40 and the Marriage Act."""

    id: str = Field(..., min_length=1, description="Marriage identifier")
    is_polygamous: bool = Field(default=False, description="Whether the marriage is polygamous")
    polygamous_house_id: Optional[str] = Field(None, description="House the marriage belongs to")
    type: MarriageType = Field(..., description="Marriage regime")
    registration_number: Optional[str] = Field(None, description="Civil registry number")

    @property
    def is_registered(self) -> bool:
        """Check if the marriage carries a registration number."""
        return bool(self.registration_number and self.registration_number.strip())

    @property
    def is_customary(self) -> bool:
        """Check if the marriage is customary or traditional."""
        return self.type in (MarriageType.CUSTOMARY.value, MarriageType.TRADITIONAL.value)

    @property
    def is_islamic(self) -> bool:
        """Check if the marriage is Islamic."""
        return self.type == MarriageType.ISLAMIC.value
