# SPDX-License-Identifier: Apache-2.0

"""
Family aggregate storage contract and in-memory implementation.

The compliance engine never talks to a database. Storage adapters implement
FamilyRepository and translate their rows into snapshots; the in-memory
repository backs local development and tests.
"""

import threading
from typing import Dict, List, Optional, Any, Union, Protocol
from opentelemetry import trace
import logging

from ..models.snapshots import FamilySnapshot, HouseSnapshot, MarriageSnapshot

tracer = trace.get_tracer(__name__)
logger = logging.getLogger(__name__)


class FamilyRepository(Protocol):
    """Read-only access to family aggregates by family ID."""

    def find_family(self, family_id: str) -> Optional[FamilySnapshot]:
        ...

    def list_houses(self, family_id: str) -> List[HouseSnapshot]:
        ...

    def list_marriages(self, family_id: str) -> List[MarriageSnapshot]:
        ...


class InMemoryFamilyRepository:
    """
    Thread-safe dictionary-backed family repository.

    Records may be given as snapshots or as raw storage rows in camelCase
    or snake_case; rows are validated into snapshots on insert.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._families: Dict[str, FamilySnapshot] = {}
        self._houses: Dict[str, List[HouseSnapshot]] = {}
        self._marriages: Dict[str, List[MarriageSnapshot]] = {}
        logger.info("In-memory family repository initialized")

    def add_family(self, family: Union[FamilySnapshot, Dict[str, Any]]) -> FamilySnapshot:
        """
        Store a family record, replacing any existing one with the same ID.

        Args:
            family: Family snapshot or raw record

        Returns:
            Stored FamilySnapshot
        """
        snapshot = FamilySnapshot.model_validate(family)
        with self._lock:
            self._families[snapshot.id] = snapshot
            self._houses.setdefault(snapshot.id, [])
            self._marriages.setdefault(snapshot.id, [])
        return snapshot

    def add_house(self, family_id: str, house: Union[HouseSnapshot, Dict[str, Any]]) -> HouseSnapshot:
        """Store a polygamous house for a family."""
        snapshot = HouseSnapshot.model_validate(house)
        with self._lock:
            self._houses.setdefault(family_id, []).append(snapshot)
        return snapshot

    def add_marriage(self, family_id: str, marriage: Union[MarriageSnapshot, Dict[str, Any]]) -> MarriageSnapshot:
        """Store a marriage for a family."""
        snapshot = MarriageSnapshot.model_validate(marriage)
        with self._lock:
            self._marriages.setdefault(family_id, []).append(snapshot)
        return snapshot

    def remove_family(self, family_id: str) -> bool:
        """
        Remove a family and its houses and marriages.

        Returns:
            True if the family existed, False otherwise
        """
        with self._lock:
            self._houses.pop(family_id, None)
            self._marriages.pop(family_id, None)
            return self._families.pop(family_id, None) is not None

    def find_family(self, family_id: str) -> Optional[FamilySnapshot]:
        with tracer.start_as_current_span("family_store.find_family") as span:
            span.set_attribute("family.id", family_id)
            with self._lock:
                family = self._families.get(family_id)
            span.set_attribute("family_store.result", "found" if family else "not_found")
            return family

    def list_houses(self, family_id: str) -> List[HouseSnapshot]:
        with self._lock:
            return list(self._houses.get(family_id, []))

    def list_marriages(self, family_id: str) -> List[MarriageSnapshot]:
        with self._lock:
            return list(self._marriages.get(family_id, []))

    def family_ids(self) -> List[str]:
        """List IDs of all stored families."""
        with self._lock:
            return sorted(self._families)
