# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Compliance service for family succession-law checks with OpenTelemetry correlation.

Loads family aggregates from a repository, signals unknown families to the
caller and hands snapshots to the pure report builder.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence
from opentelemetry import context as otel_context, trace
from opentelemetry.trace import Status, StatusCode

from ..config import ComplianceConfig, load_config
from ..domain.reports import build_compliance_report
from ..models.compliance import ComplianceReport, ReportOptions
from .family_store import FamilyRepository

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


class ComplianceError(Exception):
    """Base class for compliance service errors."""

    def __init__(self, message: str, error_type: str = "compliance-error"):
        super().__init__(message)
        self.message = message
        self.error_type = error_type


class FamilyNotFoundError(ComplianceError):
    """Raised when a family ID cannot be resolved."""

    def __init__(self, family_id: str):
        super().__init__(f"Family with ID {family_id} not found", "resource-not-found")
        self.family_id = family_id


@dataclass
class BatchComplianceResult:
    """Result of checking many families."""
    reports: Dict[str, ComplianceReport] = field(default_factory=dict)
    missing_family_ids: List[str] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.reports)


class ComplianceService:
    """Service that evaluates family compliance against the Law of Succession Act."""

    def __init__(self, repository: FamilyRepository, config: Optional[ComplianceConfig] = None):
        """Initialize compliance service with repository dependency."""
        self.repository = repository
        self.config = config or load_config()
        logger.info(
            "Compliance service initialized",
            extra={"batch_workers": self.config.batch_workers}
        )

    def default_options(self) -> ReportOptions:
        """Report options using the configured check interval."""
        return ReportOptions(next_check_interval_days=self.config.check_interval_days)

    def check_family_compliance(
        self,
        family_id: str,
        options: Optional[ReportOptions] = None
    ) -> ComplianceReport:
        """
        Build the compliance report for one family.

        Args:
            family_id: Family identifier
            options: Report options, configured defaults when omitted

        Returns:
            ComplianceReport for the family

        Raises:
            FamilyNotFoundError: If the repository has no such family
        """
        with tracer.start_as_current_span("compliance.check_family") as span:
            span.set_attribute("family.id", family_id)
            start_time = time.time()

            try:
                family = self.repository.find_family(family_id)
                if family is None:
                    span.set_attribute("compliance.result", "not_found")
                    logger.warning(
                        "Compliance check requested for unknown family",
                        extra={"family_id": family_id}
                    )
                    raise FamilyNotFoundError(family_id)

                houses = self.repository.list_houses(family_id)
                marriages = self.repository.list_marriages(family_id)

                report = build_compliance_report(
                    family, houses, marriages, options or self.default_options()
                )

            except FamilyNotFoundError:
                raise
            except Exception as e:
                span.record_exception(e)
                span.set_status(Status(StatusCode.ERROR, str(e)))
                logger.error(
                    f"Compliance check failed for family {family_id}: {str(e)}",
                    extra={"family_id": family_id}
                )
                raise

            duration_ms = round((time.time() - start_time) * 1000, 2)
            span.set_attributes({
                "compliance.result": "success",
                "compliance.overall_score": report.overall_score,
                "compliance.overall_status": report.overall_status,
                "compliance.total_issues": report.total_issues,
                "compliance.critical_issues": report.critical_issues,
                "compliance.duration_ms": duration_ms
            })

            logger.info(
                "S.40 compliance check completed",
                extra={
                    "family_id": family_id,
                    "overall_score": report.overall_score,
                    "overall_status": report.overall_status,
                    "total_issues": report.total_issues,
                    "duration_ms": duration_ms
                }
            )

            return report

    def check_many(
        self,
        family_ids: Sequence[str],
        options: Optional[ReportOptions] = None
    ) -> BatchComplianceResult:
        """
        Build compliance reports for many families in parallel.

        Unknown families are collected in missing_family_ids; any other error
        propagates.

        Args:
            family_ids: Family identifiers, duplicates are checked once
            options: Report options shared by every check

        Returns:
            BatchComplianceResult keyed by family ID
        """
        unique_ids = list(dict.fromkeys(family_ids))
        options = options or self.default_options()
        result = BatchComplianceResult()

        with tracer.start_as_current_span("compliance.check_many") as span:
            span.set_attribute("compliance.batch_size", len(unique_ids))

            if not unique_ids:
                return result

            # Worker threads do not inherit the active span
            batch_context = otel_context.get_current()

            with ThreadPoolExecutor(max_workers=self.config.batch_workers) as executor:
                futures = {
                    family_id: executor.submit(
                        self._check_in_context, batch_context, family_id, options
                    )
                    for family_id in unique_ids
                }

                for family_id, future in futures.items():
                    try:
                        result.reports[family_id] = future.result()
                    except FamilyNotFoundError:
                        result.missing_family_ids.append(family_id)

            span.set_attributes({
                "compliance.reports": result.success_count,
                "compliance.missing": len(result.missing_family_ids)
            })

            logger.info(
                "Batch compliance check completed",
                extra={
                    "batch_size": len(unique_ids),
                    "reports": result.success_count,
                    "missing": len(result.missing_family_ids)
                }
            )

            return result

    def _check_in_context(
        self,
        parent_context: otel_context.Context,
        family_id: str,
        options: ReportOptions
    ) -> ComplianceReport:
        """Run a single check with the batch trace context attached."""
        token = otel_context.attach(parent_context)
        try:
            return self.check_family_compliance(family_id, options)
        finally:
            otel_context.detach(token)


def create_compliance_service(repository: FamilyRepository) -> ComplianceService:
    """
    Factory function to create the compliance service with configuration from environment.

    Returns:
        ComplianceService: Configured compliance service instance
    """
    return ComplianceService(repository, load_config())
