# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Environment configuration for the Mirathi compliance engine.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ComplianceConfig:
    """Compliance engine configuration settings."""
    environment: str = 'development'
    service_name: str = 'mirathi-compliance'
    service_version: str = '1.0.0'
    otel_enabled: bool = True
    otlp_endpoint: Optional[str] = None
    check_interval_days: int = 90
    batch_workers: int = 4


def load_config() -> ComplianceConfig:
    """
    Build configuration from environment variables.

    Returns:
        ComplianceConfig: Configuration with environment overrides applied
    """
    return ComplianceConfig(
        environment=os.getenv('ENVIRONMENT', 'development'),
        service_version=os.getenv('SERVICE_VERSION', '1.0.0'),
        otel_enabled=os.getenv('OTEL_ENABLED', 'true').lower() == 'true',
        otlp_endpoint=os.getenv('OTEL_EXPORTER_OTLP_ENDPOINT') or None,
        check_interval_days=max(1, int(os.getenv('COMPLIANCE_CHECK_INTERVAL_DAYS', '90'))),
        batch_workers=max(1, int(os.getenv('COMPLIANCE_BATCH_WORKERS', '4')))
    )
