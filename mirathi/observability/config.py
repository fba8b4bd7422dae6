"""
OpenTelemetry Configuration

Sets up distributed tracing and structured logging for the Mirathi
compliance engine based on the runtime environment.
"""

import logging
from typing import Optional
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

from ..config import ComplianceConfig, load_config

logger = logging.getLogger(__name__)


def setup_observability(config: Optional[ComplianceConfig] = None) -> Optional[TracerProvider]:
    """
    Initialize OpenTelemetry tracing and logging from configuration.

    Returns:
        The installed TracerProvider, or None when tracing is disabled
    """
    config = config or load_config()
    setup_structured_logging(config.environment)

    if not config.otel_enabled:
        return None

    # Environment-specific sampling
    if config.environment == 'production':
        sampler = TraceIdRatioBased(0.1)
    elif config.environment == 'staging':
        sampler = TraceIdRatioBased(0.5)
    else:
        sampler = TraceIdRatioBased(1.0)

    resource = Resource.create({
        "service.name": config.service_name,
        "service.version": config.service_version,
        "deployment.environment": config.environment
    })

    tracer_provider = TracerProvider(sampler=sampler, resource=resource)

    if config.environment in ('production', 'staging'):
        if config.otlp_endpoint:
            tracer_provider.add_span_processor(
                BatchSpanProcessor(OTLPSpanExporter(endpoint=config.otlp_endpoint), max_export_batch_size=512)
            )
        else:
            logger.warning(
                "OTLP endpoint not configured, spans will not be exported",
                extra={"environment": config.environment}
            )
    else:
        tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(tracer_provider)
    return tracer_provider


def setup_structured_logging(environment: str):
    """Configure logging levels per environment."""
    log_level = {
        'production': logging.WARNING,
        'staging': logging.INFO,
        'development': logging.DEBUG,
        'test': logging.WARNING
    }.get(environment, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s %(levelname)s %(name)s %(message)s',
        handlers=[logging.StreamHandler()]
    )

    if environment == 'production':
        # Domain modules stay pure; only service events matter in production
        logging.getLogger('mirathi.services').setLevel(logging.INFO)
