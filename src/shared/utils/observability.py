"""
Observability collaborators for the Lambda handlers.

Each function builds one ``Observability`` bundle at import time (once per
execution environment) and every invocation writes to it. Handlers take the
bundle as an argument so tests can hand in mocks instead of the Powertools
singletons.
"""

from dataclasses import dataclass
from typing import Any

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

from shared.models.env_vars import get_handler_env_vars

# Metrics namespace prefix for business KPIs
METRICS_NAMESPACE = 'LambdaTemplate'


@dataclass(frozen=True)
class Observability:
    """Logger, tracer and metrics recorder used by one function."""

    logger: Logger
    tracer: Tracer
    metrics: Metrics


def create_observability(service: str, namespace: str) -> Observability:
    """
    Build the Powertools collaborators for a function.

    Args:
        service: Service name, overridden by POWERTOOLS_SERVICE_NAME when set
        namespace: Metrics namespace, e.g. ``LambdaTemplate/Hello``

    Returns:
        Observability bundle with the ``environment`` log key and metric dimension set
    """
    env_vars = get_handler_env_vars()
    service = env_vars.POWERTOOLS_SERVICE_NAME or service

    # JSON output format; level from LOG_LEVEL
    logger = Logger(service=service, level=env_vars.LOG_LEVEL)
    logger.append_keys(environment=env_vars.ENVIRONMENT)

    # Forced off by POWERTOOLS_TRACE_DISABLED; otherwise Powertools disables it outside Lambda
    tracer = Tracer(service=service, disabled=True if not env_vars.tracing_enabled else None)

    metrics = Metrics(namespace=namespace, service=service)
    metrics.set_default_dimensions(environment=env_vars.ENVIRONMENT)

    return Observability(logger=logger, tracer=tracer, metrics=metrics)


def bind_invocation(observability: Observability, correlation_id: str, context: Any) -> None:
    """Attach the correlation id and Lambda context to logs and traces for this invocation."""
    observability.logger.set_correlation_id(correlation_id)
    observability.logger.append_keys(
        function_name=context.function_name,
        function_version=context.function_version,
        function_request_id=correlation_id,
    )
    observability.tracer.put_annotation(key='correlation_id', value=correlation_id)


def flush_metrics(observability: Observability) -> None:
    """
    Publish buffered metrics; an empty buffer is not an error.

    Runs in the handlers' ``finally`` block, so a publishing failure is logged
    rather than raised over the response already built.
    """
    try:
        observability.metrics.flush_metrics(raise_on_empty_metrics=False)
    except Exception as e:
        observability.logger.warning("Could not flush metrics", extra={"error": str(e)})
