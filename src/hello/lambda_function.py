from typing import Any, Dict

from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from shared.models.output import HelloErrorOutput, HelloOutput
from shared.utils.observability import (
    METRICS_NAMESPACE,
    Observability,
    bind_invocation,
    create_observability,
    flush_metrics,
)
from shared.utils.request import (
    resolve_correlation_id,
    resolve_path,
    resolve_request_id,
    resolve_trace_id,
    resolve_user_agent,
)
from shared.utils.response import build_error_response, build_response, utc_timestamp

HELLO_MESSAGE = "Hello from TypeScript Lambda with Powertools!"
HELLO_PATH = "/hello"
APP_VERSION = "v1.0.0"

# Initialize AWS Powertools
observability = create_observability(service="hello-service", namespace=f"{METRICS_NAMESPACE}/Hello")


def add_custom_metrics(metrics: Any, success: bool) -> None:
    metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)
    if success:
        metrics.add_metric(name="SuccessCount", unit=MetricUnit.Count, value=1)
    else:
        metrics.add_metric(name="ErrorCount", unit=MetricUnit.Count, value=1)


def process_hello_request(event: Dict[str, Any], obs: Observability = observability) -> HelloOutput:
    """Process the hello request with business logic."""
    path = resolve_path(event, HELLO_PATH)

    # Add trace annotations and metadata
    obs.tracer.put_annotation(key="path", value=path)
    obs.tracer.put_metadata(key="event", value=event)

    obs.logger.info(
        "Processing hello request",
        extra={
            "path": event.get("path"),
            "http_method": event.get("httpMethod"),
            "user_agent": resolve_user_agent(event),
        },
    )

    response_data = HelloOutput(
        message=HELLO_MESSAGE,
        path=path,
        timestamp=utc_timestamp(),
        request_id=resolve_request_id(event),
        version=APP_VERSION,
    )

    obs.logger.info(
        "Hello request processed successfully",
        extra={"response": response_data.model_dump(by_alias=True)},
    )
    return response_data


def handle(
    event: Dict[str, Any], context: LambdaContext, obs: Observability = observability
) -> Dict[str, Any]:
    """
    Handle one hello invocation.

    Logging, tracing and metrics are called in sequence; any exception raised
    after the correlation id is resolved yields the JSON fallback response.

    Args:
        event: API Gateway proxy event
        context: Lambda context object
        obs: Observability collaborators for this function

    Returns:
        API Gateway proxy result
    """
    correlation_id = resolve_correlation_id(context)
    trace_id = resolve_trace_id()
    headers = {
        "X-Request-ID": correlation_id,
        "X-Trace-ID": trace_id,
        "X-Correlation-ID": correlation_id,
    }

    try:
        bind_invocation(obs, correlation_id, context)
        obs.tracer.put_annotation(key="request_id", value=correlation_id)
        obs.tracer.put_annotation(key="trace_id", value=trace_id)

        obs.logger.info(
            "Lambda invocation started",
            extra={
                "request_id": correlation_id,
                "function_name": context.function_name,
                "function_version": context.function_version,
                "remaining_time_ms": context.get_remaining_time_in_millis(),
                "trace_id": trace_id,
            },
        )

        response_data = process_hello_request(event, obs)

        response = build_response(200, response_data, headers=headers)

        add_custom_metrics(obs.metrics, success=True)

        obs.logger.info(
            "Lambda invocation completed successfully",
            extra={"status_code": response["statusCode"], "response_size": len(response["body"])},
        )
        return response

    except Exception as e:
        obs.logger.exception(
            "Lambda invocation failed",
            extra={"error": str(e), "request_id": correlation_id},
        )

        add_custom_metrics(obs.metrics, success=False)

        return build_error_response(
            HelloErrorOutput(
                request_id=correlation_id,
                correlation_id=correlation_id,
                timestamp=utc_timestamp(),
            ),
            headers=headers,
        )

    finally:
        flush_metrics(obs)


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """Hello Lambda function entry point."""
    return handle(event, context, observability)
