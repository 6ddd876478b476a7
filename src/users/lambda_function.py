import asyncio
from typing import Any, Dict, List

from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from shared.dal.users_catalog import USERS_LATENCY_SECONDS, get_users
from shared.models.output import User, UsersErrorOutput, UsersOutput
from shared.utils.observability import (
    METRICS_NAMESPACE,
    Observability,
    bind_invocation,
    create_observability,
    flush_metrics,
)
from shared.utils.request import resolve_correlation_id, resolve_path, resolve_request_id, resolve_user_agent
from shared.utils.response import build_error_response, build_response, utc_timestamp

USERS_PATH = "/users"

# Initialize AWS Powertools
observability = create_observability(service="users-service", namespace=f"{METRICS_NAMESPACE}/Users")


def add_custom_metrics(metrics: Any, user_count: int, success: bool) -> None:
    metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)
    metrics.add_metric(name="UserCount", unit=MetricUnit.Count, value=user_count)

    if success:
        metrics.add_metric(name="SuccessCount", unit=MetricUnit.Count, value=1)
    else:
        metrics.add_metric(name="ErrorCount", unit=MetricUnit.Count, value=1)


async def get_users_from_database(obs: Observability = observability) -> List[User]:
    """Simulate fetching users from a database."""
    users = await get_users(USERS_LATENCY_SECONDS)

    obs.logger.info("Users retrieved from database", extra={"user_count": len(users)})
    obs.tracer.put_annotation(key="user_count", value=len(users))

    return users


async def process_users_request(event: Dict[str, Any], obs: Observability = observability) -> UsersOutput:
    """Process the users request with business logic."""

    # Add trace annotations and metadata
    obs.tracer.put_annotation(key="path", value=resolve_path(event, USERS_PATH))
    obs.tracer.put_metadata(key="event", value=event)

    obs.logger.info(
        "Processing users request",
        extra={
            "path": event.get("path"),
            "http_method": event.get("httpMethod"),
            "user_agent": resolve_user_agent(event),
        },
    )

    users = await get_users_from_database(obs)

    response_data = UsersOutput(
        users=users,
        count=len(users),
        timestamp=utc_timestamp(),
        request_id=resolve_request_id(event),
    )

    obs.logger.info(
        "Users request processed successfully",
        extra={"user_count": response_data.count, "request_id": response_data.request_id},
    )

    return response_data


async def handle(
    event: Dict[str, Any], context: LambdaContext, obs: Observability = observability
) -> Dict[str, Any]:
    """
    Handle one users invocation.

    Args:
        event: API Gateway proxy event
        context: Lambda context object
        obs: Observability collaborators for this function

    Returns:
        API Gateway proxy result with users data
    """
    correlation_id = resolve_correlation_id(context)
    headers = {"X-Request-ID": correlation_id}

    try:
        bind_invocation(obs, correlation_id, context)

        obs.logger.info(
            "Lambda invocation started",
            extra={
                "request_id": correlation_id,
                "function_name": context.function_name,
                "function_version": context.function_version,
            },
        )

        response_data = await process_users_request(event, obs)

        response = build_response(
            200,
            response_data,
            headers={**headers, "Cache-Control": "max-age=300"},  # Cache for 5 minutes
        )

        add_custom_metrics(obs.metrics, user_count=response_data.count, success=True)

        obs.logger.info("Lambda invocation completed successfully")
        return response

    except Exception as e:
        obs.logger.exception(
            "Lambda invocation failed",
            extra={"error": str(e), "request_id": correlation_id},
        )

        add_custom_metrics(obs.metrics, user_count=0, success=False)

        return build_error_response(
            UsersErrorOutput(request_id=correlation_id, timestamp=utc_timestamp()),
            headers=headers,
        )

    finally:
        flush_metrics(obs)


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """Users Lambda function entry point; each invocation runs on its own event loop."""
    return asyncio.run(handle(event, context, observability))
