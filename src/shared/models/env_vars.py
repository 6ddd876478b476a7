"""
Environment variable models for type-safe configuration.

The handlers read their configuration through ``aws-lambda-env-modeler`` so a
misconfigured deployment fails on the first invocation with a clear pydantic
validation error instead of silently falling back. Values Powertools itself
accepts (any letter case for levels, ``1``/``yes``/``on`` for flags) are
accepted here too.
"""

from typing import Annotated, Any, Literal

from aws_lambda_env_modeler import BaseModel, get_environment_variables
from pydantic import Field, field_validator


class HandlerEnvVars(BaseModel):
    """Environment variables shared by the hello and users functions."""

    # Deployment environment, used as the "environment" log key and metric dimension
    ENVIRONMENT: Annotated[str, Field(
        default='dev',
        description='Deployment environment name',
        min_length=1,
    )] = 'dev'

    LOG_LEVEL: Annotated[Literal['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], Field(
        default='INFO',
        description='Log level for the Powertools logger, any letter case',
    )] = 'INFO'

    POWERTOOLS_SERVICE_NAME: Annotated[str | None, Field(
        default=None,
        description='Overrides the per-function service name when set',
    )] = None

    # true/false, 1/0, yes/no, on/off, t/f, y/n in any letter case
    POWERTOOLS_TRACE_DISABLED: Annotated[bool, Field(
        default=False,
        description='Disable X-Ray tracing',
    )] = False

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def upper_case_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @property
    def tracing_enabled(self) -> bool:
        """Check if X-Ray tracing is enabled."""
        return not self.POWERTOOLS_TRACE_DISABLED


def get_handler_env_vars() -> HandlerEnvVars:
    """
    Get typed environment variables for Lambda handlers.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=HandlerEnvVars)
