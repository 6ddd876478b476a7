"""
Shared Models Package

Pydantic models for the response payloads and the environment configuration.
"""

from .env_vars import HandlerEnvVars, get_handler_env_vars
from .output import (
    INTERNAL_SERVER_ERROR_MESSAGE,
    HelloErrorOutput,
    HelloOutput,
    User,
    UsersErrorOutput,
    UsersOutput,
)

__all__ = [
    # Output models
    "HelloOutput",
    "User",
    "UsersOutput",
    "HelloErrorOutput",
    "UsersErrorOutput",
    "INTERNAL_SERVER_ERROR_MESSAGE",

    # Configuration
    "HandlerEnvVars",
    "get_handler_env_vars",
]
