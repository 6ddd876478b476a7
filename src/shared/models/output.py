"""
Output models for API responses using Pydantic.

Field names are snake_case in Python and camelCase on the wire; dump with
``model_dump(by_alias=True)`` (the response builder does this for you).
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

INTERNAL_SERVER_ERROR_MESSAGE = 'Internal server error'


class _ResponseModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class HelloOutput(_ResponseModel):
    """Response model for a successful hello request."""

    message: Annotated[str, Field(
        description='Greeting message',
        examples=['Hello from TypeScript Lambda with Powertools!'],
    )]

    path: Annotated[str, Field(
        description='Request path, defaulted when the gateway omits it',
        examples=['/hello'],
    )]

    timestamp: Annotated[str, Field(
        description='UTC response time, ISO-8601 with milliseconds',
        examples=['2024-01-15T10:30:00.000Z'],
    )]

    request_id: Annotated[str, Field(
        description='API Gateway request id, or "unknown"',
        examples=['c6af9ac6-7b61-11e6-9a41-93e8deadbeef'],
    )]

    version: Annotated[str, Field(
        description='Application version',
        examples=['v1.0.0'],
    )]


class User(_ResponseModel):
    """A single entry of the users catalog."""

    id: str
    name: str
    email: str
    created_at: str


class UsersOutput(_ResponseModel):
    """Response model for a successful users request."""

    users: Annotated[list[User], Field(description='Users in catalog order')]

    count: Annotated[int, Field(description='Number of users returned', ge=0)]

    timestamp: Annotated[str, Field(description='UTC response time, ISO-8601 with milliseconds')]

    request_id: Annotated[str, Field(description='API Gateway request id, or "unknown"')]

    @model_validator(mode='after')
    def check_count_matches_users(self) -> 'UsersOutput':
        if self.count != len(self.users):
            raise ValueError(f'count ({self.count}) must equal the number of users ({len(self.users)})')
        return self


class HelloErrorOutput(_ResponseModel):
    """Fallback body returned by the hello function on any failure."""

    message: str = INTERNAL_SERVER_ERROR_MESSAGE
    request_id: str
    correlation_id: str
    timestamp: str


class UsersErrorOutput(_ResponseModel):
    """Fallback body returned by the users function on any failure."""

    message: str = INTERNAL_SERVER_ERROR_MESSAGE
    request_id: str
    timestamp: str
