"""
Role schemas.
"""
from enum import Enum
from typing import List, Optional

from pydantic import Field

from ..core.models import KnownOrUnknown, TimestampSchema, WorkOsModel


class RoleType(str, Enum):
    ENVIRONMENT_ROLE = "EnvironmentRole"
    ORGANIZATION_ROLE = "OrganizationRole"


class Role(TimestampSchema):
    """
    A role assignable to organization members.

    https://workos.com/docs/reference/roles
    """

    id: str
    name: str
    slug: str
    description: Optional[str] = None
    permissions: List[str] = Field(default_factory=list)
    type: KnownOrUnknown[RoleType]


class RoleList(WorkOsModel):
    """Unpaginated list of roles."""

    data: List[Role]


class RoleEvent(TimestampSchema):
    """Role as delivered in ``role.*`` events."""

    slug: str
    permissions: List[str] = Field(default_factory=list)
