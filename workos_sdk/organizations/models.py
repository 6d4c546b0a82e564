"""
Organization schemas.
"""
from enum import Enum
from typing import List, Optional

from pydantic import Field

from ..core.models import (
    KnownOrUnknown,
    Metadata,
    PaginationParams,
    RequestParams,
    TimestampSchema,
)


class OrganizationDomainState(str, Enum):
    PENDING = "pending"
    VERIFIED = "verified"
    FAILED = "failed"


class OrganizationDomainVerificationStrategy(str, Enum):
    DNS = "dns"
    MANUAL = "manual"


class OrganizationDomain(TimestampSchema):
    """A domain owned by an organization."""

    id: str
    organization_id: str
    domain: str
    state: KnownOrUnknown[OrganizationDomainState]
    verification_strategy: KnownOrUnknown[OrganizationDomainVerificationStrategy]
    verification_token: Optional[str] = None


class Organization(TimestampSchema):
    """
    WorkOS organization.

    https://workos.com/docs/reference/organization
    """

    id: str
    name: str
    allow_profiles_outside_organization: bool = False
    domains: List[OrganizationDomain] = Field(default_factory=list)
    external_id: Optional[str] = None
    metadata: Metadata = Field(default_factory=dict)


class OrganizationDomainData(RequestParams):
    domain: str
    state: OrganizationDomainState = OrganizationDomainState.PENDING


class CreateOrganizationParams(RequestParams):
    name: str = Field(..., min_length=1)
    domain_data: List[OrganizationDomainData] = Field(default_factory=list)
    external_id: Optional[str] = None
    metadata: Optional[Metadata] = None


class UpdateOrganizationParams(RequestParams):
    organization_id: str = Field(..., exclude=True)
    name: Optional[str] = None
    domain_data: Optional[List[OrganizationDomainData]] = None
    external_id: Optional[str] = None
    metadata: Optional[Metadata] = None


class ListOrganizationsParams(PaginationParams):
    domains: Optional[List[str]] = None
