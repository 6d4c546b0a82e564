"""
Organizations API area.
"""
from .models import (
    CreateOrganizationParams,
    ListOrganizationsParams,
    Organization,
    OrganizationDomain,
    OrganizationDomainData,
    OrganizationDomainState,
    OrganizationDomainVerificationStrategy,
    UpdateOrganizationParams,
)
from .operations import Organizations

__all__ = [
    "CreateOrganizationParams",
    "ListOrganizationsParams",
    "Organization",
    "OrganizationDomain",
    "OrganizationDomainData",
    "OrganizationDomainState",
    "OrganizationDomainVerificationStrategy",
    "Organizations",
    "UpdateOrganizationParams",
]
