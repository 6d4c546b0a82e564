"""
Organizations API.

https://workos.com/docs/reference/organization
"""
import logging
from typing import Optional

from ..core.api import ApiArea
from ..core.models import PaginatedList
from ..core.validation import path_segment
from .models import (
    CreateOrganizationParams,
    ListOrganizationsParams,
    Organization,
    UpdateOrganizationParams,
)

logger = logging.getLogger(__name__)


class Organizations(ApiArea):
    """Operations on WorkOS organizations."""

    async def create_organization(self, params: CreateOrganizationParams) -> Organization:
        """
        Create an organization.

        Args:
            params: Organization name, domains and metadata

        Returns:
            The created organization
        """
        organization = await self._make_request(
            "POST", "/organizations", Organization, json=params.to_body()
        )
        logger.info(f"Created organization: {organization.id}")
        return organization

    async def get_organization(self, organization_id: str) -> Organization:
        return await self._make_request(
            "GET", f"/organizations/{path_segment(organization_id)}", Organization
        )

    async def get_organization_by_external_id(self, external_id: str) -> Organization:
        """Look up an organization by the ID it has in your own system."""
        return await self._make_request(
            "GET", f"/organizations/external_id/{path_segment(external_id)}", Organization
        )

    async def list_organizations(
        self, params: Optional[ListOrganizationsParams] = None
    ) -> PaginatedList[Organization]:
        """
        List organizations, newest first unless ``params.order`` says otherwise.

        Args:
            params: Pagination cursors and an optional domain filter

        Returns:
            One page of organizations
        """
        params = params or ListOrganizationsParams()
        return await self._make_request(
            "GET", "/organizations", PaginatedList[Organization], params=params.to_query()
        )

    async def update_organization(self, params: UpdateOrganizationParams) -> Organization:
        organization = await self._make_request(
            "PUT",
            f"/organizations/{path_segment(params.organization_id)}",
            Organization,
            json=params.to_body(),
        )
        logger.info(f"Updated organization: {organization.id}")
        return organization

    async def delete_organization(self, organization_id: str) -> None:
        await self._make_request("DELETE", f"/organizations/{path_segment(organization_id)}")
        logger.info(f"Deleted organization: {organization_id}")
