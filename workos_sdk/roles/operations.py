"""
Roles API.
"""
from ..core.api import ApiArea
from ..core.validation import path_segment
from .models import RoleList


class Roles(ApiArea):
    async def list_organization_roles(self, organization_id: str) -> RoleList:
        """List environment and organization roles available to an organization."""
        return await self._make_request(
            "GET", f"/organizations/{path_segment(organization_id)}/roles", RoleList
        )
