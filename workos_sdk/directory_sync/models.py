"""
Directory sync schemas.
"""
from enum import Enum
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BeforeValidator, Field

from ..core.models import KnownOrUnknown, PaginationParams, TimestampSchema, WorkOsModel


class DirectoryType(str, Enum):
    AZURE_SCIM_V2 = "azure scim v2.0"
    BAMBOO_HR = "bamboohr"
    BREATHE_HR = "breathe hr"
    CEZANNE_HR = "cezanne hr"
    CYBERARK_SCIM_V2 = "cyperark scim v2.0"
    FOURTH_HR = "fourth hr"
    GENERIC_SCIM_V2 = "generic scim v2.0"
    GOOGLE_WORKSPACE = "gsuite directory"
    HIBOB = "hibob"
    JUMP_CLOUD_SCIM_V2 = "jump cloud scim v2.0"
    OKTA_SCIM_V2 = "okta scim v2.0"
    ONELOGIN_SCIM_V2 = "onelogin scim v2.0"
    PEOPLE_HR = "people hr"
    PERSONIO = "personio"
    PINGFEDERATE_SCIM_V2 = "pingfederate scim v2.0"
    RIPPLING_SCIM_V2 = "rippling scim v2.0"
    SFTP = "sftp"
    WORKDAY = "workday"


class DirectoryState(str, Enum):
    INACTIVE = "inactive"
    VALIDATING = "validating"
    ACTIVE = "active"
    INVALID_CREDENTIALS = "invalid_credentials"
    DELETING = "deleting"


_LEGACY_STATES = {"linked": "active", "unlinked": "inactive"}


def _normalize_state(value: Any) -> Any:
    if isinstance(value, str):
        return _LEGACY_STATES.get(value, value)
    return value


DirectoryStateField = Annotated[KnownOrUnknown[DirectoryState], BeforeValidator(_normalize_state)]


class Directory(TimestampSchema):
    """
    A directory synced from an HRIS or SCIM provider.

    https://workos.com/docs/reference/directory-sync/directory
    """

    id: str
    organization_id: Optional[str] = None
    type: KnownOrUnknown[DirectoryType]
    state: DirectoryStateField
    name: str
    domain: Optional[str] = None


class DirectoryEvent(TimestampSchema):
    """Directory as delivered in ``dsync.*`` events."""

    id: str
    organization_id: Optional[str] = None
    type: KnownOrUnknown[DirectoryType]
    state: DirectoryStateField
    name: str
    domains: List[Dict[str, Any]] = Field(default_factory=list)


class DirectoryUserState(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class DirectoryUserEmail(WorkOsModel):
    primary: Optional[bool] = None
    type: Optional[str] = None
    value: Optional[str] = None


class DirectoryUserRole(WorkOsModel):
    slug: str


class DirectoryGroup(TimestampSchema):
    id: str
    idp_id: str
    directory_id: str
    organization_id: Optional[str] = None
    name: str
    raw_attributes: Dict[str, Any] = Field(default_factory=dict)


class DirectoryUser(TimestampSchema):
    """
    A user provisioned through directory sync.

    https://workos.com/docs/reference/directory-sync/directory-user
    """

    id: str
    idp_id: str
    directory_id: str
    organization_id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    emails: List[DirectoryUserEmail] = Field(default_factory=list)
    username: Optional[str] = None
    groups: List[DirectoryGroup] = Field(default_factory=list)
    state: KnownOrUnknown[DirectoryUserState]
    role: Optional[DirectoryUserRole] = None
    custom_attributes: Dict[str, Any] = Field(default_factory=dict)
    raw_attributes: Dict[str, Any] = Field(default_factory=dict)

    def primary_email(self) -> Optional[str]:
        for email in self.emails:
            if email.primary:
                return email.value
        return self.email


class ListDirectoriesParams(PaginationParams):
    domain: Optional[str] = None
    search: Optional[str] = None
    organization_id: Optional[str] = None


class ListDirectoryUsersParams(PaginationParams):
    """Filter by ``directory`` or ``group``; the API requires one of them."""

    directory: Optional[str] = None
    group: Optional[str] = None


class ListDirectoryGroupsParams(PaginationParams):
    """Filter by ``directory`` or ``user``; the API requires one of them."""

    directory: Optional[str] = None
    user: Optional[str] = None
