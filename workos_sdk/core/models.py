"""
Base schemas and common types shared by every API area.
"""
from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Dict, Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")
E = TypeVar("E")

Metadata = Dict[str, str]

# A known enum value decodes to the enum member; anything the API adds later
# stays a plain string instead of failing validation.
KnownOrUnknown = Annotated[Union[E, str], Field(union_mode="left_to_right")]


class WorkOsModel(BaseModel):
    """Base class for API response objects."""

    model_config = ConfigDict(populate_by_name=True)


class TimestampSchema(WorkOsModel):
    created_at: datetime
    updated_at: datetime


class RequestParams(BaseModel):
    """Base class for request parameters."""

    model_config = ConfigDict(populate_by_name=True)

    def to_body(self) -> Dict[str, Any]:
        """Serialize for a JSON or form body, omitting unset values."""
        return self.model_dump(mode="json", exclude_none=True, by_alias=True)

    def to_query(self) -> Dict[str, Any]:
        """Serialize for a query string, omitting unset values."""
        return self.to_body()


class Order(str, Enum):
    ASC = "asc"
    DESC = "desc"


class PaginationParams(RequestParams):
    """Cursor pagination shared by list endpoints."""

    limit: Optional[int] = Field(None, ge=1, le=100)
    before: Optional[str] = None
    after: Optional[str] = None
    order: Order = Order.DESC


class ListMetadata(WorkOsModel):
    before: Optional[str] = None
    after: Optional[str] = None


class PaginatedList(WorkOsModel, Generic[T]):
    """A page of results from a list endpoint."""

    data: List[T]
    list_metadata: ListMetadata = Field(default_factory=ListMetadata)
