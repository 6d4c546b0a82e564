"""
Events API.
"""
from ..core.api import ApiArea
from ..core.models import PaginatedList
from .models import Event, ListEventsParams


class Events(ApiArea):
    async def list_events(self, params: ListEventsParams) -> PaginatedList[Event]:
        """
        List events matching the given names.

        Args:
            params: Event names plus optional organization, time range and cursor

        Returns:
            One page of events; decode each payload with ``Event.parse_data()``
        """
        return await self._make_request(
            "GET", "/events", PaginatedList[Event], params=params.to_query()
        )
