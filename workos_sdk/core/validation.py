"""
Local validation of request parameters before any network activity.
"""
import ipaddress
from typing import Optional
from urllib.parse import quote

from ..exceptions import AddressParseError


def validate_ip_address(value: Optional[str]) -> Optional[str]:
    """Return the normalized form of an IPv4/IPv6 address, or None."""
    if value is None:
        return None
    try:
        return str(ipaddress.ip_address(value.strip()))
    except ValueError:
        raise AddressParseError(value) from None


def path_segment(value: object) -> str:
    """Percent-encode a value for use as a single URL path segment."""
    return quote(str(value), safe="")
