"""
API key credential.
"""
from typing import Any


class ApiKey:
    """An API key used to authenticate with the WorkOS API.

    ``str()`` yields the secret for use in an Authorization header; ``repr()``
    masks it so the key never ends up in logs or tracebacks.
    """

    __slots__ = ("_value",)

    def __init__(self, value: str):
        if not value:
            raise ValueError("API key must not be empty")
        object.__setattr__(self, "_value", str(value))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("ApiKey is immutable")

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"ApiKey('{self._value[:3]}***')"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ApiKey):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)
