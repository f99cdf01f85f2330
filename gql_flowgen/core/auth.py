"""Authentication for introspection requests.

Any object with a `get_headers()` method can authenticate the request
sent by IntrospectionClient.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Auth(Protocol):
    """Protocol for authentication handlers.

    Example:
        class TenantAuth:
            def get_headers(self) -> dict[str, str]:
                return {"X-Tenant-ID": "acme"}
    """

    def get_headers(self) -> dict[str, str]:
        """Return headers to include in the introspection request."""
        ...


class BearerAuth:
    """Bearer token authentication.

    Example:
        auth = BearerAuth("eyJhbGciOiJIUzI1NiIs...")
    """

    def __init__(self, token: str):
        self.token = token

    def get_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


class HeaderAuth:
    """Arbitrary static headers, e.g. an API key header."""

    def __init__(self, headers: dict[str, str]):
        self._headers = dict(headers)

    def get_headers(self) -> dict[str, str]:
        return self._headers.copy()

    @classmethod
    def from_strings(cls, values: list[str] | tuple[str, ...]) -> "HeaderAuth":
        """Build from `Name: value` strings as given on the command line.

        Raises:
            ValueError: If a string has no colon or an empty header name.
        """
        headers = {}
        for value in values:
            name, sep, header_value = value.partition(":")
            name = name.strip()
            if not sep or not name:
                raise ValueError(f"Invalid header {value!r}, expected 'Name: value'")
            headers[name] = header_value.strip()
        return cls(headers)


class CombinedAuth:
    """Merges the headers of several handlers; later handlers win."""

    def __init__(self, *handlers: Auth):
        self.handlers = handlers

    def get_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        for handler in self.handlers:
            headers.update(handler.get_headers())
        return headers


class NoAuth:
    """No authentication (public endpoints)."""

    def get_headers(self) -> dict[str, str]:
        return {}
