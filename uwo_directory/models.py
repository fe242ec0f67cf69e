"""
Data model for directory lookups.

Lookup requests, parsed directory records and the per-client configuration
are all small immutable values.
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, Optional, Union

from uwo_directory.settings import (
    DEFAULT_DIRECTORY_URL,
    DEFAULT_BACKEND_SERVER,
    REQUEST_TIMEOUT,
    USER_AGENT,
)


@dataclass(frozen=True)
class NameQuery:
    """Forward lookup by first and/or last name. None means the part is absent."""
    first: Optional[str] = None
    last: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.first is None and self.last is None


@dataclass(frozen=True)
class EmailQuery:
    """Reverse lookup by UWO username or uwo.ca address."""
    address: str


LookupRequest = Union[NameQuery, EmailQuery]


@dataclass(frozen=True)
class DirectoryRecord:
    """A single student entry as listed by the directory."""
    last_name: str
    given_name: str
    email: str
    faculty: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class ClientConfig:
    """
    Where and how a DirectoryClient talks to the directory.

    Attributes:
        endpoint_url: Directory front-end receiving the form POST
        backend_server: Value sent as the ``server`` form field
        timeout: Request timeout in seconds
        user_agent: User-Agent header sent with each request
    """
    endpoint_url: str = DEFAULT_DIRECTORY_URL
    backend_server: str = DEFAULT_BACKEND_SERVER
    timeout: float = REQUEST_TIMEOUT
    user_agent: str = field(default=USER_AGENT, repr=False)
