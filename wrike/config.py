"""Connection settings for the Wrike API."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_API_HOST = "app-eu.wrike.com"


@dataclass(frozen=True)
class Config:
    """Access token and host name used to reach the API.

    An empty host falls back to ``DEFAULT_API_HOST``.
    """

    api_access_token: str = field(repr=False)
    api_host: str = DEFAULT_API_HOST

    def __post_init__(self) -> None:
        if not self.api_host:
            object.__setattr__(self, "api_host", DEFAULT_API_HOST)