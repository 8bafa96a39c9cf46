"""Request configuration and its defaults."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

DEFAULT_ROOT_URL = "https://api.gemini.com"
SANDBOX_ROOT_URL = "https://api.sandbox.gemini.com"
DEFAULT_VERSION = "v1"
DEFAULT_TIMEOUT = 10.0

DEFAULT_HEADERS: dict[str, str] = {
    "Cache-Control": "no-cache",
    "Content-Length": "0",
    "Content-Type": "text/plain",
    "User-Agent": "Gemini API Client (gemini-rest python package)",
}


class RequestConfig(BaseModel):
    """Per-request settings.

    Fields left unset on an override do not replace the values they are
    merged over.
    """

    root_url: str = DEFAULT_ROOT_URL
    version: str = DEFAULT_VERSION
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    headers: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_HEADERS))

    model_config = {"extra": "forbid"}

    def merge(self, *overrides: "RequestConfig | dict[str, Any] | None") -> "RequestConfig":
        """Return a new config with ``overrides`` applied left to right.

        Headers merge key by key; every other field is replaced whole. The
        result only marks as set the fields set here or on an override.
        """
        merged = self.model_dump()
        fields_set = set(self.model_fields_set)
        for override in overrides:
            if override is None:
                continue
            if not isinstance(override, RequestConfig):
                override = RequestConfig.model_validate(override)
            for name in override.model_fields_set:
                value = getattr(override, name)
                if name == "headers":
                    merged["headers"] = {**merged["headers"], **value}
                else:
                    merged[name] = value
            fields_set |= override.model_fields_set
        validated = RequestConfig.model_validate(merged)
        return RequestConfig.model_construct(_fields_set=fields_set, **validated.model_dump())

    def public_url(self, endpoint: str) -> str:
        return f"{self.root_url.rstrip('/')}/{self.version}/{endpoint}"

    def request_path(self, endpoint: str) -> str:
        """Absolute path that private requests are signed over."""
        return f"/{self.version}/{endpoint}"


def default_config(*, sandbox: bool = False) -> RequestConfig:
    if sandbox:
        return RequestConfig(root_url=SANDBOX_ROOT_URL)
    return RequestConfig()
