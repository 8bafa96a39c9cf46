from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, SecretStr


class Credentials(BaseModel):
    api_key: SecretStr
    api_secret: SecretStr

    model_config = {"extra": "forbid"}


class RequestSettings(BaseModel):
    root_url: str | None = None
    version: str | None = None
    timeout: float | None = Field(default=None, gt=0)
    headers: dict[str, str] = Field(default_factory=dict)

    model_config = {"extra": "forbid"}


class Settings(BaseModel):
    env: str = "dev"
    sandbox: bool = False
    credentials: Credentials | None = None
    request: RequestSettings = Field(default_factory=RequestSettings)

    model_config = {"extra": "forbid"}

    def request_overrides(self) -> dict[str, Any]:
        """Request config fields explicitly set in the settings."""
        return self.request.model_dump(exclude_none=True, exclude_defaults=True)

    def redacted(self) -> dict[str, Any]:
        data = self.model_dump(mode="json")
        creds = data.get("credentials")
        if isinstance(creds, dict):
            if "api_key" in creds:
                creds["api_key"] = "***"
            if "api_secret" in creds:
                creds["api_secret"] = "***"
        return data
