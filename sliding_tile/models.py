"""
Bridge Models: Shared Pydantic models for channels and package metadata.

Defines the core data structures used across the bridge:
  - PackageInfo: Metadata record for an installed application package
  - VersionInfo: Result of a version query
  - MethodCall: A named method invocation on a channel
  - MethodResponse: Tagged result of a call (success / error / not implemented)
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ── Package Metadata ─────────────────────────────────────────────────


class PackageInfo(BaseModel):
    """Metadata for one package as reported by a package registry."""

    model_config = ConfigDict(frozen=True)

    package_name: str
    version_name: str | None = None
    version_code: int | None = None

    @field_validator("version_name", mode="before")
    @classmethod
    def _blank_is_missing(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class VersionInfo(BaseModel):
    """The application's version name, absent when it cannot be determined."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version_name: str | None = Field(default=None, alias="versionName")

    @property
    def available(self) -> bool:
        return self.version_name is not None


# ── Method Channel ───────────────────────────────────────────────────


class MethodCall(BaseModel):
    """A method invocation on a named channel."""

    model_config = ConfigDict(frozen=True)

    method: str
    arguments: Any = None


class SuccessResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    result: Any = None


class ErrorResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["error"] = "error"
    code: str
    message: str | None = None
    details: Any = None


class NotImplementedResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["not_implemented"] = "not_implemented"


MethodResponse = Annotated[
    Union[SuccessResponse, ErrorResponse, NotImplementedResponse],
    Field(discriminator="status"),
]
