"""
Pydantic models for dispenser values and request/response payloads.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class DirectoryDevKit(BaseModel):
    kind: Literal["directory"] = "directory"
    identifier: str
    root: Path


class ArchiveDevKit(BaseModel):
    kind: Literal["archive"] = "archive"
    identifier: str
    path: Path


DevKit = Annotated[Union[DirectoryDevKit, ArchiveDevKit], Field(discriminator="kind")]


class License(BaseModel):
    """A claimed license; ``path`` is its location in the used bucket."""

    filename: str
    platform: str
    content: bytes
    path: Path


class ArchiveHandle(BaseModel):
    name: str
    path: Path
    entries: list[str]
    license_filename: str


class DispenseResponse(BaseModel):
    success: bool = True
    zip_name: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    code: str


class PoolStatus(BaseModel):
    available: dict[str, int] = Field(default_factory=dict)
    used: int = 0
