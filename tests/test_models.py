from pathlib import Path

import pytest
from pydantic import TypeAdapter, ValidationError

from kitdispenser.common.models import (
    ArchiveDevKit,
    DevKit,
    DirectoryDevKit,
    DispenseResponse,
    ErrorResponse,
    PoolStatus,
)


def test_devkit_union_discriminates_on_kind() -> None:
    adapter = TypeAdapter(DevKit)
    directory = adapter.validate_python(
        {"kind": "directory", "identifier": "kitA", "root": "/srv/dev-kit/kitA"}
    )
    archive = adapter.validate_python(
        {"kind": "archive", "identifier": "kitB", "path": "/srv/dev-kit/kitB.zip"}
    )
    assert isinstance(directory, DirectoryDevKit)
    assert directory.root == Path("/srv/dev-kit/kitA")
    assert isinstance(archive, ArchiveDevKit)


def test_devkit_union_rejects_unknown_kind() -> None:
    with pytest.raises(ValidationError):
        TypeAdapter(DevKit).validate_python({"kind": "tarball", "identifier": "x"})


def test_response_shapes() -> None:
    assert DispenseResponse(zip_name="a.zip").model_dump() == {
        "success": True,
        "zip_name": "a.zip",
    }
    assert ErrorResponse(error="boom", code="build_failed").model_dump() == {
        "success": False,
        "error": "boom",
        "code": "build_failed",
    }


def test_pool_status_defaults() -> None:
    status = PoolStatus()
    assert status.available == {}
    assert status.used == 0
