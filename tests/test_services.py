import zipfile
from pathlib import Path

import pytest

from kitdispenser.common.exceptions import (
    BuildFailed,
    InvalidInput,
    NotFound,
    PoolExhausted,
)
from kitdispenser.server.core import DispenserServer


def test_dispense_directory_kit(base_dir: Path, server: DispenserServer) -> None:
    resp = server.service.dispense("kitA-NVIDIA-v2")
    assert resp.success is True
    with zipfile.ZipFile(base_dir / "builds" / resp.zip_name) as zf:
        assert sorted(zf.namelist()) == [
            "dev-kit/a.txt",
            "dev-kit/sub/b.txt",
            "license/lic1.txt",
        ]


def test_two_requests_get_distinct_archives_and_licenses(
    base_dir: Path, server: DispenserServer
) -> None:
    first = server.service.build("kitA-NVIDIA-v2")
    second = server.service.build("kitA-NVIDIA-v2")
    assert first.name != second.name
    assert first.license_filename != second.license_filename
    assert sorted(p.name for p in (base_dir / "used").iterdir()) == [
        "lic1.txt",
        "lic2.txt",
    ]


def test_invalid_identifier_has_no_side_effects(
    base_dir: Path, server: DispenserServer
) -> None:
    with pytest.raises(InvalidInput):
        server.service.dispense("../kitA-NVIDIA-v2")
    assert list((base_dir / "used").iterdir()) == []
    assert list((base_dir / "builds").iterdir()) == []


def test_missing_kit_consumes_no_license(
    base_dir: Path, server: DispenserServer
) -> None:
    with pytest.raises(NotFound):
        server.service.dispense("kitZ-NVIDIA-v9")
    assert len(list((base_dir / "available" / "NVIDIA").iterdir())) == 2  # noqa: PLR2004
    assert list((base_dir / "used").iterdir()) == []


def test_exhausted_pool_builds_nothing(base_dir: Path, server: DispenserServer) -> None:
    server.service.dispense("kitB-AMD-v1")
    with pytest.raises(PoolExhausted):
        server.service.dispense("kitB-AMD-v1")
    assert len(list((base_dir / "builds").iterdir())) == 1


def test_build_failure_leaves_license_used(
    base_dir: Path, server: DispenserServer, monkeypatch: pytest.MonkeyPatch
) -> None:
    def failing(devkit, lic, output_dir=None):
        raise BuildFailed("Could not create ZIP file.")

    monkeypatch.setattr(server.assembler, "assemble", failing)
    with pytest.raises(BuildFailed):
        server.service.dispense("kitA-NVIDIA-v2")
    assert (base_dir / "used" / "lic1.txt").exists()


def test_build_path(base_dir: Path, server: DispenserServer) -> None:
    resp = server.service.dispense("kitB-AMD-v1")
    assert server.service.build_path(resp.zip_name) == base_dir / "builds" / resp.zip_name
    with pytest.raises(NotFound):
        server.service.build_path("..")
    with pytest.raises(NotFound):
        server.service.build_path("missing.zip")
    with pytest.raises(NotFound):
        server.service.build_path("lic1.txt")
