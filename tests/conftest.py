import zipfile
from pathlib import Path

import pytest

from kitdispenser.common.config import Config
from kitdispenser.server.core import DispenserServer

DIRECTORY_KIT = "kitA-NVIDIA-v2"
ARCHIVE_KIT = "kitB-AMD-v1"


@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    """Create a dispenser layout with two platforms and both payload forms."""
    base = tmp_path / "dispenser"
    for name in ("used", "builds"):
        (base / name).mkdir(parents=True)

    nvidia = base / "available" / "NVIDIA"
    nvidia.mkdir(parents=True)
    (nvidia / "lic1.txt").write_text("nvidia-license-1")
    (nvidia / "lic2.txt").write_text("nvidia-license-2")

    amd = base / "available" / "AMD"
    amd.mkdir(parents=True)
    (amd / "amd1.txt").write_text("amd-license-1")

    kit = base / "dev-kit" / DIRECTORY_KIT
    (kit / "sub").mkdir(parents=True)
    (kit / "a.txt").write_text("alpha")
    (kit / "sub" / "b.txt").write_text("beta")

    with zipfile.ZipFile(base / "dev-kit" / f"{ARCHIVE_KIT}.zip", "w") as zf:
        zf.writestr("readme.txt", "prebuilt kit")

    return base


@pytest.fixture
def config(base_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Config:
    """Config pointing at the temporary layout."""
    monkeypatch.setenv("KITDISPENSER_BASE_DIR", str(base_dir))
    monkeypatch.delenv("KITDISPENSER_LICENSE_GLOB", raising=False)
    monkeypatch.delenv("KITDISPENSER_CANDIDATE_ORDER", raising=False)
    return Config()


@pytest.fixture
def server(config: Config) -> DispenserServer:
    return DispenserServer(config=config)
