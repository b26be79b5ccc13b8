"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest
from PIL import Image

from markasset.config.settings import MarkassetSettings
from markasset.image.service import GetImageResult, ImageMetadata, ImageTransform


def make_image(path: Path, color: str = "red", size: tuple[int, int] = (32, 16), fmt: str = "PNG") -> Path:
    """Write a small solid-color image to disk."""
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGB", size, color).save(path, format=fmt)
    return path


class CountingImageService:
    """Image service stub that records every request.

    Sources listed in ``fail_for`` (by original file name) are rejected.
    """

    def __init__(self, fail_for: set[str] | None = None, prefix: str = "/_build/") -> None:
        self.fail_for = fail_for or set()
        self.prefix = prefix
        self.calls: list[ImageTransform] = []

    async def get_image(self, options: ImageTransform) -> GetImageResult:
        self.calls.append(options)
        assert isinstance(options.src, ImageMetadata)
        asset_path = options.src.src
        for name in self.fail_for:
            if Path(asset_path).name.startswith(Path(name).stem + "-"):
                raise RuntimeError(f"optimizer rejected {name}")
        return GetImageResult(
            raw_options=options,
            options=options,
            src=f"{self.prefix}{asset_path}",
            attributes={"width": options.src.width, "height": options.src.height},
        )


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every test away from any markasset.yaml in the working tree."""
    monkeypatch.chdir(tmp_path)
    for name in ("MARKASSET_ROOT_PATH", "MARKASSET_ROOT_URL"):
        monkeypatch.delenv(name, raising=False)
    yield tmp_path


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """A project tree with src/assets and src/pages directories."""
    root = tmp_path / "proj"
    (root / "src" / "assets").mkdir(parents=True)
    (root / "src" / "pages").mkdir(parents=True)
    return root


@pytest.fixture
def document_path(project_root: Path) -> Path:
    """Path of a markdown document inside the project."""
    path = project_root / "src" / "pages" / "post.md"
    path.write_text("# Post\n", encoding="utf-8")
    return path


@pytest.fixture
def settings(project_root: Path) -> MarkassetSettings:
    """Settings rooted at the test project."""
    return MarkassetSettings(root_path=project_root)


@pytest.fixture
def service() -> CountingImageService:
    """A counting image service stub."""
    return CountingImageService()


@pytest.fixture
def image_factory():
    """Factory writing small test images: image_factory(path, color=..., size=...)."""
    return make_image


@pytest.fixture
def service_factory():
    """Factory for counting image services: service_factory(fail_for={...})."""
    return CountingImageService
