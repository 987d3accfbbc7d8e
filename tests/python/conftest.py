from pathlib import Path

import pytest

SETTINGS_FILENAME = "pyproject.toml"


@pytest.fixture
def isolated_dir(tmp_path: Path) -> Path:
    """상위 디렉터리에 pyproject.toml이 없는 임시 디렉터리."""
    for directory in (tmp_path, *tmp_path.parents):
        if (directory / SETTINGS_FILENAME).is_file():
            pytest.skip(f"임시 디렉터리 상위에 {SETTINGS_FILENAME}이 존재합니다: {directory}")
    return tmp_path


@pytest.fixture
def write_settings(isolated_dir: Path):
    def _write(content: str, directory: Path | None = None) -> Path:
        target_dir = directory or isolated_dir
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / SETTINGS_FILENAME
        path.write_text(content, encoding="utf-8")
        return path

    return _write
