from pathlib import Path

import pytest

from djangofmt_settings import (
    Configuration,
    Profile,
    SettingsFileNotFoundError,
    SettingsParseError,
    SettingsReadError,
    SettingsResolutionError,
    resolve,
    resolve_or_default,
)
from djangofmt_settings.resolution.resolver import load_configuration, parse_settings_section

FULL_SETTINGS = """
[tool.djangofmt]
line_length = 200
indent_width = 4
custom_blocks = ['foo', 'bar']
profile = 'django'
"""


def test_resolve_raises_when_no_settings_file(isolated_dir: Path) -> None:
    with pytest.raises(SettingsFileNotFoundError, match="설정 파일을 찾을 수 없습니다") as exc_info:
        resolve(isolated_dir)

    assert exc_info.value.start_path == isolated_dir
    assert isinstance(exc_info.value, SettingsResolutionError)


def test_resolve_reads_all_fields(isolated_dir: Path, write_settings) -> None:
    write_settings(FULL_SETTINGS)

    configuration = resolve(isolated_dir)

    assert configuration == Configuration(
        line_length=200,
        indent_width=4,
        custom_blocks=("foo", "bar"),
        profile=Profile.DJANGO,
    )
    assert list(configuration.custom_blocks) == ["foo", "bar"]


def test_resolve_from_settings_file_path(write_settings) -> None:
    settings_path = write_settings(FULL_SETTINGS)

    assert resolve(settings_path).line_length == 200


@pytest.mark.parametrize(
    "content",
    [
        "",
        "[project]\nname = 'demo'\n",
        "[tool.black]\nline-length = 88\n",
        "[tool.djangofmt]\n",
    ],
)
def test_resolve_uses_defaults_without_section_values(
    isolated_dir: Path, write_settings, content: str
) -> None:
    write_settings(content)

    assert resolve(isolated_dir) == Configuration()


def test_resolve_prefers_nearest_settings_file(isolated_dir: Path, write_settings) -> None:
    write_settings("[tool.djangofmt]\nline_length = 80\n")
    app_dir = isolated_dir / "app"
    write_settings("[tool.djangofmt]\nline_length = 100\nprofile = 'jinja'\n", directory=app_dir)

    configuration = resolve(app_dir / "templates")

    assert configuration.line_length == 100
    assert configuration.profile is Profile.JINJA


def test_resolve_ignores_unknown_keys(isolated_dir: Path, write_settings) -> None:
    write_settings("[tool.djangofmt]\nindent_width = 2\nfuture_option = true\n")

    assert resolve(isolated_dir) == Configuration(indent_width=2)


def test_resolve_preserves_duplicate_custom_blocks(isolated_dir: Path, write_settings) -> None:
    write_settings("[tool.djangofmt]\ncustom_blocks = ['cache', 'stage', 'cache']\n")

    assert resolve(isolated_dir).custom_blocks == ("cache", "stage", "cache")


def test_resolve_rejects_invalid_profile(isolated_dir: Path, write_settings) -> None:
    settings_path = write_settings("[tool.djangofmt]\nprofile = 'invalid'\n")

    with pytest.raises(SettingsParseError, match="알 수 없는 profile 값입니다") as exc_info:
        resolve(isolated_dir)

    assert exc_info.value.path == settings_path


def test_resolve_rejects_profile_with_wrong_case(isolated_dir: Path, write_settings) -> None:
    write_settings("[tool.djangofmt]\nprofile = 'Django'\n")

    with pytest.raises(SettingsParseError):
        resolve(isolated_dir)


def test_resolve_rejects_malformed_toml(isolated_dir: Path, write_settings) -> None:
    settings_path = write_settings("[tool.djangofmt\nline_length = ")

    with pytest.raises(SettingsParseError, match="설정 파일 파싱 실패") as exc_info:
        resolve(isolated_dir / "nested")

    assert exc_info.value.path == settings_path
    assert str(settings_path) in str(exc_info.value)
    assert exc_info.value.__cause__ is exc_info.value.cause


@pytest.mark.parametrize(
    "content",
    [
        "tool = 1\n",
        "[tool]\ndjangofmt = 'yes'\n",
        "[tool.djangofmt]\nline_length = '120'\n",
        "[tool.djangofmt]\nindent_width = 0\n",
        "[tool.djangofmt]\ncustom_blocks = 'foo'\n",
    ],
)
def test_resolve_rejects_malformed_shapes(isolated_dir: Path, write_settings, content: str) -> None:
    write_settings(content)

    with pytest.raises(SettingsParseError):
        resolve(isolated_dir)


def test_resolve_reports_undecodable_file(isolated_dir: Path) -> None:
    settings_path = isolated_dir / "pyproject.toml"
    settings_path.write_bytes(b"\xff\xfe[tool.djangofmt]\n")

    with pytest.raises(SettingsReadError, match="설정 파일 읽기 실패") as exc_info:
        resolve(isolated_dir)

    assert exc_info.value.path == settings_path
    assert isinstance(exc_info.value.cause, UnicodeDecodeError)


def test_load_configuration_reports_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "pyproject.toml"

    with pytest.raises(SettingsReadError) as exc_info:
        load_configuration(missing)

    assert exc_info.value.path == missing
    assert isinstance(exc_info.value.cause, FileNotFoundError)


def test_parse_settings_section_returns_only_written_fields() -> None:
    section = parse_settings_section("[tool.djangofmt]\nline_length = 90\n", Path("pyproject.toml"))

    assert section.line_length == 90
    assert section.indent_width is None
    assert section.profile is None


def test_resolve_is_idempotent(isolated_dir: Path, write_settings) -> None:
    write_settings(FULL_SETTINGS)

    assert resolve(isolated_dir) == resolve(isolated_dir)


def test_resolve_or_default_falls_back_only_when_missing(isolated_dir: Path, write_settings) -> None:
    assert resolve_or_default(isolated_dir) == Configuration()

    write_settings("[tool.djangofmt]\nprofile = 'unknown'\n")

    with pytest.raises(SettingsParseError):
        resolve_or_default(isolated_dir)


def test_resolve_from_symlinked_template_directory(isolated_dir: Path, write_settings) -> None:
    shared_templates = isolated_dir / "shared" / "templates"
    shared_templates.mkdir(parents=True)
    write_settings("[tool.djangofmt]\nline_length = 80\n", directory=isolated_dir / "proj")
    linked_templates = isolated_dir / "proj" / "templates"
    linked_templates.symlink_to(shared_templates, target_is_directory=True)

    assert resolve(linked_templates).line_length == 80
