"""
목적:
- 설정 파일 탐색부터 기본값 병합까지 djangofmt 설정 해석 흐름을 제공한다.

설명:
- 탐색 -> 읽기 -> TOML 파싱 -> `[tool.djangofmt]` 추출 -> 검증 -> 기본값 병합 순서로 처리한다.
- 실패는 부재/읽기/파싱 세 종류의 예외로만 호출자에게 전달하며, 재시도나 캐시는 없다.
- 섹션이나 상위 테이블이 없으면 사용자 재정의가 없는 것으로 보고 기본값을 쓴다.

디자인 패턴:
- 서비스 레이어(Service Layer).

참조:
- src_py/djangofmt_settings/discovery/locator.py
- src_py/djangofmt_settings/config/models.py
- src_py/djangofmt_settings/exceptions.py
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from djangofmt_settings.config.models import Configuration, RawSettingsSection
from djangofmt_settings.discovery.locator import find_settings_file
from djangofmt_settings.exceptions import (
    SettingsFileNotFoundError,
    SettingsParseError,
    SettingsReadError,
)
from djangofmt_settings.shared.settings import default_settings

logger = logging.getLogger(__name__)


def resolve(start_path: str | os.PathLike[str]) -> Configuration:
    """시작 경로에서 가장 가까운 설정 파일을 해석해 Configuration을 반환한다."""
    settings = default_settings()
    settings_path = find_settings_file(start_path, filename=settings.settings_filename)
    if settings_path is None:
        raise SettingsFileNotFoundError(Path(start_path))
    return load_configuration(settings_path)


def resolve_or_default(start_path: str | os.PathLike[str]) -> Configuration:
    """설정 파일이 없을 때만 기본 Configuration으로 대체한다."""
    try:
        return resolve(start_path)
    except SettingsFileNotFoundError as exc:
        logger.info("%s; 기본 설정을 사용합니다", exc)
        return Configuration()


def load_configuration(settings_path: Path) -> Configuration:
    """지정된 설정 파일을 읽어 Configuration을 생성한다."""
    text = read_settings_text(settings_path)
    section = parse_settings_section(text, settings_path)
    configuration = Configuration.from_raw(section)
    logger.debug("설정 해석 완료: %s -> %s", settings_path, configuration)
    return configuration


def read_settings_text(settings_path: Path) -> str:
    """설정 파일 전체를 UTF-8 텍스트로 읽는다."""
    try:
        return settings_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SettingsReadError(settings_path, exc) from exc


def parse_settings_section(text: str, settings_path: Path) -> RawSettingsSection:
    """TOML 텍스트에서 도구 섹션을 추출하고 검증한다."""
    try:
        document = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise SettingsParseError(settings_path, exc) from exc

    table = _extract_section(document, default_settings().section_path, settings_path)
    try:
        return RawSettingsSection.model_validate(table)
    except ValidationError as exc:
        raise SettingsParseError(settings_path, exc) from exc


def _extract_section(
    document: dict[str, Any],
    keys: tuple[str, ...],
    settings_path: Path,
) -> dict[str, Any]:
    current: dict[str, Any] = document
    for depth, key in enumerate(keys, start=1):
        value = current.get(key)
        if value is None:
            return {}
        if not isinstance(value, dict):
            dotted = ".".join(keys[:depth])
            raise SettingsParseError(
                settings_path,
                TypeError(f"`{dotted}`는 테이블이어야 합니다: {type(value).__name__}"),
            )
        current = value
    return current
