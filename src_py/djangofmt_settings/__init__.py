"""
목적:
- djangofmt 설정 해석 패키지의 공개 진입점을 제공한다.

설명:
- 핵심 진입점은 `resolve(start_path)` 하나이며, 가장 가까운 `pyproject.toml`의
  `[tool.djangofmt]` 섹션을 기본값과 병합한 Configuration을 돌려준다.
- 설정 모델/포매터 인터페이스/예외를 함께 노출한다.

디자인 패턴:
- 퍼사드(Facade).

참조:
- src_py/djangofmt_settings/resolution/resolver.py
- src_py/djangofmt_settings/config/models.py
"""

from .config.models import Configuration, Profile, RawSettingsSection
from .contracts.layout_models import FormatterLayout, MarkupLanguage
from .discovery.locator import find_settings_file
from .exceptions import (
    DjangofmtSettingsError,
    SettingsFileNotFoundError,
    SettingsParseError,
    SettingsReadError,
    SettingsResolutionError,
)
from .resolution.resolver import load_configuration, resolve, resolve_or_default
from .version import __version__

__all__ = [
    "__version__",
    "resolve",
    "resolve_or_default",
    "load_configuration",
    "find_settings_file",
    "Configuration",
    "Profile",
    "RawSettingsSection",
    "FormatterLayout",
    "MarkupLanguage",
    "DjangofmtSettingsError",
    "SettingsResolutionError",
    "SettingsFileNotFoundError",
    "SettingsReadError",
    "SettingsParseError",
]
