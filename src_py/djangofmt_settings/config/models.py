"""
목적:
- djangofmt 포매터 설정 모델을 정의한다.

설명:
- 기본값은 Configuration 한곳에서만 정의한다.
- 설정 파일 섹션은 모든 필드가 선택적인 RawSettingsSection으로 먼저 검증하고,
  Configuration.from_raw가 존재하는 필드만 기본값 위에 덮어쓴다.
- Profile은 닫힌 열거형이며, 알 수 없는 토큰을 기본값으로 대체하지 않고 실패시킨다.

디자인 패턴:
- 값 객체(Value Object) + 섀도 모델 병합(Shadow Model Merge).

참조:
- src_py/djangofmt_settings/resolution/resolver.py
- src_py/djangofmt_settings/contracts/layout_models.py
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

from djangofmt_settings.contracts.layout_models import FormatterLayout, MarkupLanguage

PositiveStrictInt = Annotated[StrictInt, Field(ge=1)]

DEFAULT_LINE_LENGTH = 120
DEFAULT_INDENT_WIDTH = 4


class Profile(str, Enum):
    """템플릿 방언 프로필."""

    DJANGO = "django"
    JINJA = "jinja"

    @classmethod
    def parse(cls, token: str) -> Profile:
        """대소문자를 구분해 프로필 토큰을 해석한다."""
        by_token = {profile.value: profile for profile in cls}
        if token in by_token:
            return by_token[token]
        allowed = ", ".join(repr(value) for value in by_token)
        raise ValueError(f"알 수 없는 profile 값입니다: {token!r} (허용: {allowed})")

    @property
    def language(self) -> MarkupLanguage:
        """포매팅 엔진 방언 선택자로 변환한다."""
        if self is Profile.JINJA:
            return MarkupLanguage.JINJA
        return MarkupLanguage.DJANGO


class RawSettingsSection(BaseModel):
    """`[tool.djangofmt]` 섹션에 사용자가 실제로 적은 값만 담는 모델."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    line_length: PositiveStrictInt | None = None
    indent_width: PositiveStrictInt | None = None
    custom_blocks: list[StrictStr] | None = None
    profile: Profile | None = None

    @field_validator("profile", mode="before")
    @classmethod
    def validate_profile(cls, value: object) -> object:
        if value is None or isinstance(value, Profile):
            return value
        if not isinstance(value, str):
            raise ValueError(f"profile은 문자열이어야 합니다: {value!r}")
        return Profile.parse(value)


class Configuration(BaseModel):
    """기본값이 모두 채워진 djangofmt 설정 모델."""

    model_config = ConfigDict(frozen=True)

    line_length: int = Field(default=DEFAULT_LINE_LENGTH, ge=1)
    indent_width: int = Field(default=DEFAULT_INDENT_WIDTH, ge=1)
    custom_blocks: tuple[str, ...] = Field(default=())
    profile: Profile = Field(default=Profile.DJANGO)

    @classmethod
    def from_raw(cls, raw: RawSettingsSection) -> Configuration:
        """섹션에 존재하는 필드만 기본값 위에 덮어쓴다."""
        return cls(**raw.model_dump(exclude_none=True))

    def to_layout(self) -> FormatterLayout:
        """포매팅 엔진 입력 모델을 생성한다."""
        return FormatterLayout(
            language=self.profile.language,
            print_width=self.line_length,
            indent_width=self.indent_width,
            custom_blocks=self.custom_blocks,
        )
