"""
목적:
- 설정 탐색에 쓰이는 프로젝트 고정값을 제공한다.

설명:
- 설정 파일 이름과 `[tool.djangofmt]` 섹션 키 경로를 한곳에서 관리한다.
- 탐색기/해석기는 이 값을 기본 인자로 재사용한다.

디자인 패턴:
- 값 객체(Value Object).

참조:
- src_py/djangofmt_settings/discovery/locator.py
- src_py/djangofmt_settings/resolution/resolver.py
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProjectSettings(BaseModel):
    """djangofmt 설정 탐색 메타 설정 모델."""

    model_config = ConfigDict(frozen=True)

    tool_name: str = Field(default="djangofmt", min_length=1)
    settings_filename: str = Field(default="pyproject.toml", min_length=1)
    tool_namespace: str = Field(default="tool", min_length=1)

    @property
    def section_path(self) -> tuple[str, str]:
        """설정 파일 안에서 도구 전용 섹션까지의 키 경로."""
        return (self.tool_namespace, self.tool_name)


def default_settings() -> ProjectSettings:
    """기본 설정 객체를 생성한다."""
    return ProjectSettings()
