"""
목적:
- 마크업 포매팅 엔진에 넘기는 레이아웃 인터페이스 모델을 정의한다.

설명:
- 포매팅 엔진은 이 계층 밖의 협력자이며, 방언 선택자와
  줄 너비/들여쓰기 폭만 받아 레이아웃을 결정한다.
- 해석된 Configuration에서 파생되며 그 외 상태를 갖지 않는다.

디자인 패턴:
- 데이터 전송 객체(DTO).

참조:
- src_py/djangofmt_settings/config/models.py
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class MarkupLanguage(str, Enum):
    """포매팅 엔진이 인식하는 템플릿 방언."""

    DJANGO = "django"
    JINJA = "jinja"


class FormatterLayout(BaseModel):
    """포매팅 엔진 레이아웃 입력 모델."""

    model_config = ConfigDict(frozen=True)

    language: MarkupLanguage
    print_width: int = Field(ge=1)
    indent_width: int = Field(ge=1)
    custom_blocks: tuple[str, ...] = Field(default=())
