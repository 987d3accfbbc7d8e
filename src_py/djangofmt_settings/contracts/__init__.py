"""
목적:
- 외부 협력자와 주고받는 인터페이스 모델의 공개 진입점을 제공한다.

디자인 패턴:
- 데이터 전송 객체(DTO).

참조:
- src_py/djangofmt_settings/contracts/layout_models.py
"""

from .layout_models import FormatterLayout, MarkupLanguage

__all__ = ["FormatterLayout", "MarkupLanguage"]
