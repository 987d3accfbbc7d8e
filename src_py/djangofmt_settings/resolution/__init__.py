"""
목적:
- 설정 해석 계층의 공개 진입점을 제공한다.

참조:
- src_py/djangofmt_settings/resolution/resolver.py
"""

from .resolver import (
    load_configuration,
    parse_settings_section,
    read_settings_text,
    resolve,
    resolve_or_default,
)

__all__ = [
    "resolve",
    "resolve_or_default",
    "load_configuration",
    "read_settings_text",
    "parse_settings_section",
]
