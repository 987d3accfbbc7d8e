"""
목적:
- 설정 모델 계층의 공개 진입점을 제공한다.

설명:
- 설정 파일 탐색/읽기는 resolution 계층이 맡고, 이 계층은 값 검증과 기본값만 책임진다.

디자인 패턴:
- 설정 객체(Configuration Object).

참조:
- src_py/djangofmt_settings/config/models.py
"""

from .models import Configuration, Profile, RawSettingsSection

__all__ = [
    "Configuration",
    "Profile",
    "RawSettingsSection",
]
