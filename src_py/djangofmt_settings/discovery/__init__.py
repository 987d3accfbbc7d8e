"""
목적:
- 설정 파일 탐색 계층의 공개 진입점을 제공한다.

설명:
- 시작 경로의 상위 디렉터리를 가까운 순서로 확인해 설정 파일 경로만 돌려준다.

디자인 패턴:
- 함수형 유틸 모듈(Function Utility Module).

참조:
- src_py/djangofmt_settings/discovery/locator.py
"""

from .locator import find_settings_file, iter_search_directories

__all__ = ["find_settings_file", "iter_search_directories"]
