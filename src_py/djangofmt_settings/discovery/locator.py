"""
목적:
- 시작 경로의 상위 디렉터리를 따라 가장 가까운 설정 파일을 찾는다.

설명:
- 시작 경로가 디렉터리면 그 디렉터리부터, 파일이거나 존재하지 않는 경로면
  부모 디렉터리부터 루트 방향으로 탐색한다.
- 일반 파일만 일치로 인정하며, 같은 이름의 디렉터리는 건너뛴다.
- 심볼릭 링크를 따라가지 않고 시작 경로 자체의 상위 경로를 따라간다.
- 존재 여부만 확인하고 파일 내용은 읽지 않는다.

디자인 패턴:
- 함수형 유틸 모듈(Function Utility Module).

참조:
- src_py/djangofmt_settings/resolution/resolver.py
- src_py/djangofmt_settings/shared/settings.py
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from djangofmt_settings.shared.settings import default_settings

logger = logging.getLogger(__name__)


def iter_search_directories(start_path: str | os.PathLike[str]) -> Iterator[Path]:
    """탐색 대상 디렉터리를 가까운 순서대로 생성한다."""
    path = Path(start_path).absolute()
    if path.is_dir():
        yield path
    yield from path.parents


def find_settings_file(
    start_path: str | os.PathLike[str],
    filename: str | None = None,
) -> Path | None:
    """가장 가까운 설정 파일 경로를 반환한다. 없으면 None."""
    target = filename or default_settings().settings_filename
    for directory in iter_search_directories(start_path):
        candidate = directory / target
        logger.debug("설정 파일 확인: %s", candidate)
        if candidate.is_file():
            logger.debug("설정 파일 발견: %s", candidate)
            return candidate
    return None
