"""
목적:
- djangofmt 설정 해석 계층의 예외 타입을 표준화한다.

설명:
- 설정 파일 부재, 읽기 실패, 파싱/검증 실패를 명시적으로 구분해
  호출자가 기본값 사용 여부나 실행 중단을 직접 결정할 수 있게 한다.
- 읽기/파싱 예외는 문제가 된 경로와 원인 예외를 함께 보관한다.

디자인 패턴:
- 계층형 예외(Hierarchical Exception).

참조:
- src_py/djangofmt_settings/resolution/resolver.py
"""

from __future__ import annotations

from pathlib import Path


class DjangofmtSettingsError(Exception):
    """djangofmt 설정 계층 공통 베이스 예외."""


class SettingsResolutionError(DjangofmtSettingsError):
    """설정 해석(탐색/읽기/파싱) 실패의 공통 예외."""


class SettingsFileNotFoundError(SettingsResolutionError):
    """시작 경로의 어떤 상위 디렉터리에도 설정 파일이 없을 때 발생한다."""

    def __init__(self, start_path: Path) -> None:
        self.start_path = start_path
        super().__init__(f"설정 파일을 찾을 수 없습니다: start_path={start_path}")


class SettingsReadError(SettingsResolutionError):
    """찾은 설정 파일을 읽지 못했을 때 발생한다."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"설정 파일 읽기 실패: {path}: {cause}")


class SettingsParseError(SettingsResolutionError):
    """설정 파일 구문 오류 또는 필드 값이 허용 범위를 벗어났을 때 발생한다."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"설정 파일 파싱 실패: {path}: {cause}")
