"""
목적:
- 지정 경로 기준으로 해석된 djangofmt 설정을 출력하는 드라이버 스크립트를 제공한다.

설명:
- 라이브러리 본체는 로깅 핸들러를 설정하지 않는다. 이 스크립트가 `-v` 횟수에 따라 설정한다.
- `--allow-missing`이면 설정 파일 부재 시 기본값으로 대체하고, 그 외 오류는 그대로 실패한다.
- 결과는 Configuration과 포매터 레이아웃을 JSON으로 출력한다.

디자인 패턴:
- 드라이버(Driver Script).

참조:
- src_py/djangofmt_settings/resolution/resolver.py
- src_py/djangofmt_settings/config/models.py
"""

from __future__ import annotations

import argparse
import logging
import sys

from djangofmt_settings import resolve, resolve_or_default


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="djangofmt 설정 확인 드라이버")
    parser.add_argument(
        "--path",
        default=".",
        help="탐색 시작 경로 (파일 또는 디렉터리, 기본: 현재 디렉터리)",
    )
    parser.add_argument(
        "--allow-missing",
        action="store_true",
        help="설정 파일이 없으면 기본값을 사용",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="로그 상세도 (-v: INFO, -vv: DEBUG)",
    )
    return parser.parse_args()


def setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> int:
    args = parse_args()
    setup_logging(args.verbose)

    if args.allow_missing:
        configuration = resolve_or_default(args.path)
    else:
        configuration = resolve(args.path)

    print("[config]", configuration.model_dump_json())
    print("[layout]", configuration.to_layout().model_dump_json())
    return 0


if __name__ == "__main__":
    try:
        raise SystemExit(main())
    except Exception as exc:  # noqa: BLE001
        print(f"[error] {exc}", file=sys.stderr)
        raise SystemExit(1)
