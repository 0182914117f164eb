"""flowerpassword CLI 진입점."""

from __future__ import annotations

import argparse
import getpass
import logging
import sys

from dotenv import load_dotenv

from .config import Config
from .core.errors import FlowerPasswordError
from .core.generator import MAX_LENGTH, MIN_LENGTH, fp_code_many
from .ui.formatters import format_results

log = logging.getLogger("flowerpassword.cli")


def _parse_lengths(value: str) -> list[int]:
    """``8,12,16`` → [8, 12, 16]."""
    try:
        lengths = [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"정수 목록이 아닙니다: {value}") from None
    if not lengths:
        raise argparse.ArgumentTypeError("길이를 하나 이상 지정해야 합니다")
    return lengths


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="flowerpassword",
        description="마스터 비밀번호와 키로 서비스별 비밀번호를 생성합니다",
    )
    ap.add_argument("keys", nargs="+", metavar="KEY", help="도메인 등 서비스 식별자")
    lengths = ap.add_mutually_exclusive_group()
    lengths.add_argument(
        "-l", "--length", type=int, default=None,
        help=f"비밀번호 길이 ({MIN_LENGTH}~{MAX_LENGTH}, 기본값: 설정값)",
    )
    lengths.add_argument(
        "--lengths", type=_parse_lengths, default=None,
        help="여러 길이를 쉼표로 구분 (예: 8,12,16)",
    )
    ap.add_argument(
        "-p", "--password", default=None,
        help="마스터 비밀번호 (공유 셸에서는 사용하지 마세요)",
    )
    return ap


def _resolve_master(args: argparse.Namespace, config: Config) -> str:
    """인자 → 환경변수 → 프롬프트 순으로 마스터 비밀번호 결정."""
    if args.password is not None:
        return args.password
    if config.master_password:
        return config.master_password
    return getpass.getpass("마스터 비밀번호: ")


def run_cli(argv: list[str] | None = None) -> int:
    """CLI 실행. 종료 코드 반환."""
    load_dotenv()
    try:
        config = Config.from_env()
    except ValueError as ex:
        log.error("설정 오류: %s", ex)
        return 1

    errors = config.validate()
    if errors:
        for e in errors:
            log.error("설정 오류: %s", e)
        return 1

    logging.basicConfig(
        level=config.log_level_value,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    args = _build_parser().parse_args(argv)
    if args.lengths is not None:
        lengths = args.lengths
    elif args.length is not None:
        lengths = [args.length]
    else:
        lengths = [config.default_length]

    try:
        master = _resolve_master(args, config)
    except (EOFError, KeyboardInterrupt):
        print("\n취소되었습니다.", file=sys.stderr)
        return 2

    try:
        by_length = {length: fp_code_many(master, args.keys, length) for length in lengths}
    except FlowerPasswordError as ex:
        print(f"Error: {ex}", file=sys.stderr)
        return 2

    rows = [
        (key, length, by_length[length][key])
        for key in args.keys
        for length in lengths
    ]

    if len(rows) == 1:
        print(rows[0][2])
    else:
        print(format_results(rows))
    log.info("비밀번호 %d개 생성 완료", len(rows))
    return 0


def main() -> None:
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
