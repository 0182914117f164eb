"""생성 결과 텍스트 포맷터."""

from __future__ import annotations


def format_result_line(key: str, length: int, password: str, key_width: int = 0) -> str:
    """결과 한 줄: ``key  length  password``."""
    return f"{key.ljust(key_width)}  {length:>2}  {password}"


def format_results(rows: list[tuple[str, int, str]]) -> str:
    """(key, length, password) 목록을 키 열 기준으로 정렬해 출력."""
    if not rows:
        return ""
    key_width = max(len(key) for key, _, _ in rows)
    return "\n".join(
        format_result_line(key, length, password, key_width)
        for key, length, password in rows
    )
