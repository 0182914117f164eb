"""flowerpassword 예외."""

from __future__ import annotations


class FlowerPasswordError(Exception):
    """패키지 공통 예외."""


class LengthError(FlowerPasswordError, ValueError):
    """비밀번호 길이가 허용 범위를 벗어남."""

    def __init__(self, length: int, min_length: int, max_length: int) -> None:
        self.length = length
        self.min_length = min_length
        self.max_length = max_length
        super().__init__(
            f"Length must be between {min_length} and {max_length}, got: {length}"
        )
