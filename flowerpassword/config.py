"""환경변수 기반 설정 모듈."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .core.generator import DEFAULT_LENGTH, MAX_LENGTH, MIN_LENGTH


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    """CLI 설정 (환경변수에서 로드)."""

    # 마스터 비밀번호 (비어 있으면 프롬프트로 입력)
    master_password: str = ""

    # 기본 출력 길이
    default_length: int = DEFAULT_LENGTH

    # 로깅
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> Config:
        """환경변수에서 Config 인스턴스 생성."""
        return cls(
            master_password=os.environ.get("FLOWERPASSWORD_MASTER", ""),
            default_length=int(
                os.environ.get("FLOWERPASSWORD_LENGTH", str(DEFAULT_LENGTH))
            ),
            log_level=os.environ.get("FLOWERPASSWORD_LOG_LEVEL", "WARNING").upper(),
        )

    def validate(self) -> list[str]:
        """설정 유효성 검사. 오류 목록 반환."""
        errors: list[str] = []
        if not MIN_LENGTH <= self.default_length <= MAX_LENGTH:
            errors.append(
                f"FLOWERPASSWORD_LENGTH는 {MIN_LENGTH}~{MAX_LENGTH} 사이여야 합니다"
                f" (현재: {self.default_length})"
            )
        if self.log_level not in LOG_LEVELS:
            errors.append(f"알 수 없는 로그 레벨: {self.log_level}")
        return errors

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level, logging.WARNING)
