"""Flower Password 생성 알고리즘."""

from __future__ import annotations

import logging
from typing import Iterable

from ..security.hmac_md5 import hmac_md5
from .errors import LengthError

log = logging.getLogger(__name__)


MIN_LENGTH = 2
MAX_LENGTH = 32
DEFAULT_LENGTH = 16
MD5_HEX_LENGTH = 32

# 알고리즘 상수 (변경 시 기존 비밀번호와 호환되지 않음)
MAGIC_STRING = "sunlovesnow1990090127xykab"
RULE_SALT = "kise"
SOURCE_SALT = "snow"
FIRST_CHAR_REPLACEMENT = "K"

_MAGIC_CHARS = frozenset(MAGIC_STRING)


def validate_length(length: int) -> None:
    """길이가 [MIN_LENGTH, MAX_LENGTH] 범위인지 확인."""
    if not MIN_LENGTH <= length <= MAX_LENGTH:
        raise LengthError(length, MIN_LENGTH, MAX_LENGTH)


def transform(rule_digest: str, source_digest: str) -> str:
    """rule 다이제스트를 기준으로 source 다이제스트의 대소문자를 변환.

    숫자는 그대로 두고, 같은 위치의 rule 문자가 MAGIC_STRING에 있으면
    영문자를 대문자로 바꾼다. 첫 글자가 숫자면 ``K``로 치환한다.
    """
    if len(rule_digest) != MD5_HEX_LENGTH or len(source_digest) != MD5_HEX_LENGTH:
        raise ValueError(
            f"다이제스트는 {MD5_HEX_LENGTH}자리여야 합니다"
            f" (rule: {len(rule_digest)}, source: {len(source_digest)})"
        )
    chars = []
    for rule_ch, src_ch in zip(rule_digest, source_digest):
        if not src_ch.isdigit() and rule_ch in _MAGIC_CHARS:
            src_ch = src_ch.upper()
        chars.append(src_ch)

    if chars[0].isdigit():
        chars[0] = FIRST_CHAR_REPLACEMENT
    return "".join(chars)


def fp_code(password: str, key: str, length: int = DEFAULT_LENGTH) -> str:
    """마스터 비밀번호와 키로 서비스별 비밀번호 생성.

    Args:
        password: 마스터 비밀번호
        key: 도메인 등 서비스 식별자
        length: 출력 길이 (2~32)

    Raises:
        LengthError: 길이가 범위를 벗어난 경우. 해시 계산 전에 발생한다.
    """
    validate_length(length)
    log.debug("비밀번호 생성: key=%r, length=%d", key, length)

    base_digest = hmac_md5(password, key)
    rule_digest = hmac_md5(base_digest, RULE_SALT)
    source_digest = hmac_md5(base_digest, SOURCE_SALT)

    return transform(rule_digest, source_digest)[:length]


def fp_code_many(
    password: str, keys: Iterable[str], length: int = DEFAULT_LENGTH
) -> dict[str, str]:
    """여러 서비스 키에 대한 비밀번호를 한 번에 생성. {key: password} 반환."""
    validate_length(length)
    return {key: fp_code(password, key, length) for key in keys}
