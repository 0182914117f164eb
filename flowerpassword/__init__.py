"""
flowerpassword
==============

저장소 없는 서비스별 비밀번호 생성기 (Flower Password 알고리즘).

마스터 비밀번호와 키(보통 사이트 도메인)로부터 HMAC-MD5를 이용해
비밀번호를 만든다. 같은 (master, key, length)는 항상 같은 결과를 낸다.

    >>> from flowerpassword import fp_code
    >>> fp_code("test", "github.com", 16)
    'D04175F7A9c7Ab4a'
"""

from .core.errors import FlowerPasswordError, LengthError
from .core.generator import (
    DEFAULT_LENGTH,
    MAGIC_STRING,
    MAX_LENGTH,
    MIN_LENGTH,
    fp_code,
    fp_code_many,
)
from .security.hmac_md5 import hmac_md5

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_LENGTH",
    "MAGIC_STRING",
    "MAX_LENGTH",
    "MIN_LENGTH",
    "FlowerPasswordError",
    "LengthError",
    "fp_code",
    "fp_code_many",
    "hmac_md5",
]
