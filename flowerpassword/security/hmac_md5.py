"""blueimp-md5 호환 HMAC-MD5."""

from __future__ import annotations

from Crypto.Hash import MD5


BLOCK_SIZE = 64  # MD5 블록 크기 (바이트)
IPAD_BYTE = 0x36
OPAD_BYTE = 0x5C


def md5_raw(data: bytes) -> bytes:
    """MD5 다이제스트 (16바이트)."""
    return MD5.new(data).digest()


def md5_hex(data: bytes) -> str:
    """MD5 다이제스트 (32자리 소문자 hex)."""
    return MD5.new(data).hexdigest()


def _key_block(key: bytes) -> bytes:
    """키를 64바이트 블록으로 정규화. 블록보다 길면 MD5로 줄인다."""
    if len(key) > BLOCK_SIZE:
        key = md5_raw(key)
    return key.ljust(BLOCK_SIZE, b"\x00")


def hmac_md5(message: str, key: str) -> str:
    """HMAC-MD5 hex 다이제스트.

    blueimp-md5의 ``md5(message, key)`` 호출과 동일한 결과를 낸다.
    키가 빈 문자열이면 HMAC이 아니라 일반 MD5를 반환한다
    (표준 HMAC의 빈 키 결과와 다르다).
    """
    message_bytes = message.encode("utf-8")
    if not key:
        return md5_hex(message_bytes)

    block = _key_block(key.encode("utf-8"))
    ipad = bytes(b ^ IPAD_BYTE for b in block)
    opad = bytes(b ^ OPAD_BYTE for b in block)

    inner = md5_raw(ipad + message_bytes)
    return md5_hex(opad + inner)
