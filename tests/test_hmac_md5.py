import pytest
from Crypto.Hash import HMAC, MD5

from flowerpassword.security.hmac_md5 import BLOCK_SIZE, _key_block, hmac_md5, md5_hex, md5_raw


def test_md5_known_values():
    assert md5_hex(b"") == "d41d8cd98f00b204e9800998ecf8427e"
    assert md5_hex(b"password") == "5f4dcc3b5aa765d61d8327deb882cf99"
    assert md5_raw(b"") == bytes.fromhex("d41d8cd98f00b204e9800998ecf8427e")


# RFC 2202
@pytest.mark.parametrize(
    "key, message, expected",
    [
        ("\x0b" * 16, "Hi There", "9294727a3638bb1c13f48ef8158bfc9d"),
        ("Jefe", "what do ya want for nothing?", "750c783e6ab0b503eaa86e310a5db738"),
    ],
)
def test_rfc2202_vectors(key, message, expected):
    assert hmac_md5(message, key) == expected


@pytest.mark.parametrize(
    "key, message",
    [
        ("key", "password"),
        ("kise", "5f4dcc3b5aa765d61d8327deb882cf99"),
        ("b" * 1000, "password"),
        ("k" * 64, "exactly one block"),
        ("k" * 65, "one byte over"),
        ("网站.com", "密码"),
        ("key", ""),
    ],
)
def test_matches_standard_hmac_for_non_empty_key(key, message):
    expected = HMAC.new(key.encode("utf-8"), message.encode("utf-8"), digestmod=MD5).hexdigest()
    assert hmac_md5(message, key) == expected


def test_empty_key_is_plain_md5():
    assert hmac_md5("password", "") == "5f4dcc3b5aa765d61d8327deb882cf99"
    assert hmac_md5("", "") == "d41d8cd98f00b204e9800998ecf8427e"


def test_empty_key_differs_from_standard_hmac():
    standard = HMAC.new(b"", b"password", digestmod=MD5).hexdigest()
    assert hmac_md5("password", "") != standard


def test_digest_shape():
    digest = hmac_md5("anything", "key")
    assert len(digest) == 32
    assert digest == digest.lower()
    int(digest, 16)


def test_key_block_padding():
    assert _key_block(b"abc") == b"abc" + b"\x00" * (BLOCK_SIZE - 3)
    assert _key_block(b"x" * BLOCK_SIZE) == b"x" * BLOCK_SIZE


def test_long_key_block_is_hashed():
    long_key = b"b" * 1000
    assert _key_block(long_key) == md5_raw(long_key) + b"\x00" * (BLOCK_SIZE - 16)
