import pytest

from stringcipher.common.errors import DecodingError
from stringcipher.common.utils import base64_decode, base64_encode, key_fingerprint


def test_base64_standard_alphabet_with_padding():
    assert base64_encode(b"\xfb\xff") == "+/8="
    assert base64_decode("+/8=") == b"\xfb\xff"


def test_base64_empty():
    assert base64_encode(b"") == ""
    assert base64_decode("") == b""


@pytest.mark.parametrize("bad", ["not base64!!", "abc", "-_8=", "pcLKY0bi\nDqt9", "ü"])
def test_base64_decode_rejects_malformed(bad):
    with pytest.raises(DecodingError):
        base64_decode(bad)


def test_base64_decode_can_ignore_line_breaks():
    assert base64_decode("cGFu\r\nZGE=\n", ignore_whitespace=True) == b"panda"


def test_key_fingerprint_is_short_and_stable():
    fp = key_fingerprint(b"panda&beta#12345")
    assert len(fp) == 8
    assert fp == key_fingerprint(b"panda&beta#12345")
    assert fp != key_fingerprint(b"panda&beta#12346")
