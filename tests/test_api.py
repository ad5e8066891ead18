from __future__ import annotations

import utf8clen
from utf8clen import (
    REPLACEMENT_BYTES,
    REPLACEMENT_CHARACTER,
    Invalid,
    Valid,
    classify,
    sanitize,
)


def test_version():
    assert utf8clen.__version__ == "1.0.0"


def test_all_exports_resolve():
    for name in utf8clen.__all__:
        assert hasattr(utf8clen, name), name


def test_replacement_constants_agree():
    assert REPLACEMENT_CHARACTER.encode("utf-8") == REPLACEMENT_BYTES
    assert classify(REPLACEMENT_BYTES) == Valid(3)


def test_scenarios():
    assert utf8clen.utf8clen(b"A") == (1, 0)
    assert utf8clen.utf8clen(b"\xc2\xa9") == (2, 0)
    assert utf8clen.utf8clen(b"\xe2\x82\xac") == (3, 0)
    assert utf8clen.utf8clen(b"\xf0\x9f\x98\x82") == (4, 0)
    assert utf8clen.utf8clen(b"\x80\x80\x80") == (0, 3)
    assert utf8clen.utf8clen(b"\xed\xa0\x80") == (0, 3)
    assert utf8clen.utf8clen(b"\xc3") == (0, 1)
    assert utf8clen.utf8clen(b"\xc1\x81") == (0, 2)


def test_classification_alias_covers_both_results():
    assert isinstance(classify(b"A"), utf8clen.Classification)
    assert isinstance(classify(b"\x80"), utf8clen.Classification)
    assert isinstance(classify(b"\x80"), Invalid)


def test_sanitize_output_is_valid():
    assert utf8clen.is_valid_utf8(sanitize(b"\xff\x80abc\xe0\x80"))
