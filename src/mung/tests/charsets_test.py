import logging

import pytest

from mung.charsets import FALLBACK_CHARSET, find_codec, resolve_decoder


class TestFindCodec:
    @pytest.mark.parametrize(
        "charset,codec",
        [
            ("utf-8", "utf-8"),
            ("UTF-8", "utf-8"),
            ("  UTF-8 ", "utf-8"),
            ("utf8", "utf8"),
            ("ISO-8859-1", "iso-8859-1"),
            ("iso-8859-8", "iso-8859-8"),
            ("big5", "big5"),
            ("GB2312", "gbk"),
            ("macintosh", "mac-roman"),
            ("x-sjis", "shift-jis"),
            ("ks_c_5601-1987", "cp949"),
        ],
    )
    def test_known_charsets(self, charset, codec):
        assert find_codec(charset) == codec

    @pytest.mark.parametrize(
        "charset",
        [
            None,
            "",
            "zalgo-he-comes",
            # Python-specific pseudo-encodings
            "idna",
            "punycode",
            "unicode_escape",
            "raw-unicode-escape",
            # Not text encodings at all
            "base64",
            "zlib",
            "rot13",
            "hex",
            # Unsafe
            "utf-7",
            "UTF7",
        ],
    )
    def test_unusable_charsets(self, charset):
        assert find_codec(charset) is None


class TestResolveDecoder:
    def test_known_charset(self):
        decoder = resolve_decoder("ISO-8859-8")
        assert decoder.label == "ISO-8859-8"
        assert decoder.codec == "iso-8859-8"
        assert not decoder.is_fallback
        assert decoder.decode(b"\xf8") == "ר"

    def test_unknown_charset_falls_back_to_latin_1(self):
        decoder = resolve_decoder("zalgo-he-comes")
        assert decoder.codec == FALLBACK_CHARSET
        assert decoder.is_fallback
        assert decoder.decode(bytes(range(256))) == bytes(range(256)).decode("latin-1")

    def test_fallback_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="mung.charsets"):
            resolve_decoder("never-heard-of-this-one")
        assert "never-heard-of-this-one" in caplog.text

    def test_decoders_are_reused(self):
        assert resolve_decoder("big5") is resolve_decoder("big5")

    def test_decode_never_raises(self):
        assert resolve_decoder("utf-8").decode(b"\xff\xfe") == "\ufffd\ufffd"
        assert resolve_decoder("utf-16").decode(b"\x00") == "\ufffd"
        assert resolve_decoder("us-ascii").decode(b"caf\xe9") == "caf\ufffd"
