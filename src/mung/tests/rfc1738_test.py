"""Tests of the URL percent-escape decoder."""

import logging

import pytest

from mung import decode_rfc1738

from . import DecoderTest


class TestDecodeRFC1738(DecoderTest):
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("%25", "%"),
            # From https://www.w3.org/International/O-URL-code.html
            ("Fran%c3%a7ois", "François"),
            ("Fran%C3%A7ois", "François"),
            # From PSN Store URLs
            ("assassin%27s-creed-chronicles-china", "assassin's-creed-chronicles-china"),
            (
                "assassin%e2%80%99s-creed-chronicles-russia",
                "assassin’s-creed-chronicles-russia",
            ),
            ("/end_point/%3Fsource%3D%2Fdata%20here", "/end_point/?source=/data here"),
            ("%F0%9F%98%80", "😀"),
            ("%2525", "%25"),
            ("caf%C3%A9 café", "café café"),
        ],
    )
    def test_decode(self, text, expected):
        self.assert_decodes(decode_rfc1738, text, expected)

    @pytest.mark.parametrize("text", ["", "plain", "100%", "%", "%a", "%%", "a+b", "%-1"])
    def test_nothing_to_decode(self, text):
        self.assert_unchanged(decode_rfc1738, text)

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("%zz", "\ufffd"),
            ("%g1", "\ufffd"),
            ("a%zzb", "a\ufffdb"),
            # A lone lead byte, and a lead byte cut short.
            ("%c3", "\ufffd"),
            ("%c3x", "\ufffdx"),
            ("%ff%fe", "\ufffd\ufffd"),
        ],
    )
    def test_invalid_input_becomes_replacement_character(self, text, expected):
        assert decode_rfc1738(text) == expected

    def test_lone_surrogate_does_not_raise(self):
        assert decode_rfc1738("\ud800%20") == "\ufffd\ufffd\ufffd "

    def test_invalid_utf8_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="mung.rfc1738"):
            decode_rfc1738("%ff")
        assert "not valid UTF-8" in caplog.text
