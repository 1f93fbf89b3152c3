"""
Decoding of MIME encoded words.

See: Message Header Extensions for Non-ASCII Text https://tools.ietf.org/html/rfc2047
See also: base64 https://tools.ietf.org/html/rfc2045#page-24
"""
import base64
import binascii
import logging
import re

from ..charsets import resolve_decoder
from ..models import EncodedWord
from .quoted_printable import decode_quoted_printable

__all__ = ["decode_rfc2047", "decode_encoded_word"]

log = logging.getLogger(__name__)

ENCODED_WORD = re.compile(r"=\?([^?]*)\?([^?]*)\?([^?]*)\?=")

# RFC 822 linear-white-space = 1*([CRLF] SPACE / HTAB)
LINEAR_WHITESPACE = re.compile(r"\?=[\n\r\t ]+=\?")


def _debase(payload):
    """Base64-decode an encoded word's payload.

    Missing "=" padding is forgiven, since plenty of mailers leave it
    off. Anything else wrong raises binascii.Error or ValueError.
    """
    return base64.b64decode(payload + "=" * (-len(payload) % 4), validate=True)


def decode_encoded_word(word: EncodedWord) -> str:
    """Decode a single encoded word.

    If the word can't be decoded (bad base64, or a transfer encoding
    other than B or Q) its payload is returned as ordinary text, as
    RFC 2047 section 6.2 suggests.
    """
    if word.is_base64:
        try:
            data = _debase(word.payload)
        except (binascii.Error, ValueError) as e:
            log.warning("Could not base64-decode %r: %s", word.payload, e)
            return word.payload
        if word.charset == "utf-8":
            return data.decode("utf-8", "replace")
        return resolve_decoder(word.charset).decode(data)
    if word.is_quoted_printable:
        return decode_quoted_printable(word.payload, word.charset)
    log.warning(
        "Unknown transfer encoding %r; leaving %r undecoded.",
        word.encoding,
        word.payload,
    )
    return word.payload


def _substitute_encoded_word(matchobj):
    return decode_encoded_word(EncodedWord.from_match(matchobj))


def decode_rfc2047(text: str) -> str:
    """Decode RFC 2047 encoded words into Unicode.

    For those unfamiliar, a base64 encoded Latin alphabet no. 1 string:

     =?ISO-8859-1?B?SWYgeW91IGNhbiByZWFkIHRoaXMgeW91IHVuZGVyc3RhbmQgdGhlIGV4YW1wbGUu?=

    decodes to "If you can read this you understand the example."

    Whitespace between two adjacent encoded words is dropped, so a
    string split over several words (and header lines) is joined back
    together. Text outside encoded words is left exactly as it was.

    >>> decode_rfc2047("From: =?US-ASCII?Q?Keith_Moore?= <moore@cs.utk.edu>")
    'From: Keith Moore <moore@cs.utk.edu>'

    :param text: A header value, or any other Unicode string.
    :return: `text` itself if it contains no encoded words.
    """
    if not ENCODED_WORD.search(text):
        return text
    text = LINEAR_WHITESPACE.sub("?==?", text)
    return ENCODED_WORD.sub(_substitute_encoded_word, text)
