"""
Decoding of URL percent-escapes (RFC 1738).

See: Uniform Resource Locators https://tools.ietf.org/html/rfc1738
"""
import logging
import re

from .charsets.encodings import REPLACEMENT_CHARACTER

__all__ = ["decode_rfc1738"]

log = logging.getLogger(__name__)

HAS_TRIPLETS = re.compile(r"%[a-zA-Z0-9][a-zA-Z0-9]")
TRIPLETS = re.compile(rb"%([a-zA-Z0-9][a-zA-Z0-9])")

HEXDIGITS = frozenset(b"0123456789abcdefABCDEF")

# A triplet like %zz that isn't hex: U+FFFD cut down to a byte. 0xFD
# can never start valid UTF-8, so it decodes as REPLACEMENT CHARACTER.
INVALID_TRIPLET_BYTE = bytes([ord(REPLACEMENT_CHARACTER) & 0xFF])


def _substitute_triplet(matchobj):
    digits = matchobj.group(1)
    if not HEXDIGITS.issuperset(digits):
        return INVALID_TRIPLET_BYTE
    return bytes([int(digits, 16)])


def decode_rfc1738(text: str) -> str:
    """Decode URL character sequences that are escaped into their UTF-8 form.

    Every triplet is turned into a byte first, and the bytes are decoded
    as UTF-8 together, so a character split over several triplets comes
    back whole:

    >>> decode_rfc1738("Fran%c3%a7ois")
    'François'
    >>> decode_rfc1738("/end_point/%3Fsource%3D%2Fdata%20here")
    '/end_point/?source=/data here'

    :param text: A Unicode string.
    :return: `text` itself if it contains no triplets, otherwise a new
      string. Bytes that aren't valid UTF-8 become REPLACEMENT CHARACTER.
    """
    if not HAS_TRIPLETS.search(text):
        return text
    data = TRIPLETS.sub(_substitute_triplet, text.encode("utf-8", "surrogatepass"))
    decoded = data.decode("utf-8", "replace")
    if REPLACEMENT_CHARACTER in decoded and REPLACEMENT_CHARACTER not in text:
        log.debug("Percent-decoded text was not valid UTF-8: %r", text)
    return decoded
