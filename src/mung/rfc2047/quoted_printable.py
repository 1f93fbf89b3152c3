import re

from ..charsets import resolve_decoder

__all__ = ["decode_quoted_printable"]

NEEDS_DECODING = re.compile(r"=[0-9a-fA-F]{2}|_")
ESCAPES = re.compile(rb"=([0-9a-fA-F]{2})|_")


def _substitute_escape(matchobj):
    digits = matchobj.group(1)
    if digits is None:
        # "_" always means a space in a header, whatever the charset.
        return b" "
    return bytes([int(digits, 16)])


def decode_quoted_printable(payload: str, charset_label: str) -> str:
    """Decode the payload of a "Q" encoded word.

    `=XX` escapes become the bytes they name and underscores become
    spaces; the bytes are then decoded with the word's charset, or
    Latin-1 if the charset is unknown.

    >>> decode_quoted_printable("Keld_J=F8rn", "ISO-8859-1")
    'Keld Jørn'

    :param payload: The text between the third and fourth "?" of an
      encoded word.
    :param charset_label: The charset the word declares.
    :return: `payload` itself if it has nothing to decode.
    """
    if not NEEDS_DECODING.search(payload):
        return payload
    decoder = resolve_decoder(charset_label)
    data = ESCAPES.sub(_substitute_escape, payload.encode("utf-8", "surrogatepass"))
    return decoder.decode(data)
