import codecs
import logging
from functools import lru_cache

from ..models import CharsetDecoder, is_text_encoding
from .encodings import (
    CHARSET_ALIASES,
    FALLBACK_CHARSET,
    PYTHON_SPECIFIC_ENCODINGS,
    UNSAFE_ENCODINGS,
)

__all__ = ["find_codec", "resolve_decoder"]

log = logging.getLogger(__name__)


def _codec(charset):
    """Return `charset` if it names a text codec we're willing to use.

    :param charset: A candidate codec name.
    """
    if not charset:
        return None
    try:
        name = codecs.lookup(charset).name
    except (LookupError, ValueError):
        return None
    if name in PYTHON_SPECIFIC_ENCODINGS or name in UNSAFE_ENCODINGS:
        return None
    if not is_text_encoding(name):
        return None
    return charset


def find_codec(charset):
    """Convert the name of a character set to a codec name.

    :param charset: The name of a character set, as found in a
      document or header. Case and surrounding whitespace are ignored.
    :return: The name of a codec, or None if there isn't a usable one.
    """
    if not charset:
        return None
    charset = charset.strip().lower()
    value = (
        _codec(CHARSET_ALIASES.get(charset, charset))
        or _codec(charset.replace("-", ""))
        or _codec(charset.replace("-", "_"))
    )
    return value.lower() if value else None


@lru_cache(maxsize=256)
def resolve_decoder(label: str) -> CharsetDecoder:
    """Find a decoder for a character set label.

    Never fails: a label with no usable codec gets a Latin-1 decoder,
    flagged with `is_fallback`.

    :param label: A character set label such as "ISO-8859-1" or "big5".
    """
    codec = find_codec(label)
    if codec is None:
        log.debug("Unknown charset %r; falling back to %s.", label, FALLBACK_CHARSET)
        return CharsetDecoder(label=label, codec=FALLBACK_CHARSET, is_fallback=True)
    return CharsetDecoder(label=label, codec=codec)
