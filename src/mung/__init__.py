"""Mung - decoders for the escapes text picks up on its travels.

Mung turns text escaped by the common wire and document conventions
back into plain Unicode:

* HTML/XML character references: decode_entities("&amp;") == "&"
* URL percent-escapes (RFC 1738): decode_rfc1738("%25") == "%"
* MIME encoded words (RFC 2047): decode_rfc2047("=?utf-8?B?dGVzdA==?=") == "test"

None of the decoders ever raises. Anything that can't be decoded comes
out as REPLACEMENT CHARACTER, or as the undecoded text where that is the
conventional fallback, so one bad header or entity can't abort an
ingestion run.
"""

__version__ = "0.1.0"

__all__ = [
    "REPLACEMENT_CHARACTER",
    "decode_entities",
    "decode_rfc1738",
    "decode_rfc2047",
]

from .charsets import REPLACEMENT_CHARACTER
from .entities import decode_entities
from .rfc1738 import decode_rfc1738
from .rfc2047 import decode_rfc2047
