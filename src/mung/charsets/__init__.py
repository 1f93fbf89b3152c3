"""Resolution of character set labels to decoders.

Labels come from untrusted places (MIME headers, mostly), so only real
text encodings are ever selected, and anything unrecognised decodes as
Latin-1 rather than failing.
"""
from .encodings import (
    CHARSET_ALIASES,
    FALLBACK_CHARSET,
    PYTHON_SPECIFIC_ENCODINGS,
    REPLACEMENT_CHARACTER,
    UNSAFE_ENCODINGS,
)
from .resolution import find_codec, resolve_decoder
