from .encoded_word import decode_encoded_word, decode_rfc2047
from .quoted_printable import decode_quoted_printable
