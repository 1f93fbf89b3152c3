"""
Constants governing how character set labels become Python codecs.
"""

__all__ = [
    "CHARSET_ALIASES",
    "FALLBACK_CHARSET",
    "PYTHON_SPECIFIC_ENCODINGS",
    "REPLACEMENT_CHARACTER",
    "UNSAFE_ENCODINGS",
]

# Substituted for any byte or code point that can't be decoded.
REPLACEMENT_CHARACTER = "\N{REPLACEMENT CHARACTER}"

# Used when a label names no codec we're willing to use. Latin-1 maps
# every byte to a character, so it can't fail.
FALLBACK_CHARSET = "latin-1"

# This dictionary maps commonly seen charset labels to the
# corresponding Python codec names. It only covers values that aren't
# in Python's aliases, or where Python's codec is narrower than what
# mail and web software actually emit under that label.
CHARSET_ALIASES = {
    "macintosh": "mac-roman",
    "x-sjis": "shift-jis",
    "x-gbk": "gbk",
    "gb2312": "gbk",
    "ks_c_5601-1987": "cp949",
    "unicode-1-1-utf-8": "utf-8",
}

# These encodings are recognized by Python, but no real document or
# message declares them, so a label naming one is treated as unknown.
#
# Source:
# https://docs.python.org/3/library/codecs.html#python-specific-encodings
PYTHON_SPECIFIC_ENCODINGS = {
    "idna",
    "mbcs",
    "oem",
    "palmos",
    "punycode",
    "raw_unicode_escape",
    "undefined",
    "unicode_escape",
    "raw-unicode-escape",
    "unicode-escape",
    "string-escape",
    "string_escape",
}

# UTF-7 can smuggle markup past filters that only look at ASCII.
UNSAFE_ENCODINGS = {"utf-7", "utf7", "x-utf-7"}
