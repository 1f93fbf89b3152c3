import re

from ..charsets.encodings import REPLACEMENT_CHARACTER
from .table import ENTITIES

__all__ = ["EntitySubstitution", "decode_entities"]


class EntitySubstitution:
    """The ability to replace HTML or XML character references with the
    characters they stand for."""

    HTML_ENTITY_TO_CHARACTER = ENTITIES

    NAMED_ENTITY_RE = re.compile(r"&([a-zA-Z0-9]+);")
    DECIMAL_ENTITY_RE = re.compile(r"&#([0-9]+);")
    HEXADECIMAL_ENTITY_RE = re.compile(r"&#x([0-9a-fA-F]+);")

    # Anything one of the three substitutions below would act on.
    ANY_ENTITY_RE = re.compile(r"&(?:[a-zA-Z0-9]+|#[0-9]+|#x[0-9a-fA-F]+);")

    @staticmethod
    def _character(digits, base):
        """Turn the digits of a numeric reference into a character, or
        the replacement character if they aren't a Unicode scalar value."""
        digits = digits.lstrip("0") or "0"
        # U+10FFFF is seven decimal digits, six hex digits.
        if len(digits) > (7 if base == 10 else 6):
            return REPLACEMENT_CHARACTER
        codepoint = int(digits, base)
        if codepoint > 0x10FFFF or 0xD800 <= codepoint <= 0xDFFF:
            return REPLACEMENT_CHARACTER
        return chr(codepoint)

    @classmethod
    def _substitute_named_entity(cls, matchobj):
        """Used with a regular expression to substitute the character
        for a named entity.

        An unknown name comes back as the bare name, without the
        ampersand and semicolon; leaving it delimited would make it
        match again on every pass.
        """
        name = matchobj.group(1)
        return cls.HTML_ENTITY_TO_CHARACTER.get(name, name)

    @classmethod
    def _substitute_decimal_entity(cls, matchobj):
        return cls._character(matchobj.group(1), 10)

    @classmethod
    def _substitute_hexadecimal_entity(cls, matchobj):
        return cls._character(matchobj.group(1), 16)

    @classmethod
    def decode(cls, value):
        """Replace every character reference in `value`.

        Decoding repeats until no reference is left, because decoding
        one can reveal another: "&amp;amp;" becomes "&amp;" and then
        "&", and "&#38;#38;" becomes "&#38;" and then "&".

        :param value: A Unicode string.
        :return: `value` itself if it contains no references, otherwise
          a new string.
        """
        while cls.ANY_ENTITY_RE.search(value):
            value = cls.NAMED_ENTITY_RE.sub(cls._substitute_named_entity, value)
            value = cls.DECIMAL_ENTITY_RE.sub(cls._substitute_decimal_entity, value)
            value = cls.HEXADECIMAL_ENTITY_RE.sub(
                cls._substitute_hexadecimal_entity, value
            )
        return value


def decode_entities(text: str) -> str:
    """Decode HTML/XML entities into the characters they represent.

    >>> decode_entities("Best &amp; the Worst of Times")
    'Best & the Worst of Times'
    """
    return EntitySubstitution.decode(text)
