"""
The named character references understood by the entity decoder.

HTML 4 defines 252 named entities (ISO 8859-1 characters, symbols and
Greek letters, markup-significant and internationalisation characters):
https://www.w3.org/TR/html4/sgml/entities.html

XML 1.0 adds one more, &apos;, which HTML 4 lacks but which turns up in
plenty of XHTML and feed content:
https://www.w3.org/TR/xml/#sec-predefined-ent

The HTML5 list is deliberately not used; its two thousand-odd names
include semicolon-less legacy forms that would change what counts as a
reference.
"""
from html.entities import name2codepoint
from types import MappingProxyType

__all__ = ["ENTITIES"]


def _populate_entities():
    """Build the name -> replacement text mapping.

    Keys are case-sensitive (&Eacute; and &eacute; differ) and carry no
    leading ampersand or trailing semicolon.
    """
    entities = {name: chr(codepoint) for name, codepoint in name2codepoint.items()}
    entities["apos"] = "'"
    return MappingProxyType(entities)


ENTITIES = _populate_entities()
