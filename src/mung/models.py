import codecs

from pydantic import BaseModel, ConfigDict, field_validator

__all__ = ["Record", "EncodedWord", "CharsetDecoder", "is_text_encoding"]


def is_text_encoding(codec):
    """Does `codec` name a codec that turns bytes into str?

    Bytes-to-bytes codecs like zlib, base64 and rot13 are registered
    with `codecs` too, but bytes.decode() refuses them. Empty input
    never reaches the codec, so the check decodes a real byte.
    """
    try:
        codecs.lookup(codec)
        b"a".decode(codec, "replace")
    except (LookupError, ValueError):
        return False
    return True


class Record(BaseModel):
    """
    Base model for the small immutable records passed between decoders.
    """

    model_config = ConfigDict(frozen=True)


class EncodedWord(Record):
    """
    One RFC 2047 `=?charset?encoding?payload?=` token found in a header.

    The charset and encoding are compared case-insensitively, so both are
    stored lower-cased. The payload is kept exactly as written.
    """

    charset: str
    encoding: str
    payload: str

    @field_validator("charset", "encoding")
    @classmethod
    def lowercase(cls, value: str) -> str:
        return value.lower()

    @classmethod
    def from_match(cls, match) -> "EncodedWord":
        charset, encoding, payload = match.groups()
        return cls(charset=charset, encoding=encoding, payload=payload)

    @property
    def is_base64(self) -> bool:
        return self.encoding == "b"

    @property
    def is_quoted_printable(self) -> bool:
        return self.encoding == "q"


class CharsetDecoder(Record):
    """
    Turns bytes in some character set into a string, replacing anything
    undecodable with REPLACEMENT CHARACTER.

    `label` is what was asked for; `codec` is the Python codec actually
    used, which is the fallback codec when `is_fallback` is set.
    Only codecs that turn bytes into str are accepted.
    """

    label: str
    codec: str
    is_fallback: bool = False

    @field_validator("codec")
    @classmethod
    def text_codec(cls, value: str) -> str:
        if not is_text_encoding(value):
            raise ValueError(f"{value!r} is not a text encoding")
        return value

    def decode(self, data: bytes) -> str:
        return data.decode(self.codec, "replace")
