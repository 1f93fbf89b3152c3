"""Helper classes for tests."""


class DecoderTest:
    """A base class for decoder tests, with helpers for the "nothing to
    decode" cases."""

    def assert_unchanged(self, decoder, text, *args):
        """Decoding `text` gives back equal text."""
        assert decoder(text, *args) == text

    def assert_decodes(self, decoder, text, expected, *args):
        result = decoder(text, *args)
        assert result == expected
        # Whatever went in, the output must be text.
        assert isinstance(result, str)
