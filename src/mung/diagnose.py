"""Diagnostic functions, mainly for use when doing tech support."""

import cProfile
import pstats
import random
import sys
import tempfile
import time
import traceback

import mung
from mung import __version__, decode_entities, decode_rfc1738, decode_rfc2047
from mung.charsets import resolve_decoder
from mung.models import EncodedWord
from mung.rfc2047.encoded_word import ENCODED_WORD

_vowels = "aeiou"
_consonants = "bcdfghjklmnpqrstvwxyz"

DECODERS = {
    "decode_entities": decode_entities,
    "decode_rfc1738": decode_rfc1738,
    "decode_rfc2047": decode_rfc2047,
}


def diagnose(data):
    """Diagnostic suite for isolating common problems.

    :param data: A string (or file-like object) containing escaped text
      that needs to be explained.
    :return: None; diagnostics are printed to standard output.
    """
    print(f"Diagnostic running on Mung {__version__}")
    print(f"Python version {sys.version}")
    if hasattr(data, "read"):
        data = data.read()
    words = [EncodedWord.from_match(m) for m in ENCODED_WORD.finditer(data)]
    if words:
        print("Found %d encoded word(s):" % len(words))
    for word in words:
        decoder = resolve_decoder(word.charset)
        if decoder.is_fallback:
            codec = "%s (fallback, charset not recognised)" % decoder.codec
        else:
            codec = decoder.codec
        print(f"  charset={word.charset!r} codec={codec} encoding={word.encoding!r}")
    for name, decoder in DECODERS.items():
        print("Trying to decode your text with %s" % name)
        success = False
        try:
            result = decoder(data)
            success = True
        except Exception:
            print("%s could not decode the text." % name)
            traceback.print_exc()
        if success and result == data:
            print("%s left the text unchanged." % name)
        elif success:
            print("Here's what %s did with the text:" % name)
            print(result)
        print("-" * 80)


def rword(length=5):
    "Generate a random word-like string."
    s = ""
    for i in range(length):
        if i % 2 == 0:
            t = _consonants
        else:
            t = _vowels
        s += random.choice(t)
    return s


def rsentence(length=4):
    "Generate a random sentence-like string."
    return " ".join(rword(random.randint(4, 9)) for i in range(length))


def rdoc(num_elements=1000):
    """Randomly generate text full of entities, percent-escapes and
    encoded words, some of them broken."""
    entities = ["&amp;", "&amp;amp;", "&#38;", "&#x2665;", "&eacute;", "&fred;"]
    triplets = ["%20", "%c3%a7", "%e2%80%99", "%zz"]
    words = [
        "=?utf-8?B?dGVzdA==?=",
        "=?ISO-8859-1?Q?Keld_J=F8rn?=",
        "=?big5?Q?=A4=A3=AA=E1?=",
        "=?utf-8?z?dGVzdA==?=",
    ]
    elements = []
    for i in range(num_elements):
        choice = random.randint(0, 3)
        if choice == 0:
            elements.append(random.choice(entities))
        elif choice == 1:
            elements.append(rsentence(random.randint(1, 4)))
        elif choice == 2:
            elements.append(random.choice(triplets))
        else:
            elements.append(random.choice(words))
    return " ".join(elements)


def benchmark_decoders(num_elements=100000):
    """Very basic head-to-head performance benchmark."""
    print("Comparative decoder benchmark on Mung %s" % __version__)
    data = rdoc(num_elements)
    print("Generated a large escaped document (%d characters)." % len(data))

    for name, decoder in DECODERS.items():
        a = time.time()
        decoder(data)
        b = time.time()
        print(f"{name} decoded the text in {b - a:.2f}s.")


def profile(num_elements=100000, decoder="decode_rfc2047"):
    """Use Python's profiler on a randomly generated document."""
    data = rdoc(num_elements)
    vars = dict(mung=mung, data=data)
    with tempfile.NamedTemporaryFile() as filehandle:
        cProfile.runctx(f"mung.{decoder}(data)", vars, vars, filehandle.name)
        stats = pstats.Stats(filehandle.name)
    stats.sort_stats("cumulative")
    stats.print_stats("mung", 50)


def diagnose_text():
    """If this file is run as a script, standard input is diagnosed."""
    diagnose(sys.stdin.read())


if __name__ == "__main__":
    diagnose_text()
