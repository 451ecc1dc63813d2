"""Tests for the value escape codec."""

import pytest

from plainini.ini.escape import decode_value, encode_value


@pytest.mark.parametrize('raw, escaped', [
    ('plain', 'plain'),
    ('a b', 'a b'),
    ('C:\\dir', 'C:\\\\dir'),
    ('a\rb', 'a\\rb'),
    ('a\nb', 'a\\nb'),
    ('a\tb', 'a\\tb'),
    (' lead', '\\slead'),
    ('trail  ', 'trail\\s\\s'),
    ('  ', '\\s\\s'),
    ('', ''),
])
def test_encode(raw, escaped):
    assert encode_value(raw) == escaped


def test_decode_known_sequences():
    assert decode_value('\\\\\\r\\n\\t\\s') == '\\\r\n\t '


def test_decode_backslash_first():
    # `\\n` is an escaped backslash followed by `n`, not a line break.
    assert decode_value('\\\\n') == '\\n'


def test_decode_keeps_unknown_sequences():
    assert decode_value('\\x\\') == '\\x\\'


def test_decode_plain_untouched():
    assert decode_value('no escapes here') == 'no escapes here'
