# -*- encoding: utf-8 -*-
# @File   : escape.py
# @Time   : 2024/10/13 15:02:41
# @Author : Kariko Lin

"""Backslash escaping of INI values.

Only used when `escape=True` is given to the parser and serializer.
Both sides of a file should agree on it, otherwise the literal
`\\n`, `\\s` etc. would be kept in values.

    | raw             | escaped |
    |-----------------|---------|
    | `\\`            | `\\\\`  |
    | CR              | `\\r`   |
    | LF              | `\\n`   |
    | TAB             | `\\t`   |
    | leading/trailing space | `\\s` |

The parser trims every kind of whitespace (`str.strip()`), but only
the ones above have an escape. So a value starting or ending with
e.g. `\\x0b`, `\\x0c` or NBSP (`\\xa0`) still loses it on the way back.
"""

__all__ = ['encode_value', 'decode_value']

_ENCODE_TABLE = str.maketrans({
    '\\': '\\\\',
    '\r': '\\r',
    '\n': '\\n',
    '\t': '\\t',
})

_DECODE_TABLE = {
    '\\': '\\',
    'r': '\r',
    'n': '\n',
    't': '\t',
    's': ' ',
}


def encode_value(value: str) -> str:
    ret = value.translate(_ENCODE_TABLE)
    # interior spaces survive `str.strip()` in the parser, edges don't.
    body = ret.strip(' ')
    if not body:
        return '\\s' * len(ret)
    lead = len(ret) - len(ret.lstrip(' '))
    trail = len(ret) - len(ret.rstrip(' '))
    return '\\s' * lead + body + '\\s' * trail


def decode_value(value: str) -> str:
    """Single pass, left to right.

    Unknown sequences like `\\x` (and a lone trailing backslash)
    are kept as is.
    """
    if '\\' not in value:
        return value
    buf: list[str] = []
    i = 0
    while i < len(value):
        c = value[i]
        if c == '\\' and i + 1 < len(value):
            nxt = value[i + 1]
            if nxt in _DECODE_TABLE:
                buf.append(_DECODE_TABLE[nxt])
                i += 2
                continue
        buf.append(c)
        i += 1
    return ''.join(buf)
