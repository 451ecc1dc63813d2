# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/12 23:31:09
# @Author : Kariko Lin

"""Text <-> `IniDocument`.

The grammar is deliberately loose, any line we can't understand
gets skipped rather than raising:

    ```ini
    ; comment, so is `# comment`
    key = value      ; global pair, before any header
    [section]        ; header, then pairs below belong to it
    url = http://host/?a=b   ; split at the FIRST `=` only
    what is this     ; no `=`, ignored
    ```
"""

import logging
from io import StringIO, TextIOBase
from os import PathLike
from os.path import isfile
from warnings import warn

import chardet

from ..abstract import FileHandler, IniFileNotFoundError, IniIOError
from .escape import decode_value, encode_value
from .model import IniDocument, IniSection

__all__ = ['parse', 'dump', 'IniFileParser']


def parse(
    source: str, *,
    escape: bool = False,
    into: IniDocument | None = None
) -> IniDocument:
    """Parse INI text (LF or CRLF separated).

    Args:
        escape: decode backslash sequences in values,
            see `plainini.ini.escape`.
        into: parse into an existing document instead of a new one.
    """
    ret = IniDocument() if into is None else into
    this_sect: IniSection = ret.global_section()
    for lineno, line in enumerate(source.split('\n'), 1):
        # `\r` of CRLF goes with the whitespaces.
        line = line.strip()
        if not line:
            continue
        if line[0] == '[' and line[-1] == ']':
            name = line[1:-1].strip()
            if name in ret and len(ret[name]) > 0:
                warn(f'[{name}] 在第 {lineno} 行被重复声明，'
                     f'之前读到的 {len(ret[name])} 个键值对将被丢弃。')
            this_sect = IniSection(name)
            ret.set_section(name, this_sect)
        elif line[0] in (';', '#') or '=' not in line:
            logging.debug(f'skipped line {lineno}: {line}')
        else:
            key, val = line.split('=', 1)
            val = val.strip()
            this_sect[key.strip()] = decode_value(val) if escape else val
    return ret


def _dump_pairs(section: IniSection, escape: bool) -> str:
    return ''.join(
        f'{k} = {encode_value(v) if escape else v}\n'
        for k, v in section.items())


def dump(doc: IniDocument, *, escape: bool = False) -> str:
    """Render as INI text: global pairs first,
    then each section after a blank line."""
    ret = _dump_pairs(doc.global_section(), escape)
    for section in doc.enumerate_sections():
        ret += f'\n[{section.name}]\n'
        ret += _dump_pairs(section, escape)
    return ret


class IniFileParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str | None = None, *,
        escape: bool = False
    ) -> None:
        super().__init__(filename)
        self._codec = encoding
        self._escape = escape

    def readstream(
        self, buf: TextIOBase, ins: IniDocument | None = None
    ) -> IniDocument:
        """读取解码好的字符串流。

        如没有特殊需求，直接调用`self.read()`便是。
        """
        return parse(buf.read(), escape=self._escape, into=ins)

    def _decode_file(self) -> StringIO:
        with open(self._fn, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}
        logging.warning(
            f'{self._fn} is not {self._codec or "system default"} encoded, '
            f'retry with {codec["encoding"]}.')

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            buf = raw.decode('latin-1')
        return StringIO(buf)

    def readinto(self, ins: IniDocument | None = None) -> IniDocument:
        if not isfile(self._fn):
            raise IniFileNotFoundError(f'File {self._fn} not found.')
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            try:
                with open(self._fn, 'r', encoding=self._codec,
                          newline='') as fp:
                    ret = self.readstream(fp, ins)
            except UnicodeDecodeError:
                ret = self.readstream(self._decode_file(), ins)
        except OSError as e:
            raise IniIOError(
                f'An error occurred while reading the file: {self._fn}',
                self._fn) from e
        logging.info(f'loaded {self._fn}: {ret!r}')
        return ret

    def read(self) -> IniDocument:
        return self.readinto()

    def write(self, instance: IniDocument) -> None:
        """Overwrite the file with `dump(instance)`, always `\\n` ended."""
        text = dump(instance, escape=self._escape)
        try:
            with open(self._fn, 'w', encoding=self._codec or 'utf-8',
                      newline='\n') as fp:
                fp.write(text)
        except OSError as e:
            raise IniIOError(
                f'An error occurred while writing to the file: {self._fn}',
                self._fn) from e
        logging.info(f'saved {self._fn}: {instance!r}')

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"
