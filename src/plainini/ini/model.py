# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 22:07:36
# @Author : Kariko Lin

"""
Basically INI structure: one global (headless) section,
plus named sections in the order they were declared.

    ```ini
    key = val  ; use `doc.global_section()` to access these.

    [section]
    key233 = val666
    ```
"""

from collections.abc import Mapping, MutableMapping
from os import PathLike
from typing import Iterator

__all__ = ['IniSection', 'IniDocument']


class IniSection(MutableMapping[str, str]):
    """INI section, an *ordered* dict of `str: str` pairs.

    Missing keys read as empty string instead of `KeyError`,
    but reading never inserts them.
    """

    def __init__(
        self, section_name: str = '', /,
        pairs_to_import: Mapping[str, str] | None = None
    ) -> None:
        self._name = section_name
        self._data: dict[str, str] = {}
        if pairs_to_import:
            self.update(pairs_to_import)

    @property
    def name(self) -> str:
        """Empty for the global section."""
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data.get(key, '')

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    # the mixins below rely on KeyError, which `__getitem__` never raises.
    def get(self, key: str, default: str | None = None) -> str | None:
        return self._data.get(key, default)

    def pop(self, key: str, *default: str) -> str:
        return self._data.pop(key, *default)

    def setdefault(self, key: str, default: str = '') -> str:
        return self._data.setdefault(key, str(default))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IniSection):
            return self._name == other._name and self._data == other._data
        return super().__eq__(other)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()

    def copy(self, section_name: str | None = None) -> 'IniSection':
        return IniSection(
            self._name if section_name is None else section_name,
            self._data)


class IniDocument(MutableMapping[str, IniSection]):
    """INI document. As a mapping, it only covers the *named* sections;
    the global one lives aside and is reached by `self.global_section()`.

    `self[name]` raises `KeyError` for unknown sections.
    Use `self.get_or_create_section(name)` when creating one is intended.
    """

    def __init__(self) -> None:
        self.__header = IniSection()
        self.__raw: dict[str, IniSection] = {}

    @property
    def header(self) -> IniSection:
        """Pairs not belonging to any section."""
        return self.__header

    def global_section(self) -> IniSection:
        return self.__header

    def get_or_create_section(self, name: str) -> IniSection:
        """Get the section `name`.

        CAUTION: if not found, an empty section gets created
        and registered, even if you only meant to read from it.
        """
        if name not in self.__raw:
            self.__raw[name] = IniSection(name)
        return self.__raw[name]

    def set_section(
        self, name: str, section: IniSection | Mapping[str, str]
    ) -> None:
        """Insert or replace the section `name`.

        A section declared with another name gets copied under `name`,
        and so does a plain mapping.
        """
        if not isinstance(section, IniSection):
            section = IniSection(name, section)
        elif section.name != name:
            section = section.copy(name)
        self.__raw[name] = section

    def enumerate_sections(self) -> list[IniSection]:
        """Named sections in declaration order, global one excluded."""
        return list(self.__raw.values())

    def __getitem__(self, key: str) -> IniSection:
        return self.__raw[key]

    def __setitem__(
        self, key: str, value: IniSection | Mapping[str, str]
    ) -> None:
        self.set_section(key, value)

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __len__(self) -> int:
        return len(self.__raw)

    def remove_section(self, name: str) -> bool:
        if name not in self.__raw:
            return False
        del self.__raw[name]
        return True

    def rename_section(self, old: str, new: str) -> bool:
        """Rename a section, keeping its position.

        Returns:
            `True` if succeed, otherwise `False`.
            May not success if `old` is not found or `new` already exists.
        """
        if old not in self.__raw or new in self.__raw:
            return False
        section = self.__raw[old]
        # same object, so references held by callers stay attached.
        section._name = new
        self.__raw = {
            (new if k == old else k): v for k, v in self.__raw.items()
        }
        return True

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IniDocument):
            return (self.__header == other.__header
                    and self.__raw == other.__raw)
        return NotImplemented

    def clear(self) -> None:
        self.__header.clear()
        self.__raw.clear()

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Plain dict snapshot of the named sections."""
        return {k: v.to_dict() for k, v in self.__raw.items()}

    # text / file shortcuts, see `plainini.ini.parser`.

    @classmethod
    def load(cls, source: str, *, escape: bool = False) -> 'IniDocument':
        from .parser import parse
        return parse(source, escape=escape, into=cls())

    @classmethod
    def load_from_file(
        cls, filename: str | PathLike[str],
        encoding: str | None = None, *, escape: bool = False
    ) -> 'IniDocument':
        from .parser import IniFileParser
        return IniFileParser(filename, encoding, escape=escape).readinto(cls())

    def to_text(self, *, escape: bool = False) -> str:
        from .parser import dump
        return dump(self, escape=escape)

    def save_to_path(
        self, filename: str | PathLike[str],
        encoding: str = 'utf-8', *, escape: bool = False
    ) -> None:
        from .parser import IniFileParser
        IniFileParser(filename, encoding, escape=escape).write(self)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return '<IniDocument { .global = %d, .sections = %d }>' % (
            len(self.__header), len(self.__raw))
