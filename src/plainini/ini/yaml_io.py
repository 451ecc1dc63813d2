# -*- encoding: utf-8 -*-
# @File   : yaml_io.py
# @Time   : 2024/10/14 00:12:55
# @Author : Kariko Lin

from collections.abc import Mapping
from os import PathLike
from os.path import isfile
from typing import Any

import yaml

from ..abstract import (
    FileHandler, IniError, IniFileNotFoundError, IniIOError
)
from .model import IniDocument, IniSection

__all__ = ['IniYamlParser', 'InvalidIniYaml']


class InvalidIniYaml(IniError):
    """The YAML file can't be read as an INI document."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class IniYamlParser(FileHandler[IniDocument]):
    """Dump an INI document as YAML (or load it back).

    The file holds two YAML documents, the global pairs first,
    then the sections:

        ```yaml
        key: val
        ---
        section:
          key233: val666
        ```

    Since YAML is typed, scalars like `1` or `yes` in a hand-written file
    are read back as `str(...)` of the loaded value, and `null` as `''`.
    """

    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def __to_str(val: Any) -> str:
        return '' if val is None else str(val)

    def read(self) -> IniDocument:
        if not isfile(self._fn):
            raise IniFileNotFoundError(f'File {self._fn} not found.')
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                docs = list(yaml.safe_load_all(fp))
        except OSError as e:
            raise IniIOError(
                f'An error occurred while reading the file: {self._fn}',
                self._fn) from e
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise InvalidIniYaml(
                f'{self._fn} is not a valid YAML file.', self._fn) from e
        if len(docs) > 2:
            raise InvalidIniYaml(
                f'{self._fn}: expected at most 2 YAML documents, '
                f'got {len(docs)}.', self._fn)
        # missing documents are fine, just empty.
        header, data = (docs + [None, None])[:2]
        ret = IniDocument()
        self.__fill(ret.global_section(), header, 'global pairs')
        for name, pairs in self.__check_mapping(data, 'sections').items():
            section = ret.get_or_create_section(self.__to_str(name))
            self.__fill(section, pairs, f'section [{name}]')
        return ret

    def __check_mapping(self, node: Any, what: str) -> Mapping:
        if node is None:
            return {}
        if not isinstance(node, Mapping):
            raise InvalidIniYaml(
                f'{self._fn}: {what} should be a mapping, '
                f'got {type(node).__name__}.', self._fn)
        return node

    def __fill(self, section: IniSection, node: Any, what: str) -> None:
        for k, v in self.__check_mapping(node, what).items():
            # no nested sections, nor lists.
            if isinstance(v, (Mapping, list)):
                raise InvalidIniYaml(
                    f'{self._fn}: {what} has a non-scalar value at "{k}".',
                    self._fn)
            section[self.__to_str(k)] = self.__to_str(v)

    def write(self, instance: IniDocument) -> None:
        # sort_keys=False, or we lose the declaration order.
        try:
            with open(self._fn, 'w', encoding=self._codec) as fp:
                yaml.safe_dump_all(
                    [instance.global_section().to_dict(), instance.to_dict()],
                    fp, allow_unicode=True, sort_keys=False)
        except OSError as e:
            raise IniIOError(
                f'An error occurred while writing to the file: {self._fn}',
                self._fn) from e
