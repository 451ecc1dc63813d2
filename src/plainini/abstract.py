# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/10/12 21:40:18
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from os import PathLike, fspath
from typing import Generic, TypeVar

__all__ = [
    'IniError', 'IniFileNotFoundError', 'InvalidArgumentError', 'IniIOError',
    'FileHandler'
]


class IniError(Exception):
    """Base of all errors raised by `plainini`.

    Note that malformed INI text is NOT an error: parsing never fails.
    """
    pass


class IniFileNotFoundError(IniError, FileNotFoundError):
    """Loading from a path which doesn't exist."""
    pass


class InvalidArgumentError(IniError, ValueError):
    """A blank (empty or whitespace-only) file path."""
    pass


class IniIOError(IniError, OSError):
    """Wraps the low-level `OSError` of reading or writing a file."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        # not `filename`, which would make OSError.__str__ drop the message.
        self.path = path


T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    def __init__(self, filename: str | PathLike[str]) -> None:
        fn = fspath(filename)
        if not fn or fn.isspace():
            raise InvalidArgumentError(
                'File name cannot be empty or whitespace.')
        self._fn = fn

    @property
    def filename(self) -> str:
        return self._fn

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
