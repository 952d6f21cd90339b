# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/09/08 20:22:30
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from os import PathLike, fspath
from os.path import abspath
from typing import Generic, TypeVar

from .errors import InvalidPath

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    def __init__(self, filename: str | PathLike[str]) -> None:
        filename = fspath(filename)
        if not filename or filename.isspace():
            raise InvalidPath('file path must not be empty.')
        # resolved once, so a later `chdir()` won't move the file.
        self._fn = abspath(filename)

    @property
    def path(self) -> str:
        return self._fn

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
