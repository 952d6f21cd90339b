# -*- encoding: utf-8 -*-
# @File   : store.py
# @Time   : 2024/10/14 23:05:52
# @Author : Kariko Lin

"""INI file bound get/set.

Every call re-reads the file, since it may be changed by someone else
between two calls. There is no locking at all: if two writers race
on the same file, the last one to replace it wins.
"""

import logging
from errno import ENOENT
from os import PathLike
from os.path import isfile
from typing import Any

from .ini import accessor
from .ini.model import IniDocument
from .ini.parser import IniParser

_log = logging.getLogger(__name__)


class IniFile(IniParser):
    """Get/set values of an INI file on disk.

    A relative `filename` is resolved against the working directory
    once on construction, not on each call.

    Reading a missing file raises `FileNotFoundError`, while writing
    creates it. I/O failures while writing are logged and
    turned into a `False` return.
    """
    def exists(self) -> bool:
        return isfile(self._fn)

    def __load(self) -> IniDocument:
        if not self.exists():
            raise FileNotFoundError(ENOENT, 'INI file not found', self._fn)
        return self.read()

    def try_get(
        self, section: str, key: str,
        default: Any = None, astype: type | None = None
    ) -> tuple[Any, bool]:
        """See `pyinistore.ini.accessor.try_get()`."""
        return accessor.try_get(self.__load(), section, key, default, astype)

    def get(
        self, section: str, key: str,
        default: Any = None, astype: type | None = None
    ) -> Any:
        return self.try_get(section, key, default, astype)[0]

    def sections(self) -> list[str]:
        return list(self.__load())

    def keys(self, section: str) -> list[str]:
        doc = self.__load()
        return list(doc[section]) if section in doc else []

    def create(self) -> bool:
        """Create an empty file if missing.

        Returns:
            `True` if the file exists now, `False` if failed to create it.
        """
        if self.exists():
            return True
        try:
            with open(self._fn, 'xb'):
                pass
        except FileExistsError:
            # created by someone else in the meantime.
            return True
        except OSError as e:
            _log.warning('unable to create %s: %s', self._fn, e)
            return False
        return True

    def set(self, section: str, key: str, value: str) -> bool:
        """Write `[section] key=value`.

        Invalid names or values raise before the file is touched
        (see `accessor.check_entry()`).

        Returns:
            `True` once the file is rewritten, otherwise `False`.
        """
        accessor.check_entry(section, key, value)
        if not self.create():
            return False
        try:
            doc = self.read()
            accessor.set_value(doc, section, key, value)
            self.write(doc)
        except (OSError, UnicodeError) as e:
            _log.warning('unable to write [%s] %s to %s: %s',
                         section, key, self._fn, e)
            return False
        return True

    def remove(self, section: str, key: str | None = None) -> bool:
        """Delete a key, or the whole section if `key` is None.

        Returns:
            `True` once removed and rewritten, `False` if nothing to remove
            or unable to rewrite.
        """
        if not self.exists():
            return False
        try:
            doc = self.read()
            if section not in doc:
                return False
            if key is None:
                del doc[section]
            elif key in doc[section]:
                del doc[section][key]
            else:
                return False
            self.write(doc)
        except (OSError, UnicodeError) as e:
            _log.warning('unable to remove [%s] %s from %s: %s',
                         section, key or '', self._fn, e)
            return False
        return True


def read_value(
    path: str | PathLike[str], section: str, key: str,
    default: Any = None, astype: type | None = None
) -> tuple[Any, bool]:
    """One-shot `IniFile(path).try_get(...)`."""
    return IniFile(path).try_get(section, key, default, astype)


def write_value(
    path: str | PathLike[str], section: str, key: str, value: str
) -> bool:
    """One-shot `IniFile(path).set(...)`."""
    return IniFile(path).set(section, key, value)
