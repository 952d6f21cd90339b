# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/14 22:31:08
# @Author : Kariko Lin

"""Exceptions raised by the INI store.

Missing files are reported with the builtin `FileNotFoundError`,
and I/O failures on the write path never leave `IniFile.set()`
(they end up as a `False` return instead).
"""


class IniError(Exception):
    """Base of all INI store errors."""
    pass


class InvalidPath(IniError, ValueError):
    """Empty or blank file path given to a file handler."""
    pass


class InvalidName(IniError, ValueError):
    """Section or key name that would break the `[section]`/`key=value` layout."""
    pass


class InvalidValue(IniError, ValueError):
    """Value that could not be read back verbatim once written."""
    pass


class ConversionFailure(IniError, ValueError):
    """Raw string not convertible to the requested type.

    `try_get()` folds this into a `(default, False)` result.
    """
    pass
