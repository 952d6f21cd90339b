# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/14 23:40:11
# @Author : Kariko Lin

from .errors import (
    IniError,
    InvalidPath,
    InvalidName,
    InvalidValue,
    ConversionFailure
)
from .ini import (
    IniDocument,
    IniSection,
    IniEntry,
    IniParser,
    parse,
    serialize,
    try_get,
    get,
    set_value
)
from .store import IniFile, read_value, write_value

__all__ = [
    'IniError', 'InvalidPath', 'InvalidName', 'InvalidValue',
    'ConversionFailure',
    'IniDocument', 'IniSection', 'IniEntry', 'IniParser',
    'parse', 'serialize', 'try_get', 'get', 'set_value',
    'IniFile', 'read_value', 'write_value'
]
