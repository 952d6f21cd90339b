# -*- encoding: utf-8 -*-
# @File   : accessor.py
# @Time   : 2024/10/13 21:12:36
# @Author : Kariko Lin

"""Typed get/set over an `IniDocument`.

Only `str`, `int`, `bool` and `float` are supported, see `CONVERTERS`.
Reading never raises on a missing, empty or malformed value: `try_get()`
returns `(default, False)` for all of them, and there is no telling them apart.
"""

from re import compile as regex
from typing import Any, Callable, TypeVar

from ..errors import ConversionFailure, InvalidName, InvalidValue
from .consts import FORBIDDEN_KEY_CHARS, FORBIDDEN_NAME_CHARS
from .model import IniDocument
from .parser import split_comment

T = TypeVar('T')

_INTEGER = regex(r'[+-]?[0-9]+')
_DECIMAL = regex(r'[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')
_TRUTHY = ('true', '1')
_FALSY = ('false', '0')


def to_str(raw: str) -> str:
    return raw


def to_int(raw: str) -> int:
    # `int()` would also take '1_000' and ' 15 '.
    if not _INTEGER.fullmatch(raw):
        raise ConversionFailure(f'not an integer: {raw!r}')
    return int(raw)


def to_bool(raw: str) -> bool:
    folded = raw.casefold()
    if folded in _TRUTHY:
        return True
    if folded in _FALSY:
        return False
    raise ConversionFailure(f'not a boolean: {raw!r}')


def to_float(raw: str) -> float:
    # and `float()` takes 'nan', 'inf' and so on.
    if not _DECIMAL.fullmatch(raw):
        raise ConversionFailure(f'not a decimal number: {raw!r}')
    return float(raw)


CONVERTERS: dict[type, Callable[[str], Any]] = {
    str: to_str,
    int: to_int,
    bool: to_bool,
    float: to_float,
}


def _target_type(default: Any, astype: type | None) -> type:
    if astype is None:
        astype = str if default is None else type(default)
    if astype not in CONVERTERS:
        raise TypeError(
            f'unsupported INI value type {astype!r}, '
            f'should be one of {[i.__name__ for i in CONVERTERS]}.')
    return astype


def convert(raw: str, astype: type[T]) -> T:
    """Convert a raw INI value. Raises `ConversionFailure` on bad input."""
    return CONVERTERS[_target_type(None, astype)](raw)


def try_get(
    doc: IniDocument, section: str, key: str,
    default: Any = None, astype: type | None = None
) -> tuple[Any, bool]:
    """Look up `[section] key` and convert it.

    `astype` defaults to the type of `default` (or `str`).

    Returns:
        - `(value, True)` if found and converted.
        - `(default, False)` if the section or key is missing,
        the value is empty, or it fails to convert.
    """
    astype = _target_type(default, astype)
    if section not in doc or key not in doc[section]:
        return default, False
    # `k=` reads as missing, whatever the type.
    if not (raw := doc[section][key]):
        return default, False
    try:
        return CONVERTERS[astype](raw), True
    except ConversionFailure:
        return default, False


def get(
    doc: IniDocument, section: str, key: str,
    default: Any = None, astype: type | None = None
) -> Any:
    return try_get(doc, section, key, default, astype)[0]


def validate_name(name: str, *, is_key: bool = False) -> None:
    if not isinstance(name, str):
        raise TypeError(f'INI names should be str, got {type(name)!r}.')
    forbidden = FORBIDDEN_KEY_CHARS if is_key else FORBIDDEN_NAME_CHARS
    what = 'key' if is_key else 'section'
    if not name or name != name.strip():
        raise InvalidName(f'{what} name {name!r} is empty or padded.')
    if bad := forbidden.intersection(name):
        raise InvalidName(
            f'{what} name {name!r} contains {"".join(sorted(bad))!r}.')


def validate_value(value: str) -> None:
    if not isinstance(value, str):
        raise TypeError(
            f'INI values should be str, got {type(value)!r}. '
            'Convert it before writing.')
    if '\r' in value or '\n' in value:
        raise InvalidValue(f'{value!r} contains a line break.')
    if value != value.strip():
        raise InvalidValue(f'{value!r} would lose its padding.')
    if split_comment(value)[1] is not None:
        raise InvalidValue(
            f'{value!r} contains an unescaped comment mark, '
            'escape it with a backslash.')


def check_entry(section: str, key: str, value: str) -> None:
    """Raise if `[section] key=value` can't be written as is."""
    validate_name(section)
    validate_name(key, is_key=True)
    validate_value(value)


def set_value(doc: IniDocument, section: str, key: str, value: str) -> None:
    """Write `[section] key=value`, creating the section if missing."""
    check_entry(section, key, value)
    doc.setdefault(section)[key] = value
