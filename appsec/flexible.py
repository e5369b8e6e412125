"""Decoding for fields the API returns as a string, a number or a list."""

from typing import Annotated, Any, List, Optional, Union

from pydantic import BeforeValidator


def _number_to_str(value: Union[int, float]) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never an identifier
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def decode_flexible(value: Any) -> Optional[Union[str, List[str]]]:
    """
    Normalize a loosely typed JSON value.

    A string is returned as is, a number as its decimal string, an array as a
    list of strings (string and numeric elements only). Anything else yields
    ``None`` rather than an error.
    """
    if isinstance(value, str):
        return value
    if _is_number(value):
        return _number_to_str(value)
    if isinstance(value, (list, tuple)):
        items = []
        for item in value:
            if isinstance(item, str):
                items.append(item)
            elif _is_number(item):
                items.append(_number_to_str(item))
        return items
    return None


def as_str(value: Any) -> str:
    """String-or-number identifier; other kinds become ``""``."""
    decoded = decode_flexible(value)
    return decoded if isinstance(decoded, str) else ""


def as_str_list(value: Any) -> List[str]:
    """String-or-array of names; a lone string becomes a one-element list."""
    decoded = decode_flexible(value)
    if isinstance(decoded, str):
        return [decoded]
    return decoded if decoded is not None else []


FlexibleStr = Annotated[str, BeforeValidator(as_str)]
FlexibleStrList = Annotated[List[str], BeforeValidator(as_str_list)]
