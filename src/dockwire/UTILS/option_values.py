"""
Type checks for values handed to option builders.
"""
from typing import Iterable, Tuple

from ..exceptions import EncodingError


def require_str(option: str, value: object) -> str:
    if not isinstance(value, str):
        raise EncodingError(f"{option} must be a string, got {type(value).__name__}", option=option)
    return value


def require_str_list(option: str, values: Iterable[str]) -> Tuple[str, ...]:
    # A bare string is almost always a shell command line passed by mistake.
    if isinstance(values, (str, bytes)):
        raise EncodingError(f"{option} must be a list of strings, not a single string", option=option)
    items = tuple(values)
    for item in items:
        require_str(option, item)
    return items
