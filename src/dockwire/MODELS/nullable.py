"""
Decode-time normalization of fields the engine sends as null instead of empty.

Apply it only to fields known to do this (image repo tags); normalizing every
field would hide genuine schema violations.
"""
from typing import Annotated, Any, Callable, get_args, get_origin

from pydantic import BeforeValidator, TypeAdapter, ValidationError

from ..exceptions import SchemaError

_ZERO_TYPES = (list, dict, tuple, set, frozenset, str, bool, int, float)


def _base_type(tp: Any) -> Any:
    while get_origin(tp) is Annotated:
        tp = get_args(tp)[0]
    return get_origin(tp) or tp


def zero_value(tp: Any) -> Any:
    """
    Return the zero value of a type: empty container, empty string, 0 or False.

    :raises TypeError: If the type has no natural zero value.
    """
    base = _base_type(tp)
    if isinstance(base, type) and base in _ZERO_TYPES:
        return base()
    raise TypeError(f"No zero value for {tp!r}")


def normalize_nullable(raw: Any, tp: Any) -> Any:
    """
    Decode an optional-wrapped value, mapping null to the type's zero value.

    :param raw: The raw value, None when absent or null on the wire.
    :param tp: The type the value is decoded as.
    :return: The decoded value, or zero_value(tp).
    :raises SchemaError: If a present value has the wrong shape.
    """
    if raw is None:
        return zero_value(tp)
    try:
        return TypeAdapter(tp).validate_python(raw)
    except ValidationError as e:
        raise SchemaError(
            f"Invalid value for {tp!r}: {e.errors(include_url=False)[0]['msg']}",
            errors=e.errors(include_url=False),
        ) from e


def _null_to_zero(tp: Any) -> Callable[[Any], Any]:
    def replace(value: Any) -> Any:
        return zero_value(tp) if value is None else value

    return replace


def NullAsDefault(tp: Any) -> Any:
    """
    Annotate a field type so that null decodes as the type's zero value.

    Pair it with ``Field(None, validate_default=True)`` so an omitted field
    takes the same path as an explicit null.
    """
    # Fails early for types without a zero value.
    zero_value(tp)
    return Annotated[tp, BeforeValidator(_null_to_zero(tp))]
