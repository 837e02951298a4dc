# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""
Base model shared by every engine record, and the decode/encode contract.

Wire names are declared per field as explicit aliases. The engine API mixes
ordinary PascalCase (``NetworkMode``) with upper-case acronyms (``RW``,
``IPAddress``, ``OOMKilled``) and a few names that diverge entirely from the
internal name (``Domainname``), so no alias generator is used.
"""
import json
from dataclasses import dataclass, field
from typing import Annotated, Any, ClassVar, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from ..exceptions import EncodingError, SchemaError
from ..UTILS.logging_config import get_logger

logger = get_logger(__name__)

# Engine counters and timestamps that are never negative.
UnsignedInt = Annotated[StrictInt, Field(ge=0)]

NonEmptyStr = Annotated[StrictStr, Field(min_length=1)]

# Objects whose structure is undocumented or varies between engine versions.
# Callers should only test these for presence.
Placeholder = Dict[str, Any]
Opaque = Any

M = TypeVar("M", bound="WireModel")


@dataclass
class DecodedBatch:
    """Outcome of decoding a JSON array element by element."""

    records: List[Any] = field(default_factory=list)
    errors: List[SchemaError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class WireModel(BaseModel):
    """
    Immutable record decoded from an engine API payload.

    Fields are populated only from their wire names, unknown fields are
    dropped, and instances are read-only.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    # Request bodies leave unset fields out so the engine applies its defaults.
    omit_none_on_encode: ClassVar[bool] = False

    @classmethod
    def decode(cls: Type[M], payload: Any) -> M:
        """
        Decode a single record.

        :param payload: JSON text as bytes or str, or an already-decoded value.
        :return: The decoded record.
        :raises SchemaError: If the payload does not match the record.
        """
        try:
            if isinstance(payload, (bytes, bytearray, str)):
                return cls.model_validate_json(payload)
            return cls.model_validate(payload)
        except ValidationError as e:
            logger.debug("decode_failed", model=cls.__name__, error_count=e.error_count())
            raise _schema_error(cls, e) from e

    @classmethod
    def decode_list(cls: Type[M], payload: Any) -> List[M]:
        """
        Decode a JSON array of records, one element at a time.

        :raises SchemaError: For the first malformed element, with its index.
        """
        return [cls._decode_item(item, index) for index, item in enumerate(_load_array(cls, payload))]

    @classmethod
    def decode_batch(cls: Type[M], payload: Any) -> DecodedBatch:
        """
        Decode a JSON array of records, collecting per-element failures.

        Well-formed elements are returned even when siblings fail; every
        failure is reported in ``errors``.

        :raises SchemaError: If the payload itself is not a JSON array.
        """
        batch = DecodedBatch()
        for index, item in enumerate(_load_array(cls, payload)):
            try:
                batch.records.append(cls._decode_item(item, index))
            except SchemaError as e:
                logger.warning("batch_element_rejected", model=cls.__name__, index=index, fields=e.fields)
                batch.errors.append(e)
        return batch

    @classmethod
    def _decode_item(cls: Type[M], item: Any, index: int) -> M:
        try:
            return cls.model_validate(item)
        except ValidationError as e:
            raise _schema_error(cls, e, index=index) from e

    def encode(self) -> bytes:
        """
        Encode the record as JSON using its wire field names.

        :raises EncodingError: If a value cannot be serialized.
        """
        try:
            text = self.model_dump_json(by_alias=True, exclude_none=self.omit_none_on_encode)
            return text.encode("utf-8")
        except ValueError as e:
            logger.debug("encode_failed", model=type(self).__name__, error=str(e))
            raise EncodingError(f"Cannot encode {type(self).__name__}: {e}", model=type(self).__name__) from e

    @classmethod
    def wire_names(cls) -> Dict[str, str]:
        """Map of internal field name to wire field name."""
        return {
            name: info.serialization_alias or info.alias or name
            for name, info in cls.model_fields.items()
        }


def _load_array(cls: Type[WireModel], payload: Any) -> List[Any]:
    if isinstance(payload, (bytes, bytearray, str)):
        try:
            payload = json.loads(payload)
        # Deeply nested input exhausts the recursive decoder.
        except (ValueError, RecursionError) as e:
            raise SchemaError(f"Invalid JSON for {cls.__name__} list: {e}", model=cls.__name__) from e
    if not isinstance(payload, list):
        raise SchemaError(
            f"Expected a JSON array of {cls.__name__}, got {type(payload).__name__}",
            model=cls.__name__,
        )
    return payload


def _schema_error(cls: Type[WireModel], error: ValidationError, index: Optional[int] = None) -> SchemaError:
    where = cls.__name__ if index is None else f"{cls.__name__}[{index}]"
    errors = error.errors(include_url=False)
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = f"Invalid {where}: {location or '<root>'}: {first.get('msg', 'validation failed')}"
    if len(errors) > 1:
        message += f" (+{len(errors) - 1} more)"
    return SchemaError(message, model=cls.__name__, index=index, errors=errors)
