"""
Filesystem changes reported by the container diff endpoint.
"""
from enum import IntEnum

from pydantic import Field, StrictStr

from .wire_model import WireModel


class ChangeKind(IntEnum):
    """Kind of change, as numbered by the engine."""

    MODIFIED = 0
    ADDED = 1
    DELETED = 2


class FilesystemChange(WireModel):
    """A path inside the container and how it differs from the image."""

    path: StrictStr = Field(alias="Path")
    kind: ChangeKind = Field(alias="Kind")
