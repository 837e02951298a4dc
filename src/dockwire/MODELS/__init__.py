"""
Typed records for engine API responses.
"""
from .container import (
    Config,
    ContainerDetail,
    ContainerSummary,
    HostConfig,
    Mount,
    Network,
    NetworkSettings,
    Port,
    PortMapping,
    State,
)
from .filesystem import ChangeKind, FilesystemChange
from .image import Image, ImageStatus
from .nullable import NullAsDefault, normalize_nullable, zero_value
from .wire_model import DecodedBatch, WireModel

__all__ = [
    "ChangeKind",
    "Config",
    "ContainerDetail",
    "ContainerSummary",
    "DecodedBatch",
    "FilesystemChange",
    "HostConfig",
    "Image",
    "ImageStatus",
    "Mount",
    "Network",
    "NetworkSettings",
    "NullAsDefault",
    "Port",
    "PortMapping",
    "State",
    "WireModel",
    "normalize_nullable",
    "zero_value",
]
