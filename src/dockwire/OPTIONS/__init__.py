"""
Request option builders.
"""
from .container_options import (
    ContainerKillOptions,
    ContainerListOptions,
    ContainerStartOptions,
    ContainerStatusOptions,
)
from .create_options import ContainerCreateBody, ContainerCreateOptions

__all__ = [
    "ContainerCreateBody",
    "ContainerCreateOptions",
    "ContainerKillOptions",
    "ContainerListOptions",
    "ContainerStartOptions",
    "ContainerStatusOptions",
]
