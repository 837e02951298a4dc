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
Query parameters for the container list, stop/restart, start and kill
endpoints.

Every builder starts with all options unset and each method returns a new
value with one option changed, so calls can be chained in any order:

    ContainerListOptions().all().limit(5).render()  # "all=1&limit=5"

Pairs are rendered in a fixed order per builder regardless of call order.
"""
from dataclasses import dataclass, replace
from typing import Optional

from ..exceptions import EncodingError
from ..UTILS.option_values import require_str
from ..UTILS.query_string import QueryBuilder

# Stop/restart grace periods are 16-bit on the engine side.
MAX_WAIT_SECONDS = 65535


@dataclass(frozen=True)
class ContainerListOptions:
    """Options for listing containers."""

    _all: bool = False
    _latest: bool = False
    _limit: Optional[int] = None
    _size: bool = False

    def all(self) -> "ContainerListOptions":
        """Return all containers, including stopped ones."""
        return replace(self, _all=True)

    def latest(self) -> "ContainerListOptions":
        """Return only the most recently created container, even if it has stopped."""
        return replace(self, _latest=True)

    def limit(self, n: int) -> "ContainerListOptions":
        """Return at most ``n`` containers."""
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise EncodingError(f"limit must be a non-negative integer, got {n!r}", option="limit")
        return replace(self, _limit=n)

    def size(self) -> "ContainerListOptions":
        """
        Report the size of each container's filesystem.
        This is expensive on the engine side.
        """
        return replace(self, _size=True)

    def render(self) -> str:
        return (
            QueryBuilder()
            .flag("all", self._all)
            .flag("latest", self._latest)
            .value("limit", self._limit)
            .flag("size", self._size)
            .finish()
        )

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class ContainerStatusOptions:
    """Options for stopping or restarting a container."""

    _time: Optional[int] = None

    def time(self, seconds: int) -> "ContainerStatusOptions":
        """Seconds to wait before the container is killed."""
        if isinstance(seconds, bool) or not isinstance(seconds, int) or not 0 <= seconds <= MAX_WAIT_SECONDS:
            raise EncodingError(
                f"time must be an integer between 0 and {MAX_WAIT_SECONDS}, got {seconds!r}",
                option="t",
            )
        return replace(self, _time=seconds)

    def render(self) -> str:
        return QueryBuilder().value("t", self._time).finish()

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class ContainerStartOptions:
    """Options for starting a container."""

    _detach_keys: Optional[str] = None

    def detach_keys(self, keys: str) -> "ContainerStartOptions":
        """Key sequence for detaching from the container, e.g. ``ctrl-p,ctrl-q``."""
        return replace(self, _detach_keys=require_str("detachKeys", keys))

    def render(self) -> str:
        return QueryBuilder().value("detachKeys", self._detach_keys).finish()

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class ContainerKillOptions:
    """Options for killing a container."""

    _signal: Optional[str] = None

    def signal(self, signal: str) -> "ContainerKillOptions":
        """Signal to send, by name (``SIGKILL``) or number (``9``)."""
        return replace(self, _signal=require_str("signal", signal))

    def render(self) -> str:
        return QueryBuilder().value("signal", self._signal).finish()

    def __str__(self) -> str:
        return self.render()
