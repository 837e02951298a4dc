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
Options for creating a container.

Container creation takes most of its parameters as a JSON body rather than a
query string. The builder below carries the structured fields (command,
environment, labels) untouched until ``encode()`` turns them into the body;
``render()`` only covers the query-level ``name`` parameter.
"""
from dataclasses import dataclass, replace
from typing import ClassVar, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import Field, StrictBool, StrictStr, ValidationError

from ..exceptions import EncodingError
from ..MODELS.container import HostConfig
from ..MODELS.wire_model import Placeholder, WireModel
from ..UTILS.logging_config import get_logger
from ..UTILS.option_values import require_str, require_str_list
from ..UTILS.query_string import QueryBuilder

logger = get_logger(__name__)


class ContainerCreateBody(WireModel):
    """Request body for the container create endpoint. Unset fields are omitted."""

    omit_none_on_encode: ClassVar[bool] = True

    hostname: Optional[StrictStr] = Field(None, alias="Hostname")
    user: Optional[StrictStr] = Field(None, alias="User")
    attach_stdout: Optional[StrictBool] = Field(None, alias="AttachStdout")
    attach_stderr: Optional[StrictBool] = Field(None, alias="AttachStderr")
    exposed_ports: Optional[Dict[StrictStr, Placeholder]] = Field(None, alias="ExposedPorts")
    tty: Optional[StrictBool] = Field(None, alias="Tty")
    open_stdin: Optional[StrictBool] = Field(None, alias="OpenStdin")
    env: Optional[List[StrictStr]] = Field(None, alias="Env")
    cmd: Optional[List[StrictStr]] = Field(None, alias="Cmd")
    entrypoint: Optional[List[StrictStr]] = Field(None, alias="Entrypoint")
    image: StrictStr = Field(alias="Image")
    working_dir: Optional[StrictStr] = Field(None, alias="WorkingDir")
    labels: Optional[Dict[StrictStr, StrictStr]] = Field(None, alias="Labels")
    host_config: Optional[HostConfig] = Field(None, alias="HostConfig")


@dataclass(frozen=True)
class ContainerCreateOptions:
    """
    Builder for container creation.

    Example:
        options = (
            ContainerCreateOptions()
            .name("web")
            .image("nginx:1.25")
            .env(["MODE=production"])
            .label("tier", "frontend")
            .expose("80/tcp")
        )
        query = options.render()   # "name=web"
        body = options.encode()    # b'{"ExposedPorts":{"80/tcp":{}},...}'
    """

    _name: Optional[str] = None
    _image: Optional[str] = None
    _cmd: Optional[Tuple[str, ...]] = None
    _entrypoint: Optional[Tuple[str, ...]] = None
    _env: Optional[Tuple[str, ...]] = None
    _labels: Optional[Tuple[Tuple[str, str], ...]] = None
    _hostname: Optional[str] = None
    _working_dir: Optional[str] = None
    _user: Optional[str] = None
    _exposed_ports: Optional[Tuple[str, ...]] = None
    _tty: bool = False
    _open_stdin: bool = False
    _attach_stdout: bool = False
    _attach_stderr: bool = False
    _network_mode: Optional[str] = None

    def name(self, name: str) -> "ContainerCreateOptions":
        """Name to assign to the new container."""
        return replace(self, _name=require_str("name", name))

    def image(self, image: str) -> "ContainerCreateOptions":
        return replace(self, _image=require_str("image", image))

    def cmd(self, args: Iterable[str]) -> "ContainerCreateOptions":
        """Command arguments, in order."""
        return replace(self, _cmd=require_str_list("cmd", args))

    def entrypoint(self, args: Iterable[str]) -> "ContainerCreateOptions":
        return replace(self, _entrypoint=require_str_list("entrypoint", args))

    def env(self, variables: Iterable[str]) -> "ContainerCreateOptions":
        """Environment as ``KEY=VALUE`` strings, in order."""
        return replace(self, _env=require_str_list("env", variables))

    def label(self, key: str, value: str) -> "ContainerCreateOptions":
        """Set one label, replacing any earlier value for the same key."""
        require_str("label key", key)
        require_str("label value", value)
        labels = dict(self._labels or ())
        labels[key] = value
        return replace(self, _labels=tuple(labels.items()))

    def labels(self, labels: Mapping[str, str]) -> "ContainerCreateOptions":
        """Replace all labels."""
        for key, value in labels.items():
            require_str("label key", key)
            require_str("label value", value)
        return replace(self, _labels=tuple(labels.items()))

    def hostname(self, hostname: str) -> "ContainerCreateOptions":
        return replace(self, _hostname=require_str("hostname", hostname))

    def working_dir(self, path: str) -> "ContainerCreateOptions":
        return replace(self, _working_dir=require_str("working_dir", path))

    def user(self, user: str) -> "ContainerCreateOptions":
        return replace(self, _user=require_str("user", user))

    def expose(self, port_spec: str) -> "ContainerCreateOptions":
        """Expose a port, given as ``port/protocol`` (``80/tcp``)."""
        require_str("exposed port", port_spec)
        ports = self._exposed_ports or ()
        if port_spec in ports:
            return self
        return replace(self, _exposed_ports=ports + (port_spec,))

    def tty(self) -> "ContainerCreateOptions":
        """Allocate a pseudo-TTY."""
        return replace(self, _tty=True)

    def open_stdin(self) -> "ContainerCreateOptions":
        return replace(self, _open_stdin=True)

    def attach_stdout(self) -> "ContainerCreateOptions":
        return replace(self, _attach_stdout=True)

    def attach_stderr(self) -> "ContainerCreateOptions":
        return replace(self, _attach_stderr=True)

    def network_mode(self, mode: str) -> "ContainerCreateOptions":
        """Network mode, e.g. ``bridge``, ``host`` or ``container:<id>``."""
        return replace(self, _network_mode=require_str("network_mode", mode))

    def render(self) -> str:
        """Query-level parameters only. The body is produced by encode()."""
        return QueryBuilder().value("name", self._name).finish()

    def __str__(self) -> str:
        return self.render()

    def to_body(self) -> ContainerCreateBody:
        """
        Build the request body.

        :raises EncodingError: If no image was set.
        """
        if self._image is None:
            raise EncodingError("image is required to create a container", option="image")

        fields = {
            "Image": self._image,
            "Cmd": list(self._cmd) if self._cmd is not None else None,
            "Entrypoint": list(self._entrypoint) if self._entrypoint is not None else None,
            "Env": list(self._env) if self._env is not None else None,
            "Labels": dict(self._labels) if self._labels is not None else None,
            "Hostname": self._hostname,
            "WorkingDir": self._working_dir,
            "User": self._user,
            "ExposedPorts": {port: {} for port in self._exposed_ports} if self._exposed_ports else None,
            "Tty": self._tty or None,
            "OpenStdin": self._open_stdin or None,
            "AttachStdout": self._attach_stdout or None,
            "AttachStderr": self._attach_stderr or None,
            "HostConfig": {"NetworkMode": self._network_mode} if self._network_mode else None,
        }
        try:
            return ContainerCreateBody.model_validate({key: value for key, value in fields.items() if value is not None})
        except ValidationError as e:
            logger.debug("create_body_rejected", error_count=e.error_count())
            raise EncodingError(f"Invalid container create options: {e}") from e

    def encode(self) -> bytes:
        """JSON request body with the engine's field names."""
        return self.to_body().encode()
