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
Container records returned by the list and inspect endpoints.
"""
from typing import Dict, List, Optional

from pydantic import AliasChoices, Field, StrictBool, StrictInt, StrictStr

from .wire_model import NonEmptyStr, Opaque, Placeholder, UnsignedInt, WireModel


class Port(WireModel):
    """
    A port exposed by a listed container.

    ``public_port`` is None when the port is not published on the host.
    """

    ip: Optional[StrictStr] = Field(None, alias="IP")
    private_port: UnsignedInt = Field(alias="PrivatePort")
    public_port: Optional[UnsignedInt] = Field(None, alias="PublicPort")
    # Older engines sent the transport tag in lower case.
    type: StrictStr = Field(validation_alias=AliasChoices("Type", "type"), serialization_alias="Type")


class HostConfig(WireModel):
    """Host-level configuration. Only the network mode is modeled."""

    network_mode: StrictStr = Field(alias="NetworkMode")


class ContainerSummary(WireModel):
    """
    One row of a container listing.

    The size fields are only reported when the listing asked for them, and
    some platforms never report them.
    """

    id: NonEmptyStr = Field(alias="Id")
    names: List[StrictStr] = Field(alias="Names")
    image: StrictStr = Field(alias="Image")
    image_id: Optional[StrictStr] = Field(None, alias="ImageID")
    command: StrictStr = Field(alias="Command")
    created: UnsignedInt = Field(alias="Created")
    ports: List[Port] = Field(alias="Ports")
    size_rw: Optional[UnsignedInt] = Field(
        None, validation_alias=AliasChoices("SizeRw", "SizeRW"), serialization_alias="SizeRw"
    )
    size_root_fs: Optional[UnsignedInt] = Field(None, alias="SizeRootFs")
    labels: Optional[Dict[StrictStr, StrictStr]] = Field(None, alias="Labels")
    state: Optional[StrictStr] = Field(None, alias="State")
    status: StrictStr = Field(alias="Status")
    host_config: HostConfig = Field(alias="HostConfig")

    def __str__(self) -> str:
        return self.id


class Config(WireModel):
    """
    Configuration a container was created with.

    ``cmd``, ``entrypoint`` and ``on_build`` have been observed both as
    strings and as lists, so they are kept opaque.
    """

    hostname: StrictStr = Field(alias="Hostname")
    domain_name: StrictStr = Field(alias="Domainname")
    user: Optional[StrictStr] = Field(None, alias="User")
    attach_stdin: StrictBool = Field(alias="AttachStdin")
    attach_stdout: StrictBool = Field(alias="AttachStdout")
    attach_stderr: StrictBool = Field(alias="AttachStderr")
    exposed_ports: Optional[Dict[StrictStr, Placeholder]] = Field(None, alias="ExposedPorts")
    tty: StrictBool = Field(alias="Tty")
    open_stdin: StrictBool = Field(alias="OpenStdin")
    stdin_once: StrictBool = Field(alias="StdinOnce")
    # KEY=VALUE strings, passed through unvalidated.
    env: Optional[List[StrictStr]] = Field(None, alias="Env")
    cmd: Opaque = Field(None, alias="Cmd")
    image: StrictStr = Field(alias="Image")
    volumes: Optional[Dict[StrictStr, Placeholder]] = Field(None, alias="Volumes")
    working_dir: StrictStr = Field(alias="WorkingDir")
    entrypoint: Opaque = Field(None, alias="Entrypoint")
    on_build: Opaque = Field(None, alias="OnBuild")
    labels: Dict[StrictStr, StrictStr] = Field(alias="Labels")


class Mount(WireModel):
    """A bind mount or volume attached to a container."""

    type: Optional[StrictStr] = Field(None, alias="Type")
    name: Optional[StrictStr] = Field(None, alias="Name")
    source: StrictStr = Field(alias="Source")
    destination: StrictStr = Field(alias="Destination")
    driver: Optional[StrictStr] = Field(None, alias="Driver")
    mode: StrictStr = Field(alias="Mode")
    rw: StrictBool = Field(alias="RW")
    propagation: StrictStr = Field(alias="Propagation")


class PortMapping(WireModel):
    """
    Host side of a published port. ``host_port`` stays a string because the
    engine may report a range.
    """

    host_ip: StrictStr = Field(alias="HostIp")
    host_port: StrictStr = Field(alias="HostPort")


class Network(WireModel):
    """Addressing of a container on one network. Empty strings mean unassigned."""

    ipam_config: Opaque = Field(None, alias="IPAMConfig")
    links: Optional[List[StrictStr]] = Field(None, alias="Links")
    aliases: Optional[List[StrictStr]] = Field(None, alias="Aliases")
    network_id: StrictStr = Field(alias="NetworkID")
    endpoint_id: StrictStr = Field(alias="EndpointID")
    gateway: StrictStr = Field(alias="Gateway")
    ip_address: StrictStr = Field(alias="IPAddress")
    ip_prefix_len: UnsignedInt = Field(alias="IPPrefixLen")
    ipv6_gateway: StrictStr = Field(alias="IPv6Gateway")
    global_ipv6_address: StrictStr = Field(alias="GlobalIPv6Address")
    global_ipv6_prefix_len: UnsignedInt = Field(alias="GlobalIPv6PrefixLen")
    mac_address: StrictStr = Field(alias="MacAddress")


class NetworkSettings(WireModel):
    """Container-wide addressing plus one entry per attached network."""

    bridge: StrictStr = Field(alias="Bridge")
    sandbox_id: StrictStr = Field(alias="SandboxID")
    hairpin_mode: StrictBool = Field(alias="HairpinMode")
    link_local_ipv6_address: StrictStr = Field(alias="LinkLocalIPv6Address")
    link_local_ipv6_prefix_len: UnsignedInt = Field(alias="LinkLocalIPv6PrefixLen")
    # Port spec ("80/tcp") to host bindings; null when exposed but unpublished.
    ports: Optional[Dict[StrictStr, Optional[List[PortMapping]]]] = Field(None, alias="Ports")
    sandbox_key: StrictStr = Field(alias="SandboxKey")
    secondary_ip_addresses: Opaque = Field(None, alias="SecondaryIPAddresses")
    secondary_ipv6_addresses: Opaque = Field(None, alias="SecondaryIPv6Addresses")
    endpoint_id: StrictStr = Field(alias="EndpointID")
    gateway: StrictStr = Field(alias="Gateway")
    global_ipv6_address: StrictStr = Field(alias="GlobalIPv6Address")
    global_ipv6_prefix_len: UnsignedInt = Field(alias="GlobalIPv6PrefixLen")
    ip_address: StrictStr = Field(alias="IPAddress")
    ip_prefix_len: UnsignedInt = Field(alias="IPPrefixLen")
    ipv6_gateway: StrictStr = Field(alias="IPv6Gateway")
    mac_address: StrictStr = Field(alias="MacAddress")
    networks: Dict[StrictStr, Network] = Field(alias="Networks")


class State(WireModel):
    """
    Lifecycle snapshot taken when the container was inspected.

    The running, paused and dead flags are not checked for exclusivity.
    Timestamps are kept as the engine formats them.
    """

    status: StrictStr = Field(alias="Status")
    running: StrictBool = Field(alias="Running")
    paused: StrictBool = Field(alias="Paused")
    restarting: StrictBool = Field(alias="Restarting")
    oom_killed: StrictBool = Field(alias="OOMKilled")
    dead: StrictBool = Field(alias="Dead")
    # Signed: some engine APIs use negative PIDs.
    pid: StrictInt = Field(alias="Pid")
    exit_code: StrictInt = Field(alias="ExitCode")
    error: StrictStr = Field(alias="Error")
    started_at: StrictStr = Field(alias="StartedAt")
    finished_at: StrictStr = Field(alias="FinishedAt")
    health: Opaque = Field(None, alias="Health")


class ContainerDetail(WireModel):
    """Full result of inspecting one container."""

    id: NonEmptyStr = Field(alias="Id")
    created: StrictStr = Field(alias="Created")
    path: StrictStr = Field(alias="Path")
    args: List[StrictStr] = Field(alias="Args")
    state: State = Field(alias="State")
    image: StrictStr = Field(alias="Image")
    resolv_conf_path: StrictStr = Field(alias="ResolvConfPath")
    hostname_path: StrictStr = Field(alias="HostnamePath")
    hosts_path: StrictStr = Field(alias="HostsPath")
    log_path: StrictStr = Field(alias="LogPath")
    name: StrictStr = Field(alias="Name")
    restart_count: UnsignedInt = Field(alias="RestartCount")
    driver: StrictStr = Field(alias="Driver")
    platform: Optional[StrictStr] = Field(None, alias="Platform")
    mount_label: StrictStr = Field(alias="MountLabel")
    process_label: StrictStr = Field(alias="ProcessLabel")
    app_armor_profile: StrictStr = Field(alias="AppArmorProfile")
    exec_ids: Optional[List[StrictStr]] = Field(None, alias="ExecIDs")
    host_config: Optional[HostConfig] = Field(None, alias="HostConfig")
    graph_driver: Optional[Placeholder] = Field(None, alias="GraphDriver")
    mounts: List[Mount] = Field(alias="Mounts")
    config: Config = Field(alias="Config")
    network_settings: NetworkSettings = Field(alias="NetworkSettings")

    def __str__(self) -> str:
        return self.id
