"""
Engine payloads shared by the unit and fuzz tests.
"""
import copy

import pytest

SUMMARY = {
    "Id": "abc123",
    "Image": "nginx",
    "Status": "Up 2 minutes",
    "Command": "nginx -g daemon off;",
    "Created": 1600000000,
    "Names": ["/web"],
    "Ports": [],
    "HostConfig": {"NetworkMode": "bridge"},
}

DETAIL = {
    "Id": "4fa6e0f0c6786287e131c3852c58a2e01cc697a68231826813597e4994f1d6e2",
    "Created": "2024-01-05T10:11:12.123456789Z",
    "Path": "nginx",
    "Args": ["-g", "daemon off;"],
    "State": {
        "Status": "running",
        "Running": True,
        "Paused": False,
        "Restarting": False,
        "OOMKilled": False,
        "Dead": False,
        "Pid": 4242,
        "ExitCode": 0,
        "Error": "",
        "StartedAt": "2024-01-05T10:11:13.000000000Z",
        "FinishedAt": "0001-01-01T00:00:00Z",
    },
    "Image": "sha256:a6bd71f48f6839d9faae1f29d3babef831e76bc213107682c5cc80f0cbb30866",
    "ResolvConfPath": "/var/lib/docker/containers/4fa6/resolv.conf",
    "HostnamePath": "/var/lib/docker/containers/4fa6/hostname",
    "HostsPath": "/var/lib/docker/containers/4fa6/hosts",
    "LogPath": "/var/lib/docker/containers/4fa6/4fa6-json.log",
    "Name": "/web",
    "RestartCount": 0,
    "Driver": "overlay2",
    "Platform": "linux",
    "MountLabel": "",
    "ProcessLabel": "",
    "AppArmorProfile": "docker-default",
    "ExecIDs": None,
    "HostConfig": {"NetworkMode": "bridge", "Privileged": False, "ShmSize": 67108864},
    "GraphDriver": {"Name": "overlay2", "Data": {"MergedDir": "/var/lib/docker/overlay2/x/merged"}},
    "Mounts": [
        {
            "Type": "bind",
            "Source": "/srv/www",
            "Destination": "/usr/share/nginx/html",
            "Mode": "ro",
            "RW": False,
            "Propagation": "rprivate",
        }
    ],
    "Config": {
        "Hostname": "4fa6e0f0c678",
        "Domainname": "",
        "User": "",
        "AttachStdin": False,
        "AttachStdout": True,
        "AttachStderr": True,
        "ExposedPorts": {"80/tcp": {}},
        "Tty": False,
        "OpenStdin": False,
        "StdinOnce": False,
        "Env": ["PATH=/usr/local/sbin:/usr/local/bin", "NGINX_VERSION=1.25.3"],
        "Cmd": ["nginx", "-g", "daemon off;"],
        "Image": "nginx",
        "Volumes": None,
        "WorkingDir": "",
        "Entrypoint": ["/docker-entrypoint.sh"],
        "OnBuild": None,
        "Labels": {"maintainer": "NGINX Docker Maintainers"},
        "StopSignal": "SIGQUIT",
    },
    "NetworkSettings": {
        "Bridge": "",
        "SandboxID": "0e1f9c8d7b6a",
        "HairpinMode": False,
        "LinkLocalIPv6Address": "",
        "LinkLocalIPv6PrefixLen": 0,
        "Ports": {
            "80/tcp": [{"HostIp": "0.0.0.0", "HostPort": "8080"}],
            "443/tcp": None,
        },
        "SandboxKey": "/var/run/docker/netns/0e1f9c8d7b6a",
        "SecondaryIPAddresses": None,
        "SecondaryIPv6Addresses": None,
        "EndpointID": "a1b2c3",
        "Gateway": "172.17.0.1",
        "GlobalIPv6Address": "",
        "GlobalIPv6PrefixLen": 0,
        "IPAddress": "172.17.0.2",
        "IPPrefixLen": 16,
        "IPv6Gateway": "",
        "MacAddress": "02:42:ac:11:00:02",
        "Networks": {
            "bridge": {
                "IPAMConfig": None,
                "Links": None,
                "Aliases": None,
                "NetworkID": "7ea29fc1412292a2d7bba362f9253545fecdfa8ce9a6e37dd10ba8bee7129812",
                "EndpointID": "a1b2c3",
                "Gateway": "172.17.0.1",
                "IPAddress": "172.17.0.2",
                "IPPrefixLen": 16,
                "IPv6Gateway": "",
                "GlobalIPv6Address": "",
                "GlobalIPv6PrefixLen": 0,
                "MacAddress": "02:42:ac:11:00:02",
                "DriverOpts": None,
            }
        },
    },
}

IMAGE = {
    "Id": "sha256:e216a057b1cb1efc11f8a268f37ef62083e70b1b38323ba252e25ac88904a7e8",
    "ParentId": "",
    "RepoTags": ["nginx:1.25", "nginx:latest"],
    "RepoDigests": ["nginx@sha256:0d17b565c37bcbd895e9d92315a05c1c3c9a29f762b011a10c54a66cd53c9b31"],
    "Created": 1700000000,
    "Size": 187000000,
    "VirtualSize": 187000000,
    "Labels": None,
    "Containers": -1,
}


@pytest.fixture
def summary_payload():
    return copy.deepcopy(SUMMARY)


@pytest.fixture
def detail_payload():
    return copy.deepcopy(DETAIL)


@pytest.fixture
def image_payload():
    return copy.deepcopy(IMAGE)
