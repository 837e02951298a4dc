"""
Unit tests for filesystem change records.
"""
import pytest

from dockwire.exceptions import SchemaError
from dockwire.MODELS.filesystem import ChangeKind, FilesystemChange


class TestFilesystemChange:
    """Tests for container diff entries."""

    def test_decode_diff(self):
        """Test decoding a diff response."""
        changes = FilesystemChange.decode_list(
            b'[{"Path":"/etc","Kind":0},{"Path":"/etc/nginx/conf.d/app.conf","Kind":1},'
            b'{"Path":"/tmp/cache","Kind":2}]'
        )
        assert [change.kind for change in changes] == [ChangeKind.MODIFIED, ChangeKind.ADDED, ChangeKind.DELETED]
        assert changes[1].path == "/etc/nginx/conf.d/app.conf"

    def test_unknown_kind_fails(self):
        """Test that kinds outside the enum are rejected."""
        with pytest.raises(SchemaError):
            FilesystemChange.decode({"Path": "/etc", "Kind": 7})

    def test_kind_encodes_as_integer(self):
        """Test that the kind stays a small integer on the wire."""
        change = FilesystemChange.decode({"Path": "/var/log", "Kind": ChangeKind.ADDED})
        assert change.encode() == b'{"Path":"/var/log","Kind":1}'
        assert FilesystemChange.decode(change.encode()) == change
