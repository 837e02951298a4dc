"""
Image records returned by the image list endpoint and pull/push progress frames.
"""
from typing import Dict, List, Optional

from pydantic import Field, StrictStr

from .nullable import NullAsDefault
from .wire_model import Opaque, UnsignedInt, WireModel

# The engine sends null rather than [] for untagged images.
RepoTags = NullAsDefault(List[StrictStr])


class Image(WireModel):
    """
    One row of an image listing.

    ``repo_tags`` is always a list, empty for untagged images.
    """

    id: StrictStr = Field(alias="Id")
    parent_id: StrictStr = Field(alias="ParentId")
    repo_tags: RepoTags = Field(None, alias="RepoTags", validate_default=True)
    repo_digests: Optional[List[StrictStr]] = Field(None, alias="RepoDigests")
    created: UnsignedInt = Field(alias="Created")
    size: UnsignedInt = Field(alias="Size")
    # Dropped by newer engine API versions.
    virtual_size: Optional[UnsignedInt] = Field(None, alias="VirtualSize")
    labels: Optional[Dict[StrictStr, StrictStr]] = Field(None, alias="Labels")


class ImageStatus(WireModel):
    """
    A progress frame from an image pull or push stream.

    In practice a frame carries either ``status`` or ``error``; both are
    optional so partial frames still decode. Frames use lower camel case on
    the wire.
    """

    status: Optional[StrictStr] = Field(None, alias="status")
    error: Optional[StrictStr] = Field(None, alias="error")
    id: Optional[StrictStr] = Field(None, alias="id")
    progress: Optional[StrictStr] = Field(None, alias="progress")
    progress_detail: Opaque = Field(None, alias="progressDetail")
    error_detail: Opaque = Field(None, alias="errorDetail")

    @property
    def failed(self) -> bool:
        return self.error is not None
