"""Domain value objects."""

from docfeed.domain.value_objects.authz_status import AuthzStatus
from docfeed.domain.value_objects.codec_mode import CodecMode
from docfeed.domain.value_objects.doc_id import DocId
from docfeed.domain.value_objects.feed_action import FeedAction
from docfeed.domain.value_objects.push_attributes import (
    PushAttributes,
    PushAttributesBuilder,
)
from docfeed.domain.value_objects.read_permission import ReadPermission

__all__ = [
    "AuthzStatus",
    "CodecMode",
    "DocId",
    "FeedAction",
    "PushAttributes",
    "PushAttributesBuilder",
    "ReadPermission",
]
