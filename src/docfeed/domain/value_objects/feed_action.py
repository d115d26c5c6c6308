"""Feed action attached to every URL in a feed."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from docfeed.domain.value_objects.push_attributes import PushAttributes


class FeedAction(StrEnum):
    """Action the crawl system takes for a fed URL."""

    ADD = "add"
    DELETE = "delete"

    @classmethod
    def for_attributes(cls, attributes: PushAttributes) -> FeedAction:
        """Deletion is a flag on the push attributes, everything else is an add."""
        return cls.DELETE if attributes.delete else cls.ADD
