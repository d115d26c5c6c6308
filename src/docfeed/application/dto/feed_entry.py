"""Feed entry DTO."""

from dataclasses import dataclass

from docfeed.domain.value_objects import DocId, FeedAction, PushAttributes


@dataclass(frozen=True)
class FeedEntry:
    """One record handed to the feed serializer."""

    url: str
    action: FeedAction
    doc_id: DocId
    attributes: PushAttributes
