"""DocId pusher port - channel for sending DocIds to the crawl system."""

from collections.abc import Iterable
from typing import Protocol

from docfeed.domain.value_objects import DocId, PushAttributes


class DocIdPusher(Protocol):
    """Port handed to adaptors that initiate their own pushes."""

    def push_doc_ids(
        self,
        doc_ids: Iterable[DocId],
        attributes: PushAttributes = PushAttributes.DEFAULT,
    ) -> None: ...
