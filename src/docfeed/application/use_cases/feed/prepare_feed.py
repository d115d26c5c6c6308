"""Prepare feed use case."""

import logging
from collections.abc import Iterable

from docfeed.application.dto.feed_entry import FeedEntry
from docfeed.application.ports import DocIdCodecPort
from docfeed.domain.exceptions import MalformedReference
from docfeed.domain.value_objects import DocId, PushAttributes

logger = logging.getLogger(__name__)


class PrepareFeedUseCase:
    """Turn DocIds into feed entries ready for serialization."""

    def __init__(self, codec: DocIdCodecPort) -> None:
        self._codec = codec

    def execute(
        self,
        doc_ids: Iterable[DocId],
        attributes: PushAttributes | None = None,
    ) -> list[FeedEntry]:
        """Encode each DocId, skipping ones that cannot be rendered as a URL.

        CodecStateError is not caught: it means the codec is misconfigured.
        """
        attributes = attributes or PushAttributes.DEFAULT
        action = attributes.feed_action
        entries: list[FeedEntry] = []
        skipped = 0
        for doc_id in doc_ids:
            try:
                url = self._codec.encode(doc_id)
            except MalformedReference as e:
                skipped += 1
                logger.warning("Skipping %s from feed: %s", doc_id, e)
                continue
            entries.append(
                FeedEntry(url=url, action=action, doc_id=doc_id, attributes=attributes)
            )
        logger.debug("Prepared %d feed entries (%d skipped)", len(entries), skipped)
        return entries
