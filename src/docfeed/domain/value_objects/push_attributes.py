"""Push attributes - per-submission controls for a pushed DocId."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from docfeed.domain.value_objects.feed_action import FeedAction


@dataclass(frozen=True)
class PushAttributes:
    """Controls for a pushed DocId that dictate the crawl system's treatment."""

    DEFAULT: ClassVar[PushAttributes]

    delete: bool = False
    last_modified: datetime | None = None
    display_url: str | None = None
    crawl_immediately: bool = False
    crawl_once: bool = False
    lock: bool = False

    @property
    def feed_action(self) -> FeedAction:
        return FeedAction.for_attributes(self)

    @staticmethod
    def builder() -> PushAttributesBuilder:
        return PushAttributesBuilder()


class PushAttributesBuilder:
    """Accumulates attribute values for PushAttributes.

    Every attribute starts at its default. build() does not reset the
    builder, so it can be called repeatedly to produce equal snapshots.
    Not safe for concurrent use.
    """

    def __init__(self) -> None:
        self._delete = False
        self._last_modified: datetime | None = None
        self._display_url: str | None = None
        self._crawl_immediately = False
        self._crawl_once = False
        self._lock = False

    def set_delete_from_index(self, delete: bool) -> PushAttributesBuilder:
        self._delete = delete
        return self

    def set_last_modified(self, last_modified: datetime | None) -> PushAttributesBuilder:
        self._last_modified = last_modified
        return self

    def set_display_url(self, display_url: str | None) -> PushAttributesBuilder:
        self._display_url = display_url
        return self

    def set_crawl_immediately(self, crawl_immediately: bool) -> PushAttributesBuilder:
        self._crawl_immediately = crawl_immediately
        return self

    def set_crawl_once(self, crawl_once: bool) -> PushAttributesBuilder:
        self._crawl_once = crawl_once
        return self

    def set_lock(self, lock: bool) -> PushAttributesBuilder:
        self._lock = lock
        return self

    def build(self) -> PushAttributes:
        """Create a single PushAttributes snapshot."""
        return PushAttributes(
            delete=self._delete,
            last_modified=self._last_modified,
            display_url=self._display_url,
            crawl_immediately=self._crawl_immediately,
            crawl_once=self._crawl_once,
            lock=self._lock,
        )


PushAttributes.DEFAULT = PushAttributesBuilder().build()
