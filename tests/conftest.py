"""Pytest fixtures for docfeed tests."""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from docfeed.domain.value_objects import CodecMode, DocId, PushAttributes
from docfeed.infrastructure.codec.url_codec import CodecConfig, DocIdCodec


# --- Fakes ---


class RecordingDocIdPusher:
    """In-memory DocIdPusher that records every push."""

    def __init__(self) -> None:
        self.pushes: list[tuple[list[DocId], PushAttributes]] = []

    def push_doc_ids(
        self,
        doc_ids: Iterable[DocId],
        attributes: PushAttributes = PushAttributes.DEFAULT,
    ) -> None:
        self.pushes.append((list(doc_ids), attributes))


# --- Fixtures ---


@pytest.fixture
def prefixed_config() -> CodecConfig:
    """Prefixed-mode config rooted at https://host/ with /docs/ segment."""
    return CodecConfig(
        mode=CodecMode.PREFIXED,
        base_url="https://host/",
        doc_id_path="/docs/",
    )


@pytest.fixture
def prefixed_codec(prefixed_config: CodecConfig) -> DocIdCodec:
    return DocIdCodec(prefixed_config)


@pytest.fixture
def opaque_codec() -> DocIdCodec:
    return DocIdCodec(CodecConfig(mode=CodecMode.OPAQUE))


@pytest.fixture
def pusher() -> RecordingDocIdPusher:
    return RecordingDocIdPusher()


@pytest.fixture
def sample_doc_ids() -> list[DocId]:
    """Three distinct public DocIds."""
    return [DocId("a"), DocId("b"), DocId("c")]
