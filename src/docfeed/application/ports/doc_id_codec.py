"""DocId codec port - DocId <-> feed URL mapping."""

from typing import Protocol

from docfeed.domain.value_objects import DocId


class DocIdCodecPort(Protocol):
    """Port for rendering DocIds as feed URLs and back."""

    def encode(self, doc_id: DocId) -> str: ...

    def decode(self, url: str) -> DocId: ...
