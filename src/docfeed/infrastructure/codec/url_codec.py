"""DocId codec - renders DocIds as feed URLs and recovers them from URLs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING
from urllib.parse import quote, unquote, urlsplit, urlunsplit

from docfeed.domain.exceptions import CodecStateError, InvalidArgument, MalformedReference
from docfeed.domain.value_objects import CodecMode, DocId

if TYPE_CHECKING:
    from docfeed.config import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CodecConfig:
    """Codec mode and URL layout, fixed for the lifetime of a codec."""

    mode: CodecMode = CodecMode.PREFIXED
    base_url: str = "http://localhost:5678/"
    doc_id_path: str = "/doc/"

    def __post_init__(self) -> None:
        try:
            mode = CodecMode(self.mode)
        except ValueError as e:
            raise InvalidArgument(f"unknown codec mode: {self.mode!r}") from e
        object.__setattr__(self, "mode", mode)


def _join_path(base_path: str, segment: str) -> str:
    """Concatenate two URL paths without doubling the slash between them."""
    if not base_path:
        base_path = "/"
    if base_path.endswith("/") and segment.startswith("/"):
        return base_path + segment[1:]
    if not base_path.endswith("/") and segment and not segment.startswith("/"):
        return f"{base_path}/{segment}"
    return base_path + segment


def _is_absolute_url(value: str) -> bool:
    if any(ch.isspace() for ch in value):
        return False
    try:
        parts = urlsplit(value)
        parts.port  # raises on a non-numeric port
    except ValueError:
        return False
    return bool(parts.scheme and parts.netloc)


class DocIdCodec:
    """Bidirectional DocId <-> URL mapping.

    In opaque mode the DocId is already a URL and passes through unchanged.
    In prefixed mode the id is appended to ``base_url``'s path and
    ``doc_id_path``; decode strips that prefix again.

    Only the id travels in the URL, so decode always yields a public DocId.
    """

    def __init__(self, config: CodecConfig) -> None:
        self._config = config
        self._prefix = _join_path(unquote(urlsplit(config.base_url).path), config.doc_id_path)

    @classmethod
    def from_settings(cls, settings: Settings) -> DocIdCodec:
        return cls(
            CodecConfig(
                mode=settings.codec_mode,
                base_url=settings.base_url,
                doc_id_path=settings.doc_id_path,
            )
        )

    @property
    def config(self) -> CodecConfig:
        return self._config

    @property
    def prefix(self) -> str:
        """Unquoted path every prefixed-mode URL starts with."""
        return self._prefix

    def encode(self, doc_id: DocId) -> str:
        """Provide the URL used for doc_id in the feed."""
        if self._config.mode is CodecMode.OPAQUE:
            if not _is_absolute_url(doc_id.id):
                raise MalformedReference(f"unable to safely encode {doc_id}: not an absolute URL")
            return doc_id.id

        base = urlsplit(self._config.base_url)
        if not base.scheme or not base.netloc:
            raise CodecStateError(
                f"base URL {self._config.base_url!r} cannot be resolved against"
            )
        try:
            path = quote(self._prefix + doc_id.id, safe="/")
        except UnicodeEncodeError as e:
            raise MalformedReference(f"unable to safely encode {doc_id}") from e
        url = urlunsplit((base.scheme, base.netloc, path, "", ""))
        logger.debug("Encoded %s as %s", doc_id, url)
        return url

    def decode(self, url: str) -> DocId:
        """Given a URL used in a feed, convert it back to a DocId."""
        if self._config.mode is CodecMode.OPAQUE:
            return DocId(url)

        path = unquote(urlsplit(url).path)
        if not path.startswith(self._prefix):
            raise MalformedReference(f"{url!r} is not under {self._prefix!r}")
        raw_id = path[len(self._prefix) :]
        if not raw_id:
            raise MalformedReference(f"{url!r} names no document under {self._prefix!r}")
        return DocId(raw_id)
