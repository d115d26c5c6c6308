"""DocId to URL encoding modes."""

from enum import StrEnum


class CodecMode(StrEnum):
    """How document ids are rendered as feed URLs."""

    OPAQUE = "opaque"
    PREFIXED = "prefixed"
