"""Read permission class declared on a document."""

from enum import StrEnum


class ReadPermission(StrEnum):
    """Who may read a document."""

    IS_PUBLIC = "public"
    USE_HEAD_REQUEST = "use-head-request"
