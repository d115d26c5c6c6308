"""Adaptor port - repository-specific connector."""

from collections.abc import Collection, Mapping, Set
from typing import Protocol

from docfeed.application.ports.doc_id_pusher import DocIdPusher
from docfeed.domain.value_objects import AuthzStatus, DocId


class Adaptor(Protocol):
    """Port implemented by every repository-specific adaptor."""

    def set_doc_id_pusher(self, pusher: DocIdPusher) -> None: ...

    def is_user_authorized(
        self,
        user_id: str,
        groups: Set[str],
        doc_ids: Collection[DocId],
    ) -> Mapping[DocId, AuthzStatus]: ...
