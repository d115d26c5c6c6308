"""Default adaptor policy - permissive authorization and no-op lifecycle."""

import logging
from collections.abc import Collection, Mapping, Set
from types import MappingProxyType

from docfeed.application.ports import DocIdPusher
from docfeed.domain.value_objects import AuthzStatus, DocId

logger = logging.getLogger(__name__)


class DefaultAdaptorPolicy:
    """Fallback behavior for adaptors that do not supply their own.

    Adaptors hold an instance and delegate the methods they do not implement.
    """

    def set_doc_id_pusher(self, pusher: DocIdPusher) -> None:
        """Accept the push channel and ignore it: the adaptor never pushes on its own."""

    def is_user_authorized(
        self,
        user_id: str,
        groups: Set[str],
        doc_ids: Collection[DocId],
    ) -> Mapping[DocId, AuthzStatus]:
        """Permit every requested DocId, one verdict each, in a read-only mapping."""
        result: dict[DocId, AuthzStatus] = {}
        for doc_id in doc_ids:
            result[doc_id] = AuthzStatus.PERMIT
        logger.debug("Permitted %d documents for %s", len(result), user_id)
        return MappingProxyType(result)
