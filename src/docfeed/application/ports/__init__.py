"""Application ports - interfaces for external adapters."""

from docfeed.application.ports.adaptor import Adaptor
from docfeed.application.ports.doc_id_codec import DocIdCodecPort
from docfeed.application.ports.doc_id_pusher import DocIdPusher

__all__ = [
    "Adaptor",
    "DocIdCodecPort",
    "DocIdPusher",
]
