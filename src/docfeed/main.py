"""Application entry point and composition root."""

import argparse
import logging
import sys
from collections.abc import Sequence

from docfeed import __version__
from docfeed.config import Settings, get_settings
from docfeed.domain.exceptions import DocFeedError
from docfeed.domain.value_objects import DocId
from docfeed.infrastructure.codec.url_codec import DocIdCodec

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_codec(settings: Settings | None = None) -> DocIdCodec:
    """Composition root - build the codec from process settings."""
    settings = settings or get_settings()
    codec = DocIdCodec.from_settings(settings)
    logger.info("DocId codec in %s mode, prefix %s", settings.codec_mode, codec.prefix)
    return codec


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point: encode a DocId or decode a feed URL."""
    parser = argparse.ArgumentParser(prog="docfeed", description="DocId <-> feed URL codec")
    parser.add_argument("--version", action="version", version=f"docfeed {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)
    encode = sub.add_parser("encode", help="Print the feed URL for a DocId")
    encode.add_argument("doc_id")
    decode = sub.add_parser("decode", help="Print the DocId a feed URL refers to")
    decode.add_argument("url")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)
    codec = create_codec(settings)
    try:
        if args.command == "encode":
            print(codec.encode(DocId(args.doc_id)))
        else:
            print(codec.decode(args.url))
    except DocFeedError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0
