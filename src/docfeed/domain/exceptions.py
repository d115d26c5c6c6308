"""Domain exceptions."""


class DocFeedError(Exception):
    """Base exception for docfeed."""

    pass


class InvalidArgument(DocFeedError, ValueError):
    """Value object constructed with a missing or invalid argument."""

    pass


class MalformedReference(DocFeedError):
    """Document reference cannot be rendered as, or recovered from, a URL."""

    pass


class CodecStateError(DocFeedError):
    """Codec configuration cannot produce a valid URL."""

    pass
