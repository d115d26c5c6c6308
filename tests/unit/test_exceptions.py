"""Unit tests for domain exceptions."""

import pytest

from docfeed.domain.exceptions import (
    CodecStateError,
    DocFeedError,
    InvalidArgument,
    MalformedReference,
)


def test_invalid_argument_inherits_docfeed_error() -> None:
    """InvalidArgument is a subclass of DocFeedError."""
    assert issubclass(InvalidArgument, DocFeedError)


def test_invalid_argument_is_value_error() -> None:
    """InvalidArgument can be caught as ValueError."""
    with pytest.raises(ValueError):
        raise InvalidArgument("id cannot be None")


def test_malformed_reference_inherits_docfeed_error() -> None:
    """MalformedReference is a subclass of DocFeedError."""
    assert issubclass(MalformedReference, DocFeedError)


def test_codec_state_error_inherits_docfeed_error() -> None:
    """CodecStateError is a subclass of DocFeedError."""
    assert issubclass(CodecStateError, DocFeedError)


def test_codec_state_error_is_not_malformed_reference() -> None:
    """Configuration errors are not mistaken for skippable bad references."""
    assert not issubclass(CodecStateError, MalformedReference)


def test_exception_message_preserved() -> None:
    """Exception message is preserved when raised."""
    msg = "not an absolute URL"
    with pytest.raises(MalformedReference, match=msg):
        raise MalformedReference(msg)
