"""Authorization verdicts."""

from enum import StrEnum


class AuthzStatus(StrEnum):
    """Outcome of an authorization check for a (user, document) pair."""

    PERMIT = "permit"
    DENY = "deny"
    INDETERMINATE = "indeterminate"
