"""DocId value object - stable reference to a repository document."""

from dataclasses import dataclass

from docfeed.domain.exceptions import InvalidArgument
from docfeed.domain.value_objects.feed_action import FeedAction
from docfeed.domain.value_objects.read_permission import ReadPermission


@dataclass(frozen=True, eq=False)
class DocId:
    """Unique document in the repository plus its declared read permission.

    The adaptor hands DocIds to the crawl system to have documents crawled and
    indexed; the crawl system hands them back when it needs content or an
    authorization decision for a particular document.

    Equality covers both fields, the hash only the id, so two DocIds that
    differ only in permission class collide in a set but stay distinct.
    """

    id: str
    permission_class: ReadPermission = ReadPermission.IS_PUBLIC

    def __post_init__(self) -> None:
        if self.id is None:
            raise InvalidArgument("id cannot be None")
        if not isinstance(self.id, str):
            raise InvalidArgument(f"id must be a string, got {type(self.id).__name__}")
        if not self.id:
            raise InvalidArgument("id cannot be empty")
        if self.permission_class is None:
            raise InvalidArgument("permissions must be provided")
        try:
            permission = ReadPermission(self.permission_class)
        except ValueError as e:
            raise InvalidArgument(f"unknown permission class: {self.permission_class!r}") from e
        object.__setattr__(self, "permission_class", permission)

    @property
    def feed_action(self) -> FeedAction:
        return FeedAction.ADD

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.id == other.id and self.permission_class == other.permission_class

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"DocId({self.id}|{self.permission_class})"
