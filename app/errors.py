from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LoadErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    RENDER_FAILED = "render_failed"


@dataclass(frozen=True)
class FetchError:
    """A text resource could not be retrieved, or came back with a non-200 status."""

    path: str
    status_code: Optional[int] = None
    detail: str = ""


@dataclass(frozen=True)
class LoadError:
    """
    Failure of a post load.

    Every fetch failure is reported as NOT_FOUND regardless of the upstream
    status; `status_code` keeps the upstream value for logs only.
    """

    kind: LoadErrorKind
    slug: str
    detail: str = ""
    status_code: Optional[int] = None


class DuplicateSlugError(ValueError):
    def __init__(self, slugs):
        self.slugs = list(slugs)
        super().__init__(f"Duplicate slugs: {self.slugs}")
