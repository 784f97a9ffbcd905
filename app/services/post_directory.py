import logging
import threading
from collections import Counter
from typing import Callable, Iterable, List, Optional, Tuple

from app.errors import DuplicateSlugError
from app.schemas.blog import PostMetadata

logger = logging.getLogger(__name__)

Snapshot = Tuple[PostMetadata, ...]
Observer = Callable[[Snapshot], None]
Unsubscribe = Callable[[], None]


class PostDirectory:
    """
    Read-only, ordered listing of post metadata.

    Built once at startup and shared by every reader. Posts keep the order
    they were authored in; sorting and publish filtering belong to callers.
    Subscribers get the snapshot as soon as they subscribe.
    """

    def __init__(self, posts: Iterable[PostMetadata]):
        snapshot = tuple(posts)
        duplicates = [
            slug for slug, n in Counter(p.slug for p in snapshot).items() if n > 1
        ]
        if duplicates:
            raise DuplicateSlugError(duplicates)

        self._snapshot: Snapshot = snapshot
        self._by_slug = {p.slug: p for p in snapshot}
        self._observers: List[Observer] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._snapshot)

    def get_snapshot(self) -> Snapshot:
        return self._snapshot

    def get(self, slug: str) -> Optional[PostMetadata]:
        return self._by_slug.get(slug)

    def subscribe(self, observer: Observer) -> Unsubscribe:
        # An observer that raises on delivery is never registered
        observer(self._snapshot)
        with self._lock:
            self._observers.append(observer)

        active = True

        def unsubscribe() -> None:
            nonlocal active
            with self._lock:
                if active:
                    self._observers.remove(observer)
                    active = False

        return unsubscribe
