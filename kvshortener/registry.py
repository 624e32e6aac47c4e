"""Link registry: resolve and create short links on top of the key-value store

The registry is the only component that knows how links are laid out in the
store:

    <key>                    -> target URL   (always)
    targets:<xxh128(target)> -> key          (only with dedupe_targets enabled)

Example:
    >>> from kvshortener.dao.memory import KeyValueMemoryDAO
    >>> registry = LinkRegistry(store=KeyValueMemoryDAO())
    >>> link = registry.create('https://example.com/page')
    >>> registry.resolve(link.key)
    'https://example.com/page'
"""

import logging

from kvshortener.models import LinkModel
from kvshortener.constants import MAX_KEY_ALLOCATION_ATTEMPTS
from kvshortener.dao.base import KeyValueStoreBaseDAO
from kvshortener.exceptions import KeyAllocationError
from kvshortener.utils.shortener import generate_key, reverse_index_key


logger = logging.getLogger(__name__)


class LinkRegistry:
    """Coordinate lookup and creation of links

    Args:
        store (KeyValueStoreBaseDAO):
            Key-value store holding every link.
        dedupe (bool):
            If True, reuse the existing short key of an already shortened target
            (tracked via a reverse index). Otherwise every call to create()
            allocates a new key. Defaults to False.
        max_attempts (int):
            Bound on key generation and conditional write attempts.
    """

    def __init__(self, store: KeyValueStoreBaseDAO, dedupe: bool = False, max_attempts: int = MAX_KEY_ALLOCATION_ATTEMPTS):
        self.store = store
        self.dedupe = dedupe
        self.max_attempts = max_attempts

    def resolve(self, key: str) -> str | None:
        """Return the target stored under a short key, None if unknown."""
        return self.store.get(key)

    def create(self, target: str) -> LinkModel:
        """Create (or, with dedupe enabled, reuse) a short link for target

        Returns:
            LinkModel: link whose key resolves to target.

        Raises:
            KeyAllocationError:
                If no free key could be claimed within max_attempts.
            DataStoreError:
                If the store can't be reached.
        """
        if self.dedupe:
            existing_key = self._find_existing(target)
            if existing_key is not None:
                logger.debug('Reusing existing short key for target.', extra={'key': existing_key})
                return LinkModel(key=existing_key, target=target)

        link = self._allocate(target)

        if self.dedupe:
            self.store.put(reverse_index_key(target), link.key)
        return link

    def _find_existing(self, target: str) -> str | None:
        key = self.store.get(reverse_index_key(target))
        if key is None:
            return None

        # The reverse entry only counts if the forward mapping still agrees
        # (guards against digest collisions and half-written entries).
        if self.store.get(key) != target:
            logger.debug('Ignoring stale reverse index entry.', extra={'key': key})
            return None
        return key

    def _allocate(self, target: str) -> LinkModel:
        for attempt in range(1, self.max_attempts + 1):
            key = generate_key(self.store, max_attempts=self.max_attempts)
            if self.store.put_if_absent(key, target):
                return LinkModel(key=key, target=target)

            # Another request claimed the key between generate_key() and put_if_absent()
            logger.info(
                'Short key claimed concurrently, retrying (attempt %s/%s).',
                attempt,
                self.max_attempts,
                extra={'key': key},
            )

        raise KeyAllocationError(f'Failed to claim a free short key after {self.max_attempts} attempts.')
