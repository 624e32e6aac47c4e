"""Short key generation utility

This module provides helpers for drawing random short keys and allocating a
free one against the key-value store.

Functions:
    random_key(length=6):
        Draw a random lowercase hexadecimal key.

    generate_key(store, max_attempts=10, length=6):
        Draw keys until one is not present in the store.

    reverse_index_key(target):
        Store key of the reverse (target -> short key) index entry.

Example:
    >>> from kvshortener.utils import generate_key
    >>> generate_key(store)
    '3f9a1c'
"""

import uuid
import logging

import xxhash

from kvshortener.constants import KEY_LENGTH, MAX_KEY_ALLOCATION_ATTEMPTS, REVERSE_INDEX_NAMESPACE
from kvshortener.dao.base import KeyValueStoreBaseDAO
from kvshortener.exceptions import KeyAllocationError


logger = logging.getLogger(__name__)


def random_key(length: int = KEY_LENGTH) -> str:
    """Draw a random short key.

    The key is the head of a random (version 4) UUID's hex form, so it only
    uses the [0-9a-f] alphabet, which is safe inside the [0-9a-z] route pattern.

    Args:
        length (int, optional):
            Number of characters. Must be between 1 and 32. Defaults to 6.

    Returns:
        str: Random lowercase hexadecimal key.
    """
    if not 0 < length <= 32:
        raise ValueError(f'Key length must be between 1 and 32 (given value: {length}).')
    return uuid.uuid4().hex[:length]


def generate_key(store: KeyValueStoreBaseDAO, max_attempts: int = MAX_KEY_ALLOCATION_ATTEMPTS, length: int = KEY_LENGTH) -> str:
    """Generate a short key which is not in use yet.

    Draws random keys and checks each against the store until a free one
    is found. The loop is bounded to guarantee termination even when the
    keyspace is nearly exhausted.

    NOTE: Checking and persisting are separate steps here. Callers must write
          the mapping with store.put_if_absent() and retry on failure, since a
          concurrent request may claim the same key in between.

    Args:
        store (KeyValueStoreBaseDAO):
            Key-value store to check candidates against.
        max_attempts (int, optional):
            Maximum number of candidates to draw. Defaults to 10.
        length (int, optional):
            Key length. Defaults to 6.

    Returns:
        str: A key with no stored value at the time of the check.

    Raises:
        KeyAllocationError:
            If every candidate collided with an existing key.
        DataStoreError:
            If the store can't be reached.
    """
    if max_attempts < 1:
        raise ValueError(f'max_attempts must be a positive integer (given value: {max_attempts}).')

    for attempt in range(1, max_attempts + 1):
        candidate = random_key(length)
        if store.get(candidate) is None:
            return candidate
        logger.debug('Short key collision (attempt %s/%s).', attempt, max_attempts, extra={'key': candidate})

    raise KeyAllocationError(f'Failed to find a free short key after {max_attempts} attempts.')


def reverse_index_key(target: str) -> str:
    """Return the store key of the reverse index entry for a target URL.

    Target URLs are hashed (xxh128) to a fixed-length digest, so reverse keys
    stay short and can never look like a 6-character short key.

    Example:
        >>> reverse_index_key('https://example.com')
        'targets:...'
    """
    return f'{REVERSE_INDEX_NAMESPACE}:{xxhash.xxh128_hexdigest(target)}'
