"""In-process implementation of the key-value store

Backs the store with a plain dictionary. Useful for unit tests and local runs
where no Redis is available. Data lives only as long as the process (i.e. a
warm Lambda container) and is never shared between processes.
"""

import threading

from beartype import beartype

from kvshortener.dao.base import KeyValueStoreBaseDAO


class KeyValueMemoryDAO(KeyValueStoreBaseDAO):
    """Dictionary-backed key-value store DAO

    Args:
        data (dict[str, str] | None):
            Optional initial contents. The dictionary is used as-is (not copied),
            so callers may inspect it after the fact.

    Example:
        >>> dao = KeyValueMemoryDAO()
        >>> dao.put_if_absent('abc123', 'https://example.com')
        True
        >>> dao.get('abc123')
        'https://example.com'
    """

    def __init__(self, data: dict[str, str] | None = None, **kwargs):
        self.data = data if data is not None else {}
        self._lock = threading.Lock()

    @beartype
    def get(self, key: str, **kwargs) -> str | None:
        return self.data.get(key)

    @beartype
    def put(self, key: str, value: str, **kwargs) -> 'KeyValueMemoryDAO':
        with self._lock:
            self.data[key] = value
        return self

    @beartype
    def put_if_absent(self, key: str, value: str, **kwargs) -> bool:
        with self._lock:
            if key in self.data:
                return False
            self.data[key] = value
            return True
