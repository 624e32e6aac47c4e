"""Abstract base class for key-value store data access objects (DAOs).

This class establishes a consistent contract for the flat string -> string
store backing every persisted link, regardless of the underlying storage
mechanism (e.g., Redis or an in-process dictionary).

Responsibilities:
    - Provide plain and conditional writes of string values.
    - Provide reads which report a missing key as None (not as an error).
    - Standardize error handling across multiple data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from kvshortener.dao.redis import KeyValueRedisDAO

        >>> dao = KeyValueRedisDAO(...)

        >>> dao.put_if_absent("a1b2c3", "https://example.com/blog/article-123")
        True
        >>> dao.put_if_absent("a1b2c3", "https://example.com/other")
        False

        >>> dao.get("a1b2c3")
        'https://example.com/blog/article-123'

        >>> print(dao.get("zzzzzz"))
        None
"""

from abc import ABC, abstractmethod


class KeyValueStoreBaseDAO(ABC):
    """Interface for key-value store data access objects (DAOs).

    Methods:
        get(key: str, **kwargs) -> str | None:
            Retrieve the value stored under key.
            Returns None if the key does not exist.
            Raises DataStoreError on connection or read failure.

        put(key: str, value: str, **kwargs) -> KeyValueStoreBaseDAO:
            Store value under key, overwriting any previous value.
            Raises DataStoreError on connection or write failure.

        put_if_absent(key: str, value: str, **kwargs) -> bool:
            Atomically store value under key only if the key does not exist.
            Returns False (and leaves the stored value untouched) otherwise.
            Raises DataStoreError on connection or write failure.

    Subclassing:
        Datastore-specific implementations (e.g., KeyValueRedisDAO or
        KeyValueMemoryDAO) must extend this class and implement all
        abstract methods.

    NOTE:
        - Entries never expire and the DAO does not provide an interface
          to delete them.
    """

    @abstractmethod
    def get(self, key: str, **kwargs) -> str | None:
        """Retrieve the value stored under a key.

        Args:
            key (str):
                The key to look up.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            str | None: The stored value if found, otherwise None.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def put(self, key: str, value: str, **kwargs) -> 'KeyValueStoreBaseDAO':
        """Store a value under a key (last write wins).

        Args:
            key (str):
                The key to write.

            value (str):
                The value to store.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            KeyValueStoreBaseDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def put_if_absent(self, key: str, value: str, **kwargs) -> bool:
        """Store a value under a key only if the key is not set yet.

        Args:
            key (str):
                The key to write.

            value (str):
                The value to store.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            bool: True if the value was written, False if the key already existed.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass
