"""Select the key-value store DAO for the active backend

The Lambda configuration (see kvshortener.utils.config.load_config) names the
active backend and carries a section of connection parameters for it:

    {
        "active_backend": "redis",
        "redis": {"host": "redis.internal", "port": 6379, "db": 0}
    }
"""

import logging

from kvshortener.types import LambdaConfiguration
from kvshortener.dao.base import KeyValueStoreBaseDAO
from kvshortener.dao.memory import KeyValueMemoryDAO
from kvshortener.dao.redis import KeyValueRedisDAO
from kvshortener.exceptions import BadConfigurationError


logger = logging.getLogger(__name__)

BACKENDS: dict[str, type[KeyValueStoreBaseDAO]] = {
    'redis': KeyValueRedisDAO,
    'memory': KeyValueMemoryDAO,
}

# Shared by every memory-backed DAO in this process (survives warm Lambda invocations)
_memory_data: dict[str, str] = {}


def kv_store_dao(config: LambdaConfiguration, prefix: str | None = None) -> KeyValueStoreBaseDAO:
    """Build the key-value store DAO for the configured backend

    Args:
        config (LambdaConfiguration):
            Lambda configuration with 'active_backend' and a section named after it.
        prefix (str | None):
            Namespace prefix for store keys (only meaningful for Redis).

    Returns:
        KeyValueStoreBaseDAO: Ready-to-use DAO instance.

    Raises:
        BadConfigurationError:
            If the active backend is missing or unknown.
        DataStoreError:
            If the backend can't be reached (Redis healthcheck).
    """
    backend = config.get('active_backend')
    if backend not in BACKENDS:
        raise BadConfigurationError(f'Unknown key-value store backend: {backend!r}')

    if backend == 'memory':
        return KeyValueMemoryDAO(data=_memory_data)

    logger.debug('Using Redis as the key-value store backend.')
    backend_config = {f'redis_{k}': v for k, v in config.get('redis', {}).items()}
    return KeyValueRedisDAO(**backend_config, prefix=prefix)
