from kvshortener.dao.memory.kv_store_memory_dao import KeyValueMemoryDAO


__all__ = ['KeyValueMemoryDAO']
