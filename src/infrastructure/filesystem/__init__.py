from src.infrastructure.filesystem.file_cache import FileCache, FileCacheStats

__all__ = ["FileCache", "FileCacheStats"]
