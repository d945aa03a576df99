from tessera.infrastructure.cache.blink import BlinkCache

__all__ = ["BlinkCache"]
