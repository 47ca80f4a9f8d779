"""A class with exactly one lazily created, thread-safe instance."""

from __future__ import annotations

import threading


class Singleton:
    """Obtain the one instance through get_instance; direct construction fails."""

    _instance: Singleton | None = None
    _lock = threading.Lock()

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} is created through get_instance()")

    @classmethod
    def get_instance(cls) -> Singleton:
        instance = cls._instance
        if instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = object.__new__(cls)
                instance = cls._instance
        return instance

    def __copy__(self) -> Singleton:
        return self

    def __deepcopy__(self, memo) -> Singleton:
        return self