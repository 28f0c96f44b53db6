"""Registry that creates indexes by name."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, ClassVar, Optional

from knowhere.errors import KnowhereError

logger = logging.getLogger("knowhere")

IndexCreator = Callable[[Any], Any]


class IndexFactory:
    """Map index type names to functions that build index objects."""

    _instance: ClassVar[Optional["IndexFactory"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._creators: dict[str, IndexCreator] = {}

    def register(self, name: str, func: IndexCreator) -> "IndexFactory":
        """Register ``func`` under ``name``, replacing any earlier one."""
        self._creators[name] = func
        return self

    def create(self, name: str, obj: Any = None) -> Any:
        """Build an index of type ``name``, passing ``obj`` to its creator."""
        try:
            creator = self._creators[name]
        except KeyError:
            raise KnowhereError(f"index type {name} is not registered") from None
        logger.info("create knowhere index %s", name)
        return creator(obj)

    def __contains__(self, name: object) -> bool:
        return name in self._creators

    @classmethod
    def instance(cls) -> "IndexFactory":
        """The process-wide factory."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance