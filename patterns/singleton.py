"""
Singleton pattern for single-instance classes.
"""
from typing import Any, Dict, List
import threading
from utils.logging_config import get_logger

logger = get_logger(__name__)


class SingletonMeta(type):
    """
    Thread-safe Singleton metaclass.

    Every class using this metaclass gets exactly one instance per process,
    created on first call. Construction runs under a lock, so threads racing
    on the first call still construct once.
    """
    _instances: Dict[type, Any] = {}
    _lock = threading.RLock()

    def __call__(cls, *args, **kwargs):
        """Create or return existing instance."""
        if cls not in cls._instances:
            with cls._lock:
                # Double-checked locking
                if cls not in cls._instances:
                    instance = super().__call__(*args, **kwargs)
                    cls._instances[cls] = instance
                    logger.info(f"Created singleton instance of {cls.__name__}")

        return cls._instances[cls]

    def get_instance(cls):
        """Access point for the shared instance."""
        return cls()

    def has_instance(cls) -> bool:
        return cls in cls._instances


class Singleton(metaclass=SingletonMeta):
    """Base class for singleton objects."""
    pass


class Database(Singleton):
    """
    The process-wide database handle.

    Use ``Database.get_instance()``; ``Database()`` goes through the same
    guarded path and returns the same object.
    """

    def __init__(self):
        self._history: List[str] = []
        self._history_lock = threading.Lock()
        self.logger = get_logger(self.__class__.__name__)
        self.logger.debug("Opened database connection")

    def query(self, sql: str) -> Dict[str, Any]:
        """Run a statement against the shared connection."""
        with self._history_lock:
            self._history.append(sql)
            sequence = len(self._history)
        self.logger.debug(f"Query #{sequence}: {sql}")
        return {'sequence': sequence, 'sql': sql}

    @property
    def history(self) -> List[str]:
        """Statements executed so far, oldest first."""
        with self._history_lock:
            return list(self._history)
