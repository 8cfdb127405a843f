from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional
import logging

from avl_trees.logging_config import get_logger

# Get logger for this module
logger = get_logger("AVLTree")


class Direction(Enum):
    """Side of a child link, also used as the direction of a rotation."""
    LEFT = 0
    RIGHT = 1

    def opposite(self) -> "Direction":
        return Direction.RIGHT if self is Direction.LEFT else Direction.LEFT


class AVLTreeError(Exception):
    """Base class for errors signalled by the tree operations."""


class DuplicateKeyError(AVLTreeError, KeyError):
    """Raised by ``insert`` when the key is already stored. The tree is unchanged."""

    def __init__(self, key: int):
        super().__init__(key)
        self.key = key

    def __str__(self):
        return f"key {self.key} already exists in the tree"


class KeyNotFoundError(AVLTreeError, KeyError):
    """Raised by ``delete`` when the key is not stored. The tree is unchanged."""

    def __init__(self, key: int):
        super().__init__(key)
        self.key = key

    def __str__(self):
        return f"key {self.key} not found in the tree"


class PreconditionViolation(AVLTreeError, LookupError):
    """Raised by the prefix queries when the given key is not stored."""

    def __init__(self, key: int, operation: str):
        super().__init__(key, operation)
        self.key = key
        self.operation = operation

    def __str__(self):
        return f"{self.operation}(): key {self.key} must be present in the tree"


class AbstractOrderedMap(ABC):
    """
    Abstract base class for a binary search tree mapping integer keys to
    boolean values.
    """

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True if and only if the tree stores no keys."""
        pass

    @abstractmethod
    def insert(self, key: int, value: bool) -> int:
        """
        Insert a new key with the given boolean value.

        Parameters:
            key (int): The key to insert. Must not be present yet.
            value (bool): The payload.

        Returns:
            int: The number of rebalancing units the insertion required.

        Raises:
            DuplicateKeyError: If the key is already present.
        """
        pass

    @abstractmethod
    def delete(self, key: int) -> int:
        """
        Delete the key from the tree.

        Parameters:
            key (int): The key to delete.

        Returns:
            int: The number of rebalancing units the deletion required.

        Raises:
            KeyNotFoundError: If the key is not present.
        """
        pass

    @abstractmethod
    def search(self, key: int) -> Optional[bool]:
        """
        Return the value stored under ``key``, or None if the key is absent.
        """
        pass

    def empty(self) -> bool:
        return self.is_empty()


def check_key(key, operation: str) -> None:
    """Validate a key argument. Booleans are rejected although they are ints."""
    if not isinstance(key, int) or isinstance(key, bool):
        raise TypeError(f"{operation}(): key must be an int, got {type(key).__name__}")
    if key < 0:
        raise ValueError(f"{operation}(): key must be >= 0, got {key}")


def debug_log(message, *args, **kwargs):
    """Log a debug message only if debug logging is enabled"""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(message, *args, **kwargs)
