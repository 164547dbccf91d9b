"""In-memory registry for configured fields."""

from typing import Callable, Dict, List, Optional, TypeVar, Generic
from threading import Lock

from .field import Field
from .ids import validate_id
from .validation import validate_field

T = TypeVar('T')


class Registry(Generic[T]):
    """Thread-safe in-memory registry for entities."""

    def __init__(self, name: str, validator: Optional[Callable[[T], None]] = None):
        self.name = name
        self.validator = validator
        self._data: Dict[str, T] = {}
        self._lock = Lock()

    def create(self, id: str, entity: T) -> T:
        """Create a new entity."""
        if not validate_id(id):
            raise ValueError(f"Invalid {self.name} id {id!r}")
        if self.validator:
            self.validator(entity)

        with self._lock:
            if id in self._data:
                raise ValueError(f"{self.name} with id {id} already exists")
            self._data[id] = entity
        return entity

    def get(self, id: str) -> Optional[T]:
        """Get entity by ID."""
        with self._lock:
            return self._data.get(id)

    def update(self, id: str, entity: T) -> T:
        """Update existing entity."""
        if not validate_id(id):
            raise ValueError(f"Invalid {self.name} id {id!r}")
        if self.validator:
            self.validator(entity)

        with self._lock:
            if id not in self._data:
                raise ValueError(f"{self.name} with id {id} not found")
            self._data[id] = entity
        return entity

    def delete(self, id: str) -> bool:
        """Delete entity by ID."""
        with self._lock:
            if id in self._data:
                del self._data[id]
                return True
            return False

    def items(self) -> List[tuple]:
        """List (id, entity) pairs."""
        with self._lock:
            return list(self._data.items())

    def list(self) -> List[T]:
        """List all entities."""
        with self._lock:
            return list(self._data.values())

    def clear(self) -> None:
        """Clear all entities (for testing)."""
        with self._lock:
            self._data.clear()

    def count(self) -> int:
        """Count entities."""
        with self._lock:
            return len(self._data)


class GlobalRegistry:
    """Global singleton registry for all entity types."""

    _instance = None
    _lock = Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        """Initialize all registries."""
        self.fields = Registry[Field]("Field", validate_field)

    def clear_all(self):
        """Clear all registries (for testing)."""
        self.fields.clear()


# Global instance
registry = GlobalRegistry()
