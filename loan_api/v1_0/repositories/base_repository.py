import threading
from typing import Any, Callable, Dict, Generic, Optional, Protocol, TypeVar, runtime_checkable

# --- los modelos deben exponer .id ---
@runtime_checkable
class HasId(Protocol):
    id: Any  # clave del registro

ModelT = TypeVar("ModelT", bound=HasId)


class BaseRepository(Generic[ModelT]):
    """
    In-memory repository keyed by ``entity.id``.

    Every operation runs inside the same lock, so callers on different
    threads observe the operations as if they ran one after another.
    Reads return new lists, never a live view of the underlying dict.
    """

    def __init__(self) -> None:
        self._items: Dict[Any, ModelT] = {}
        self._lock = threading.Lock()

    def add(self, entity: ModelT) -> ModelT:
        with self._lock:
            if entity.id in self._items:
                raise ValueError(f"duplicate_id: {entity.id}")
            self._items[entity.id] = entity
        return entity

    def get_by_id(self, id_: Any) -> Optional[ModelT]:
        with self._lock:
            return self._items.get(id_)

    def list_all(self) -> list[ModelT]:
        with self._lock:
            return list(self._items.values())

    def list_where(self, predicate: Callable[[ModelT], bool]) -> list[ModelT]:
        # predicate runs under the lock: it must be a pure in-memory check
        with self._lock:
            return [e for e in self._items.values() if predicate(e)]

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def delete_by_id(self, id_: Any) -> bool:
        with self._lock:
            return self._items.pop(id_, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._items.clear()
