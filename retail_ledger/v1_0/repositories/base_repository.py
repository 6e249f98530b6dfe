from typing import Any, Generic, Iterable, List, Optional, Set, TypeVar

from retail_ledger.storage.ledger_store import LedgerStore

ModelT = TypeVar("ModelT")


class BaseRepository(Generic[ModelT]):
    """
    List-backed repository over one collection of a ``LedgerStore``.

    ``key`` names the identifier attribute; collections without one (the
    inventory catalog) are addressed by position instead.
    """

    def __init__(self, store: LedgerStore, collection: str, key: Optional[str] = None):
        self.store = store
        self.collection = collection
        self.key = key

    @property
    def items(self) -> List[ModelT]:
        return getattr(self.store, self.collection)

    def add(self, entity: ModelT) -> ModelT:
        self.items.append(entity)
        return entity

    def add_many(self, entities: Iterable[ModelT]) -> List[ModelT]:
        batch = list(entities)
        self.items.extend(batch)
        return batch

    def replace_all(self, entities: Iterable[ModelT]) -> int:
        self.items[:] = list(entities)
        return len(self.items)

    def get_by_id(self, id_: Any) -> Optional[ModelT]:
        for e in self.items:
            if getattr(e, self.key) == id_:
                return e
        return None

    def ids(self) -> Set[str]:
        return {getattr(e, self.key) for e in self.items}

    def list_all(self) -> List[ModelT]:
        return list(self.items)

    def count(self) -> int:
        return len(self.items)

    def update_fields(
        self,
        entity: ModelT,
        data: dict[str, Any],
        *,
        allow: set[str] | None = None,
    ) -> ModelT:
        for k, v in data.items():
            if allow and k not in allow:
                continue
            setattr(entity, k, v)
        return entity

    def delete(self, entity: ModelT) -> bool:
        for i, e in enumerate(self.items):
            if e is entity:
                del self.items[i]
                return True
        return False
