"""In-memory persistence backend."""

from calshare.infrastructure.persistence.memory.repositories import MemoryStore
from calshare.infrastructure.persistence.memory.unit_of_work import (
    MemoryUnitOfWork,
    create_memory_uow_factory,
)

__all__ = ["MemoryStore", "MemoryUnitOfWork", "create_memory_uow_factory"]
