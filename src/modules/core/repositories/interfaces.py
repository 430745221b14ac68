"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from django.db import models

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the entity managed by the
    repository (e.g. ``Product``).  Entities are addressed by an
    integer primary key assigned by the store.
    """

    @abstractmethod
    def query(self) -> models.QuerySet:
        """Return a lazy, composable query over every entity."""

    @abstractmethod
    def list(self) -> List[T]:
        """Return every entity, materialized."""

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def exists(self, id: int) -> bool:
        """Tell whether an entity with this primary key exists."""

    @abstractmethod
    def add(self, entity: T) -> T:
        """Insert a new entity; the store assigns its primary key."""

    @abstractmethod
    def update(self, entity: T) -> T:
        """Overwrite the stored fields of an existing entity."""

    @abstractmethod
    def delete(self, id: int) -> bool:
        """Remove an entity by ID."""
