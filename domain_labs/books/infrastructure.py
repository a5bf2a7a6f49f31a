"""
Инфраструктурный слой контекста книжного склада.

Реализации репозиториев в памяти.
"""

from typing import Dict, List, Optional

from ..shared_kernel import EntityId
from . import interfaces as ports
from .domain import BookCollection, BookReview, BookStatistics


class InMemoryBookReviewRepository(ports.IBookReviewRepository):
    """Реализация репозитория отзывов в памяти."""

    def __init__(self):
        self._reviews: Dict[EntityId, List[BookReview]] = {}

    def add(self, book_id: EntityId, review: BookReview) -> None:
        self._reviews.setdefault(book_id, []).append(review)

    def find_by_book(self, book_id: EntityId) -> List[BookReview]:
        return list(self._reviews.get(book_id, []))


class InMemoryBookStatisticsRepository(ports.IBookStatisticsRepository):
    """Реализация репозитория статистики в памяти."""

    def __init__(self):
        self._statistics: Dict[EntityId, BookStatistics] = {}

    def get(self, book_id: EntityId) -> Optional[BookStatistics]:
        return self._statistics.get(book_id)

    def save(self, book_id: EntityId, statistics: BookStatistics) -> None:
        self._statistics[book_id] = statistics


class InMemoryBookCollectionRepository(ports.IBookCollectionRepository):
    """Реализация репозитория подборок в памяти."""

    def __init__(self):
        self._collections: Dict[str, BookCollection] = {}

    def add(self, collection: BookCollection) -> None:
        if collection.name in self._collections:
            raise ValueError(f"Collection '{collection.name}' already exists")
        self._collections[collection.name] = collection

    def get_by_name(self, name: str) -> BookCollection:
        if name not in self._collections:
            raise KeyError(f"Collection '{name}' not found")
        return self._collections[name]

    def list_all(self) -> List[BookCollection]:
        return list(self._collections.values())
