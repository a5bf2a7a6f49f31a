"""
Интерфейсы (порты) для контекста книжного склада.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from ..shared_kernel import EntityId
from .domain import BookCollection, BookReview, BookStatistics


class IBookReviewRepository(Protocol):
    """Интерфейс репозитория отзывов о книгах."""

    def add(self, book_id: EntityId, review: BookReview) -> None: ...
    def find_by_book(self, book_id: EntityId) -> List[BookReview]: ...


class IBookStatisticsRepository(Protocol):
    """Интерфейс репозитория статистики книг."""

    def get(self, book_id: EntityId) -> Optional[BookStatistics]: ...
    def save(self, book_id: EntityId, statistics: BookStatistics) -> None: ...


class IBookCollectionRepository(Protocol):
    """Интерфейс репозитория подборок. Подборки различаются по названию."""

    def add(self, collection: BookCollection) -> None: ...
    def get_by_name(self, name: str) -> BookCollection: ...
    def list_all(self) -> List[BookCollection]: ...
