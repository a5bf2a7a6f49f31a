"""
Интерфейсы (порты) для контекста путешествий.
"""

from __future__ import annotations

from typing import List, Protocol

from ..shared_kernel import EntityId
from .domain import Transport, TransportReview


class ITransportRepository(Protocol):
    """Интерфейс реестра транспорта."""

    def add(self, transport: Transport) -> None: ...
    def get_by_id(self, transport_id: EntityId) -> Transport: ...
    def list_all(self) -> List[Transport]: ...


class ITransportReviewRepository(Protocol):
    """Интерфейс репозитория отзывов о транспорте."""

    def add(self, review: TransportReview) -> None: ...
    def find_by_transport(self, transport_id: EntityId) -> List[TransportReview]: ...
