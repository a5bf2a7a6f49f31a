"""
Инфраструктурный слой контекста путешествий.

Реализации репозиториев в памяти.
"""

from typing import Dict, List

from ..shared_kernel import EntityId
from . import interfaces as ports
from .domain import Transport, TransportReview


class InMemoryTransportRepository(ports.ITransportRepository):
    """Реестр транспорта в памяти. Владеет объектами Transport."""

    def __init__(self):
        self._transports: Dict[EntityId, Transport] = {}

    def add(self, transport: Transport) -> None:
        if transport.id in self._transports:
            raise ValueError(f"Transport with id {transport.id} already exists")
        self._transports[transport.id] = transport

    def get_by_id(self, transport_id: EntityId) -> Transport:
        if transport_id not in self._transports:
            raise KeyError(f"Transport with id {transport_id} not found")
        return self._transports[transport_id]

    def list_all(self) -> List[Transport]:
        return list(self._transports.values())


class InMemoryTransportReviewRepository(ports.ITransportReviewRepository):
    """Реализация репозитория отзывов о транспорте в памяти."""

    def __init__(self):
        self._reviews: List[TransportReview] = []

    def add(self, review: TransportReview) -> None:
        self._reviews.append(review)

    def find_by_transport(self, transport_id: EntityId) -> List[TransportReview]:
        return [
            review for review in self._reviews
            if review.transport_id == transport_id
        ]
