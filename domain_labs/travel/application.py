"""
Прикладной слой контекста путешествий.

Содержит сервис регистрации транспорта и приема отзывов о поездках.
"""

from typing import List, Optional

from pydantic import BaseModel

from ..shared_kernel import ConsoleLogger, EntityId, ILogger, WarehouseError
from . import interfaces as ports
from .domain import Transport, TransportReview, TransportType

# DTO (Data Transfer Objects) для входящих данных


class RegisterTransportRequest(BaseModel):
    """Запрос на регистрацию рейса."""

    company: str
    departure: str
    arrival: str
    departure_time: str
    arrival_time: str
    price: float
    transport_type: TransportType


class SubmitTransportReviewRequest(BaseModel):
    """Запрос на добавление отзыва о транспорте."""

    transport_id: EntityId
    reviewer_name: str
    comment: str
    rating: int


# DTO для исходящих данных


class TransportDTO(BaseModel):
    """DTO для представления транспорта."""

    id: EntityId
    company: str
    transport_type: str
    departure: str
    arrival: str
    price: float
    info: str

    @classmethod
    def from_domain(cls, transport: Transport) -> "TransportDTO":
        """Создает DTO из доменной модели."""
        return cls(
            id=transport.id,
            company=transport.company,
            transport_type=transport.transport_type.value,
            departure=transport.departure,
            arrival=transport.arrival,
            price=transport.price,
            info=transport.get_transport_info(),
        )


class TransportReviewDTO(BaseModel):
    """DTO для представления отзыва о транспорте."""

    transport_id: EntityId
    company: str
    reviewer_name: str
    comment: str
    rating: int
    summary: str

    @classmethod
    def from_domain(
        cls, review: TransportReview, transport: Transport
    ) -> "TransportReviewDTO":
        """Создает DTO из доменной модели."""
        return cls(
            transport_id=review.transport_id,
            company=transport.company,
            reviewer_name=review.reviewer_name,
            comment=review.comment,
            rating=review.rating,
            summary=review.get_review_summary(),
        )


# Сервисы приложения


class TransportReviewApplicationService:
    """Сервис приложения для транспорта и отзывов о нем."""

    def __init__(
        self,
        transports: ports.ITransportRepository,
        reviews: ports.ITransportReviewRepository,
        logger: Optional[ILogger] = None,
    ):
        self._transports = transports
        self._reviews = reviews
        self._logger = logger or ConsoleLogger()

    def register_transport(self, request: RegisterTransportRequest) -> TransportDTO:
        """Регистрирует рейс в реестре."""
        try:
            transport = Transport(**request.model_dump())
        except WarehouseError as e:
            self._logger.error(f"Ошибка при регистрации транспорта: {e}")
            raise
        self._transports.add(transport)
        self._logger.info(
            "Зарегистрирован транспорт",
            transport_id=transport.id,
            company=transport.company,
        )
        return TransportDTO.from_domain(transport)

    def submit_review(self, request: SubmitTransportReviewRequest) -> TransportReviewDTO:
        """Добавляет отзыв о зарегистрированном транспорте."""
        try:
            review = TransportReview(
                request.transport_id,
                request.reviewer_name,
                request.comment,
                request.rating,
            )
            transport = review.get_transport(self._transports)
        except (WarehouseError, KeyError) as e:
            self._logger.error(
                f"Ошибка при добавлении отзыва: {e}",
                transport_id=request.transport_id,
            )
            raise
        self._reviews.add(review)
        self._logger.info(
            "Добавлен отзыв о транспорте",
            transport_id=review.transport_id,
            rating=review.rating,
        )
        return TransportReviewDTO.from_domain(review, transport)

    def list_reviews(self, transport_id: EntityId) -> List[TransportReviewDTO]:
        """Возвращает отзывы о транспорте."""
        transport = self._transports.get_by_id(transport_id)
        return [
            TransportReviewDTO.from_domain(review, transport)
            for review in self._reviews.find_by_transport(transport_id)
        ]

    def get_average_rating(self, transport_id: EntityId) -> float:
        """Средняя оценка транспорта; 0.0, если отзывов нет."""
        reviews = self._reviews.find_by_transport(transport_id)
        if not reviews:
            return 0.0
        return sum(review.rating for review in reviews) / len(reviews)
