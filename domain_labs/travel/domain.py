"""
Доменная модель контекста путешествий.

Транспорт является сущностью с собственным идентификатором и живет
в реестре. Отзывы о транспорте ссылаются на него только по идентификатору.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from ..config import TourReviewConfig, TransportConfig, TransportReviewConfig
from ..shared_kernel import EntityId, WarehouseError, generate_id
from ..shared_kernel.validation import is_in_range, is_valid_date, is_valid_name

if TYPE_CHECKING:
    from .interfaces import ITransportRepository


def invalid_field(field_name: str, rule: str) -> WarehouseError:
    """Ошибка валидации с указанием поля и нарушенного правила."""
    return WarehouseError.data_validation(f"Поле '{field_name}' - {rule}")


class TransportType(str, Enum):
    """Вид транспорта."""

    FLIGHT = "flight"
    TRAIN = "train"
    BUS = "bus"
    SHIP = "ship"
    TAXI = "taxi"

    @property
    def display_name(self) -> str:
        return _TRANSPORT_TYPE_NAMES.get(self, "Неизвестно")

    def __str__(self) -> str:
        return self.display_name


_TRANSPORT_TYPE_NAMES = {
    TransportType.FLIGHT: "Самолет",
    TransportType.TRAIN: "Поезд",
    TransportType.BUS: "Автобус",
    TransportType.SHIP: "Корабль",
    TransportType.TAXI: "Такси",
}


class Transport(BaseModel):
    """Рейс перевозчика между двумя пунктами."""

    id: EntityId = Field(default_factory=generate_id)
    company: str
    departure: str
    arrival: str
    departure_time: str
    arrival_time: str
    price: float
    transport_type: TransportType

    @field_validator("company")
    @classmethod
    def check_company(cls, v: str) -> str:
        if not v:
            raise invalid_field("company", "не может быть пустым")
        if len(v) > TransportConfig.MAX_COMPANY_NAME_LENGTH:
            raise invalid_field(
                "company",
                f"не может быть длиннее {TransportConfig.MAX_COMPANY_NAME_LENGTH} символов",
            )
        return v

    @field_validator("departure", "arrival")
    @classmethod
    def check_location(cls, v: str, info: ValidationInfo) -> str:
        if not v:
            raise invalid_field(
                info.field_name, "пункты отправления и прибытия должны быть указаны"
            )
        return v

    @field_validator("departure_time", "arrival_time")
    @classmethod
    def check_time(cls, v: str, info: ValidationInfo) -> str:
        if not is_valid_date(v):
            raise invalid_field(info.field_name, "ожидается дата в формате YYYY-MM-DD")
        return v

    @field_validator("price")
    @classmethod
    def check_price(cls, v: float) -> float:
        if not is_in_range(v, TransportConfig.MIN_PRICE, TransportConfig.MAX_PRICE):
            raise invalid_field(
                "price",
                f"должна быть в диапазоне {TransportConfig.MIN_PRICE:g}"
                f" - {TransportConfig.MAX_PRICE:g}",
            )
        return v

    def get_transport_info(self) -> str:
        return (
            f"Перевозчик: {self.company}\n"
            f"Тип: {self.transport_type.display_name}\n"
            f"Откуда: {self.departure}, {self.departure_time}\n"
            f"Куда: {self.arrival}, {self.arrival_time}\n"
            f"Цена: ${int(self.price)}"
        )


@dataclass(frozen=True)
class TourGuide:
    """Гид, сопровождающий тур."""

    name: str
    language: str
    experience_years: int

    def __post_init__(self):
        if not is_valid_name(self.name):
            raise invalid_field("name", "некорректное имя")
        if not self.language:
            raise invalid_field("language", "не может быть пустым")
        if self.experience_years < 0:
            raise invalid_field("experience_years", "не может быть отрицательным")

    def get_guide_info(self) -> str:
        return (
            f"Гид: {self.name}\n"
            f"Язык: {self.language}\n"
            f"Опыт: {self.experience_years} лет"
        )


@dataclass(frozen=True)
class TourReview:
    """Отзыв туриста о туре."""

    reviewer_name: str
    comment: str
    rating: int

    def __post_init__(self):
        if not is_valid_name(self.reviewer_name):
            raise invalid_field("reviewer_name", "некорректное имя")
        if not self.comment or len(self.comment) > TourReviewConfig.MAX_REVIEW_LENGTH:
            raise invalid_field(
                "comment",
                "не может быть пустым или длиннее "
                f"{TourReviewConfig.MAX_REVIEW_LENGTH} символов",
            )
        if not is_in_range(
            self.rating, TourReviewConfig.MIN_RATING, TourReviewConfig.MAX_RATING
        ):
            raise invalid_field(
                "rating",
                f"должна быть от {TourReviewConfig.MIN_RATING} "
                f"до {TourReviewConfig.MAX_RATING}",
            )

    def get_review_summary(self) -> str:
        return f"{self.reviewer_name} оценил(а) на {self.rating}/5: {self.comment}"


@dataclass(frozen=True)
class TransportReview:
    """
    Отзыв о поездке.

    Хранит только идентификатор транспорта: временем жизни транспорта
    управляет реестр, а не отзыв.
    """

    transport_id: Optional[EntityId]
    reviewer_name: str
    comment: str
    rating: int

    def __post_init__(self):
        if self.transport_id is None:
            raise invalid_field("transport_id", "транспорт должен быть указан")
        if not is_valid_name(self.reviewer_name):
            raise invalid_field("reviewer_name", "некорректное имя")
        if not self.comment:
            raise invalid_field("comment", "не может быть пустым")
        if not is_in_range(
            self.rating,
            TransportReviewConfig.MIN_RATING,
            TransportReviewConfig.MAX_RATING,
        ):
            raise invalid_field(
                "rating",
                f"должна быть в диапазоне {TransportReviewConfig.MIN_RATING}"
                f" - {TransportReviewConfig.MAX_RATING}",
            )

    def get_transport(self, transports: ITransportRepository) -> Transport:
        """Находит транспорт в реестре по идентификатору."""
        return transports.get_by_id(self.transport_id)

    def get_review_summary(self) -> str:
        return f"{self.reviewer_name} оценил(а) на {self.rating}/5: {self.comment}"
