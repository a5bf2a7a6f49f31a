"""
Основные доменные типы общего ядра: идентификаторы и исключения.
"""

from enum import Enum
from uuid import UUID, uuid4

# Общие типы идентификаторов
EntityId = UUID


def generate_id() -> UUID:
    """Генерирует новый UUID."""
    return uuid4()


class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class ErrorKind(str, Enum):
    """Категории ошибок системы."""

    INSUFFICIENT_STOCK = "insufficient_stock"
    BOOK_NOT_FOUND = "book_not_found"
    INVALID_ISBN = "invalid_isbn"
    ORDER_PROCESSING = "order_processing"
    PAYMENT_PROCESSING = "payment_processing"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    DUPLICATE_BOOK = "duplicate_book"
    INVALID_ORDER_STATE = "invalid_order_state"
    SHIPPING = "shipping"
    REPORT_GENERATION = "report_generation"
    DATA_VALIDATION = "data_validation"

    @property
    def label(self) -> str:
        """Метка категории, которая добавляется в начало сообщения."""
        return _ERROR_LABELS[self]


_ERROR_LABELS = {
    ErrorKind.INSUFFICIENT_STOCK: "Недостаточно товара",
    ErrorKind.BOOK_NOT_FOUND: "Книга не найдена",
    ErrorKind.INVALID_ISBN: "Некорректный ISBN",
    ErrorKind.ORDER_PROCESSING: "Ошибка обработки заказа",
    ErrorKind.PAYMENT_PROCESSING: "Ошибка обработки платежа",
    ErrorKind.AUTHENTICATION: "Ошибка аутентификации",
    ErrorKind.AUTHORIZATION: "Доступ запрещен",
    ErrorKind.DUPLICATE_BOOK: "Дубликат книги",
    ErrorKind.INVALID_ORDER_STATE: "Недопустимое состояние заказа",
    ErrorKind.SHIPPING: "Ошибка доставки",
    ErrorKind.REPORT_GENERATION: "Ошибка формирования отчета",
    ErrorKind.DATA_VALIDATION: "Ошибка валидации данных",
}


class WarehouseError(DomainException):
    """
    Ошибка предметной области с явной категорией.

    Сообщение формируется из метки категории и текста,
    переданного вызывающей стороной.
    """

    def __init__(self, kind: ErrorKind, detail: str):
        self.kind = kind
        self.detail = detail
        self.message = f"{kind.label}: {detail}"
        super().__init__(self.message)

    @classmethod
    def data_validation(cls, detail: str) -> "WarehouseError":
        """Создает ошибку валидации данных."""
        return cls(ErrorKind.DATA_VALIDATION, detail)
