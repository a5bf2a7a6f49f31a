"""
Общее ядро (Shared Kernel).

Содержит идентификаторы, исключения, правила валидации и логгер,
используемые контекстами книжного склада и путешествий.
"""

from .domain import (
    # Исключения
    DomainException,
    # Базовые типы
    EntityId,
    ErrorKind,
    WarehouseError,
    generate_id,
)
from .infrastructure import ConsoleLogger
from .interfaces import ILogger

__all__ = [
    # Базовые типы
    "EntityId",
    "generate_id",
    # Исключения
    "DomainException",
    "ErrorKind",
    "WarehouseError",
    # Логирование
    "ILogger",
    "ConsoleLogger",
]
