"""
Модуль контекста книжного склада (Books Context).

Отвечает за описание книг и связанных с ними данных:
- Состояние экземпляра и жанр
- Издательство, название, серия
- Статистика продаж, подборки и отзывы
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    "domain",
    "application",
    "infrastructure",
    "interfaces",
]
