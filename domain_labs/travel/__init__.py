"""
Модуль контекста путешествий (Travel Context).

Отвечает за:
- Реестр транспорта
- Гидов и отзывы о турах
- Отзывы о транспорте, ссылающиеся на рейсы по идентификатору
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    "domain",
    "application",
    "infrastructure",
    "interfaces",
]
