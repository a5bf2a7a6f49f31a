"""
Общие правила проверки строк, годов, адресов почты и дат.

Функции возвращают bool; решение о том, какую ошибку поднять,
принимает вызывающий объект-значение.
"""

from typing import Optional

_CONTROL_CHARS = ("\t", "\n", "\r")


def is_valid_name(value: str, max_length: Optional[int] = None) -> bool:
    """
    Проверяет непустую строку без управляющих символов.

    Строка из одних пробелов считается некорректной.
    """
    if not value:
        return False
    if max_length is not None and len(value) > max_length:
        return False
    if any(char in value for char in _CONTROL_CHARS):
        return False
    return any(char != " " for char in value)


def is_valid_length(value: str, max_length: int) -> bool:
    """Проверяет только верхнюю границу длины (для описаний)."""
    return len(value) <= max_length


def is_in_range(value: float, minimum: float, maximum: float) -> bool:
    """Проверяет попадание значения в диапазон, включая границы."""
    return minimum <= value <= maximum


def is_valid_email(email: str) -> bool:
    """
    Проверяет адрес почты.

    Пустая строка допустима (почта необязательна). Иначе нужен '@'
    не в первой позиции и точка после него, но не сразу за ним.
    """
    if not email:
        return True
    at_pos = email.find("@")
    if at_pos <= 0:
        return False
    dot_pos = email.find(".", at_pos)
    if dot_pos == -1 or dot_pos == at_pos + 1:
        return False
    return True


def is_valid_date(value: str) -> bool:
    """
    Проверяет формат даты YYYY-MM-DD.

    Календарная корректность не проверяется: "2025-13-40" проходит.
    """
    if len(value) != 10:
        return False
    if value[4] != "-" or value[7] != "-":
        return False
    return all(
        value[i] in "0123456789" for i in range(10) if i not in (4, 7)
    )


def normalize_language(language: str) -> str:
    """Приводит код языка к верхнему регистру."""
    return language.upper()
