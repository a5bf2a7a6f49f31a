"""
Общие фикстуры для тестов.
"""
from unittest.mock import MagicMock

import pytest

from domain_labs.shared_kernel import generate_id
from domain_labs.travel.domain import Transport, TransportType


@pytest.fixture
def logger() -> MagicMock:
    """Логгер-заглушка, позволяющий проверить вызовы."""
    return MagicMock()


@pytest.fixture
def book_id():
    return generate_id()


@pytest.fixture
def flight() -> Transport:
    """Рейс с корректными данными."""
    return Transport(
        company="Belavia",
        departure="Минск",
        arrival="Батуми",
        departure_time="2025-07-01",
        arrival_time="2025-07-01",
        price=320.0,
        transport_type=TransportType.FLIGHT,
    )
