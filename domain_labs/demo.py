"""
Демонстрация объектов-значений книжного склада и путешествий.

Запуск: python -m domain_labs.demo
"""

from .books.domain import (
    BookCollection,
    BookCondition,
    BookReview,
    BookSeries,
    BookStatistics,
    BookTitle,
    Genre,
    Publisher,
)
from .shared_kernel import WarehouseError, generate_id
from .travel.domain import TourGuide, TourReview, Transport, TransportReview, TransportType
from .travel.infrastructure import InMemoryTransportRepository


def demo_books() -> None:
    print("--- Книги ---")
    publisher = Publisher("Govor production", "xxxvodo4kaxxx@gmail.com", 2007)
    print(publisher.get_info())

    title = BookTitle("Война и мир", "Том первый", "ru")
    print(f"Название: {title.get_full_title()}")
    print(
        f"Жанр: {Genre.HISTORICAL_FICTION.display_name}, "
        f"состояние: {BookCondition.LIKE_NEW.display_name}"
    )

    series = BookSeries("Гарри Поттер", "Цикл романов", 7, 1997, 2007)
    print(series.get_info())

    stats = BookStatistics()
    good = BookReview(
        "George", "Good book", "Good book with beautiful imgs^_^", 5, "2025-11-08"
    )
    bad = BookReview(
        "George", "Bad book", "Bad book without beautiful imgs-_-", 1, "2025-11-08"
    )
    for review in (good, bad):
        stats.update_rating(review.rating)
        print(review.get_summary())
    stats.increment_sales(3)
    stats.last_sale_date = "2025-11-09"
    print(stats.get_summary())

    collection = BookCollection("Классика", "Проверенные временем книги")
    collection.add_book(generate_id())
    print(collection.get_info())

    try:
        Publisher("Govor production", "@gmail.com", 2007)
    except WarehouseError as e:
        print(f"Ошибка: {e}")


def demo_travel() -> None:
    print("\n--- Путешествия ---")
    transports = InMemoryTransportRepository()
    flight = Transport(
        company="Belavia",
        departure="Минск",
        arrival="Батуми",
        departure_time="2025-07-01",
        arrival_time="2025-07-01",
        price=320.0,
        transport_type=TransportType.FLIGHT,
    )
    transports.add(flight)

    review = TransportReview(flight.id, "George", "Вовремя и без задержек", 5)
    print(review.get_transport(transports).get_transport_info())
    print(review.get_review_summary())

    guide = TourGuide("Нино", "грузинский", 6)
    print(guide.get_guide_info())
    print(TourReview("George", "Отличная экскурсия", 4).get_review_summary())


def main() -> None:
    demo_books()
    demo_travel()


if __name__ == "__main__":
    main()
