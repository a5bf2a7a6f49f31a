"""
Ограничения, используемые при валидации объектов-значений.

Все значения собраны в одном месте, чтобы доменные классы
не содержали "магических чисел".
"""


class BookTitleConfig:
    """Ограничения для названия книги."""

    MIN_LENGTH = 1
    MAX_LENGTH = 128
    LANGUAGE_LENGTH = 2


class PublisherConfig:
    """Ограничения для издательства."""

    MAX_NAME_LENGTH = 100
    YEAR_MIN = 1400
    YEAR_MAX = 2025


class BookSeriesConfig:
    """Ограничения для книжной серии."""

    MAX_NAME_LENGTH = 100
    MAX_DESCRIPTION_LENGTH = 500
    YEAR_MIN = 1400
    YEAR_MAX = 2025


class BookStatisticsConfig:
    """Ограничения и пороги для статистики книги."""

    MAX_VIEWS = 1_000_000
    MAX_SALES = 100_000
    MIN_RATING = 0.0
    MAX_RATING = 5.0
    BESTSELLER_THRESHOLD = 1000
    HIGHLY_RATED_THRESHOLD = 4.0

    # Веса для показателя популярности
    VIEWS_WEIGHT = 0.01
    SALES_WEIGHT = 0.5
    RATING_WEIGHT = 10.0


class BookCollectionConfig:
    """Ограничения для подборки книг."""

    MAX_NAME_LENGTH = 100
    MAX_DESCRIPTION_LENGTH = 500
    DEFAULT_CATEGORY = "Общее"


class BookReviewConfig:
    """Ограничения для отзыва о книге."""

    MIN_RATING = 1
    MAX_RATING = 5
    MAX_AUTHOR_LENGTH = 100
    MAX_TITLE_LENGTH = 200
    MAX_TEXT_LENGTH = 2000
    POSITIVE_THRESHOLD = 4
    CRITICAL_THRESHOLD = 2


class TourReviewConfig:
    """Ограничения для отзыва о туре."""

    MIN_RATING = 1
    MAX_RATING = 5
    MAX_REVIEW_LENGTH = 500


class TransportConfig:
    """Ограничения для транспорта."""

    MAX_COMPANY_NAME_LENGTH = 40
    MIN_PRICE = 5.0
    MAX_PRICE = 5000.0


class TransportReviewConfig:
    """Ограничения для отзыва о транспорте."""

    MIN_RATING = 1
    MAX_RATING = 5
