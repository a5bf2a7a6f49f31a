"""
Доменная модель контекста книжного склада.

Содержит перечисления (состояние книги, жанр) и объекты-значения,
которые проверяют свои поля при создании и умеют выводить краткую сводку.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from ..config import (
    BookCollectionConfig,
    BookReviewConfig,
    BookSeriesConfig,
    BookStatisticsConfig,
    BookTitleConfig,
    PublisherConfig,
)
from ..shared_kernel import EntityId, WarehouseError
from ..shared_kernel.validation import (
    is_in_range,
    is_valid_date,
    is_valid_email,
    is_valid_length,
    is_valid_name,
    normalize_language,
)

# ============================================
# Enums (Перечисления)
# ============================================


class BookCondition(str, Enum):
    """Физическое состояние экземпляра книги."""

    NEW = "new"
    LIKE_NEW = "like_new"
    VERY_GOOD = "very_good"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @property
    def display_name(self) -> str:
        return _CONDITION_NAMES.get(self, "Неизвестно")

    def is_new(self) -> bool:
        return self is BookCondition.NEW

    def is_used(self) -> bool:
        return not self.is_new()

    def needs_replacement(self) -> bool:
        """Книга в плохом состоянии требует замены."""
        return self is BookCondition.POOR

    def __str__(self) -> str:
        return self.display_name


_CONDITION_NAMES = {
    BookCondition.NEW: "Новая",
    BookCondition.LIKE_NEW: "Как новая",
    BookCondition.VERY_GOOD: "Очень хорошее",
    BookCondition.GOOD: "Хорошее",
    BookCondition.FAIR: "Удовлетворительное",
    BookCondition.POOR: "Плохое",
}


class Genre(str, Enum):
    """Жанр книги."""

    MYSTERY = "mystery"
    THRILLER = "thriller"
    FANTASY = "fantasy"
    SCIENCE_FICTION = "science_fiction"
    ROMANCE = "romance"
    HISTORICAL_FICTION = "historical_fiction"
    HORROR = "horror"
    FOR_CHILDREN = "for_children"
    AUTOBIOGRAPHY = "autobiography"
    DRAMA = "drama"
    POETRY = "poetry"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        return _GENRE_NAMES.get(self, "Неизвестный жанр")

    def __str__(self) -> str:
        return self.display_name


_GENRE_NAMES = {
    Genre.MYSTERY: "Детектив",
    Genre.THRILLER: "Триллер",
    Genre.FANTASY: "Фэнтези",
    Genre.SCIENCE_FICTION: "Научная фантастика",
    Genre.ROMANCE: "Любовный роман",
    Genre.HISTORICAL_FICTION: "Исторический роман",
    Genre.HORROR: "Ужасы",
    Genre.FOR_CHILDREN: "Детская литература",
    Genre.AUTOBIOGRAPHY: "Автобиография",
    Genre.DRAMA: "Драма",
    Genre.POETRY: "Поэзия",
    Genre.OTHER: "Другое",
}


# ============================================
# Value Objects (Объекты-значения)
# ============================================


@dataclass(frozen=True)
class Publisher:
    """
    Издательство.

    Атрибуты:
        name: Название (до 100 символов)
        contact_email: Контактный адрес почты, может быть пустым
        foundation_year: Год основания (1400-2025)
    """

    name: str
    contact_email: str
    foundation_year: int

    def __post_init__(self):
        if not is_valid_name(self.name, PublisherConfig.MAX_NAME_LENGTH):
            raise WarehouseError.data_validation(
                f"Некорректное название издательства: '{self.name}'"
            )
        if not is_valid_email(self.contact_email):
            raise WarehouseError.data_validation(
                f"Некорректный формат почты: '{self.contact_email}'"
            )
        if not is_in_range(
            self.foundation_year, PublisherConfig.YEAR_MIN, PublisherConfig.YEAR_MAX
        ):
            raise WarehouseError.data_validation(
                f"Некорректный год основания: {self.foundation_year}"
            )

    def get_info(self) -> str:
        info = f"Издательство: {self.name}\nОсновано: {self.foundation_year}"
        if self.contact_email:
            info += f"\nEmail: {self.contact_email}"
        return info


@dataclass(frozen=True)
class BookTitle:
    """
    Название книги.

    Атрибуты:
        title: Основное название (1-128 символов)
        subtitle: Подзаголовок, может быть пустым
        language: Двухбуквенный код языка, хранится в верхнем регистре
    """

    title: str
    subtitle: str
    language: str

    def __post_init__(self):
        if not self._is_valid_title(self.title):
            raise WarehouseError.data_validation(
                f"Некорректное название книги: '{self.title}'"
            )
        if self.subtitle and not self._is_valid_title(self.subtitle):
            raise WarehouseError.data_validation(
                f"Некорректный подзаголовок книги: '{self.subtitle}'"
            )
        language = normalize_language(self.language)
        if len(language) != BookTitleConfig.LANGUAGE_LENGTH:
            raise WarehouseError.data_validation(
                f"Код языка должен состоять из 2 букв: '{self.language}'"
            )
        object.__setattr__(self, "language", language)

    @staticmethod
    def _is_valid_title(value: str) -> bool:
        return len(value) >= BookTitleConfig.MIN_LENGTH and is_valid_name(
            value, BookTitleConfig.MAX_LENGTH
        )

    def get_full_title(self) -> str:
        """Возвращает название вместе с подзаголовком и языком."""
        if not self.subtitle:
            return f"{self.title} ({self.language})"
        return f"{self.title}: {self.subtitle} ({self.language})"


@dataclass(frozen=True)
class BookSeries:
    """
    Книжная серия.

    Нулевой end_year означает, что серия еще выходит.
    Нулевой start_year означает, что год начала неизвестен.
    """

    name: str
    description: str = ""
    book_count: int = 0
    start_year: int = 0
    end_year: int = 0

    def __post_init__(self):
        if not is_valid_name(self.name, BookSeriesConfig.MAX_NAME_LENGTH):
            raise WarehouseError.data_validation(
                f"Некорректное название серии: '{self.name}'"
            )
        if not is_valid_length(
            self.description, BookSeriesConfig.MAX_DESCRIPTION_LENGTH
        ):
            raise WarehouseError.data_validation("Слишком длинное описание серии")
        if self.book_count < 0:
            raise WarehouseError.data_validation(
                f"Некорректное количество книг: {self.book_count}"
            )
        if not self._is_valid_year(self.start_year):
            raise WarehouseError.data_validation(
                f"Некорректный год начала: {self.start_year}"
            )
        if not self._is_valid_year(self.end_year):
            raise WarehouseError.data_validation(
                f"Некорректный год окончания: {self.end_year}"
            )
        if self.end_year != 0 and self.end_year < self.start_year:
            raise WarehouseError.data_validation(
                "Год окончания не может быть раньше года начала"
            )

    @staticmethod
    def _is_valid_year(year: int) -> bool:
        return year == 0 or is_in_range(
            year, BookSeriesConfig.YEAR_MIN, BookSeriesConfig.YEAR_MAX
        )

    def is_completed(self) -> bool:
        return self.end_year != 0

    def is_ongoing(self) -> bool:
        return self.end_year == 0

    def get_info(self) -> str:
        info = f"Серия: {self.name}"
        if self.description:
            info += f" - {self.description}"
        details: List[str] = []
        if self.book_count > 0:
            details.append(f"{self.book_count} книг")
        if self.start_year > 0:
            end = str(self.end_year) if self.is_completed() else "н.в."
            details.append(f"{self.start_year}-{end}")
        if details:
            info += f" ({', '.join(details)})"
        return info


class BookStatistics(BaseModel):
    """
    Статистика продаж и оценок книги.

    Единственный изменяемый объект контекста: каждое присваивание
    проходит ту же проверку, что и конструктор.
    """

    model_config = ConfigDict(validate_assignment=True)

    view_count: int = 0
    sales_count: int = 0
    average_rating: float = 0.0
    review_count: int = 0
    last_sale_date: str = ""

    def __init__(
        self,
        view_count: int = 0,
        sales_count: int = 0,
        average_rating: float = 0.0,
        review_count: int = 0,
        last_sale_date: str = "",
    ):
        super().__init__(
            view_count=view_count,
            sales_count=sales_count,
            average_rating=average_rating,
            review_count=review_count,
            last_sale_date=last_sale_date,
        )

    @field_validator("view_count")
    @classmethod
    def check_view_count(cls, v: int) -> int:
        if not is_in_range(v, 0, BookStatisticsConfig.MAX_VIEWS):
            raise WarehouseError.data_validation(
                f"Некорректное количество просмотров: {v}"
            )
        return v

    @field_validator("sales_count")
    @classmethod
    def check_sales_count(cls, v: int) -> int:
        if not is_in_range(v, 0, BookStatisticsConfig.MAX_SALES):
            raise WarehouseError.data_validation(
                f"Некорректное количество продаж: {v}"
            )
        return v

    @field_validator("average_rating")
    @classmethod
    def check_average_rating(cls, v: float) -> float:
        if not cls._is_valid_rating(v):
            raise WarehouseError.data_validation(f"Некорректный рейтинг: {v}")
        return v

    @field_validator("review_count")
    @classmethod
    def check_review_count(cls, v: int) -> int:
        if v < 0:
            raise WarehouseError.data_validation(
                f"Некорректное количество отзывов: {v}"
            )
        return v

    @field_validator("last_sale_date")
    @classmethod
    def check_last_sale_date(cls, v: str) -> str:
        if v and not is_valid_date(v):
            raise WarehouseError.data_validation(
                f"Некорректная дата последней продажи: '{v}'"
            )
        return v

    @staticmethod
    def _is_valid_rating(rating: float) -> bool:
        return is_in_range(
            rating, BookStatisticsConfig.MIN_RATING, BookStatisticsConfig.MAX_RATING
        )

    @staticmethod
    def _check_increment(amount: int) -> None:
        if amount < 0:
            raise WarehouseError.data_validation(
                f"Шаг увеличения не может быть отрицательным: {amount}"
            )

    def increment_views(self, amount: int = 1) -> None:
        self._check_increment(amount)
        self.view_count = self.view_count + amount

    def increment_sales(self, amount: int = 1) -> None:
        self._check_increment(amount)
        self.sales_count = self.sales_count + amount

    def increment_reviews(self, amount: int = 1) -> None:
        self._check_increment(amount)
        self.review_count = self.review_count + amount

    def update_rating(self, new_rating: float) -> None:
        """Учитывает новую оценку в среднем рейтинге."""
        if not self._is_valid_rating(new_rating):
            raise WarehouseError.data_validation(f"Некорректная оценка: {new_rating}")
        total = self.average_rating * self.review_count + new_rating
        self.average_rating = total / (self.review_count + 1)
        self.review_count = self.review_count + 1

    def remove_rating(self, rating: float) -> None:
        """Исключает ранее учтенную оценку из среднего рейтинга."""
        if self.review_count == 0:
            raise WarehouseError.data_validation("Нет оценок для удаления")
        if not self._is_valid_rating(rating):
            raise WarehouseError.data_validation(f"Некорректная оценка: {rating}")
        if self.review_count == 1:
            self.average_rating = 0.0
            self.review_count = 0
            return
        total = self.average_rating * self.review_count - rating
        self.average_rating = total / (self.review_count - 1)
        self.review_count = self.review_count - 1

    def get_popularity_score(self) -> float:
        """Комбинированный показатель популярности."""
        return (
            self.view_count * BookStatisticsConfig.VIEWS_WEIGHT
            + self.sales_count * BookStatisticsConfig.SALES_WEIGHT
            + self.average_rating * BookStatisticsConfig.RATING_WEIGHT
        )

    def is_bestseller(self) -> bool:
        return self.sales_count > BookStatisticsConfig.BESTSELLER_THRESHOLD

    def is_highly_rated(self) -> bool:
        return self.average_rating >= BookStatisticsConfig.HIGHLY_RATED_THRESHOLD

    def get_summary(self) -> str:
        summary = (
            f"Просмотры: {self.view_count}, продажи: {self.sales_count}, "
            f"рейтинг: {self.average_rating:.2f} ({self.review_count} отзывов)"
        )
        if self.last_sale_date:
            summary += f", последняя продажа: {self.last_sale_date}"
        return summary


@dataclass(frozen=True)
class BookCollection:
    """
    Тематическая подборка книг.

    Подборка не владеет книгами: она хранит только их идентификаторы
    в порядке добавления. Повторное добавление той же книги допускается.
    """

    name: str
    description: str = ""
    category: str = BookCollectionConfig.DEFAULT_CATEGORY
    _books: List[EntityId] = field(
        default_factory=list, init=False, repr=False, hash=False
    )

    def __post_init__(self):
        if not is_valid_name(self.name, BookCollectionConfig.MAX_NAME_LENGTH):
            raise WarehouseError.data_validation(
                f"Некорректное название подборки: '{self.name}'"
            )
        if not is_valid_length(
            self.description, BookCollectionConfig.MAX_DESCRIPTION_LENGTH
        ):
            raise WarehouseError.data_validation("Слишком длинное описание подборки")
        if not is_valid_name(self.category, BookCollectionConfig.MAX_NAME_LENGTH):
            raise WarehouseError.data_validation(
                f"Некорректная категория: '{self.category}'"
            )

    @property
    def books(self) -> Tuple[EntityId, ...]:
        return tuple(self._books)

    def add_book(self, book_id: Optional[EntityId]) -> None:
        if book_id is None:
            raise WarehouseError.data_validation("Книга не может быть пустой")
        self._books.append(book_id)

    def remove_book(self, book_id: Optional[EntityId]) -> None:
        """Удаляет первое вхождение книги; отсутствующая книга игнорируется."""
        if book_id in self._books:
            self._books.remove(book_id)

    def contains_book(self, book_id: Optional[EntityId]) -> bool:
        return book_id in self._books

    def get_book_count(self) -> int:
        return len(self._books)

    def is_empty(self) -> bool:
        return not self._books

    def get_info(self) -> str:
        info = f"Подборка: {self.name} ({self.category})"
        if self.description:
            info += f" - {self.description}"
        info += f" [{len(self._books)} книг]"
        return info

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, book_id: object) -> bool:
        return book_id in self._books


@dataclass(frozen=True)
class BookReview:
    """
    Отзыв читателя о книге.

    Атрибуты:
        author: Автор отзыва (до 100 символов)
        title: Заголовок отзыва (до 200 символов)
        text: Текст отзыва (до 2000 символов)
        rating: Оценка от 1 до 5
        date: Дата в формате YYYY-MM-DD
    """

    author: str
    title: str
    text: str
    rating: int
    date: str

    def __post_init__(self):
        if not is_valid_name(self.author, BookReviewConfig.MAX_AUTHOR_LENGTH):
            raise WarehouseError.data_validation(
                f"Некорректный автор отзыва: '{self.author}'"
            )
        if not is_valid_name(self.title, BookReviewConfig.MAX_TITLE_LENGTH):
            raise WarehouseError.data_validation(
                f"Некорректный заголовок отзыва: '{self.title}'"
            )
        if not is_valid_name(self.text, BookReviewConfig.MAX_TEXT_LENGTH):
            raise WarehouseError.data_validation("Некорректный текст отзыва")
        if not isinstance(self.rating, int) or isinstance(self.rating, bool):
            raise WarehouseError.data_validation(
                f"Оценка должна быть целым числом: {self.rating!r}"
            )
        if not is_in_range(
            self.rating, BookReviewConfig.MIN_RATING, BookReviewConfig.MAX_RATING
        ):
            raise WarehouseError.data_validation(
                f"Оценка должна быть от {BookReviewConfig.MIN_RATING} "
                f"до {BookReviewConfig.MAX_RATING}: {self.rating}"
            )
        if not is_valid_date(self.date):
            raise WarehouseError.data_validation(
                f"Некорректная дата отзыва: '{self.date}'"
            )

    def get_rating_stars(self) -> str:
        """Возвращает оценку в виде звезд, например ★★★★☆."""
        return "★" * self.rating + "☆" * (BookReviewConfig.MAX_RATING - self.rating)

    def is_positive_review(self) -> bool:
        return self.rating >= BookReviewConfig.POSITIVE_THRESHOLD

    def is_critical_review(self) -> bool:
        return self.rating <= BookReviewConfig.CRITICAL_THRESHOLD

    def get_summary(self) -> str:
        return (
            f"{self.title} {self.get_rating_stars()}\n"
            f"Автор: {self.author}, {self.date}\n"
            f"{self.text}"
        )
