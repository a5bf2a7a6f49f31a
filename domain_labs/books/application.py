"""
Прикладной слой контекста книжного склада.

Сервисы приложения координируют репозитории и объекты-значения:
принимают запросы, создают доменные объекты и возвращают DTO.
"""

from typing import List, Optional

from pydantic import BaseModel

from ..shared_kernel import ConsoleLogger, EntityId, ILogger, WarehouseError
from . import interfaces as ports
from .domain import BookCollection, BookReview, BookStatistics

# DTO (Data Transfer Objects) для входящих данных


class SubmitBookReviewRequest(BaseModel):
    """Запрос на добавление отзыва о книге."""

    author: str
    title: str
    text: str
    rating: int
    date: str


class CreateCollectionRequest(BaseModel):
    """Запрос на создание подборки."""

    name: str
    description: str = ""
    category: Optional[str] = None


# DTO для исходящих данных


class BookReviewDTO(BaseModel):
    """DTO для представления отзыва."""

    author: str
    title: str
    text: str
    rating: int
    date: str
    stars: str
    is_positive: bool
    is_critical: bool

    @classmethod
    def from_domain(cls, review: BookReview) -> "BookReviewDTO":
        """Создает DTO из доменной модели."""
        return cls(
            author=review.author,
            title=review.title,
            text=review.text,
            rating=review.rating,
            date=review.date,
            stars=review.get_rating_stars(),
            is_positive=review.is_positive_review(),
            is_critical=review.is_critical_review(),
        )


class BookStatisticsDTO(BaseModel):
    """DTO для представления статистики книги."""

    view_count: int
    sales_count: int
    average_rating: float
    review_count: int
    last_sale_date: str
    popularity_score: float
    is_bestseller: bool
    is_highly_rated: bool

    @classmethod
    def from_domain(cls, statistics: BookStatistics) -> "BookStatisticsDTO":
        """Создает DTO из доменной модели."""
        return cls(
            view_count=statistics.view_count,
            sales_count=statistics.sales_count,
            average_rating=statistics.average_rating,
            review_count=statistics.review_count,
            last_sale_date=statistics.last_sale_date,
            popularity_score=statistics.get_popularity_score(),
            is_bestseller=statistics.is_bestseller(),
            is_highly_rated=statistics.is_highly_rated(),
        )


class BookCollectionDTO(BaseModel):
    """DTO для представления подборки."""

    name: str
    description: str
    category: str
    books: List[EntityId]
    info: str

    @classmethod
    def from_domain(cls, collection: BookCollection) -> "BookCollectionDTO":
        """Создает DTO из доменной модели."""
        return cls(
            name=collection.name,
            description=collection.description,
            category=collection.category,
            books=list(collection.books),
            info=collection.get_info(),
        )


# Сервисы приложения


class BookReviewApplicationService:
    """Сервис приложения для отзывов и статистики книг."""

    def __init__(
        self,
        reviews: ports.IBookReviewRepository,
        statistics: ports.IBookStatisticsRepository,
        logger: Optional[ILogger] = None,
    ):
        self._reviews = reviews
        self._statistics = statistics
        self._logger = logger or ConsoleLogger()

    def _load_statistics(self, book_id: EntityId) -> BookStatistics:
        return self._statistics.get(book_id) or BookStatistics()

    def submit_review(
        self, book_id: EntityId, request: SubmitBookReviewRequest
    ) -> BookReviewDTO:
        """Добавляет отзыв и учитывает его оценку в статистике книги."""
        try:
            review = BookReview(
                request.author,
                request.title,
                request.text,
                request.rating,
                request.date,
            )
            statistics = self._load_statistics(book_id)
            statistics.update_rating(review.rating)
        except WarehouseError as e:
            self._logger.error(
                f"Ошибка при добавлении отзыва: {e}", book_id=book_id
            )
            raise

        self._reviews.add(book_id, review)
        self._statistics.save(book_id, statistics)
        self._logger.info(
            "Добавлен отзыв о книге",
            book_id=book_id,
            rating=review.rating,
            average_rating=statistics.average_rating,
        )
        return BookReviewDTO.from_domain(review)

    def list_reviews(self, book_id: EntityId) -> List[BookReviewDTO]:
        """Возвращает отзывы о книге в порядке добавления."""
        return [
            BookReviewDTO.from_domain(review)
            for review in self._reviews.find_by_book(book_id)
        ]

    def get_statistics(self, book_id: EntityId) -> BookStatisticsDTO:
        """Возвращает статистику книги (нулевую, если данных еще нет)."""
        return BookStatisticsDTO.from_domain(self._load_statistics(book_id))

    def record_view(self, book_id: EntityId, amount: int = 1) -> BookStatisticsDTO:
        """Учитывает просмотры карточки книги."""
        statistics = self._load_statistics(book_id)
        try:
            statistics.increment_views(amount)
        except WarehouseError as e:
            self._logger.error(
                f"Ошибка при учете просмотров: {e}", book_id=book_id
            )
            raise
        self._statistics.save(book_id, statistics)
        return BookStatisticsDTO.from_domain(statistics)

    def record_sale(
        self, book_id: EntityId, sale_date: str, amount: int = 1
    ) -> BookStatisticsDTO:
        """Учитывает продажу книги и запоминает ее дату."""
        statistics = self._load_statistics(book_id).model_copy()
        try:
            statistics.increment_sales(amount)
            statistics.last_sale_date = sale_date
        except WarehouseError as e:
            self._logger.error(f"Ошибка при учете продажи: {e}", book_id=book_id)
            raise
        self._statistics.save(book_id, statistics)
        if statistics.is_bestseller():
            self._logger.info("Книга стала бестселлером", book_id=book_id)
        return BookStatisticsDTO.from_domain(statistics)


class BookCollectionApplicationService:
    """Сервис приложения для работы с подборками книг."""

    def __init__(
        self,
        collections: ports.IBookCollectionRepository,
        logger: Optional[ILogger] = None,
    ):
        self._collections = collections
        self._logger = logger or ConsoleLogger()

    def create_collection(self, request: CreateCollectionRequest) -> BookCollectionDTO:
        """Создает новую подборку."""
        try:
            if request.category is None:
                collection = BookCollection(request.name, request.description)
            else:
                collection = BookCollection(
                    request.name, request.description, request.category
                )
            self._collections.add(collection)
        except (WarehouseError, ValueError) as e:
            self._logger.error(f"Ошибка при создании подборки: {e}")
            raise
        self._logger.info("Создана подборка", name=collection.name)
        return BookCollectionDTO.from_domain(collection)

    def add_book(self, collection_name: str, book_id: EntityId) -> BookCollectionDTO:
        """Добавляет книгу в подборку."""
        collection = self._collections.get_by_name(collection_name)
        if collection.contains_book(book_id):
            self._logger.warning(
                "Книга уже есть в подборке, добавлена повторно",
                collection=collection_name,
                book_id=book_id,
            )
        collection.add_book(book_id)
        return BookCollectionDTO.from_domain(collection)

    def remove_book(
        self, collection_name: str, book_id: EntityId
    ) -> BookCollectionDTO:
        """Удаляет одно вхождение книги из подборки."""
        collection = self._collections.get_by_name(collection_name)
        if not collection.contains_book(book_id):
            self._logger.warning(
                "Книги нет в подборке",
                collection=collection_name,
                book_id=book_id,
            )
        collection.remove_book(book_id)
        return BookCollectionDTO.from_domain(collection)

    def get_collection(self, collection_name: str) -> BookCollectionDTO:
        """Возвращает подборку по названию."""
        return BookCollectionDTO.from_domain(
            self._collections.get_by_name(collection_name)
        )
