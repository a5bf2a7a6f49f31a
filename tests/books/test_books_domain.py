"""
Тесты для доменной модели книжного склада.
"""
import pytest

from domain_labs.books.domain import (
    BookCollection,
    BookCondition,
    BookReview,
    BookSeries,
    BookStatistics,
    BookTitle,
    Genre,
    Publisher,
)
from domain_labs.shared_kernel import ErrorKind, WarehouseError, generate_id


def assert_data_validation(error_info):
    assert error_info.value.kind is ErrorKind.DATA_VALIDATION
    assert str(error_info.value).startswith("Ошибка валидации данных: ")


class TestBookCondition:
    """Тесты для перечисления BookCondition."""

    @pytest.mark.parametrize("condition", list(BookCondition))
    def test_is_used_is_negation_of_is_new(self, condition):
        assert condition.is_used() is not condition.is_new()

    @pytest.mark.parametrize("condition", list(BookCondition))
    def test_only_poor_needs_replacement(self, condition):
        assert condition.needs_replacement() is (condition is BookCondition.POOR)

    def test_only_new_is_new(self):
        assert BookCondition.NEW.is_new()
        assert BookCondition.LIKE_NEW.is_used()

    def test_display_names(self):
        assert str(BookCondition.NEW) == "Новая"
        assert str(BookCondition.LIKE_NEW) == "Как новая"
        assert str(BookCondition.POOR) == "Плохое"
        assert all(c.display_name != "Неизвестно" for c in BookCondition)

    def test_equality_is_tag_equality(self):
        assert BookCondition("good") == BookCondition.GOOD
        assert BookCondition.GOOD != BookCondition.FAIR


class TestGenre:
    """Тесты для перечисления Genre."""

    def test_there_are_twelve_genres(self):
        assert len(Genre) == 12

    def test_every_genre_has_its_own_name(self):
        names = [genre.display_name for genre in Genre]
        assert "Неизвестный жанр" not in names
        assert len(set(names)) == 12

    def test_display_names(self):
        assert str(Genre.FANTASY) == "Фэнтези"
        assert str(Genre.SCIENCE_FICTION) == "Научная фантастика"
        assert Genre.OTHER.display_name == "Другое"


class TestPublisher:
    """Тесты для объекта-значения Publisher."""

    def test_publisher_creation_success(self):
        publisher = Publisher("Govor production", "xxxvodo4kaxxx@gmail.com", 2007)
        assert publisher.name == "Govor production"
        assert publisher.contact_email == "xxxvodo4kaxxx@gmail.com"
        assert publisher.foundation_year == 2007

        info = publisher.get_info()
        assert "Govor production" in info
        assert "2007" in info
        assert "xxxvodo4kaxxx@gmail.com" in info

    def test_info_without_email(self):
        info = Publisher("Эксмо", "", 1991).get_info()
        assert info == "Издательство: Эксмо\nОсновано: 1991"

    @pytest.mark.parametrize("year", [1400, 2025])
    def test_boundary_years_are_accepted(self, year):
        assert Publisher("Эксмо", "", year).foundation_year == year

    @pytest.mark.parametrize("year", [1399, 2026])
    def test_years_outside_range_are_rejected(self, year):
        with pytest.raises(WarehouseError, match="Некорректный год основания") as e:
            Publisher("Эксмо", "", year)
        assert_data_validation(e)

    @pytest.mark.parametrize(
        "name", ["", "a" * 101, "Эксмо\tАСТ", "Эксмо\n", "\rЭксмо", "    "]
    )
    def test_invalid_names_are_rejected(self, name):
        with pytest.raises(WarehouseError, match="Некорректное название издательства"):
            Publisher(name, "", 2000)

    @pytest.mark.parametrize("email", ["@b.c", "a@.c", "abc"])
    def test_invalid_emails_are_rejected(self, email):
        with pytest.raises(WarehouseError, match="Некорректный формат почты"):
            Publisher("Эксмо", email, 2000)

    def test_first_failing_field_wins(self):
        with pytest.raises(WarehouseError, match="название издательства"):
            Publisher("", "abc", 1000)

    def test_publisher_is_immutable(self):
        publisher = Publisher("Эксмо", "", 1991)
        with pytest.raises(AttributeError):
            publisher.name = "АСТ"

    def test_publisher_equality(self):
        publisher1 = Publisher("Эксмо", "info@eksmo.ru", 1991)
        publisher2 = Publisher("Эксмо", "info@eksmo.ru", 1991)

        assert publisher1 == publisher2
        assert not publisher1 != publisher2
        assert publisher1 != Publisher("АСТ", "info@eksmo.ru", 1991)
        assert publisher1 != Publisher("Эксмо", "", 1991)
        assert publisher1 != Publisher("Эксмо", "info@eksmo.ru", 1992)


class TestBookTitle:
    """Тесты для объекта-значения BookTitle."""

    def test_language_is_normalized(self):
        title = BookTitle("Война и мир", "", "ru")
        assert title.language == "RU"
        assert title == BookTitle("Война и мир", "", "RU")

    def test_full_title(self):
        assert BookTitle("Дюна", "", "ru").get_full_title() == "Дюна (RU)"
        assert (
            BookTitle("Война и мир", "Том первый", "ru").get_full_title()
            == "Война и мир: Том первый (RU)"
        )

    @pytest.mark.parametrize("title", ["", "a" * 129, "   ", "Дюна\n"])
    def test_invalid_title_is_rejected(self, title):
        with pytest.raises(WarehouseError, match="Некорректное название книги"):
            BookTitle(title, "", "en")

    def test_max_length_title_is_accepted(self):
        assert BookTitle("a" * 128, "", "en").title == "a" * 128

    def test_blank_subtitle_is_rejected(self):
        with pytest.raises(WarehouseError, match="Некорректный подзаголовок"):
            BookTitle("Дюна", "   ", "en")

    @pytest.mark.parametrize("language", ["", "e", "eng"])
    def test_language_must_have_two_letters(self, language):
        with pytest.raises(WarehouseError, match="Код языка"):
            BookTitle("Дюна", "", language)

    def test_equality(self):
        title = BookTitle("Дюна", "Мессия", "en")
        assert title == BookTitle("Дюна", "Мессия", "EN")
        assert title != BookTitle("Дюна", "", "en")
        assert title != BookTitle("Дюна", "Мессия", "ru")


class TestBookSeries:
    """Тесты для объекта-значения BookSeries."""

    def test_ongoing_series(self):
        series = BookSeries("Плоский мир", end_year=0)
        assert series.is_ongoing()
        assert not series.is_completed()

    def test_completed_series(self):
        series = BookSeries("Плоский мир", end_year=2010)
        assert series.is_completed()
        assert not series.is_ongoing()

    def test_defaults(self):
        series = BookSeries("Плоский мир")
        assert series.description == ""
        assert series.book_count == 0
        assert series.start_year == 0
        assert series.end_year == 0

    @pytest.mark.parametrize(
        "kwargs, error_msg",
        [
            ({"name": ""}, "Некорректное название серии"),
            ({"name": "Серия", "description": "a" * 501}, "Слишком длинное описание"),
            ({"name": "Серия", "book_count": -1}, "Некорректное количество книг"),
            ({"name": "Серия", "start_year": 1399}, "Некорректный год начала"),
            ({"name": "Серия", "end_year": 2026}, "Некорректный год окончания"),
            (
                {"name": "Серия", "start_year": 2000, "end_year": 1999},
                "Год окончания не может быть раньше",
            ),
        ],
    )
    def test_invalid_data(self, kwargs, error_msg):
        with pytest.raises(WarehouseError, match=error_msg):
            BookSeries(**kwargs)

    def test_get_info(self):
        assert (
            BookSeries("Гарри Поттер", "Цикл романов", 7, 1997, 2007).get_info()
            == "Серия: Гарри Поттер - Цикл романов (7 книг, 1997-2007)"
        )
        assert (
            BookSeries("Плоский мир", "", 41, 1983).get_info()
            == "Серия: Плоский мир (41 книг, 1983-н.в.)"
        )
        assert BookSeries("Плоский мир").get_info() == "Серия: Плоский мир"

    def test_equality(self):
        series = BookSeries("Гарри Поттер", "Цикл романов", 7, 1997, 2007)
        assert series == BookSeries("Гарри Поттер", "Цикл романов", 7, 1997, 2007)

    @pytest.mark.parametrize(
        "changed",
        [
            {"name": "Плоский мир"},
            {"description": "Другое описание"},
            {"book_count": 8},
            {"start_year": 1998},
            {"end_year": 2008},
        ],
    )
    def test_any_changed_field_breaks_equality(self, changed):
        data = {
            "name": "Гарри Поттер",
            "description": "Цикл романов",
            "book_count": 7,
            "start_year": 1997,
            "end_year": 2007,
        }
        series = BookSeries(**data)
        data.update(changed)
        assert series != BookSeries(**data)


class TestBookStatistics:
    """Тесты для изменяемого объекта BookStatistics."""

    def test_defaults(self):
        stats = BookStatistics()
        assert stats.view_count == 0
        assert stats.sales_count == 0
        assert stats.average_rating == 0.0
        assert stats.review_count == 0
        assert stats.last_sale_date == ""

    def test_update_rating_computes_running_average(self):
        stats = BookStatistics()
        stats.update_rating(4)
        stats.update_rating(2)
        assert stats.review_count == 2
        assert stats.average_rating == pytest.approx(3.0)

    def test_update_rating_uses_existing_average(self):
        stats = BookStatistics(average_rating=4.0, review_count=3)
        stats.update_rating(5)
        assert stats.review_count == 4
        assert stats.average_rating == pytest.approx(4.25)

    def test_update_rating_rejects_out_of_range(self):
        stats = BookStatistics()
        with pytest.raises(WarehouseError, match="Некорректная оценка"):
            stats.update_rating(6)
        assert stats.review_count == 0

    def test_remove_rating(self):
        stats = BookStatistics()
        stats.update_rating(4)
        stats.update_rating(2)

        stats.remove_rating(2)
        assert stats.review_count == 1
        assert stats.average_rating == pytest.approx(4.0)

        stats.remove_rating(4)
        assert stats.review_count == 0
        assert stats.average_rating == 0.0

    def test_remove_rating_from_empty_statistics(self):
        with pytest.raises(WarehouseError, match="Нет оценок для удаления"):
            BookStatistics().remove_rating(3)

    @pytest.mark.parametrize(
        "kwargs, error_msg",
        [
            ({"view_count": -1}, "просмотров"),
            ({"view_count": 1_000_001}, "просмотров"),
            ({"sales_count": -1}, "продаж"),
            ({"sales_count": 100_001}, "продаж"),
            ({"average_rating": 5.1}, "Некорректный рейтинг"),
            ({"average_rating": -0.1}, "Некорректный рейтинг"),
            ({"review_count": -1}, "отзывов"),
            ({"last_sale_date": "2025/01/01"}, "дата последней продажи"),
        ],
    )
    def test_invalid_data(self, kwargs, error_msg):
        with pytest.raises(WarehouseError, match=error_msg) as e:
            BookStatistics(**kwargs)
        assert_data_validation(e)

    def test_boundaries_are_accepted(self):
        stats = BookStatistics(1_000_000, 100_000, 5.0, 0, "2025-13-40")
        assert stats.view_count == 1_000_000
        assert stats.sales_count == 100_000

    def test_setters_revalidate(self):
        stats = BookStatistics(view_count=10)
        with pytest.raises(WarehouseError):
            stats.view_count = -5
        assert stats.view_count == 10

        stats.sales_count = 50
        assert stats.sales_count == 50

        with pytest.raises(WarehouseError):
            stats.last_sale_date = "вчера"
        assert stats.last_sale_date == ""

    def test_increments(self):
        stats = BookStatistics()
        stats.increment_views()
        stats.increment_views(9)
        stats.increment_sales(3)
        stats.increment_reviews(2)
        assert stats.view_count == 10
        assert stats.sales_count == 3
        assert stats.review_count == 2

    def test_increment_beyond_bound_is_rejected(self):
        stats = BookStatistics(sales_count=100_000)
        with pytest.raises(WarehouseError, match="продаж"):
            stats.increment_sales()
        assert stats.sales_count == 100_000

    def test_bestseller_threshold(self):
        assert not BookStatistics(sales_count=1000).is_bestseller()
        assert BookStatistics(sales_count=1001).is_bestseller()

    def test_highly_rated_threshold(self):
        assert BookStatistics(average_rating=4.0).is_highly_rated()
        assert not BookStatistics(average_rating=3.99).is_highly_rated()

    def test_popularity_score_grows_with_each_input(self):
        base = BookStatistics(100, 10, 3.0).get_popularity_score()
        assert BookStatistics(200, 10, 3.0).get_popularity_score() > base
        assert BookStatistics(100, 20, 3.0).get_popularity_score() > base
        assert BookStatistics(100, 10, 4.0).get_popularity_score() > base

    def test_summary(self):
        summary = BookStatistics(100, 10, 4.5, 2, "2025-11-09").get_summary()
        assert "Просмотры: 100" in summary
        assert "продажи: 10" in summary
        assert "рейтинг: 4.50 (2 отзывов)" in summary
        assert "2025-11-09" in summary

    def test_equality(self):
        stats = BookStatistics(1, 2, 3.0, 4, "2025-01-01")
        assert stats == BookStatistics(1, 2, 3.0, 4, "2025-01-01")

    @pytest.mark.parametrize(
        "changed",
        [
            {"view_count": 10},
            {"sales_count": 20},
            {"average_rating": 3.5},
            {"review_count": 5},
            {"last_sale_date": ""},
        ],
    )
    def test_any_changed_field_breaks_equality(self, changed):
        data = {
            "view_count": 1,
            "sales_count": 2,
            "average_rating": 3.0,
            "review_count": 4,
            "last_sale_date": "2025-01-01",
        }
        stats = BookStatistics(**data)
        data.update(changed)
        assert stats != BookStatistics(**data)

    @pytest.mark.parametrize(
        "method, counter",
        [
            ("increment_views", "view_count"),
            ("increment_sales", "sales_count"),
            ("increment_reviews", "review_count"),
        ],
    )
    def test_negative_increment_is_rejected(self, method, counter):
        stats = BookStatistics(view_count=10, sales_count=10, review_count=3)
        before = getattr(stats, counter)

        with pytest.raises(WarehouseError, match="не может быть отрицательным") as e:
            getattr(stats, method)(-1)

        assert_data_validation(e)
        assert getattr(stats, counter) == before

    def test_zero_increment_keeps_counters(self):
        stats = BookStatistics(view_count=10)
        stats.increment_views(0)
        assert stats.view_count == 10


class TestBookCollection:
    """Тесты для подборки книг."""

    def test_collection_creation_defaults(self):
        collection = BookCollection("Классика")
        assert collection.description == ""
        assert collection.category == "Общее"
        assert collection.is_empty()
        assert collection.get_book_count() == 0

    def test_add_and_contains(self):
        collection = BookCollection("Классика")
        first, second = generate_id(), generate_id()
        collection.add_book(first)
        collection.add_book(second)

        assert collection.contains_book(first)
        assert second in collection
        assert not collection.contains_book(generate_id())
        assert collection.books == (first, second)
        assert len(collection) == 2
        assert not collection.is_empty()

    def test_duplicates_are_allowed(self):
        collection = BookCollection("Классика")
        book = generate_id()
        collection.add_book(book)
        collection.add_book(book)
        assert collection.get_book_count() == 2

    def test_remove_book_removes_first_match_only(self):
        collection = BookCollection("Классика")
        book, other = generate_id(), generate_id()
        collection.add_book(book)
        collection.add_book(other)
        collection.add_book(book)

        collection.remove_book(book)

        assert collection.books == (other, book)

    def test_remove_missing_book_is_ignored(self):
        collection = BookCollection("Классика")
        collection.add_book(generate_id())
        collection.remove_book(generate_id())
        collection.remove_book(None)
        assert collection.get_book_count() == 1

    def test_add_none_is_rejected(self):
        with pytest.raises(WarehouseError, match="Книга не может быть пустой"):
            BookCollection("Классика").add_book(None)

    def test_books_snapshot_is_read_only(self):
        collection = BookCollection("Классика")
        collection.add_book(generate_id())
        snapshot = collection.books
        collection.add_book(generate_id())
        assert len(snapshot) == 1

    @pytest.mark.parametrize(
        "args, error_msg",
        [
            (("",), "Некорректное название подборки"),
            (("   ",), "Некорректное название подборки"),
            (("a" * 101,), "Некорректное название подборки"),
            (("Классика\t",), "Некорректное название подборки"),
            (("Классика", "a" * 501), "Слишком длинное описание"),
            (("Классика", "", ""), "Некорректная категория"),
            (("Классика", "", "  "), "Некорректная категория"),
            (("Классика", "", "Проза\n"), "Некорректная категория"),
        ],
    )
    def test_invalid_data(self, args, error_msg):
        with pytest.raises(WarehouseError, match=error_msg):
            BookCollection(*args)

    def test_get_info(self):
        collection = BookCollection("Классика", "Проверенные временем", "Проза")
        collection.add_book(generate_id())
        assert (
            collection.get_info()
            == "Подборка: Классика (Проза) - Проверенные временем [1 книг]"
        )

    def test_equality_includes_books(self):
        book = generate_id()
        collection1 = BookCollection("Классика", "", "Проза")
        collection2 = BookCollection("Классика", "", "Проза")
        assert collection1 == collection2

        collection1.add_book(book)
        assert collection1 != collection2

        collection2.add_book(book)
        assert collection1 == collection2
        assert collection1 != BookCollection("Классика", "", "Поэзия")


class TestBookReview:
    """Тесты для отзыва о книге."""

    def _review(self, **overrides) -> BookReview:
        data = {
            "author": "George",
            "title": "Good book",
            "text": "Good book with beautiful imgs^_^",
            "rating": 5,
            "date": "2025-11-08",
        }
        data.update(overrides)
        return BookReview(**data)

    def test_review_creation_success(self):
        review = self._review()
        assert review.author == "George"
        assert review.rating == 5
        assert review.date == "2025-11-08"

    @pytest.mark.parametrize("rating, positive, critical", [
        (1, False, True),
        (2, False, True),
        (3, False, False),
        (4, True, False),
        (5, True, False),
    ])
    def test_positive_and_critical(self, rating, positive, critical):
        review = self._review(rating=rating)
        assert review.is_positive_review() is positive
        assert review.is_critical_review() is critical

    def test_rating_stars(self):
        assert self._review(rating=4).get_rating_stars() == "★★★★☆"
        assert self._review(rating=1).get_rating_stars() == "★☆☆☆☆"

    @pytest.mark.parametrize(
        "overrides, error_msg",
        [
            ({"author": ""}, "Некорректный автор"),
            ({"author": "a" * 101}, "Некорректный автор"),
            ({"title": "   "}, "Некорректный заголовок"),
            ({"title": "a" * 201}, "Некорректный заголовок"),
            ({"text": "a" * 2001}, "Некорректный текст"),
            ({"text": "строка\nстрока"}, "Некорректный текст"),
            ({"rating": 0}, "Оценка должна быть от 1 до 5"),
            ({"rating": 6}, "Оценка должна быть от 1 до 5"),
            ({"date": "2025/09/01"}, "Некорректная дата"),
        ],
    )
    def test_invalid_data(self, overrides, error_msg):
        with pytest.raises(WarehouseError, match=error_msg):
            self._review(**overrides)

    def test_date_without_calendar_check(self):
        assert self._review(date="2025-13-40").date == "2025-13-40"

    def test_summary(self):
        summary = self._review(rating=4).get_summary()
        assert "Good book ★★★★☆" in summary
        assert "George" in summary
        assert "2025-11-08" in summary

    def test_equality(self):
        assert self._review() == self._review()

    @pytest.mark.parametrize(
        "changed",
        [
            {"author": "Anna"},
            {"title": "Bad book"},
            {"text": "Another text"},
            {"rating": 4},
            {"date": "2025-11-09"},
        ],
    )
    def test_any_changed_field_breaks_equality(self, changed):
        assert self._review() != self._review(**changed)

    @pytest.mark.parametrize("rating", [4.5, 4.0, "5", True])
    def test_rating_must_be_integer(self, rating):
        with pytest.raises(WarehouseError, match="целым числом"):
            self._review(rating=rating)
