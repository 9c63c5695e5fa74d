"""
Unit tests for the request models and shared field rules
"""
import pytest
from decimal import Decimal

from pydantic import ValidationError

from bookstore.core.config import Settings
from bookstore.domain.book import Book, BookCreate, BookUpdate
from bookstore.domain.customer import CustomerUpdate
from bookstore.domain.validation import normalize_price


VALID_BOOK = {
    "title": "Dune",
    "writer": "Frank Herbert",
    "cover_image_url": "https://example.com/dune.jpg",
    "price": "9.99",
    "tags": ["scifi", "classic"],
}


def error_fields(exc: ValidationError):
    return {error["loc"][0] for error in exc.errors()}


class TestBookCreate:

    def test_valid_book(self):
        book = BookCreate(**VALID_BOOK)

        assert book.price == Decimal("9.99")
        assert book.tags == ["scifi", "classic"]

    def test_cover_image_url_is_kept_as_sent(self):
        book = BookCreate(**dict(VALID_BOOK, cover_image_url="http://example.com"))

        assert book.cover_image_url == "http://example.com"

    def test_empty_tags_allowed(self):
        assert BookCreate(**dict(VALID_BOOK, tags=[])).tags == []

    @pytest.mark.parametrize("field,value", [
        ("title", ""),
        ("title", 42),
        ("writer", None),
        ("cover_image_url", "dune.jpg"),
        ("price", "abc"),
        ("price", -0.01),
        ("price", "1000000"),
        ("tags", ["scifi", 3]),
    ])
    def test_invalid_field(self, field, value):
        with pytest.raises(ValidationError) as exc:
            BookCreate(**dict(VALID_BOOK, **{field: value}))

        assert error_fields(exc.value) == {field}

    def test_missing_fields_reported_together(self):
        with pytest.raises(ValidationError) as exc:
            BookCreate(title="Dune")

        assert error_fields(exc.value) == {"writer", "cover_image_url", "price", "tags"}


class TestPartialUpdate:

    def test_changes_only_include_supplied_fields(self):
        assert BookUpdate(price="12.5").changes() == {"price": Decimal("12.50")}
        assert BookUpdate().changes() == {}

    def test_null_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            BookUpdate(tags=None)

        assert error_fields(exc.value) == {"tags"}

    def test_supplied_fields_are_still_checked(self):
        with pytest.raises(ValidationError):
            CustomerUpdate(points=-1)


class TestPrice:

    def test_rounds_half_up_to_cents(self):
        assert normalize_price(Decimal("10.005")) == Decimal("10.01")
        assert normalize_price(Decimal("10.004")) == Decimal("10.00")

    @pytest.mark.parametrize("value", ["1e30", "1e40", "999999.995"])
    def test_values_above_maximum_are_rejected(self, value):
        with pytest.raises(ValueError):
            normalize_price(Decimal(value))

    def test_maximum_is_accepted(self):
        assert normalize_price(Decimal("999999.99")) == Decimal("999999.99")

    def test_book_to_dict_serializes_price_as_float(self):
        book = Book(id=1, title="Dune", writer="Frank Herbert",
                    cover_image_url="https://example.com/dune.jpg",
                    price=Decimal("12.50"), tags=[])

        assert book.to_dict()["price"] == 12.5


class TestSettings:

    def test_allowed_origins_comma_separated(self):
        settings = Settings(ALLOWED_ORIGINS="http://a.test, http://b.test")
        assert settings.get_allowed_origins() == ["http://a.test", "http://b.test"]

    def test_allowed_origins_json_list(self):
        settings = Settings(ALLOWED_ORIGINS='["http://a.test"]')
        assert settings.get_allowed_origins() == ["http://a.test"]
