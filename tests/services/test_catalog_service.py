"""
Tests for the Catalog Store.
"""

import pytest
from pydantic import ValidationError

from storefront.schemas.products import Product
from storefront.services.catalog_service import (
    PRODUCT_CATALOG,
    ensure_unique_ids,
    filter_by_category,
    get_catalog,
    get_categories,
)
from storefront.services.errors import InvalidRequestError


class TestCatalog:
    """Tests for the static catalog."""

    def test_six_products_in_fixed_order(self):
        assert [p.id for p in get_catalog()] == [1, 2, 3, 4, 5, 6]

    def test_ids_are_unique(self):
        ids = [p.id for p in PRODUCT_CATALOG]
        assert len(ids) == len(set(ids))

    def test_get_catalog_returns_copy(self):
        catalog = get_catalog()
        catalog.pop()
        assert len(get_catalog()) == 6

    def test_products_are_immutable(self):
        with pytest.raises(ValidationError):
            PRODUCT_CATALOG[0].price = 1

    def test_integer_price_kept_as_integer(self):
        assert PRODUCT_CATALOG[0].model_dump()["price"] == 299
        assert isinstance(PRODUCT_CATALOG[0].price, int)

    def test_fractional_price_kept(self):
        product = Product(id=9, name="Cable", category="Misc", price=4.5)
        assert product.price == 4.5

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            Product(id=9, name="Broken", category="Misc", price=-1)


class TestCategories:
    """Tests for get_categories function."""

    def test_all_first_then_first_appearance_order(self):
        assert get_categories() == ["All", "Phone", "Watch", "Laptop", "Audio"]

    def test_custom_catalog(self, make_product):
        products = [make_product(1, category="B"), make_product(2, category="A"),
                    make_product(3, category="B")]
        assert get_categories(products) == ["All", "B", "A"]


class TestFilterByCategory:
    """Tests for filter_by_category function."""

    @pytest.mark.parametrize("category", ["All", "", None])
    def test_no_filter(self, category):
        assert [p.id for p in filter_by_category(category)] == [1, 2, 3, 4, 5, 6]

    def test_laptops(self):
        assert [p.name for p in filter_by_category("Laptop")] == [
            "Gaming Laptop G15",
            "Everyday Laptop E3",
        ]

    def test_unknown_category(self):
        assert filter_by_category("Camera") == []

    def test_exact_match_only(self):
        assert filter_by_category("phone") == []


class TestEnsureUniqueIds:
    """Tests for ensure_unique_ids function."""

    def test_unique_passes(self, make_product):
        ensure_unique_ids([make_product(1), make_product(2)])

    def test_duplicate_raises(self, make_product):
        with pytest.raises(InvalidRequestError, match="Duplicate product id"):
            ensure_unique_ids([make_product(1), make_product(2), make_product(1)])
