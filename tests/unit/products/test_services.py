"""Unit tests for ProductService.

Covers:
- create_product: happy path, missing fields, invalid fields.
- update_product: happy path, not found, partial update, vanished row.
- get_product: happy path, not found.
- list_products: delegation to repository, page arithmetic.
- delete_product / delete_all_products.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from modules.products.exceptions import (
    InvalidProductId,
    MissingProductFields,
    ProductNotFound,
    ProductValidationError,
)
from modules.products.filters import ProductQuery
from modules.products.models import Product
from modules.products.services import ProductService

pytestmark = pytest.mark.unit

PRODUCT_ID = "0190a4c2-7b1e-7c3d-8e4f-1a2b3c4d5e6f"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    return MagicMock()


@pytest.fixture()
def service(mock_repo):
    return ProductService(repository=mock_repo)


def _make_product(**overrides) -> Product:
    defaults = {
        "name": "Widget",
        "price": 19.99,
        "category": "Electronics",
    }
    defaults.update(overrides)
    return Product(**defaults)


# ===========================================================================
# create_product
# ===========================================================================


class TestCreateProduct:
    def test_success(self, service, mock_repo):
        mock_repo.create.side_effect = lambda fields: _make_product(**fields)

        product = service.create_product(
            {"name": " Widget ", "price": "19.99", "category": "Electronics"}
        )

        assert product.name == "Widget"
        assert product.price == 19.99
        mock_repo.create.assert_called_once_with(
            {"name": "Widget", "price": 19.99, "category": "Electronics"}
        )

    def test_missing_fields_never_reach_repository(self, service, mock_repo):
        with pytest.raises(MissingProductFields):
            service.create_product({"name": "Widget"})
        mock_repo.create.assert_not_called()

    def test_invalid_fields_never_reach_repository(self, service, mock_repo):
        with pytest.raises(ProductValidationError):
            service.create_product({"name": "Widget", "price": 1, "category": "Bogus"})
        mock_repo.create.assert_not_called()


# ===========================================================================
# update_product
# ===========================================================================


class TestUpdateProduct:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_product()
        mock_repo.update.return_value = _make_product(price=1500)

        product = service.update_product(PRODUCT_ID, {"price": 1500})

        assert product.price == 1500
        mock_repo.update.assert_called_once_with(PRODUCT_ID, {"price": 1500.0})

    def test_partial_update_passes_only_supplied_fields(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_product()
        mock_repo.update.return_value = _make_product(name="Gadget")

        service.update_product(PRODUCT_ID, {"name": "Gadget", "extra": True})

        mock_repo.update.assert_called_once_with(PRODUCT_ID, {"name": "Gadget"})

    def test_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound):
            service.update_product(PRODUCT_ID, {"price": 1})
        mock_repo.update.assert_not_called()

    def test_not_found_checked_before_validation(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound):
            service.update_product(PRODUCT_ID, {"category": "Bogus"})

    def test_deleted_between_check_and_write(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_product()
        mock_repo.update.return_value = None

        with pytest.raises(ProductNotFound, match=PRODUCT_ID):
            service.update_product(PRODUCT_ID, {"price": 1})

    def test_invalid_field(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_product()

        with pytest.raises(ProductValidationError):
            service.update_product(PRODUCT_ID, {"price": -1})
        mock_repo.update.assert_not_called()


# ===========================================================================
# get_product
# ===========================================================================


class TestGetProduct:
    def test_success(self, service, mock_repo):
        expected = _make_product()
        mock_repo.get_by_id.return_value = expected
        assert service.get_product(PRODUCT_ID) is expected

    def test_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(ProductNotFound, match="Product not found with ID"):
            service.get_product(PRODUCT_ID)

    def test_malformed_id_propagates(self, service, mock_repo):
        mock_repo.get_by_id.side_effect = InvalidProductId("abc")
        with pytest.raises(ProductNotFound, match="Invalid product ID: abc"):
            service.get_product("abc")


# ===========================================================================
# list_products
# ===========================================================================


class TestListProducts:
    def test_delegates_query_to_repository(self, service, mock_repo):
        items = [_make_product(), _make_product(name="Gadget")]
        mock_repo.find.return_value = items
        mock_repo.count.return_value = 7
        query = ProductQuery(
            filters={"category": "Electronics"}, ordering=("price",), page=2, limit=2
        )

        page = service.list_products(query)

        mock_repo.find.assert_called_once_with(
            {"category": "Electronics"}, ordering=("price",), skip=2, limit=2
        )
        mock_repo.count.assert_called_once_with({"category": "Electronics"})
        assert page.items == items
        assert page.count == 2
        assert page.total == 7
        assert page.total_pages == 4

    def test_list_by_category(self, service, mock_repo):
        mock_repo.find_by_category.return_value = []
        assert service.list_by_category("Books") == []
        mock_repo.find_by_category.assert_called_once_with("Books")


# ===========================================================================
# delete
# ===========================================================================


class TestDeleteProduct:
    def test_returns_deleted_product(self, service, mock_repo):
        product = _make_product()
        mock_repo.get_by_id.return_value = product
        mock_repo.delete.return_value = product

        assert service.delete_product(PRODUCT_ID) is product
        mock_repo.delete.assert_called_once_with(PRODUCT_ID)

    def test_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(ProductNotFound):
            service.delete_product(PRODUCT_ID)
        mock_repo.delete.assert_not_called()

    def test_delete_all_returns_count(self, service, mock_repo):
        mock_repo.delete_many.return_value = 4
        assert service.delete_all_products() == 4
        mock_repo.delete_many.assert_called_once_with()
