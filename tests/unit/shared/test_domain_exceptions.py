"""Unit tests for the shared domain error taxonomy."""

from __future__ import annotations

import pytest

from modules.products.exceptions import ProductNotFound
from shared.domain.exceptions import BusinessError, NotFoundError, ValidationError

pytestmark = pytest.mark.unit


class TestBusinessError:
    def test_carries_code_and_message(self):
        exc = BusinessError("Something broke", "SOMETHING_BROKE")
        assert exc.code == "SOMETHING_BROKE"
        assert exc.message == "Something broke"
        assert str(exc) == "Something broke"


class TestValidationError:
    def test_default_code(self):
        exc = ValidationError("Product name is required.")
        assert exc.code == "VALIDATION_ERROR"
        assert isinstance(exc, BusinessError)

    def test_code_can_be_overridden(self):
        exc = ValidationError("Too expensive.", code="PRICE_TOO_HIGH")
        assert exc.code == "PRICE_TOO_HIGH"


class TestNotFoundError:
    def test_message_embeds_resource_and_id(self):
        exc = NotFoundError("Order", 42)
        assert exc.message == "Order with identifier 42 was not found"
        assert exc.code == "RESOURCE_NOT_FOUND"
        assert exc.resource_type == "Order"
        assert exc.identifier == 42

    def test_product_not_found(self):
        exc = ProductNotFound(999)
        assert isinstance(exc, NotFoundError)
        assert exc.message == "Product with identifier 999 was not found"
