"""Unit tests for request body dependencies"""
import pytest
from unittest.mock import AsyncMock, Mock

from app.core.errors import ValidationError
from app.dependencies.product import parse_json_body
from app.schemas.product import DiscountUpdate, ProductCreate


def mock_request(body: bytes):
    request = Mock()
    request.body = AsyncMock(return_value=body)
    return request


class TestParseJsonBody:

    @pytest.mark.asyncio
    async def test_empty_body_is_empty_object(self):
        product = await parse_json_body(mock_request(b""), ProductCreate)

        assert product.model_dump(exclude_unset=True) == {}

    @pytest.mark.asyncio
    async def test_valid_body(self):
        discount = await parse_json_body(mock_request(b'{"temporaryPrice": 2.5}'), DiscountUpdate)

        assert discount.temporaryPrice == 2.5

    @pytest.mark.asyncio
    async def test_numeric_category_coerced(self):
        product = await parse_json_body(mock_request(b'{"category": 5}'), ProductCreate)

        assert product.category == "5"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [b"{not json", b"null", b'{"originalPrice": "cheap"}'])
    async def test_invalid_body(self, body):
        with pytest.raises(ValidationError) as exc_info:
            await parse_json_body(mock_request(body), ProductCreate)

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Invalid data"
        assert exc_info.value.details["body_errors"]
