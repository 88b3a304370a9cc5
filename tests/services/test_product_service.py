"""Unit tests for ProductService"""
import pytest
from unittest.mock import AsyncMock

from app.core.errors import MalformedIdError, NotFoundError, StoreFault, ValidationError
from app.repositories.product import ProductRepository
from app.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from app.services.product import ProductService


class TestProductService:
    """Test cases for ProductService class"""

    @pytest.fixture
    def mock_repository(self):
        """Mock ProductRepository"""
        return AsyncMock(spec=ProductRepository)

    @pytest.fixture
    def product_service(self, mock_repository):
        return ProductService(mock_repository)

    @pytest.fixture
    def sample_response(self, product_id):
        return ProductResponse(
            id=product_id,
            name="Test Product",
            originalPrice=29.99,
            temporaryPrice=-1,
            category="sweet",
        )


class TestCreateProduct(TestProductService):

    @pytest.mark.asyncio
    async def test_create_product(self, product_service, mock_repository, sample_response):
        data = ProductCreate(name="Test Product", originalPrice=29.99)
        mock_repository.create.return_value = sample_response

        result = await product_service.create_product(data, created_by="user-1")

        assert result == sample_response
        mock_repository.create.assert_called_once_with(data)


class TestGetProduct(TestProductService):

    @pytest.mark.asyncio
    async def test_get_product(self, product_service, mock_repository, sample_response, product_id):
        mock_repository.get_by_id.return_value = sample_response

        assert await product_service.get_product(product_id) == sample_response

    @pytest.mark.asyncio
    async def test_get_product_not_found(self, product_service, mock_repository, product_id):
        mock_repository.get_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await product_service.get_product(product_id)

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Product not found"

    @pytest.mark.asyncio
    async def test_malformed_id_propagates_as_store_fault(self, product_service, mock_repository):
        mock_repository.get_by_id.side_effect = MalformedIdError()

        with pytest.raises(StoreFault) as exc_info:
            await product_service.get_product("bad")

        assert isinstance(exc_info.value, MalformedIdError)
        assert exc_info.value.status_code == 500


class TestSearchProducts(TestProductService):

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", [None, ""])
    async def test_search_requires_name(self, product_service, mock_repository, name):
        with pytest.raises(ValidationError) as exc_info:
            await product_service.search_products(name)

        assert exc_info.value.message == 'Missing search query parameter "name"'
        mock_repository.search_by_name.assert_not_called()

    @pytest.mark.asyncio
    async def test_search_passes_pattern_through(self, product_service, mock_repository, sample_response):
        mock_repository.search_by_name.return_value = [sample_response]

        result = await product_service.search_products("te.t")

        assert result == [sample_response]
        mock_repository.search_by_name.assert_called_once_with("te.t")

    @pytest.mark.asyncio
    async def test_search_store_fault_is_reraised(self, product_service, mock_repository):
        mock_repository.search_by_name.side_effect = StoreFault()

        with pytest.raises(StoreFault):
            await product_service.search_products("x")


class TestSortedProducts(TestProductService):

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "criteria, field",
        [
            ("originalprice", "originalPrice"),
            ("ORIGINALPRICE", "originalPrice"),
            ("Name", "name"),
            ("temporaryPrice", "temporaryPrice"),
        ],
    )
    async def test_criteria_maps_to_field(self, product_service, mock_repository, criteria, field):
        mock_repository.list_sorted.return_value = []

        await product_service.list_sorted(criteria)

        mock_repository.list_sorted.assert_called_once_with(field)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("criteria", ["price", "category", "_id", ""])
    async def test_invalid_criteria(self, product_service, mock_repository, criteria):
        with pytest.raises(ValidationError) as exc_info:
            await product_service.list_sorted(criteria)

        assert exc_info.value.message == "Invalid sorting criteria"
        mock_repository.list_sorted.assert_not_called()


class TestUpdateAndDelete(TestProductService):

    @pytest.mark.asyncio
    async def test_update_not_found(self, product_service, mock_repository, product_id):
        mock_repository.replace.return_value = None

        with pytest.raises(NotFoundError):
            await product_service.update_product(product_id, ProductUpdate(name="x"))

    @pytest.mark.asyncio
    async def test_update_product(self, product_service, mock_repository, product_id, sample_response):
        data = ProductUpdate(name="Test Product")
        mock_repository.replace.return_value = sample_response

        result = await product_service.update_product(product_id, data, updated_by="user-1")

        assert result == sample_response
        mock_repository.replace.assert_called_once_with(product_id, data)

    @pytest.mark.asyncio
    async def test_delete_not_found(self, product_service, mock_repository, product_id):
        mock_repository.delete.return_value = False

        with pytest.raises(NotFoundError):
            await product_service.delete_product(product_id)

    @pytest.mark.asyncio
    async def test_delete_product(self, product_service, mock_repository, product_id):
        mock_repository.delete.return_value = True

        assert await product_service.delete_product(product_id) is None
        mock_repository.delete.assert_called_once_with(product_id)


class TestSetDiscount(TestProductService):

    @pytest.mark.asyncio
    @pytest.mark.parametrize("price", [None, 0, 0.0])
    async def test_falsy_price_rejected(self, product_service, mock_repository, product_id, price):
        with pytest.raises(ValidationError) as exc_info:
            await product_service.set_discount(product_id, price)

        assert exc_info.value.message == "Invalid data"
        mock_repository.set_temporary_price.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_product_id_rejected(self, product_service):
        with pytest.raises(ValidationError):
            await product_service.set_discount("", 9.99)

    @pytest.mark.asyncio
    async def test_set_discount(self, product_service, mock_repository, product_id, sample_response):
        mock_repository.set_temporary_price.return_value = sample_response

        await product_service.set_discount(product_id, 9.99)

        mock_repository.set_temporary_price.assert_called_once_with(product_id, 9.99)

    @pytest.mark.asyncio
    async def test_set_discount_not_found(self, product_service, mock_repository, product_id):
        mock_repository.set_temporary_price.return_value = None

        with pytest.raises(NotFoundError):
            await product_service.set_discount(product_id, -1)


class TestCartProducts(TestProductService):

    @pytest.mark.asyncio
    async def test_ids_are_split_on_commas(self, product_service, mock_repository):
        mock_repository.find_by_ids.return_value = []

        await product_service.get_cart_products("a,b,c")

        mock_repository.find_by_ids.assert_called_once_with(["a", "b", "c"])
