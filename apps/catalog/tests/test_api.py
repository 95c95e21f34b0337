import pytest
from django.urls import reverse
from rest_framework import status

from apps.catalog.services import (
    clamp_limit,
    search_products,
    get_product_by_id,
    ProductNotFoundError,
)


# =============================================================================
# Product Search API Tests
# =============================================================================

@pytest.mark.django_db
class TestProductSearch:
    """Tests for GET /api/v1/products/search"""

    def test_search_matches_display_name_and_brand(self, authenticated_client, products):
        url = reverse('catalog:product-search')
        response = authenticated_client.get(url, {'q': 'milk'})

        assert response.status_code == status.HTTP_200_OK
        names = [p['display_name'] for p in response.data['data']]
        # "Oat Beverage" matches through its brand
        assert names == ['Almond Milk', 'Oat Beverage', 'Whole Milk']

    def test_search_is_case_insensitive(self, authenticated_client, products):
        url = reverse('catalog:product-search')
        response = authenticated_client.get(url, {'q': 'SOURDOUGH'})

        assert [p['display_name'] for p in response.data['data']] == ['Sourdough Bread']

    def test_blank_query_returns_empty_list(self, authenticated_client, products):
        url = reverse('catalog:product-search')

        assert authenticated_client.get(url).data == {'data': []}
        assert authenticated_client.get(url, {'q': '   '}).data == {'data': []}

    def test_default_limit(self, authenticated_client, many_products):
        url = reverse('catalog:product-search')
        response = authenticated_client.get(url, {'q': 'apple'})

        assert len(response.data['data']) == 15

    def test_limit_is_capped(self, authenticated_client, many_products):
        url = reverse('catalog:product-search')
        response = authenticated_client.get(url, {'q': 'apple', 'limit': '500'})

        assert len(response.data['data']) == 30

    def test_invalid_limit_falls_back_to_default(self, authenticated_client, many_products):
        url = reverse('catalog:product-search')
        response = authenticated_client.get(url, {'q': 'apple', 'limit': 'lots'})

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data['data']) == 15

    def test_search_requires_auth(self, api_client):
        response = api_client.get(reverse('catalog:product-search'), {'q': 'milk'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Service Tests
# =============================================================================

class TestClampLimit:

    @pytest.mark.parametrize('raw, expected', [
        (None, 15),
        ('', 15),
        ('abc', 15),
        (0, 15),
        (-3, 15),
        (5, 5),
        ('30', 30),
        (31, 30),
    ])
    def test_clamp_limit(self, raw, expected):
        assert clamp_limit(raw) == expected


@pytest.mark.django_db
class TestProductLookup:

    def test_get_product_by_id(self, products):
        product = products[0]

        assert get_product_by_id(product_id=product.id) == product

    def test_get_unknown_product(self, db):
        with pytest.raises(ProductNotFoundError):
            get_product_by_id(product_id='missing')

    def test_search_none_query(self, products):
        assert list(search_products(query=None)) == []
