from rest_framework import serializers
from .models import CanonicalProduct


class ProductSearchParamsSerializer(serializers.Serializer):
    """
    Validate query parameters for product search.

    Query Parameters:
        q (str): Substring to search for
        limit (str): Max results; clamped by the service, never rejected
    """

    q = serializers.CharField(required=False, allow_blank=True, max_length=200)
    limit = serializers.CharField(required=False, allow_blank=True)


class CanonicalProductSerializer(serializers.ModelSerializer):
    """Product suggestion shown while adding list items."""

    class Meta:
        model = CanonicalProduct
        fields = [
            'id',
            'display_name',
            'brand',
            'category',
            'size_description',
            'sold_by',
            'image_url',
            'source',
        ]
        read_only_fields = fields
