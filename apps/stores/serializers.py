from rest_framework import serializers
from .models import Store

STORE_ID_MAX_LENGTH = 64


class AddFavoriteInputSerializer(serializers.Serializer):
    """Validate body for adding a favorite store."""

    store_id = serializers.CharField(
        max_length=STORE_ID_MAX_LENGTH,
        error_messages={
            'required': 'store_id is required',
            'blank': 'store_id is required',
            'null': 'store_id is required',
            'max_length': 'store_id too long',
        },
    )


class StoreSerializer(serializers.ModelSerializer):

    class Meta:
        model = Store
        fields = [
            'id',
            'external_id',
            'name',
            'address_line',
            'city',
            'state',
            'zip_code',
            'chain',
            'source',
        ]
        read_only_fields = fields
