import math

from rest_framework import serializers

from .models import GroceryList, ListItem, ListType
from .services import MAX_LIST_STORES


# =============================================================================
# INPUT SERIALIZERS
# =============================================================================

class ListInputSerializer(serializers.Serializer):
    """
    Validate body for creating or patching a list.

    Every field is optional. On create a blank name falls back to the
    default; on patch only the fields sent are applied.
    """

    name = serializers.CharField(
        max_length=200,
        required=False,
        allow_blank=True,
        allow_null=True,
        trim_whitespace=True,
        error_messages={'max_length': 'Name too long'},
    )
    list_type = serializers.ChoiceField(
        choices=ListType.choices,
        required=False,
        error_messages={'invalid_choice': 'Invalid list type'},
    )
    week_start = serializers.CharField(
        max_length=32,
        required=False,
        allow_blank=True,
        allow_null=True,
        error_messages={'max_length': 'week_start too long'},
    )


class SetListStoresInputSerializer(serializers.Serializer):
    """Validate body for replacing a list's stores."""

    store_ids = serializers.ListField(
        child=serializers.CharField(max_length=64),
        max_length=MAX_LIST_STORES,
        required=False,
        default=list,
        error_messages={
            'not_a_list': 'store_ids must be an array',
            'max_length': f'At most {MAX_LIST_STORES} stores',
        },
    )


QUANTITY_ERRORS = {'invalid': 'Quantity must be a number'}


def validate_positive_quantity(value):
    if not math.isfinite(value) or value <= 0:
        raise serializers.ValidationError('Quantity must be positive')


class AddListItemInputSerializer(serializers.Serializer):
    """
    Validate body for adding an item.

    Either a catalog product id or a free-text label is required; when both
    are sent the product takes precedence for display.
    """

    canonical_product_id = serializers.CharField(
        max_length=64, required=False, allow_blank=True, allow_null=True
    )
    free_text = serializers.CharField(
        max_length=500,
        required=False,
        allow_blank=True,
        allow_null=True,
        error_messages={'max_length': 'free_text too long'},
    )
    quantity = serializers.FloatField(
        required=False,
        validators=[validate_positive_quantity],
        error_messages=QUANTITY_ERRORS,
    )

    def validate(self, attrs):
        if not attrs.get('canonical_product_id') and not (attrs.get('free_text') or '').strip():
            raise serializers.ValidationError(
                'Either canonical_product_id or free_text is required'
            )
        return attrs


class UpdateListItemInputSerializer(serializers.Serializer):
    """Validate body for patching an item."""

    quantity = serializers.FloatField(
        required=False,
        validators=[validate_positive_quantity],
        error_messages=QUANTITY_ERRORS,
    )
    checked = serializers.BooleanField(required=False)


# =============================================================================
# OUTPUT SERIALIZERS
# =============================================================================

class ListItemSerializer(serializers.ModelSerializer):
    """Item with the joined catalog fields (null for free-text items)."""

    list_id = serializers.UUIDField(source='grocery_list_id', read_only=True)
    canonical_product_id = serializers.CharField(read_only=True)
    display_name = serializers.SerializerMethodField()
    brand = serializers.SerializerMethodField()
    size_description = serializers.SerializerMethodField()
    upc = serializers.SerializerMethodField()

    class Meta:
        model = ListItem
        fields = [
            'id',
            'list_id',
            'canonical_product_id',
            'free_text',
            'quantity',
            'estimated_weight_override',
            'sort_order',
            'checked',
            'created_at',
            'display_name',
            'brand',
            'size_description',
            'upc',
        ]
        read_only_fields = fields

    def _product_field(self, obj, field):
        product = obj.canonical_product
        return getattr(product, field) if product is not None else None

    def get_display_name(self, obj):
        return self._product_field(obj, 'display_name')

    def get_brand(self, obj):
        return self._product_field(obj, 'brand')

    def get_size_description(self, obj):
        return self._product_field(obj, 'size_description')

    def get_upc(self, obj):
        return self._product_field(obj, 'upc')


class GroceryListSerializer(serializers.ModelSerializer):

    user_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = GroceryList
        fields = [
            'id',
            'user_id',
            'name',
            'list_type',
            'week_start',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class GroceryListDetailSerializer(GroceryListSerializer):
    """List with its items embedded (``?include=items``)."""

    items = ListItemSerializer(many=True, read_only=True)

    class Meta(GroceryListSerializer.Meta):
        fields = GroceryListSerializer.Meta.fields + ['items']
        read_only_fields = fields
