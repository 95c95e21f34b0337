from django.db import models
from django.db.models import Q
import uuid


class ListType(models.TextChoices):
    CURRENT_WEEK = 'current_week', 'Current week'
    NEXT_ORDER = 'next_order', 'Next order'
    CUSTOM = 'custom', 'Custom'


DEFAULT_LIST_NAME = 'New list'


class GroceryList(models.Model):
    """A user's grocery list."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Every list has exactly one owner; all access is scoped by it
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='grocery_lists'
    )

    name = models.CharField(max_length=200, default=DEFAULT_LIST_NAME)
    list_type = models.CharField(
        max_length=20,
        choices=ListType.choices,
        default=ListType.CUSTOM
    )
    # Client-supplied date string (YYYY-MM-DD), kept verbatim
    week_start = models.CharField(max_length=32, null=True, blank=True)

    stores = models.ManyToManyField(
        'stores.Store',
        through='ListStore',
        related_name='grocery_lists',
        blank=True
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'lists'
        indexes = [
            models.Index(fields=['user', 'updated_at'], name='lists_user_updated_idx'),
        ]
        ordering = ['-updated_at']

    def __str__(self):
        return f"{self.name} ({self.list_type})"


class ListItem(models.Model):
    """
    One line on a grocery list.

    An item is resolved against a canonical product or carries a free-text
    label. When both are present the product is used for display.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    grocery_list = models.ForeignKey(
        GroceryList,
        on_delete=models.CASCADE,
        related_name='items'
    )

    canonical_product = models.ForeignKey(
        'catalog.CanonicalProduct',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='list_items'
    )
    free_text = models.CharField(max_length=500, null=True, blank=True)

    quantity = models.FloatField(default=1.0)
    estimated_weight_override = models.CharField(max_length=50, null=True, blank=True)

    sort_order = models.PositiveIntegerField(default=0)
    checked = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'list_items'
        indexes = [
            models.Index(fields=['grocery_list', 'sort_order'], name='list_items_order_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=Q(canonical_product__isnull=False) | Q(free_text__isnull=False),
                name='list_item_product_or_free_text',
            ),
            models.CheckConstraint(
                condition=Q(quantity__gt=0),
                name='list_item_quantity_positive',
            ),
        ]
        ordering = ['sort_order', 'created_at']

    def __str__(self):
        return f"{self.quantity} x {self.label}"

    @property
    def label(self):
        if self.canonical_product_id:
            return self.canonical_product.display_name
        return self.free_text


class ListStore(models.Model):
    """Association between a list and a store it will be shopped at."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    grocery_list = models.ForeignKey(
        GroceryList,
        on_delete=models.CASCADE,
        related_name='store_links'
    )
    store = models.ForeignKey(
        'stores.Store',
        on_delete=models.CASCADE,
        related_name='list_links'
    )
    position = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'list_stores'
        constraints = [
            models.UniqueConstraint(fields=['grocery_list', 'store'], name='unique_list_store'),
        ]
        ordering = ['position']

    def __str__(self):
        return f"{self.grocery_list_id} @ {self.store_id}"
