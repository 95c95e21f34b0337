from django.db import models

from apps.common.ids import generate_id


class SoldBy(models.TextChoices):
    UNIT = 'unit', 'Unit'
    WEIGHT = 'weight', 'Weight'


class CanonicalProduct(models.Model):
    """Store-independent product that list items can resolve against."""

    id = models.CharField(primary_key=True, max_length=64, default=generate_id, editable=False)
    display_name = models.CharField(max_length=255, db_index=True)
    brand = models.CharField(max_length=120, blank=True, null=True)
    category = models.CharField(max_length=120, blank=True, null=True)
    size_description = models.CharField(max_length=120, blank=True, null=True)
    sold_by = models.CharField(max_length=10, choices=SoldBy.choices, default=SoldBy.UNIT)
    image_url = models.URLField(max_length=500, blank=True, null=True)
    upc = models.CharField(max_length=32, blank=True, null=True, db_index=True)

    # Where the product record came from (e.g. 'kroger', 'manual')
    source = models.CharField(max_length=40, default='manual')

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'canonical_products'
        ordering = ['display_name']

    def __str__(self):
        if self.brand:
            return f"{self.brand} {self.display_name}"
        return self.display_name
