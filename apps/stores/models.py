from django.db import models
import uuid

from apps.common.ids import generate_id


class Store(models.Model):
    """Physical store (or chain default) a list can be shopped at."""

    id = models.CharField(primary_key=True, max_length=64, default=generate_id)
    external_id = models.CharField(max_length=100, blank=True)
    name = models.CharField(max_length=200)

    # Address (optional; chain-level defaults have none)
    address_line = models.CharField(max_length=255, blank=True, null=True)
    city = models.CharField(max_length=100, blank=True, null=True)
    state = models.CharField(max_length=50, blank=True, null=True)
    zip_code = models.CharField(max_length=20, blank=True, null=True)

    chain = models.CharField(max_length=100, blank=True)

    # Data source tag (e.g. 'kroger', 'walmart', 'manual')
    source = models.CharField(max_length=40, default='manual')

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'stores'
        ordering = ['chain', 'name']

    def __str__(self):
        return self.name


class UserFavoriteStore(models.Model):
    """A store the user has picked in settings."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='favorite_stores'
    )
    store = models.ForeignKey(
        Store,
        on_delete=models.CASCADE,
        related_name='favorited_by'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'user_favorite_stores'
        constraints = [
            models.UniqueConstraint(fields=['user', 'store'], name='unique_user_favorite_store'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.user} -> {self.store}"
