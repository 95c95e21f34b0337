from django.contrib import admin
from .models import Store, UserFavoriteStore


@admin.register(Store)
class StoreAdmin(admin.ModelAdmin):
    list_display = ['name', 'chain', 'city', 'state', 'source', 'external_id']
    list_filter = ['chain', 'source', 'state']
    search_fields = ['name', 'chain', 'city', 'zip_code', 'external_id']
    ordering = ['chain', 'name']


@admin.register(UserFavoriteStore)
class UserFavoriteStoreAdmin(admin.ModelAdmin):
    list_display = ['user', 'store', 'created_at']
    list_filter = ['store__chain']
    search_fields = ['user__email', 'store__name']
    raw_id_fields = ['user', 'store']
