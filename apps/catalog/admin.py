from django.contrib import admin
from .models import CanonicalProduct


@admin.register(CanonicalProduct)
class CanonicalProductAdmin(admin.ModelAdmin):
    list_display = ['display_name', 'brand', 'category', 'size_description', 'sold_by', 'source']
    list_filter = ['source', 'sold_by', 'category']
    search_fields = ['display_name', 'brand', 'upc']
    readonly_fields = ['id', 'created_at']
