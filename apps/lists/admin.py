from django.contrib import admin
from .models import GroceryList, ListItem, ListStore


class ListItemInline(admin.TabularInline):
    model = ListItem
    extra = 0
    fields = ['canonical_product', 'free_text', 'quantity', 'sort_order', 'checked']
    raw_id_fields = ['canonical_product']


class ListStoreInline(admin.TabularInline):
    model = ListStore
    extra = 0
    raw_id_fields = ['store']


@admin.register(GroceryList)
class GroceryListAdmin(admin.ModelAdmin):
    list_display = ['name', 'user', 'list_type', 'week_start', 'updated_at']
    list_filter = ['list_type', 'created_at']
    search_fields = ['name', 'user__email']
    readonly_fields = ['created_at', 'updated_at']
    raw_id_fields = ['user']
    inlines = [ListItemInline, ListStoreInline]


@admin.register(ListItem)
class ListItemAdmin(admin.ModelAdmin):
    list_display = ['label', 'grocery_list', 'quantity', 'checked', 'sort_order']
    list_filter = ['checked']
    search_fields = ['free_text', 'canonical_product__display_name', 'grocery_list__name']
    raw_id_fields = ['grocery_list', 'canonical_product']
