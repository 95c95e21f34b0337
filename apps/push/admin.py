from django.contrib import admin
from .models import PushToken


@admin.register(PushToken)
class PushTokenAdmin(admin.ModelAdmin):
    list_display = ['user', 'platform', 'created_at']
    list_filter = ['platform']
    search_fields = ['user__email', 'token']
    raw_id_fields = ['user']
