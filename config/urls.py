"""
URL configuration for CartScout.

All client-facing endpoints live under /api/v1/ so the mobile and web
clients share one stable contract.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from config.views import health_check

api_v1_patterns = [
    path('', include('apps.accounts.urls')),
    path('', include('apps.lists.urls')),
    path('', include('apps.stores.urls')),
    path('', include('apps.catalog.urls')),
    path('', include('apps.push.urls')),
]

urlpatterns = [
    # Health check (for Render)
    path('api/health/', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # API endpoints
    path('api/v1/', include(api_v1_patterns)),
]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
