from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # POST /api/v1/auth/register  - create account, returns tokens
    # POST /api/v1/auth/login     - returns tokens
    # POST /api/v1/auth/refresh   - rotate refresh token
    # GET  /api/v1/auth/me        - current user
    path('auth/register', views.register, name='register'),
    path('auth/login', views.login, name='login'),
    path('auth/refresh', views.refresh, name='refresh'),
    path('auth/me', views.me, name='me'),
]
