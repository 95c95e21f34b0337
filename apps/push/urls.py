from django.urls import path
from . import views

app_name = 'push'

urlpatterns = [
    path('push/register', views.register, name='register'),
]
