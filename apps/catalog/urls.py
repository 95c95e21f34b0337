from django.urls import path
from . import views

app_name = 'catalog'

urlpatterns = [
    # GET /api/v1/products/search?q=&limit= - product suggestions
    path('products/search', views.product_search, name='product-search'),
]
