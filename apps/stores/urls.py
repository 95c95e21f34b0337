from django.urls import path
from . import views

app_name = 'stores'

urlpatterns = [
    # GET    /api/v1/stores                       - All stores
    # GET    /api/v1/stores/favorites             - Favorite store ids
    # POST   /api/v1/stores/favorites             - Add favorite
    # DELETE /api/v1/stores/favorites/{store_id}  - Remove favorite
    path('stores', views.store_list, name='store-list'),
    path('stores/favorites', views.favorites, name='favorites'),
    path('stores/favorites/<str:store_id>', views.favorite_detail, name='favorite-detail'),
]
