from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'lists'

router = SimpleRouter(trailing_slash=False)
router.register(r'lists', views.GroceryListViewSet, basename='list')

urlpatterns = [
    # GET    /api/v1/lists                          - User's lists (?include=items)
    # POST   /api/v1/lists                          - Create list
    # GET    /api/v1/lists/{id}                     - Get list (?include=items)
    # PATCH  /api/v1/lists/{id}                     - Update list
    # DELETE /api/v1/lists/{id}                     - Delete list
    # GET    /api/v1/lists/{id}/stores              - Store ids for list
    # PUT    /api/v1/lists/{id}/stores              - Replace store ids
    # POST   /api/v1/lists/{id}/items               - Add item
    # PATCH  /api/v1/lists/{id}/items/{item_id}     - Update item
    # DELETE /api/v1/lists/{id}/items/{item_id}     - Delete item
    path('', include(router.urls)),
]
