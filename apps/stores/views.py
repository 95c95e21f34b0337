from rest_framework import serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema

from apps.common.responses import success_response, created_response
from .serializers import StoreSerializer, AddFavoriteInputSerializer
from .services import (
    get_all_stores,
    get_favorite_store_ids,
    add_favorite,
    remove_favorite,
)

# Favorite endpoints answer with the full, updated id list
STORE_ID_LIST = serializers.ListField(child=serializers.CharField())


@extend_schema(
    responses={200: StoreSerializer(many=True)},
    description="List all stores (for the settings store picker).",
    tags=['stores'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def store_list(request):
    """GET /api/v1/stores"""
    return success_response(StoreSerializer(get_all_stores(), many=True).data)


@extend_schema(
    methods=['GET'],
    responses={200: STORE_ID_LIST},
    description="Current user's favorite store ids.",
    tags=['stores'],
)
@extend_schema(
    methods=['POST'],
    request=AddFavoriteInputSerializer,
    responses={201: STORE_ID_LIST},
    description="Add a store to favorites; returns the updated id list.",
    tags=['stores'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def favorites(request):
    """GET/POST /api/v1/stores/favorites"""
    if request.method == 'GET':
        return success_response(get_favorite_store_ids(user=request.user))

    serializer = AddFavoriteInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    ids = add_favorite(user=request.user, store_id=serializer.validated_data['store_id'])
    return created_response(ids)


@extend_schema(
    responses={200: STORE_ID_LIST},
    description="Remove a store from favorites; returns the updated id list.",
    tags=['stores'],
)
@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def favorite_detail(request, store_id):
    """DELETE /api/v1/stores/favorites/{store_id}"""
    return success_response(remove_favorite(user=request.user, store_id=store_id))
