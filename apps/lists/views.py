from rest_framework import serializers, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.common.responses import success_response, created_response, no_content_response
from .serializers import (
    ListInputSerializer,
    SetListStoresInputSerializer,
    AddListItemInputSerializer,
    UpdateListItemInputSerializer,
    GroceryListSerializer,
    GroceryListDetailSerializer,
    ListItemSerializer,
)
from .services import (
    get_lists_for_user,
    get_list_for_user,
    create_list,
    update_list,
    delete_list,
    get_list_store_ids,
    set_list_stores,
    add_list_item,
    update_list_item,
    delete_list_item,
)

INCLUDE_PARAM = OpenApiParameter(
    name='include',
    type=OpenApiTypes.STR,
    location=OpenApiParameter.QUERY,
    required=False,
    description="Pass `items` to embed each list's items.",
    enum=['items'],
)


STORE_ID_LIST = serializers.ListField(child=serializers.CharField())


def _wants_items(request) -> bool:
    return request.query_params.get('include') == 'items'


class GroceryListViewSet(viewsets.ViewSet):
    """
    Grocery lists of the authenticated user.

    All business logic is handled by services; lists owned by other users
    are reported as not found.

    list: Get the user's lists, most recently updated first
    create: Create a list
    retrieve: Get one list
    partial_update: Rename or retype a list
    destroy: Delete a list with its items and store associations
    stores: Get or replace the stores a list will be shopped at
    items: Add an item
    item_detail: Update or delete an item
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        parameters=[INCLUDE_PARAM],
        responses={200: GroceryListDetailSerializer(many=True)},
        tags=['lists'],
    )
    def list(self, request):
        include_items = _wants_items(request)
        lists = get_lists_for_user(user=request.user, include_items=include_items)
        serializer_class = GroceryListDetailSerializer if include_items else GroceryListSerializer
        return success_response(serializer_class(lists, many=True).data)

    @extend_schema(
        request=ListInputSerializer,
        responses={201: GroceryListSerializer},
        tags=['lists'],
    )
    def create(self, request):
        serializer = ListInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        grocery_list = create_list(user=request.user, **serializer.validated_data)
        return created_response(GroceryListSerializer(grocery_list).data)

    @extend_schema(
        parameters=[INCLUDE_PARAM],
        responses={200: GroceryListDetailSerializer},
        tags=['lists'],
    )
    def retrieve(self, request, pk=None):
        include_items = _wants_items(request)
        grocery_list = get_list_for_user(user=request.user, list_id=pk, include_items=include_items)
        serializer_class = GroceryListDetailSerializer if include_items else GroceryListSerializer
        return success_response(serializer_class(grocery_list).data)

    @extend_schema(
        request=ListInputSerializer,
        responses={200: GroceryListSerializer},
        tags=['lists'],
    )
    def partial_update(self, request, pk=None):
        serializer = ListInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        grocery_list = update_list(user=request.user, list_id=pk, data=serializer.validated_data)
        return success_response(GroceryListSerializer(grocery_list).data)

    @extend_schema(responses={204: None}, tags=['lists'])
    def destroy(self, request, pk=None):
        delete_list(user=request.user, list_id=pk)
        return no_content_response()

    @extend_schema(
        methods=['GET'],
        responses={200: STORE_ID_LIST},
        description="Store ids associated with the list.",
        tags=['lists'],
    )
    @extend_schema(
        methods=['PUT'],
        request=SetListStoresInputSerializer,
        responses={200: STORE_ID_LIST},
        description="Replace the list's stores. Unknown ids are dropped.",
        tags=['lists'],
    )
    @action(detail=True, methods=['get', 'put'])
    def stores(self, request, pk=None):
        if request.method == 'GET':
            return success_response(get_list_store_ids(user=request.user, list_id=pk))

        serializer = SetListStoresInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        store_ids = set_list_stores(
            user=request.user,
            list_id=pk,
            store_ids=serializer.validated_data['store_ids'],
        )
        return success_response(store_ids)

    @extend_schema(
        request=AddListItemInputSerializer,
        responses={201: ListItemSerializer},
        tags=['lists'],
    )
    @action(detail=True, methods=['post'])
    def items(self, request, pk=None):
        serializer = AddListItemInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        item = add_list_item(user=request.user, list_id=pk, **serializer.validated_data)
        return created_response(ListItemSerializer(item).data)

    @extend_schema(
        methods=['PATCH'],
        request=UpdateListItemInputSerializer,
        responses={200: ListItemSerializer},
        tags=['lists'],
    )
    @extend_schema(methods=['DELETE'], responses={204: None}, tags=['lists'])
    @action(
        detail=True,
        methods=['patch', 'delete'],
        url_path=r'items/(?P<item_id>[^/.]+)',
        url_name='item-detail',
    )
    def item_detail(self, request, pk=None, item_id=None):
        if request.method == 'DELETE':
            delete_list_item(user=request.user, list_id=pk, item_id=item_id)
            return no_content_response()

        serializer = UpdateListItemInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        item = update_list_item(
            user=request.user,
            list_id=pk,
            item_id=item_id,
            **serializer.validated_data,
        )
        return success_response(ListItemSerializer(item).data)
