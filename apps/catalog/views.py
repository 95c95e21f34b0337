from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.common.responses import success_response
from .serializers import ProductSearchParamsSerializer, CanonicalProductSerializer
from .services import search_products


@extend_schema(
    parameters=[
        OpenApiParameter('q', str, description='Search term (display name or brand)'),
        OpenApiParameter('limit', int, description='Max results (default 15, max 30)'),
    ],
    responses={200: CanonicalProductSerializer(many=True)},
    description="Product suggestions for the add-item box.",
    tags=['products'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def product_search(request):
    """Search canonical products."""
    params = ProductSearchParamsSerializer(data=request.query_params)
    params.is_valid(raise_exception=True)

    products = search_products(
        query=params.validated_data.get('q'),
        limit=params.validated_data.get('limit'),
    )
    return success_response(CanonicalProductSerializer(products, many=True).data)
