"""Product suggestion search."""

from django.db.models import Q, QuerySet
from typing import Optional

from ..models import CanonicalProduct
from .exceptions import ProductNotFoundError

DEFAULT_SEARCH_LIMIT = 15
MAX_SEARCH_LIMIT = 30


def clamp_limit(limit) -> int:
    """
    Normalize a requested result limit.

    Missing, non-numeric or non-positive values fall back to the default;
    anything above the cap is capped.
    """
    try:
        limit = int(limit)
    except (TypeError, ValueError):
        return DEFAULT_SEARCH_LIMIT
    if limit <= 0:
        return DEFAULT_SEARCH_LIMIT
    return min(limit, MAX_SEARCH_LIMIT)


def search_products(*, query: Optional[str], limit=DEFAULT_SEARCH_LIMIT) -> QuerySet[CanonicalProduct]:
    """
    Search canonical products by display name or brand.

    Args:
        query: Substring to look for (case-insensitive); blank returns nothing
        limit: Maximum number of results (default 15, capped at 30)

    Returns:
        QuerySet of CanonicalProduct ordered by display name
    """
    term = (query or '').strip()
    if not term:
        return CanonicalProduct.objects.none()

    return (
        CanonicalProduct.objects
        .filter(Q(display_name__icontains=term) | Q(brand__icontains=term))
        .order_by('display_name')[:clamp_limit(limit)]
    )


def get_product_by_id(*, product_id: str) -> CanonicalProduct:
    """
    Raises:
        ProductNotFoundError: If product doesn't exist
    """
    try:
        return CanonicalProduct.objects.get(id=product_id)
    except CanonicalProduct.DoesNotExist:
        raise ProductNotFoundError()
