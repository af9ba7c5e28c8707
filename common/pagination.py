# common/pagination.py
from django.conf import settings
from django.core.paginator import EmptyPage, Paginator


def _positive_int(value, default):
    try:
        value = int(value)
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


def paginate(queryset, page=None, limit=None, total_key="total"):
    """
    Slice *queryset* the way the list endpoints expose it.

    Returns (items, pagination_dict). A page past the end yields an empty list
    rather than an error.
    """
    conf = settings.FLEETLINK
    page = _positive_int(page, 1)
    limit = min(_positive_int(limit, conf["DEFAULT_PAGE_SIZE"]), conf["MAX_PAGE_SIZE"])

    paginator = Paginator(queryset, limit)
    total = paginator.count
    try:
        items = list(paginator.page(page).object_list)
    except EmptyPage:
        items = []

    skip = (page - 1) * limit
    pagination = {
        "currentPage": page,
        "totalPages": paginator.num_pages if total else 0,
        total_key: total,
        "hasNext": skip + len(items) < total,
        "hasPrev": page > 1,
    }
    return items, pagination
