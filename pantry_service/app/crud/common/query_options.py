# app/crud/common/query_options.py
import math
from typing import Dict, Tuple

from sqlalchemy.orm import Query

from shared.core.exceptions import ValidationError
from shared.core.schemas import PageOptions
from shared.utils.app_status_code import AppStatusCode
from ...enum.inventory_enum import SortDirection


def parse_sort(sort_by: str, allowed: Dict[str, object], default: str) -> Tuple[object, SortDirection]:
    """Resolve "field:direction" against an allow-list of sortable columns."""
    field, _, direction = (sort_by or default).partition(":")
    field = field.strip()
    direction = (direction.strip() or SortDirection.desc.value).lower()

    if field not in allowed:
        raise ValidationError(
            f"Cannot sort by '{field}'. Allowed fields: {', '.join(sorted(allowed))}",
            AppStatusCode.INVALID_SORT_FIELD)
    try:
        return allowed[field], SortDirection(direction)
    except ValueError:
        raise ValidationError(
            f"Sort direction must be 'asc' or 'desc', got '{direction}'",
            AppStatusCode.INVALID_SORT_FIELD)


def paginate(query: Query, options: PageOptions, allowed_sorts: Dict[str, object], default_sort: str, id_column) -> dict:
    column, direction = parse_sort(options.sort_by, allowed_sorts, default_sort)
    total_results = query.order_by(None).count()

    ordering = column.asc() if direction == SortDirection.asc else column.desc()
    results = (
        query
        .order_by(ordering, id_column.asc())
        .offset((options.page - 1) * options.limit)
        .limit(options.limit)
        .all()
    )

    return {
        "results": results,
        "page": options.page,
        "limit": options.limit,
        "total_pages": math.ceil(total_results / options.limit),
        "total_results": total_results,
    }
