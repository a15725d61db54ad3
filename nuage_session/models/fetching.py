"""Pagination / filtering metadata exchanged through X-Nuage-* headers."""

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field

from ..config import (
    HEADER_ATTRIBUTES,
    HEADER_COUNT,
    HEADER_FILTER,
    HEADER_FILTER_TYPE,
    HEADER_GROUP_BY,
    HEADER_ORDER_BY,
    HEADER_PAGE,
    HEADER_PAGE_SIZE,
)


def _header_int(headers: Mapping[str, str], name: str) -> int:
    try:
        return int(headers.get(name, ""))
    except (TypeError, ValueError):
        return 0


@dataclass
class FetchingInfo:
    """
    Filled by the caller before a children fetch and overwritten from the
    response headers afterwards.  ``page == -1`` means no pagination.
    """

    filter: str = ""
    filter_type: str = ""
    order_by: str = ""
    page: int = -1
    page_size: int = 0
    group_by: list[str] = field(default_factory=list)
    total_count: int = 0

    def apply_to_headers(self, headers: MutableMapping[str, str]) -> None:
        """Set the request headers for every field that is set."""
        if self.filter:
            headers[HEADER_FILTER] = self.filter
        if self.order_by:
            headers[HEADER_ORDER_BY] = self.order_by
        if self.page != -1:
            headers[HEADER_PAGE] = str(self.page)
        if self.page_size > 0:
            headers[HEADER_PAGE_SIZE] = str(self.page_size)
        if self.group_by:
            headers[HEADER_GROUP_BY] = "true"
            headers[HEADER_ATTRIBUTES] = ", ".join(self.group_by)

    def update_from_headers(self, headers: Mapping[str, str]) -> None:
        """Overwrite fields from the mirrored response headers (0 when missing)."""
        self.filter = headers.get(HEADER_FILTER, "")
        self.filter_type = headers.get(HEADER_FILTER_TYPE, "")
        self.order_by = headers.get(HEADER_ORDER_BY, "")
        self.page = _header_int(headers, HEADER_PAGE)
        self.page_size = _header_int(headers, HEADER_PAGE_SIZE)
        self.total_count = _header_int(headers, HEADER_COUNT)
