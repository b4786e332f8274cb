"""Card table pagination and page-number window"""

from dataclasses import dataclass, replace
from typing import List, Optional, Sequence

from hitsort_dashboard.domain.models import CardPage, CardRecord, PageMarker

CARDS_PER_PAGE = 50
MAX_PAGES_SHOWN = 5
ELLIPSIS = "…"


def total_pages_for(count: int, page_size: int = CARDS_PER_PAGE) -> int:
    return -(-count // page_size)


def page_window(current_page: int, total_pages: int) -> List[PageMarker]:
    """
    Page-number controls to show, with ellipsis gaps for long tables.

    Examples:
        (2, 3)  -> [1, 2, 3]
        (1, 10) -> [1, 2, 3, 4, "…", 10]
        (9, 10) -> [1, "…", 7, 8, 9, 10]
        (5, 10) -> [1, "…", 4, 5, 6, "…", 10]
    """
    if total_pages <= MAX_PAGES_SHOWN:
        return list(range(1, total_pages + 1))

    if current_page <= 3:
        return [1, 2, 3, 4, ELLIPSIS, total_pages]

    if current_page >= total_pages - 2:
        return [1, ELLIPSIS] + list(range(total_pages - 3, total_pages + 1))

    return [1, ELLIPSIS, current_page - 1, current_page, current_page + 1, ELLIPSIS, total_pages]


def paginate(
    filtered: Sequence[CardRecord],
    page: int,
    page_size: int = CARDS_PER_PAGE,
) -> CardPage:
    """Slice one page out of the filtered cards; pages outside 1..total_pages are empty"""
    total_pages = total_pages_for(len(filtered), page_size)
    start = (page - 1) * page_size
    items = list(filtered[start:start + page_size]) if page >= 1 else []

    return CardPage(
        items=items,
        page=page,
        total_pages=total_pages,
        total_items=len(filtered),
        window=page_window(page, total_pages),
    )


@dataclass(frozen=True)
class TableState:
    """Search box, seller dropdown and current page of the card table"""

    search_term: str = ""
    seller_filter: str = ""
    page: int = 1

    def apply(
        self,
        search_term: Optional[str] = None,
        seller_filter: Optional[str] = None,
        page: Optional[int] = None,
    ) -> "TableState":
        """
        Move to a new state. Any change to the filters sends the table back to
        page 1; a page change on its own leaves the filters alone.
        """
        search_term = self.search_term if search_term is None else search_term
        seller_filter = self.seller_filter if seller_filter is None else seller_filter

        if search_term != self.search_term or seller_filter != self.seller_filter:
            return TableState(search_term=search_term, seller_filter=seller_filter, page=1)

        if page is not None:
            return replace(self, page=page)
        return self
