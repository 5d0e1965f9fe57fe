"""Client-side ticket table: filtering, pagination and the cost summary.

The module-level functions are pure. ``TicketListViewState`` holds the
collection together with the current criteria and page for one view session.
"""
from __future__ import annotations
import math
from datetime import datetime, timezone
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from bilete.core.config import DEFAULT_TICKET_PRICES
from bilete.schemas.ticket import ALL, FilterCriteria, SentFilter, StatusFilter, Summary, Ticket, ViewPage


def _matches(ticket: Ticket, criteria: FilterCriteria, term: str) -> bool:
    if term and term not in ticket.nume.lower() and term not in ticket.telefon.lower():
        return False
    if criteria.status_filter == StatusFilter.verified and not ticket.verified:
        return False
    if criteria.status_filter == StatusFilter.pending and ticket.verified:
        return False
    if criteria.sent_filter == SentFilter.sent and not ticket.sent:
        return False
    if criteria.sent_filter == SentFilter.not_sent and ticket.sent:
        return False
    if criteria.type_filter != ALL and ticket.tip_bilet != criteria.type_filter:
        return False
    return True


def apply_filters(tickets: Sequence[Ticket], criteria: FilterCriteria) -> List[Ticket]:
    term = criteria.normalized_search()
    return [t for t in tickets if _matches(t, criteria, term)]


def total_pages_for(count: int, per_page: int) -> int:
    # at least one page so an empty table still renders "page 1 of 1"
    return max(1, math.ceil(count / per_page))


def paginate(filtered: Sequence[Ticket], page: int, per_page: int) -> Tuple[List[Ticket], int]:
    """Return ``(items, total_pages)`` for a 1-indexed page.

    The page is not clamped: asking past the last page yields no items.
    """
    if per_page < 1:
        raise ValueError("per_page must be a positive integer")
    start = max(0, (page - 1) * per_page)
    end = max(0, page * per_page)
    return list(filtered[start:end]), total_pages_for(len(filtered), per_page)


def page_range(count: int, page: int, per_page: int) -> Tuple[int, int]:
    """1-based inclusive range of rows shown on ``page``; ``(0, 0)`` when empty."""
    if count == 0:
        return 0, 0
    start = (page - 1) * per_page + 1
    end = min(page * per_page, count)
    if start > end:
        return 0, 0
    return start, end


def page_window(current: int, total_pages: int, max_visible: int = 5) -> List[int]:
    start = max(1, current - max_visible // 2)
    end = min(total_pages, start + max_visible - 1)
    if end - start < max_visible - 1:
        start = max(1, end - max_visible + 1)
    return list(range(start, end + 1))


def price_of(tip_bilet: Optional[str], prices: Optional[Mapping[str, float]] = None) -> float:
    table = DEFAULT_TICKET_PRICES if prices is None else prices
    if tip_bilet is None:
        return 0.0
    return float(table.get(tip_bilet, 0))


def summarize(tickets: Sequence[Ticket], prices: Optional[Mapping[str, float]] = None) -> Summary:
    total = sum((price_of(t.tip_bilet, prices) for t in tickets), 0.0)
    return Summary(count=len(tickets), total_cost=total)


def build_view_page(
    filtered: Sequence[Ticket],
    page: int,
    per_page: int,
    max_visible: int = 5,
) -> ViewPage:
    items, total_pages = paginate(filtered, page, per_page)
    start, end = page_range(len(filtered), page, per_page)
    return ViewPage(
        items=items,
        total=len(filtered),
        total_pages=total_pages,
        current_page=page,
        start=start,
        end=end,
        page_numbers=page_window(page, total_pages, max_visible),
        has_prev=page > 1,
        has_next=page < total_pages,
        show_pager=len(filtered) > per_page,
    )


class TicketListViewState:
    """Ticket table state for one view session.

    Changing the filter criteria always goes back to page 1. Paging never
    touches the criteria, and mutating a ticket keeps both where they are.
    Not thread-safe: callers sharing one instance must serialize access.
    """

    def __init__(
        self,
        tickets: Optional[Sequence[Ticket]] = None,
        items_per_page: int = 50,
        prices: Optional[Mapping[str, float]] = None,
        max_visible_pages: int = 5,
    ) -> None:
        if items_per_page < 1:
            raise ValueError("items_per_page must be a positive integer")
        self.tickets: List[Ticket] = list(tickets or [])
        self.criteria = FilterCriteria()
        self.current_page = 1
        self.items_per_page = items_per_page
        self.max_visible_pages = max_visible_pages
        self.prices: Dict[str, float] = dict(DEFAULT_TICKET_PRICES if prices is None else prices)

    def filtered(self) -> List[Ticket]:
        return apply_filters(self.tickets, self.criteria)

    @property
    def total_pages(self) -> int:
        return total_pages_for(len(self.filtered()), self.items_per_page)

    def set_criteria(self, criteria: FilterCriteria) -> None:
        self.criteria = criteria
        self.current_page = 1

    def update_criteria(self, **changes) -> None:
        self.set_criteria(FilterCriteria.model_validate({**self.criteria.model_dump(), **changes}))

    def go_to_page(self, page: int) -> int:
        self.current_page = min(max(1, page), self.total_pages)
        return self.current_page

    def next_page(self) -> int:
        return self.go_to_page(self.current_page + 1)

    def prev_page(self) -> int:
        return self.go_to_page(self.current_page - 1)

    def replace_tickets(self, tickets: Sequence[Ticket]) -> None:
        self.tickets = list(tickets)
        self.current_page = min(self.current_page, self.total_pages)

    def find(self, ticket_id: str) -> Optional[Ticket]:
        for t in self.tickets:
            if t.id == ticket_id:
                return t
        return None

    def update_ticket(self, ticket_id: str, **fields) -> bool:
        ticket = self.find(ticket_id)
        if ticket is None:
            return False
        if "sent" in fields and "sent_at" not in fields:
            fields["sent_at"] = datetime.now(timezone.utc) if fields["sent"] else None
        for name, value in fields.items():
            setattr(ticket, name, value)
        return True

    def current(self) -> ViewPage:
        return build_view_page(self.filtered(), self.current_page, self.items_per_page, self.max_visible_pages)

    def summary(self) -> Summary:
        return summarize(self.tickets, self.prices)
