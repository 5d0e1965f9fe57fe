from typing import Dict, List
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from bilete.api.deps import get_settings, get_ticket_prices
from bilete.core.config import Settings
from bilete.schemas.ticket import FilterCriteria, Summary, Ticket, TicketTypeOut, ViewPage
from bilete.services.phone import INVALID_PHONE_MESSAGE
from bilete.services.ticket_list import apply_filters, build_view_page, summarize
from bilete.services.whatsapp import ticket_share_link

router = APIRouter()

class TicketViewBody(BaseModel):
    tickets: List[Ticket] = Field(default_factory=list)
    criteria: FilterCriteria = Field(default_factory=FilterCriteria)
    page: int = Field(1, ge=1)
    per_page: int | None = Field(None, ge=1, le=500, description="Defaults to ITEMS_PER_PAGE")

class TicketSummaryBody(BaseModel):
    tickets: List[Ticket] = Field(default_factory=list)

class ShareLinkBody(BaseModel):
    ticket: Ticket

@router.post("/view", response_model=ViewPage)
def view_tickets(payload: TicketViewBody, cfg: Settings = Depends(get_settings)):
    """Filter the posted ticket list and return one page of it.

    The page is not clamped; a page past the end comes back with no items.
    """
    per_page = payload.per_page or cfg.items_per_page
    filtered = apply_filters(payload.tickets, payload.criteria)
    return build_view_page(filtered, payload.page, per_page, cfg.max_visible_pages)

@router.post("/summary", response_model=Summary)
def tickets_summary(payload: TicketSummaryBody, prices: Dict[str, float] = Depends(get_ticket_prices)):
    return summarize(payload.tickets, prices)

@router.post("/share-link")
def share_ticket(payload: ShareLinkBody, cfg: Settings = Depends(get_settings)):
    try:
        number, url, message = ticket_share_link(payload.ticket, cfg.public_base_url)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_PHONE_MESSAGE)
    return {"phone": number, "url": url, "message": message}

@router.get("/types", response_model=List[TicketTypeOut])
def ticket_types(prices: Dict[str, float] = Depends(get_ticket_prices)):
    return [TicketTypeOut(tip_bilet=name, price=price) for name, price in prices.items()]
