from __future__ import annotations
from datetime import datetime
from enum import Enum
from typing import List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

ALL = "all"


class StatusFilter(str, Enum):
    all = "all"
    verified = "verified"
    pending = "pending"


class SentFilter(str, Enum):
    all = "all"
    sent = "sent"
    not_sent = "not-sent"


class Ticket(BaseModel):
    """Ticket record as returned by the ticket API.

    The API sends the identifier as ``_id``; both spellings are accepted.
    Unknown fields are kept so records round-trip untouched.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    nume: str = Field(min_length=1)
    telefon: str
    tip_bilet: Optional[str] = None
    group: Optional[str] = None
    created_at: Optional[datetime] = None
    verified: bool = False
    verification_count: int = Field(default=0, ge=0)
    sent: bool = False
    sent_at: Optional[datetime] = None


class FilterCriteria(BaseModel):
    model_config = ConfigDict(extra="forbid")

    search_term: str = ""
    status_filter: StatusFilter = StatusFilter.all
    sent_filter: SentFilter = SentFilter.all
    type_filter: str = ALL

    @field_validator("status_filter", "sent_filter", "type_filter", mode="before")
    @classmethod
    def _blank_means_all(cls, v):
        # an unselected <select> posts an empty value
        if v is None or (isinstance(v, str) and not v.strip()):
            return ALL
        return v

    def normalized_search(self) -> str:
        return self.search_term.strip().lower()


class Summary(BaseModel):
    count: int
    total_cost: float


class ViewPage(BaseModel):
    items: List[Ticket]
    total: int
    total_pages: int
    current_page: int
    start: int
    end: int
    page_numbers: List[int]
    has_prev: bool
    has_next: bool
    show_pager: bool


class TicketTypeOut(BaseModel):
    tip_bilet: str
    price: float
