from __future__ import annotations
from urllib.parse import quote

from bilete.schemas.ticket import Ticket
from bilete.services.phone import whatsapp_number

WA_BASE_URL = "https://wa.me"
# characters encodeURIComponent leaves alone
_SAFE = "-_.!~*'()"


def ticket_public_url(ticket_id: str, public_base_url: str) -> str:
    return f"{public_base_url.rstrip('/')}/tickets/{ticket_id}/custom-public"


def ticket_message(ticket: Ticket, public_base_url: str) -> str:
    tip = ticket.tip_bilet or ""
    return (
        f"*Bilet {tip}*\n"
        "\n"
        f"*Nume:* {ticket.nume}\n"
        f"*Telefon:* {ticket.telefon}\n"
        f"*Tip bilet:* {tip}\n"
        "\n"
        f"*Vezi și descarcă biletul:* {ticket_public_url(ticket.id, public_base_url)}"
    )


def share_link(phone: str, message: str) -> str:
    number = whatsapp_number(phone)
    if not number:
        raise ValueError("Phone number has no digits")
    return f"{WA_BASE_URL}/{number}?text={quote(message, safe=_SAFE)}"


def ticket_share_link(ticket: Ticket, public_base_url: str) -> tuple[str, str, str]:
    """Return ``(number, url, message)`` for sharing a ticket with its holder."""
    message = ticket_message(ticket, public_base_url)
    url = share_link(ticket.telefon, message)
    return whatsapp_number(ticket.telefon), url, message
