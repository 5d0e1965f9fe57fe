import pytest

from bilete.schemas.ticket import Ticket


def make_ticket(i: int, **overrides) -> Ticket:
    data = {
        "_id": f"t{i}",
        "nume": f"Participant {i}",
        "telefon": f"07{i:08d}",
        "tip_bilet": "BAL",
        "group": "grupa-a",
        "created_at": "2025-02-01T10:00:00Z",
        "verified": False,
        "verification_count": 0,
        "sent": False,
    }
    data.update(overrides)
    return Ticket.model_validate(data)


@pytest.fixture
def ticket_factory():
    return make_ticket


@pytest.fixture
def mixed_tickets():
    return [
        make_ticket(1, nume="Ana Popescu", telefon="0712345678", tip_bilet="BAL", verified=True, sent=True),
        make_ticket(2, nume="Banu", telefon="0722000111", tip_bilet="AFTER"),
        make_ticket(3, nume="Ioana Marin", telefon="+40733444555", tip_bilet="AFTER VIP", sent=True),
        make_ticket(4, nume="Mihai", telefon="0744 555 666", tip_bilet="BAL + AFTER", verified=True),
        make_ticket(5, nume="Elena", telefon="0755123123", tip_bilet=None),
    ]
