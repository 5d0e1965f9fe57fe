from fastapi import APIRouter, Query

from bilete.services.phone import is_valid_phone, normalize_phone, validation_message

router = APIRouter()

@router.get("/normalize")
def normalize(raw: str = Query("", description="Phone number as typed by the user")):
    """Normalize a Romanian phone number to +40XXXXXXXXX and report validity.

    An invalid number is not an error here; `valid` is false and `message`
    carries the text to show next to the input.
    """
    return {
        "raw": raw,
        "normalized": normalize_phone(raw),
        "valid": is_valid_phone(raw),
        "message": validation_message(raw),
    }
