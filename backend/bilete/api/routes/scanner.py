from fastapi import APIRouter, Depends
from pydantic import BaseModel

from bilete.api.deps import get_scanner_session
from bilete.services.scanner import ScannerSession

router = APIRouter()

class DetectBody(BaseModel):
    code: str

def _state(scanner: ScannerSession) -> dict:
    return {"state": scanner.state.value, "debounce_ms": scanner.debounce_ms}

@router.get("")
@router.get("/")
def scanner_state(scanner: ScannerSession = Depends(get_scanner_session)):
    return _state(scanner)

@router.post("/start")
def start_scanner(scanner: ScannerSession = Depends(get_scanner_session)):
    scanner.start()
    return _state(scanner)

@router.post("/stop")
def stop_scanner(scanner: ScannerSession = Depends(get_scanner_session)):
    scanner.stop()
    return _state(scanner)

@router.post("/detect")
def detect_code(payload: DetectBody, scanner: ScannerSession = Depends(get_scanner_session)):
    """Report a decoded QR payload.

    `accepted` is false when the scanner is stopped or the same code was read
    inside the debounce window; only accepted codes should be verified.
    """
    accepted = scanner.detect(payload.code)
    return {"accepted": accepted, "code": payload.code.strip(), **_state(scanner)}
