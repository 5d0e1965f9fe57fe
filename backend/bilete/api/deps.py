from typing import Dict
from fastapi import Depends

from bilete.core.config import Settings, settings
from bilete.services.scanner import ScannerSession, session as scanner_session

def get_settings() -> Settings:
    return settings

def get_ticket_prices(cfg: Settings = Depends(get_settings)) -> Dict[str, float]:
    return cfg.ticket_prices

def get_scanner_session() -> ScannerSession:
    return scanner_session
