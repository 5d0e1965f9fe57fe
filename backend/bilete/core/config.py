from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Dict, List, Optional
from pathlib import Path
import json
import logging

logger = logging.getLogger("bilete.config")

DEFAULT_TICKET_PRICES: Dict[str, int] = {
    "BAL": 60,
    "AFTER": 120,
    "AFTER VIP": 120,
    "BAL + AFTER": 160,
    "BAL + AFTER VIP": 160,
}

class Settings(BaseSettings):
    app_name: str = Field(default="Bilete API", alias="APP_NAME")
    env: str = Field(default="dev", alias="ENV")
    # Raw env values (strings), parsed via properties to avoid JSON decoding errors
    cors_origins_raw: Optional[str] = Field(default=None, alias="CORS_ORIGINS", description="Comma or space separated list of allowed CORS origins")
    ticket_prices_raw: Optional[str] = Field(default=None, alias="TICKET_PRICES", description="JSON object: ticket type -> price in lei")
    items_per_page: int = Field(default=50, ge=1, alias="ITEMS_PER_PAGE")
    max_visible_pages: int = Field(default=5, ge=1, alias="MAX_VISIBLE_PAGES")
    public_base_url: str = Field(default="https://www.site-bilete.shop/api", alias="PUBLIC_BASE_URL")
    scan_debounce_ms: int = Field(default=2000, ge=0, alias="SCAN_DEBOUNCE_MS")

    class Config:
        # Load env from backend/.env regardless of CWD
        env_file = str(Path(__file__).resolve().parents[2] / ".env")
        case_sensitive = False
        populate_by_name = True

    def _parse_list(self, v: Optional[str]) -> List[str]:
        if v is None:
            return []
        s = v.strip()
        if not s:
            return []
        if s.startswith("[") and s.endswith("]"):
            try:
                loaded = json.loads(s)
                if isinstance(loaded, list):
                    return [str(e).strip() for e in loaded if str(e).strip()]
            except ValueError:
                pass
        return [e.strip() for e in s.replace(" ", ",").split(",") if e.strip()]

    @property
    def cors_origins(self) -> List[str]:
        items = self._parse_list(self.cors_origins_raw)
        # Fallback dev defaults if none provided
        if not items:
            return ["http://localhost:5173", "http://127.0.0.1:5173"]
        # Dev convenience: ensure both localhost and 127.0.0.1 variants for same ports
        augmented = set(items)
        for origin in items:
            if origin.startswith("http://localhost:"):
                port = origin.rsplit(":", 1)[1]
                augmented.add(f"http://127.0.0.1:{port}")
            if origin.startswith("http://127.0.0.1:"):
                port = origin.rsplit(":", 1)[1]
                augmented.add(f"http://localhost:{port}")
        return sorted(augmented)

    @property
    def ticket_prices(self) -> Dict[str, float]:
        """Price table keyed by ticket type.

        Falls back to the default table when TICKET_PRICES is unset or not a
        JSON object of numbers.
        """
        raw = (self.ticket_prices_raw or "").strip()
        if not raw:
            return dict(DEFAULT_TICKET_PRICES)
        try:
            loaded = json.loads(raw)
        except ValueError:
            logger.warning("TICKET_PRICES is not valid JSON, using default prices")
            return dict(DEFAULT_TICKET_PRICES)
        if not isinstance(loaded, dict):
            logger.warning("TICKET_PRICES must be a JSON object, using default prices")
            return dict(DEFAULT_TICKET_PRICES)
        prices: Dict[str, float] = {}
        for name, value in loaded.items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                logger.warning("Ignoring non-numeric price for ticket type %r", name)
                continue
            prices[str(name)] = value
        return prices or dict(DEFAULT_TICKET_PRICES)

settings = Settings()  # type: ignore
