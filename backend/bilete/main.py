from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bilete.api.router import api_router
from bilete.core.config import settings

app = FastAPI(title=settings.app_name, version="0.1.0")

# Configurable CORS origins (CORS_ORIGINS env). If empty -> dev defaults.
origins = settings.cors_origins
print("[startup] Resolved CORS origins:", origins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)

@app.on_event("startup")
def startup():
    print(f"[startup] env={settings.env} items_per_page={settings.items_per_page} ticket types={list(settings.ticket_prices)}")
