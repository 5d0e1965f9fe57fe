from fastapi import APIRouter

from bilete.api.routes import health, phone, scanner, tickets

api_router = APIRouter()
api_router.include_router(health.router, prefix="/health", tags=["health"])  # GET /
api_router.include_router(phone.router, prefix="/phone", tags=["phone"])  # GET /normalize
api_router.include_router(tickets.router, prefix="/tickets", tags=["tickets"])  # POST /view, /summary, /share-link; GET /types
api_router.include_router(scanner.router, prefix="/scanner", tags=["scanner"])  # GET /, POST /start, /stop, /detect
