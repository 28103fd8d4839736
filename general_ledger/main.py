"""
General Ledger: FastAPI application.

This is the entry point for the application.
All routers are registered here.
"""

from fastapi import FastAPI

from general_ledger.config import get_settings
from general_ledger.logging_config import configure_logging
from general_ledger.api.health import router as health_router
from general_ledger.api.accounts import router as accounts_router
from general_ledger.api.transactions import router as transactions_router

settings = get_settings()

configure_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Double-entry general ledger: chart of accounts and journal transactions",
)

# Register routers
app.include_router(health_router)
app.include_router(accounts_router)
app.include_router(transactions_router)
