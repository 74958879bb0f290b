from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

import logging

from simplemeal.infra.Repository import JsonRepository
from simplemeal.infra.paths import STORE_FILE
from simplemeal.infra.subscription import RevenueCatSubscription, StaticSubscription
from simplemeal.logic.library.catalog import seed_default_items
from simplemeal.logic.shopping.list_builder import purge_orphans
from simplemeal.utilities.config import REVENUECAT_API_KEY, REVENUECAT_APP_USER_ID
from simplemeal.utilities.errors import DeepLinkError, PersistenceError

# Routers
from simplemeal.api.routes import exchange, export, library, plan, shopping

# Logging
logger = logging.getLogger("simplemeal_app")

# Initialize FastAPI app
app = FastAPI(title="SimpleMeal Planner API")

# Include routers
app.include_router(library.router)
app.include_router(plan.router)
app.include_router(shopping.router)
app.include_router(exchange.router)
app.include_router(export.router)


@app.on_event("startup")
async def _startup():
    """Open the store, clean it up and read the subscription state once."""
    if not hasattr(app.state, "repository"):
        app.state.repository = JsonRepository(STORE_FILE)
    if not hasattr(app.state, "subscription"):
        if REVENUECAT_API_KEY and REVENUECAT_APP_USER_ID:
            app.state.subscription = RevenueCatSubscription()
        else:
            app.state.subscription = StaticSubscription(is_premium=False)

    repo = app.state.repository
    removed = purge_orphans(repo)
    seeded = seed_default_items(repo)
    logger.info(f"Store ready at {STORE_FILE} (orphans removed: {removed}, items seeded: {seeded})")
    await app.state.subscription.refresh()


# -------------------- Error mapping --------------------
@app.exception_handler(DeepLinkError)
async def _deep_link_error(request: Request, exc: DeepLinkError):
    logger.warning(f"Rejected share link ({exc.reason}): {exc}")
    return JSONResponse(status_code=400, content={"error": exc.reason, "detail": str(exc)})


@app.exception_handler(PersistenceError)
async def _persistence_error(request: Request, exc: PersistenceError):
    logger.error(f"Persistence failure on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": "persistence", "detail": str(exc)})


@app.get('/health')
def health():
    return {"status": "ok"}
