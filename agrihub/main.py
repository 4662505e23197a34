import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agrihub.core.config import settings
from agrihub.core.errors import register_exception_handlers
from agrihub.core.logging import configure_logging
from agrihub.db.init import init_db, seed_demo_data
from agrihub.db.session import SessionLocal
from agrihub.api import (
    users, dashboard, equipment, bookings, produce, products, orders, transport, payments
)
from agrihub.auth.jwt import router as auth_router

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Schema first, then demo rows, then start serving
    init_db()
    if settings.seed_demo_data:
        db = SessionLocal()
        try:
            seed_demo_data(db)
        finally:
            db.close()
    logger.info(f"{settings.app_name} ready")
    yield


app = FastAPI(
    title="agrihub",
    description="Backend API for the AgriHub agricultural marketplace",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(auth_router, prefix=f"{API_PREFIX}/auth", tags=["auth"])
app.include_router(users.router, prefix=f"{API_PREFIX}/users", tags=["users"])
app.include_router(dashboard.router, prefix=f"{API_PREFIX}/dashboard", tags=["dashboard"])
app.include_router(equipment.router, prefix=f"{API_PREFIX}/equipment", tags=["equipment"])
app.include_router(bookings.router, prefix=f"{API_PREFIX}/bookings", tags=["bookings"])
app.include_router(produce.router, prefix=f"{API_PREFIX}/produce", tags=["produce"])
app.include_router(products.router, prefix=f"{API_PREFIX}/products", tags=["products"])
app.include_router(orders.router, prefix=f"{API_PREFIX}/orders", tags=["orders"])
app.include_router(transport.router, prefix=f"{API_PREFIX}/transport", tags=["transport"])
app.include_router(payments.router, prefix=f"{API_PREFIX}/payments", tags=["payments"])

@app.get("/health")
def health_check():
    return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}
