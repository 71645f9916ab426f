"""
ISP Billing System - Main Application

Subscriber billing for an internet service provider:
- /api/v1/auth/...       → Login, current user
- /api/v1/{section}/...  → Permission-checked business API
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from database import init_db, db
from database.seed import seed_all
from core.config import settings
from core.exceptions import ServiceError

from routers import (
    auth_router, users_router, packages_router, clients_router,
    invoices_router, payments_router, expenses_router, incomes_router,
    reports_router, dashboard_router, settings_router
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(f"🚀 Starting {settings.app_name}...")

    try:
        init_db()
        logger.info("✅ Database initialized")

        # Seed manager account (first run only)
        with db.get_session() as session:
            seed_all(session)

    except Exception as e:
        logger.error(f"❌ Database initialization failed: {e}")
        raise

    logger.info(f"✅ {settings.app_name} started successfully!")

    yield

    logger.info(f"👋 Shutting down {settings.app_name}...")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="""
    Billing back office for an internet service provider.

    * **Packages** - Subscription plans, prices, billing cycles
    * **Clients** - Subscribers, service and payment status, credit
    * **Invoices** - Manual invoices, monthly generation, overdue view
    * **Payments** - Single and batch payments
    * **Expenses / Incomes** - Operating ledgers
    * **Reports** - Financial summary, debtors, revenue breakdowns
    * **Dashboard** - Live statistics
    """,
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message}
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "message": "Internal server error",
            "detail": str(exc) if settings.debug else None
        }
    )


# ==================== HEALTH ====================

@app.get("/", tags=["Health"])
async def root():
    return {
        "message": settings.app_name,
        "version": settings.app_version,
        "status": "running"
    }


@app.get("/health", tags=["Health"])
async def health_check():
    from sqlalchemy import text
    try:
        with db.get_session() as session:
            session.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "connected"}
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "database": "disconnected", "error": str(e)}
        )


# ==================== API ROUTES ====================

API_PREFIX = "/api/v1"

app.include_router(auth_router, prefix=f"{API_PREFIX}/auth", tags=["Authentication"])
app.include_router(users_router, prefix=f"{API_PREFIX}/users", tags=["Users"])
app.include_router(packages_router, prefix=f"{API_PREFIX}/packages", tags=["Packages"])
app.include_router(clients_router, prefix=f"{API_PREFIX}/clients", tags=["Clients"])
app.include_router(invoices_router, prefix=f"{API_PREFIX}/invoices", tags=["Invoices"])
app.include_router(payments_router, prefix=f"{API_PREFIX}/payments", tags=["Payments"])
app.include_router(expenses_router, prefix=f"{API_PREFIX}/expenses", tags=["Expenses"])
app.include_router(incomes_router, prefix=f"{API_PREFIX}/incomes", tags=["Incomes"])
app.include_router(reports_router, prefix=f"{API_PREFIX}/reports", tags=["Reports"])
app.include_router(dashboard_router, prefix=f"{API_PREFIX}/dashboard", tags=["Dashboard"])
app.include_router(settings_router, prefix=f"{API_PREFIX}/settings", tags=["Settings"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
