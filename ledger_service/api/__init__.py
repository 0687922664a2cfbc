"""
Ledger API Application Factory
"""

from typing import Optional
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import uvicorn

from .. import __version__
from ..config import get_config
from ..exceptions import LedgerError
from ..ledger import LedgerStore
from ..logging_config import get_logger, log_action, setup_logging

from .customers import router as customers_router
from .statement import router as statement_router
from .accounts import router as accounts_router
from .transactions import router as transactions_router


logger = get_logger("ledger.api")


def create_app(store: Optional[LedgerStore] = None) -> FastAPI:
    """Create and configure the FastAPI application around a ledger store"""
    config = get_config()

    app = FastAPI(
        title="Ledger Service API",
        description="Customer accounts with credit/debit statements and running balances",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    if store is None:
        store = LedgerStore(amount_precision=config.amount_precision)
    app.state.store = store

    @app.exception_handler(LedgerError)
    async def ledger_error_handler(request: Request, exc: LedgerError):
        log_action(logger, "warning", exc.message, action="request_rejected",
                   resource=f"{request.method} {request.url.path}",
                   extra=exc.details or None)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    # Include routers
    app.include_router(customers_router, prefix="/customers", tags=["Customers"])
    app.include_router(statement_router, prefix="/statement", tags=["Statement"])
    app.include_router(accounts_router, prefix="/account", tags=["Accounts"])
    app.include_router(transactions_router, tags=["Transactions"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "service": config.service_name,
            "version": __version__
        }

    @app.get("/")
    async def get_api_info():
        """Get API information"""
        return {
            "name": "Ledger Service API",
            "version": __version__,
            "endpoints": {
                "docs": "/docs",
                "health": "/health",
                "customers": "/customers",
                "account": "/account",
                "statement": "/statement",
                "deposit": "/deposit",
                "withdraw": "/withdraw",
                "balance": "/balance",
            }
        }

    return app


def run_server(host: Optional[str] = None, port: Optional[int] = None,
               reload: Optional[bool] = None):
    """Run the FastAPI server; unset arguments come from configuration"""
    config = get_config()
    setup_logging(config.log_level, config.log_format, config.log_file)

    host = host or config.api_host
    port = port or config.api_port
    reload = config.api_reload if reload is None else reload

    log_action(logger, "info", "Server starting", action="server_start",
               extra={"host": host, "port": port})
    uvicorn.run(
        "ledger_service.api:app",
        host=host,
        port=port,
        reload=reload,
        log_level=config.log_level.lower()
    )


# Module-level app for uvicorn
app = create_app()
