"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import src.api.endpoints.cheques as cheques_module
import src.api.endpoints.loans as loans_module
from src.api.dependencies import api_key_protection, select_cheque_provider, select_loan_provider
from src.error_handler import ApiError, ErrorHandler, validation_error
from src.integrations.clients.mocks.cheques import MockChequeStore
from src.utils.config_loader import load_app_config

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app_config = load_app_config()
error_handler = ErrorHandler()

# Initialize FastAPI app
app = FastAPI(
    title="Cheque Collection & Loans API",
    description="Mock cheque collection backend, bank submission providers and loan schedule functions",
    version="1.0.0",
    dependencies=[Depends(api_key_protection)],  # protect everything by default
)

# CORS middleware
class ApiCORSMiddleware(CORSMiddleware):
    """CORSMiddleware that leaves excluded path prefixes to their own CORS headers."""

    def __init__(self, app, exclude_prefixes=(), **options):
        super().__init__(app, **options)
        self.exclude_prefixes = tuple(exclude_prefixes)

    async def __call__(self, scope, receive, send):
        if scope["type"] == "http" and scope["path"].startswith(self.exclude_prefixes):
            await self.app(scope, receive, send)
            return
        await super().__call__(scope, receive, send)


# Edge functions answer preflights themselves (see endpoints/loans.py)
app.add_middleware(
    ApiCORSMiddleware,
    exclude_prefixes=(loans_module.functions_router.prefix,),
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================

cheques_module.cheque_store = MockChequeStore(
    provider=select_cheque_provider(app_config),
    simulate_latency=app_config.mock.simulate_latency,
    delays_ms=app_config.mock.delays_ms,
)
loans_module.loan_provider = select_loan_provider(app_config)

app.include_router(cheques_module.router)
app.include_router(loans_module.router)
app.include_router(loans_module.functions_router)


# ============================================================================
# ERROR HANDLERS
# ============================================================================

@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_envelope())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    module = "loans" if request.url.path.startswith("/api/loans") else "cheques"
    return JSONResponse(status_code=400, content=validation_error(message, module=module).to_envelope())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    return JSONResponse(status_code=500, content=error_handler.handle_exception(exc, {"path": request.url.path}))


@app.get("/health")
async def health():
    return {
        "status": "ok",
        "integrations_mode": app_config.integrations.mode,
        "loans_source": "local" if app_config.loans.auth_disabled else "remote",
    }


@app.on_event("startup")
async def startup_event():
    logger.info(
        "Starting Cheque Collection API (integrations=%s, latency=%s)",
        app_config.integrations.mode,
        app_config.mock.simulate_latency,
    )


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("Shutting down Cheque Collection API...")
