import os
import hmac
import logging

from fastapi import Header, HTTPException, status, Request
from dotenv import load_dotenv

from src.integrations.clients.mocks.cheque_collection import MockChequeCollectionProvider
from src.integrations.clients.mocks.loans import LocalLoanProvider
from src.integrations.clients.real_http.cheque_collection import HttpChequeCollectionProvider
from src.integrations.clients.real_http.loans import RemoteLoanProvider
from src.integrations.contracts.interfaces import ChequeCollectionProvider, LoanProvider
from src.utils.config_loader import AppConfig, env_flag

load_dotenv()

logger = logging.getLogger(__name__)

_ALLOWLIST_PATHS = {
    "/",
    "/health",
    "/docs",
    "/docs/oauth2-redirect",
    "/openapi.json",
    "/redoc",
}


def get_api_keys():
    keys = os.getenv("API_KEYS", "")
    return [k.strip() for k in keys.split(",") if k.strip()]


async def api_key_protection(
    request: Request = None,  # keep Request type so FastAPI injects it; default None for direct calls/tests
    x_api_key: str = Header(default=None, alias="X-API-KEY"),
):
    debug = env_flag("API_KEY_DEBUG")
    path = request.url.path if request is not None else "<no-request>"
    if debug:
        logger.info("API key check: path=%s header_present=%s", path, bool(x_api_key))

    if env_flag("AUTH_DISABLED"):
        return

    if request is not None and (request.method == "OPTIONS" or request.url.path in _ALLOWLIST_PATHS):
        if debug:
            logger.info("API key check: allowlisted path=%s method=%s", path, request.method)
        return

    valid_keys = get_api_keys()
    candidate = (x_api_key or "").strip()

    ok = bool(candidate) and any(hmac.compare_digest(candidate, k) for k in valid_keys)
    if debug:
        logger.info("API key check: path=%s ok=%s configured_keys=%d", path, ok, len(valid_keys))

    if not ok:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing API Key",
        )


# ============================================================================
# Integration selection (the ONLY place mock vs real clients are chosen)
# ============================================================================

def select_cheque_provider(cfg: AppConfig) -> ChequeCollectionProvider:
    if cfg.integrations.mode == "real":
        logger.info("Using HTTP cheque collection provider")
        return HttpChequeCollectionProvider(timeout_seconds=cfg.integrations.cheque_bank_timeout_seconds)
    return MockChequeCollectionProvider()


def select_loan_provider(cfg: AppConfig) -> LoanProvider:
    if cfg.loans.auth_disabled:
        return LocalLoanProvider()
    return RemoteLoanProvider(base_url=cfg.loans.functions_base_url, timeout_seconds=cfg.loans.timeout_seconds)
