"""Maps exceptions to HTTP status codes and renders plain-text error responses."""
from typing import Optional
import logging

from fastapi.responses import PlainTextResponse

from src.integrations.contracts.errors import CheckoutError, ProviderError

logger = logging.getLogger(__name__)


class ErrorHandler:
    def status_code_for(self, exc: Exception) -> int:
        if isinstance(exc, CheckoutError):
            return exc.status_code
        return 500

    def handle_exception(self, exc: Exception, prefix: Optional[str] = None) -> PlainTextResponse:
        status_code = self.status_code_for(exc)
        message = f"{prefix}: {exc}" if prefix else str(exc)

        if isinstance(exc, ProviderError):
            logger.warning("Payment provider error (status=%s): %s", status_code, message)
        elif not isinstance(exc, CheckoutError):
            logger.error("Unhandled exception in checkout pipeline: %s", exc, exc_info=exc)
        elif status_code >= 500:
            logger.error("Checkout request failed: %s", message)
        else:
            logger.info("Rejected checkout request (status=%s): %s", status_code, message)

        return PlainTextResponse(message, status_code=status_code)


error_handler = ErrorHandler()
