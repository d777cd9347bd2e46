"""Error translation for the contact sync API."""
from typing import Any, Dict, Tuple
import logging

from src.integrations.contracts.notion import NotionAPIError

logger = logging.getLogger(__name__)

NOTION_UNAUTHORIZED_MESSAGE = "Notion responded with an unauthorized error"
GENERIC_ERROR_MESSAGE = "An error occurred"


class ErrorHandler:
    def translate(self, exc: Exception, context: Dict[str, Any] = None) -> Tuple[int, Dict[str, Any]]:
        """Log `exc` and return the (status code, body) to send back.

        Only an unauthorized answer from Notion gets its own message; every
        other failure is reported as a generic 500.
        """
        logger.error("Unhandled exception while syncing contact: %s (context=%s)", exc, context or {}, exc_info=exc)
        if isinstance(exc, NotionAPIError) and exc.is_unauthorized:
            return 401, {"message": NOTION_UNAUTHORIZED_MESSAGE}
        return 500, {"message": GENERIC_ERROR_MESSAGE}
