"""
FastAPI application - Main entry point

Run with:
  uvicorn src.api.main:app --host 0.0.0.0 --port 8000
"""

from dotenv import load_dotenv

load_dotenv()

import logging

from src.api.app import create_app
from src.utils.config_loader import load_app_config

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

config = load_app_config()
app = create_app(config)


# ============================================================================
# STARTUP/SHUTDOWN EVENTS
# ============================================================================
@app.on_event("startup")
async def startup_event():
    """Log which Notion databases this instance writes to"""
    logger.info("Starting iOS Contact Notion Sync...")
    logger.info(
        "Notion target: api=%s version=%s organizations_db=%s contacts_db=%s mode=%s",
        config.notion.api_base_url,
        config.notion.api_version,
        config.notion.organizations_database_id,
        config.notion.contacts_database_id,
        config.integrations_mode,
    )


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("Shutting down iOS Contact Notion Sync...")
