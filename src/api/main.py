"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging

import uvicorn
from fastapi import FastAPI

from src.api.dependencies import close_http_client, get_gateway_config
from src.api.endpoints.checkout import checkout_api

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Checkout Gateway API",
    description="Access tokens, checkout preferences and payment counts on top of Mercado Pago",
    version="1.0.0",
)

# Register checkout API router
app.include_router(checkout_api)


@app.on_event("shutdown")
async def shutdown_event():
    """Close the shared provider client"""
    logger.info("Shutting down Checkout Gateway API...")
    await close_http_client(app)


def run() -> None:
    config = get_gateway_config()
    logging.getLogger().setLevel(config.log_level)
    logger.info("Listening on port %s", config.port)
    uvicorn.run(app, host="0.0.0.0", port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    run()
