"""FastAPI server receiving Linear webhooks."""

import logging
from contextlib import asynccontextmanager
from typing import Dict, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from .common import log_server_message, setup_logging
from .config import BridgeConfig
from .models import InboundRequest
from .pipeline import PipelineState, WebhookPipeline
from .processing import LarkDeliverer

SIGNATURE_HEADER = "linear-signature"

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[BridgeConfig] = None,
    deliverer: Optional[LarkDeliverer] = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        config: Bridge configuration, read from the environment by default.
        deliverer: Lark deliverer, built from the configuration by default.
    """
    config = config or BridgeConfig.from_env()
    deliverer = deliverer or LarkDeliverer(
        timeout=config.delivery_timeout,
        signing_secret=config.lark_signing_secret,
    )
    pipeline = WebhookPipeline(
        secret=config.webhook_secret,
        lark_webhook_url=config.lark_webhook_url,
        deliverer=deliverer,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Configure logging and report configuration problems on startup."""
        setup_logging(config.log_dir, config.log_level)
        log_server_message("Server starting up")
        log_server_message(f"Webhook endpoint: {config.webhook_endpoint}")
        log_server_message("Health check: /health")
        for problem in config.validate():
            logger.warning(problem)
        log_server_message("Server ready")
        try:
            yield
        finally:
            log_server_message("Server shutting down")

    app = FastAPI(
        lifespan=lifespan,
        title="Linear Lark Bridge",
        description="Forwards Linear issue webhooks to a Lark group as cards.",
        version="1.0.0",
    )
    app.state.config = config
    app.state.pipeline = pipeline

    @app.get("/health")
    async def health_check() -> Dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "service": "linear_bridge"}

    @app.post(config.webhook_endpoint)
    async def linear_webhook(request: Request) -> Dict[str, str]:
        """Handle Linear webhook requests with HMAC signature validation."""
        body = await request.body()

        if not config.webhook_secret:
            log_server_message("Webhook secret not configured")
            raise HTTPException(status_code=500, detail="Webhook secret not configured")

        inbound = InboundRequest(
            body=body,
            signature=request.headers.get(SIGNATURE_HEADER),
            content_type=request.headers.get("content-type"),
        )

        # The pipeline blocks on the outbound Lark call, so keep it off the event loop
        result = await run_in_threadpool(pipeline.handle, inbound)

        if result.state in (PipelineState.UNAUTHORIZED, PipelineState.BAD_REQUEST):
            return JSONResponse(
                status_code=result.status_code,
                content={"status": result.state.value, "message": result.message},
            )

        return {"status": result.state.value, "message": result.message}

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: HTTPException):
        """Handle 404 errors."""
        log_server_message(f"404 Not Found: {request.url.path}")
        return JSONResponse(
            status_code=404,
            content={"error": "Not found", "path": request.url.path}
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _config = app.state.config
    uvicorn.run(
        "linear_bridge.server:app",
        host=_config.host,
        port=_config.port,
        reload=False,
        log_level="info"
    )
