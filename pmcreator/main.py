"""PM Creator: FastAPI service entry point."""

from __future__ import annotations

import logging
import sys

from fastapi import FastAPI
from starlette.responses import Response

from pmcreator.catalog.rules import supported_types
from pmcreator.config import settings
from pmcreator.intake.receiver import router as plan_router
from pmcreator.telemetry.metrics import get_metrics

logging.basicConfig(
    level=settings.log_level,
    format='{"timestamp":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
    stream=sys.stdout,
)
logger = logging.getLogger("pmcreator")

app = FastAPI(
    title="PM Creator",
    description="Rule-based preventive maintenance task generation",
    version="1.0.0",
)

app.include_router(plan_router)


@app.get("/health")
async def health():
    return {
        "status": "healthy",
        "roles_enabled": settings.assign_roles,
        "supported_component_types": len(supported_types()),
    }


@app.get("/metrics", include_in_schema=False)
async def metrics():
    body, content_type = get_metrics()
    return Response(content=body, media_type=content_type)


logger.info("PM Creator ready (roles_enabled=%s)", settings.assign_roles)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
