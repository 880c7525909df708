from __future__ import annotations

from typing import Any, Dict

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from .errors import register_exception_handlers
from .routes.dashboard import router as dashboard_router
from .security import verify_api_key

API_PREFIX: str = "/api/v1"

app: FastAPI = FastAPI(
    title="Nutrition Dashboard",
    version="1.0.0",
    description="Household nutrition dashboards, member summaries and health metrics",
)
register_exception_handlers(app)


@app.api_route("/", methods=["GET", "HEAD"], include_in_schema=False)
@app.api_route("/healthz", methods=["GET", "HEAD"], include_in_schema=False)
async def healthz() -> dict[str, str]:
    """Lightweight endpoint used for health checks."""
    return {"status": "ok"}


@app.get(f"{API_PREFIX}/api-schema")
async def get_api_schema(request: Request, _: Any = Depends(verify_api_key)) -> JSONResponse:
    """Return the OpenAPI schema for this API version."""
    openapi_schema: Dict[str, Any] = request.app.openapi()
    return JSONResponse(openapi_schema)


app.include_router(
    dashboard_router,
    prefix=f"{API_PREFIX}/nutrition-dashboard",
    tags=["nutrition-dashboard"],
    dependencies=[Depends(verify_api_key)],
)
