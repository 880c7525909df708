from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProblemDetail(BaseModel):
    """RFC 7807 error body returned by every failing endpoint."""

    model_config = ConfigDict(extra="allow")

    type: str = Field("about:blank", description="URI identifying the problem type.")
    title: str = Field(..., description="Short summary of the problem type.")
    status: int = Field(..., description="HTTP status code of this occurrence.")
    detail: str = Field(..., description="Explanation specific to this occurrence.")
    instance: str = Field(..., description="Request path that produced the problem.")
    errors: Optional[List[Dict[str, Any]]] = Field(
        None, description="Field-level validation failures, when relevant."
    )
