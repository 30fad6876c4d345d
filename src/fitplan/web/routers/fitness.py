"""Plan generation routes."""

import logging

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from ...errors import classify_error
from ...models.request import GenerationRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/fitness", tags=["fitness"])


@router.post("/generate-program")
async def generate_program(request: Request, payload: dict | None = Body(None)):
    """Generate, store and return a workout and diet plan."""
    generator = request.app.state.plan_generator

    try:
        result = await generator.generate(GenerationRequest.from_dict(payload))
    except Exception as e:
        status_code, error_type, message = classify_error(e)
        if status_code >= 500:
            logger.error("Error generating fitness plan: %s", e, exc_info=e)
        else:
            logger.warning("Fitness plan request rejected (%s): %s", error_type, e)
        return JSONResponse(
            status_code=status_code,
            content={"success": False, "error": message, "errorType": error_type},
        )

    return {"success": True, "data": result.to_dict()}
