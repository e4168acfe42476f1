"""Application form submission endpoint"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from typing import AsyncIterator, Optional
import logging
import httpx

from formrelay.config import Settings, get_settings
from formrelay.exceptions import GENERIC_ERROR_MESSAGE, SubmissionError, ValidationError
from formrelay.models.submission import SubmitResponse
from formrelay.services.submission_service import ensure_configured, relay_submission

logger = logging.getLogger(__name__)
router = APIRouter()

SUCCESS_MESSAGE = "신청 성공"


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """One outbound HTTP client per request"""
    async with httpx.AsyncClient() as client:
        yield client


def get_client_ip(request: Request, settings: Settings) -> Optional[str]:
    """Submitter address from the edge proxy header, else the socket peer"""
    ip = request.headers.get(settings.client_ip_header)
    if ip:
        return ip
    return request.client.host if request.client else None


@router.post("/submit", response_model=SubmitResponse)
async def submit_application(
    request: Request,
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client)
):
    """Handle job application submission (PUBLIC endpoint)"""
    try:
        template = ensure_configured(settings)

        form = await request.form()
        await relay_submission(
            client,
            form,
            settings,
            template,
            remote_ip=get_client_ip(request, settings)
        )

        return SubmitResponse(message=SUCCESS_MESSAGE)

    except ValidationError as e:
        logger.warning(f"Submission validation failed: {e.message}")
        return JSONResponse(
            status_code=settings.validation_error_status,
            content={"message": e.message}
        )
    except SubmissionError as e:
        logger.error(f"Submission failed ({type(e).__name__}): {e.message}")
        return JSONResponse(status_code=e.status_code, content={"message": e.message})
    except Exception as e:
        logger.exception(f"An unexpected error occurred in submit_application: {e}")
        return JSONResponse(status_code=500, content={"message": GENERIC_ERROR_MESSAGE})
