import logging

from fastapi import APIRouter, Depends, Request
from slowapi import Limiter

from app.api.responses import debug_detail, error_response, utc_timestamp
from app.core.completion_client import (
    CompletionAuthError,
    CompletionBadRequestError,
    CompletionClient,
    CompletionError,
    CompletionRateLimitError,
    CompletionTimeoutError,
)
from app.core.config import Settings
from app.core.query_builder import build_search_query
from app.core.response_parser import parse_scholarship_response
from app.core.schemas import ErrorResponse, ScholarshipSearchRequest, ScholarshipSearchResponse

logger = logging.getLogger(__name__)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_completion_client(settings: Settings = Depends(get_settings)) -> CompletionClient:
    return CompletionClient(settings)


# (status code, message) per completion failure kind; checked in order
COMPLETION_ERROR_STATUS = [
    (CompletionTimeoutError, 408, "Search request timed out. Please try again."),
    (CompletionAuthError, 500, "API authentication failed. Please contact support."),
    (CompletionRateLimitError, 429, "Too many requests. Please wait and try again."),
    (CompletionBadRequestError, 400, "Invalid request format. Please check your input."),
]
GENERIC_SEARCH_ERROR = "Failed to search scholarships. Please try again."


def _is_blank(value) -> bool:
    return value is None or not value.strip()


async def search_scholarships(
    request: Request,
    profile: ScholarshipSearchRequest,
    settings: Settings = Depends(get_settings),
    client: CompletionClient = Depends(get_completion_client),
):
    """
    Search scholarships for a student profile.

    **Returns:**
    - **scholarships**: 1 to 8 records (name, amount, eligibility, deadline, description, link)
    - **total**: number of records
    - **searchParams**: the profile as received
    """
    logger.info("Scholarship search request received")
    received = {
        "collegeName": profile.college_name,
        "course": profile.course,
        "location": profile.location,
    }

    if _is_blank(profile.college_name):
        logger.info("Rejected search: missing college name")
        return error_response(400, "College name is required", received=received)
    if _is_blank(profile.course):
        logger.info("Rejected search: missing course")
        return error_response(400, "Course is required", received=received)

    if not settings.api_key_configured:
        logger.error("PERPLEXITY_API_KEY not configured")
        return error_response(
            500,
            "Server configuration error - API key not configured",
            debug=debug_detail(settings.is_development, reason="PERPLEXITY_API_KEY missing"),
        )

    query = build_search_query(profile)
    logger.debug(f"Searching with query: {query}")

    try:
        answer = await client.complete(query)
    except CompletionError as e:
        logger.error(f"Error in scholarship search: {e}")
        status_code, message = 500, GENERIC_SEARCH_ERROR
        for error_cls, mapped_status, mapped_message in COMPLETION_ERROR_STATUS:
            if isinstance(e, error_cls):
                status_code, message = mapped_status, mapped_message
                break
        return error_response(
            status_code,
            message,
            debug=debug_detail(settings.is_development, message=str(e), status=e.status_code, data=e.body),
        )

    scholarships = parse_scholarship_response(answer)
    logger.info(f"Successfully parsed {len(scholarships)} scholarships")

    return ScholarshipSearchResponse(
        scholarships=scholarships,
        total=len(scholarships),
        search_params=profile.model_dump(by_alias=True),
        timestamp=utc_timestamp(),
    )


def build_search_router(limiter: Limiter, rate_limit: str) -> APIRouter:
    """Router for /api, with the search endpoint throttled per client address."""
    router = APIRouter(prefix="/api", tags=["scholarships"])
    router.add_api_route(
        "/search-scholarships",
        limiter.limit(rate_limit)(search_scholarships),
        methods=["POST"],
        response_model=ScholarshipSearchResponse,
        response_model_by_alias=True,
        summary="Search Scholarships",
        description="Ask the completion API for scholarships matching a student profile and return them as structured records.",
        responses={
            400: {"model": ErrorResponse, "description": "Missing college name or course"},
            408: {"model": ErrorResponse, "description": "Completion API timed out"},
            429: {"model": ErrorResponse, "description": "Rate limited"},
            500: {"model": ErrorResponse, "description": "Configuration or upstream failure"},
        },
    )
    return router
