from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Literal, Optional


DEFAULT_SCHOLARSHIP_LINK = "https://scholarships.gov.in"


class ScholarshipRecord(BaseModel):
    """One scholarship surfaced to the caller. Built per request, never mutated."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Title of the scholarship, grant, fellowship, award or scheme")
    amount: str = Field(..., description="Free-form monetary description, or 'Amount varies'")
    eligibility: str
    deadline: str
    description: str
    link: str = Field(default=DEFAULT_SCHOLARSHIP_LINK, description="Absolute URL of the official page")


class ScholarshipSearchRequest(BaseModel):
    """Student profile. Only collegeName and course are required (checked in the route).

    Numeric values such as `"gpa": 8.5` or `"budget": 50000` are accepted as text.
    """
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    college_name: Optional[str] = Field(default=None, alias="collegeName")
    course: Optional[str] = None
    location: Optional[str] = None
    gpa: Optional[str] = None
    category: Optional[str] = None
    budget: Optional[str] = None


class ScholarshipSearchResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: Literal[True] = True
    scholarships: List[ScholarshipRecord]
    total: int
    search_params: Dict[str, Optional[str]] = Field(default_factory=dict, alias="searchParams")
    timestamp: str


class ErrorResponse(BaseModel):
    success: Literal[False] = False
    error: str
    timestamp: str
    debug: Optional[Any] = None
    received: Optional[Dict[str, Optional[str]]] = None


class HealthResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str
    service: str
    timestamp: str
    environment: str
    api_key: Literal["configured", "missing"] = Field(..., alias="apiKey")
