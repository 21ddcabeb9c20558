"""
Diagnosis API Routes

Exposes the diagnosis engine and the read-only catalog listings via REST.
Main endpoint: POST /api/diagnosis/result
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Body, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from db import get_session
from .logic.catalog import DEFAULT_CATALOG
from .logic.contracts import DiagnosisRequest
from .logic.engine import DiagnosisEngine
from .logic.errors import DiagnosisError, NoSchoolId, InvalidRequest, InternalError
from .logic.normalizer import norm
from .logic import catalog_queries


logger = logging.getLogger(__name__)

PREFIX = "/api/diagnosis"

router = APIRouter(prefix=PREFIX, tags=["diagnosis"])


def _error_response(error: DiagnosisError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


def _school_id(school_id: Optional[str], school: Optional[str]) -> str:
    # `school` is the legacy query parameter name
    value = norm(school_id) or norm(school)
    if not value:
        raise NoSchoolId()
    return value


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies on diagnosis routes become INVALID_REQUEST; other routes keep FastAPI's 422."""
    if request.url.path.startswith(PREFIX):
        return _error_response(InvalidRequest.from_errors(exc.errors()))
    return await request_validation_exception_handler(request, exc)


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/result", summary="Resolve a diagnosis result")
def post_result(
    request: Optional[DiagnosisRequest] = Body(default=None),
    db: Session = Depends(get_session)
):
    """
    Resolve the quiz answers into a result, a recommended class and instructors.

    **Request Body:**
    - `schoolId`: tenant id
    - `answers`: option id per question, Q1..Q6 all required (null counts as unanswered)

    **Response:**
    - `pattern` A/B and `score` of the best class x instructor pair
    - `result`, `selectedCampus`, `instructors`, `concernMessage`
    - `debug.instructorMatchedBy`: relaxation step that produced the instructors
    """
    try:
        response = DiagnosisEngine(db, DEFAULT_CATALOG).resolve(request or DiagnosisRequest())
        return response.model_dump(by_alias=True, mode="json")

    except DiagnosisError as e:
        return _error_response(e)
    except Exception as e:
        logger.exception("[POST /api/diagnosis/result] failed")
        return _error_response(InternalError.wrap(e))


@router.get("/questions", summary="Question catalog")
def get_questions():
    return [q.model_dump(by_alias=True, exclude_none=True) for q in DEFAULT_CATALOG.questions]


@router.get("/campuses", summary="Active campuses for a school")
def get_campuses(
    school_id: Optional[str] = Query(default=None, alias="schoolId"),
    school: Optional[str] = Query(default=None),
    full: Optional[str] = Query(default=None),
    db: Session = Depends(get_session)
):
    try:
        sid = _school_id(school_id, school)
    except DiagnosisError as e:
        return _error_response(e)

    return catalog_queries.list_campuses(db, sid, full=full == "1")


@router.get("/courses", summary="Active courses for a school")
def get_courses(
    school_id: Optional[str] = Query(default=None, alias="schoolId"),
    school: Optional[str] = Query(default=None),
    db: Session = Depends(get_session)
):
    try:
        sid = _school_id(school_id, school)
    except DiagnosisError as e:
        return _error_response(e)

    return catalog_queries.list_courses(db, sid)


@router.get("/results", summary="Configured diagnosis results")
def get_results(
    school_id: Optional[str] = Query(default=None, alias="schoolId"),
    include_inactive: Optional[str] = Query(default=None, alias="includeInactive"),
    db: Session = Depends(get_session)
):
    try:
        sid = _school_id(school_id, None)
    except DiagnosisError as e:
        return _error_response(e)

    return catalog_queries.list_results(db, sid, include_inactive=include_inactive == "true")


@router.get("/schedule", summary="Weekly schedule of a course")
def get_schedule(
    school_id: Optional[str] = Query(default=None, alias="schoolId"),
    course_id: Optional[str] = Query(default=None, alias="courseId"),
    db: Session = Depends(get_session)
):
    try:
        sid = _school_id(school_id, None)
    except DiagnosisError as e:
        return _error_response(e)

    if not norm(course_id):
        raise HTTPException(status_code=400, detail="courseId が必要です")

    return catalog_queries.weekly_schedule(db, sid, norm(course_id))


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Diagnosis engine health check")
def health_check():
    """Check if diagnosis engine is operational."""
    return {"status": "ok", "engine": "diagnosis", "version": "1.0.0"}
