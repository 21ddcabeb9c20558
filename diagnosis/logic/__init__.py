"""
Diagnosis Logic Module

Provides the deterministic engine that turns quiz answers into a result,
a recommended class and a list of instructors.
"""

from .contracts import (
    DiagnosisRequest,
    DiagnosisResponse,
    MatchContext,
    NormalizedAnswers,
    ResultConditions,
    ResolutionContext,
    ClassCandidate,
    TeacherCandidate,
    CandidatePair,
    ScoredPair,
    ScoreBreakdownItem,
    MatchSelection,
    Question,
    QuestionOption,
)
from .catalog import QuestionCatalog, DEFAULT_CATALOG
from .engine import DiagnosisEngine, resolve_diagnosis
from .errors import (
    DiagnosisError,
    NoSchoolId,
    InvalidRequest,
    MissingAnswers,
    NoCampus,
    NoGenre,
    NoMatchedResult,
    InternalError,
)
from .constants import MatchPattern, InstructorMatchedBy, ResultMatchedBy

__all__ = [
    # Main engine
    "DiagnosisEngine",
    "resolve_diagnosis",

    # Catalog
    "QuestionCatalog",
    "DEFAULT_CATALOG",

    # Contracts
    "DiagnosisRequest",
    "DiagnosisResponse",
    "MatchContext",
    "NormalizedAnswers",
    "ResultConditions",
    "ResolutionContext",
    "ClassCandidate",
    "TeacherCandidate",
    "CandidatePair",
    "ScoredPair",
    "ScoreBreakdownItem",
    "MatchSelection",
    "Question",
    "QuestionOption",

    # Errors
    "DiagnosisError",
    "NoSchoolId",
    "InvalidRequest",
    "MissingAnswers",
    "NoCampus",
    "NoGenre",
    "NoMatchedResult",
    "InternalError",

    # Enums
    "MatchPattern",
    "InstructorMatchedBy",
    "ResultMatchedBy",
]
