"""
Diagnosis Engine

Main orchestrator that resolves one diagnosis request into a response.
This is the primary entry point used by the routes.

Pipeline flow:
1. Validation - schoolId and Q1..Q6 present
2. Normalization - answers -> tags / labels / MatchContext
3. Entity Resolution - campus, genre, recommended course
4. Result Selection - conditions -> fallback -> first
5. Instructor Resolution - progressive relaxation
6. Match Selection - score course x instructor pairs, pattern A/B
7. Output Assembly - DiagnosisResponse
"""

import logging
import time
from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from sqlalchemy.orm import Session

from .catalog import QuestionCatalog, DEFAULT_CATALOG
from .conditions import select_result
from .constants import (
    BASE_SCORE,
    HEADER_LABEL,
    PATTERN_B_MESSAGE,
    MatchPattern,
)
from .contracts import (
    DiagnosisRequest,
    DiagnosisResponse,
    ResolutionContext,
    ClassCandidate,
    TeacherCandidate,
    CandidatePair,
    MatchSelection,
    BestMatch,
    WorstMatch,
    InstructorSummary,
    ResultContent,
    SelectedCampus,
    DiagnosisDebug,
)
from .errors import NoSchoolId, MissingAnswers, InvalidRequest
from .instructors import resolve_instructors
from .normalizer import AnswerNormalizer, find_missing_answers, norm
from .resolver import EntityResolver
from .selector import select_matches
from ..models import DiagnosisCourse, DiagnosisInstructor

logger = logging.getLogger(__name__)


class DiagnosisEngine:
    """
    Resolves a diagnosis request against one tenant's data.

    The engine holds no state between requests; the catalog is an immutable
    value shared by every request.
    """

    def __init__(self, db: Session, catalog: QuestionCatalog = DEFAULT_CATALOG):
        self.db = db
        self.catalog = catalog
        self.normalizer = AnswerNormalizer(catalog)

    def resolve(self, request: DiagnosisRequest) -> DiagnosisResponse:
        """
        Resolve a diagnosis result.

        Raises:
            NoSchoolId, MissingAnswers: invalid input
            NoCampus, NoGenre, NoMatchedResult: tenant data is incomplete
        """
        start_time = time.perf_counter()

        # Step 1: Validation
        school_id = norm(request.school_id)
        if not school_id:
            raise NoSchoolId()

        answers = request.answers or {}
        missing = find_missing_answers(answers)
        if missing:
            raise MissingAnswers(missing)

        logger.info(f"🚀 Resolving diagnosis for school: {school_id}")

        # Step 2: Normalization
        normalized = self.normalizer.normalize(answers)
        ctx = normalized.to_match_context()

        # Step 3: Entity resolution
        resolver = EntityResolver(self.db, school_id, self.catalog)
        campus = resolver.resolve_campus(normalized.campus_slug)
        genre = resolver.resolve_genre(ctx.user_genre)
        course = resolver.resolve_course(normalized.level_label)

        logger.info(
            f"📍 campus={campus.slug} genre={genre.slug if genre else None} "
            f"course={course.slug if course else None}"
        )

        # Step 4: Result selection
        resolution = ResolutionContext(
            campus_slug=campus.slug,
            genre_slug=genre.slug if genre else None,
            q2_for_course=normalized.level_label,
            course_slug=course.slug if course else None,
        )
        result, result_matched_by = select_result(self.db, school_id, resolution)
        logger.info(f"🎯 Result {result.id} selected by {result_matched_by.value}")

        # Step 5: Instructors
        instructors, instructor_matched_by = resolve_instructors(
            self.db, school_id, campus, genre=genre, course=course
        )

        # Step 6: Match selection
        courses = [course] if course is not None else resolver.active_courses()
        pairs = build_pairs(resolver, courses, instructors)
        selection = select_matches(pairs, ctx) if pairs else None

        # Step 7: Output assembly
        response = assemble_response(
            selection=selection,
            result=result,
            campus=campus,
            genre_label=genre.label if genre else None,
            course=course,
            instructors=instructors,
            concern_message=self.normalizer.concern_message(normalized),
            debug=DiagnosisDebug(
                instructor_matched_by=instructor_matched_by,
                instructors_count=len(instructors),
                result_matched_by=result_matched_by,
                campus_slug=campus.slug,
                genre_slug=resolution.genre_slug,
                course_slug=resolution.course_slug,
                q2_for_course=resolution.q2_for_course,
            ),
        )

        processing_time = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"✨ Diagnosis complete: pattern={response.pattern} score={response.score} "
            f"({processing_time:.2f}ms)"
        )
        return response

    def resolve_from_dict(self, payload: Dict[str, Any]) -> DiagnosisResponse:
        """
        Convenience wrapper accepting the raw JSON body.

        Raises:
            InvalidRequest: payload does not fit DiagnosisRequest
        """
        try:
            request = DiagnosisRequest(**payload)
        except ValidationError as e:
            raise InvalidRequest.from_errors(e.errors())
        return self.resolve(request)


# =============================================================================
# PAIRS
# =============================================================================

def class_candidate(resolver: EntityResolver, course: DiagnosisCourse) -> ClassCandidate:
    return ClassCandidate(
        id=course.id,
        name=course.label,
        levels=resolver.course_levels(course),
        targets=list(course.target_tags or []),
    )


def teacher_candidate(instructor: DiagnosisInstructor) -> TeacherCandidate:
    return TeacherCandidate(
        id=instructor.id,
        name=instructor.label,
        slug=instructor.slug,
        styles=list(instructor.style_tags or []),
    )


def build_pairs(
    resolver: EntityResolver,
    courses: List[DiagnosisCourse],
    instructors: List[DiagnosisInstructor],
) -> List[CandidatePair]:
    """Cross product, course order outer and instructor order inner."""
    teachers = [teacher_candidate(i) for i in instructors]
    pairs: List[CandidatePair] = []
    for course in courses:
        clazz = class_candidate(resolver, course)
        for teacher in teachers:
            pairs.append(CandidatePair(clazz=clazz, teacher=teacher))
    return pairs


# =============================================================================
# OUTPUT
# =============================================================================

def _summary(teacher: TeacherCandidate) -> InstructorSummary:
    return InstructorSummary(id=teacher.id or "", label=teacher.name or "", slug=teacher.slug or "")


def assemble_response(
    selection: Optional[MatchSelection],
    result,
    campus,
    genre_label: Optional[str],
    course: Optional[DiagnosisCourse],
    instructors: List[DiagnosisInstructor],
    concern_message: str,
    debug: DiagnosisDebug,
) -> DiagnosisResponse:
    """
    Build the response. Without a selection (no course or no instructor to
    pair) the pattern is A with a score of 100 and the class name falls back
    to the course label, then the result title.
    """
    genres = [genre_label] if genre_label else []

    if selection is not None:
        best = selection.best
        pattern = MatchPattern(selection.pattern)
        score = best.score
        best_match = BestMatch(
            class_id=best.clazz.id,
            class_name=best.clazz.name or result.title,
            genres=genres,
            levels=list(best.clazz.levels),
            targets=list(best.clazz.targets),
            instructor=_summary(best.teacher),
        )
        breakdown = list(best.breakdown)
        worst_match = WorstMatch(
            class_name=selection.worst.clazz.name or result.title,
            score=selection.worst.score,
            instructor=_summary(selection.worst.teacher),
        )
    else:
        pattern = MatchPattern.A
        score = BASE_SCORE
        best_match = BestMatch(
            class_id=course.id if course is not None else result.id,
            class_name=course.label if course is not None else result.title,
            genres=genres,
        )
        breakdown = []
        worst_match = None

    return DiagnosisResponse(
        pattern=pattern,
        pattern_message=PATTERN_B_MESSAGE if pattern == MatchPattern.B else None,
        score=score,
        header_label=HEADER_LABEL,
        best_match=best_match,
        breakdown=breakdown,
        worst_match=worst_match,
        instructors=[
            InstructorSummary(id=i.id, label=i.label, slug=i.slug) for i in instructors
        ],
        result=ResultContent(
            id=result.id,
            title=result.title,
            body=result.body,
            cta_label=result.cta_label,
            cta_url=result.cta_url,
        ),
        selected_campus=SelectedCampus(
            label=campus.label,
            slug=campus.slug,
            is_online=bool(campus.is_online),
            address=campus.address,
            access=campus.access,
            google_map_url=campus.google_map_url,
        ),
        concern_message=concern_message,
        debug=debug,
    )


def resolve_diagnosis(
    db: Session,
    request: DiagnosisRequest,
    catalog: QuestionCatalog = DEFAULT_CATALOG,
) -> DiagnosisResponse:
    """Convenience function for simple usage."""
    return DiagnosisEngine(db, catalog).resolve(request)
