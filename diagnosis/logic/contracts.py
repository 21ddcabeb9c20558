"""
Data Contracts for the Diagnosis Engine

Defines Pydantic models for the request (answers), the intermediate
matching structures and the response. These contracts are the API boundary
for the engine.
"""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field

from .constants import (
    BreakdownKey,
    MatchPattern,
    InstructorMatchedBy,
    ResultMatchedBy,
    DEFAULT_LEVEL_TAG,
    DEFAULT_AGE_TAG,
    DEFAULT_GENRE_TAG,
    DEFAULT_TEACHER_STYLE_TAG,
)


class CamelModel(BaseModel):
    """Base for models exchanged with the embed client (camelCase keys)."""

    class Config:
        populate_by_name = True
        use_enum_values = True


# =============================================================================
# QUESTION CATALOG
# =============================================================================

class QuestionOption(CamelModel):
    id: str
    label: str
    tag: Optional[str] = None
    message_key: Optional[str] = Field(default=None, alias="messageKey")
    is_online: Optional[bool] = Field(default=None, alias="isOnline")


class Question(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    key: str  # area / level / age / genre / teacher / concern
    options: List[QuestionOption] = Field(default_factory=list)


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class DiagnosisRequest(CamelModel):
    """Inbound body of POST /diagnosis/result."""
    school_id: Optional[str] = Field(default=None, alias="schoolId")
    # null marks an unanswered question
    answers: Optional[Dict[str, Optional[str]]] = Field(default_factory=dict)


class NormalizedAnswers(BaseModel):
    """
    Semantic values extracted from the raw answers.

    Every field is optional: an unanswered question or an option without the
    expected field leaves it unset. Defaults are applied explicitly by
    ``to_match_context`` and by the resolvers, never by falsy coercion.
    """
    campus_slug: Optional[str] = None
    level_tag: Optional[str] = None
    level_label: Optional[str] = None  # Q2 label used for course matching
    age_tag: Optional[str] = None
    genre_tag: Optional[str] = None
    teacher_style_tag: Optional[str] = None
    concern_key: Optional[str] = None

    def to_match_context(self) -> "MatchContext":
        """
        Apply the scoring default policy:
        level Lv1_入門, age Age_Adult_Work, genre Genre_All, style Style_Healing.
        """
        return MatchContext(
            user_level=self.level_tag if self.level_tag is not None else DEFAULT_LEVEL_TAG,
            user_age=self.age_tag if self.age_tag is not None else DEFAULT_AGE_TAG,
            user_genre=self.genre_tag if self.genre_tag is not None else DEFAULT_GENRE_TAG,
            user_teacher_style=(
                self.teacher_style_tag
                if self.teacher_style_tag is not None
                else DEFAULT_TEACHER_STYLE_TAG
            ),
        )


class MatchContext(BaseModel):
    """User profile used by the pair scorer."""
    user_level: str = DEFAULT_LEVEL_TAG
    user_age: str = DEFAULT_AGE_TAG
    user_genre: str = DEFAULT_GENRE_TAG
    user_teacher_style: str = DEFAULT_TEACHER_STYLE_TAG


# =============================================================================
# RESULT CONDITIONS
# =============================================================================

def _as_str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    items = [str(v if v is not None else "").strip() for v in value]
    return [v for v in items if v]


class ResultConditions(BaseModel):
    """
    Parsed DiagnosisResult.conditions.

    An empty list for a field is a wildcard for that dimension.
    """
    campus: List[str] = Field(default_factory=list)
    genre: List[str] = Field(default_factory=list)
    q2_tags: List[str] = Field(default_factory=list)
    course_slug: List[str] = Field(default_factory=list)

    @classmethod
    def parse(cls, raw: Any) -> "ResultConditions":
        """Build from the stored JSON blob. Anything that is not an object is a full wildcard."""
        if not isinstance(raw, dict):
            return cls()
        return cls(
            campus=_as_str_list(raw.get("campus")),
            genre=_as_str_list(raw.get("genre")),
            q2_tags=_as_str_list(raw.get("q2Tags")),
            course_slug=_as_str_list(raw.get("courseSlug")),
        )

    def is_wildcard(self) -> bool:
        return not (self.campus or self.genre or self.q2_tags or self.course_slug)


class ResolutionContext(BaseModel):
    """Resolved values the conditions are evaluated against."""
    campus_slug: Optional[str] = None
    genre_slug: Optional[str] = None
    q2_for_course: Optional[str] = None
    course_slug: Optional[str] = None


# =============================================================================
# SCORING STRUCTURES
# =============================================================================

class ClassCandidate(BaseModel):
    """Class side of a pair."""
    id: Optional[str] = None
    name: Optional[str] = None
    levels: List[str] = Field(default_factory=list)
    targets: List[str] = Field(default_factory=list)


class TeacherCandidate(BaseModel):
    """Instructor side of a pair."""
    id: Optional[str] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    styles: List[str] = Field(default_factory=list)


class CandidatePair(BaseModel):
    clazz: ClassCandidate
    teacher: TeacherCandidate


class ScoreBreakdownItem(CamelModel):
    key: BreakdownKey
    score_diff: int = Field(alias="scoreDiff")
    note: str


class ScoredPair(CandidatePair):
    """A pair with its computed score. Never persisted."""
    score: int
    breakdown: List[ScoreBreakdownItem] = Field(default_factory=list)

    def has_far_level_gap(self) -> bool:
        return any(
            item.key == BreakdownKey.LEVEL and item.score_diff <= -30
            for item in self.breakdown
        )


class MatchSelection(BaseModel):
    pattern: MatchPattern
    best: ScoredPair
    worst: ScoredPair
    scored: List[ScoredPair] = Field(default_factory=list)

    class Config:
        use_enum_values = True


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class InstructorSummary(CamelModel):
    id: str
    label: str
    slug: str


class BestMatch(CamelModel):
    class_id: Optional[str] = Field(default=None, alias="classId")
    class_name: str = Field(alias="className")
    genres: List[str] = Field(default_factory=list)
    levels: List[str] = Field(default_factory=list)
    targets: List[str] = Field(default_factory=list)
    instructor: Optional[InstructorSummary] = None


class WorstMatch(CamelModel):
    class_name: str = Field(alias="className")
    score: int
    instructor: Optional[InstructorSummary] = None


class ResultContent(CamelModel):
    id: str
    title: str
    body: Optional[str] = None
    cta_label: Optional[str] = Field(default=None, alias="ctaLabel")
    cta_url: Optional[str] = Field(default=None, alias="ctaUrl")


class SelectedCampus(CamelModel):
    label: str
    slug: str
    is_online: bool = Field(default=False, alias="isOnline")
    address: Optional[str] = None
    access: Optional[str] = None
    google_map_url: Optional[str] = Field(default=None, alias="googleMapUrl")


class DiagnosisDebug(CamelModel):
    instructor_matched_by: InstructorMatchedBy = Field(alias="instructorMatchedBy")
    instructors_count: int = Field(alias="instructorsCount")
    result_matched_by: ResultMatchedBy = Field(alias="resultMatchedBy")
    campus_slug: str = Field(alias="campusSlug")
    genre_slug: Optional[str] = Field(default=None, alias="genreSlug")
    course_slug: Optional[str] = Field(default=None, alias="courseSlug")
    q2_for_course: Optional[str] = Field(default=None, alias="q2ForCourse")


class DiagnosisResponse(CamelModel):
    """Outbound body of POST /diagnosis/result."""
    pattern: MatchPattern
    pattern_message: Optional[str] = Field(default=None, alias="patternMessage")
    score: int
    header_label: str = Field(alias="headerLabel")
    best_match: BestMatch = Field(alias="bestMatch")
    breakdown: List[ScoreBreakdownItem] = Field(default_factory=list)
    worst_match: Optional[WorstMatch] = Field(default=None, alias="worstMatch")
    instructors: List[InstructorSummary] = Field(default_factory=list)
    result: ResultContent
    selected_campus: SelectedCampus = Field(alias="selectedCampus")
    concern_message: str = Field(alias="concernMessage")
    debug: DiagnosisDebug
