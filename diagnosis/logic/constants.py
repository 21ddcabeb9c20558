"""
Diagnosis Engine Constants

Defines the level scale, deduction amounts, default tags, tag mappings and
thresholds used by the diagnosis engine.
All values are deterministic with no AI/ML components.
"""

from enum import Enum
from typing import Dict, Optional, Tuple

# =============================================================================
# QUESTIONS
# =============================================================================

REQUIRED_QUESTION_IDS: Tuple[str, ...] = ("Q1", "Q2", "Q3", "Q4", "Q5", "Q6")

# =============================================================================
# LEVEL SCALE
# =============================================================================

# Ordinal scale used by the level deduction (index = step)
LEVEL_ORDER: Tuple[str, ...] = (
    "Lv0_超入門",
    "Lv1_入門",
    "Lv2_初級",
    "Lv3_初中級",
    "Lv4_中上級",
)

# Distance used when the user level is unknown or the class declares no levels
UNKNOWN_LEVEL_DISTANCE = 2

# =============================================================================
# DEFAULT TAGS
# =============================================================================

# Used when an answer is missing or its option carries no tag
DEFAULT_LEVEL_TAG = "Lv1_入門"
DEFAULT_AGE_TAG = "Age_Adult_Work"
DEFAULT_GENRE_TAG = "Genre_All"
DEFAULT_TEACHER_STYLE_TAG = "Style_Healing"
DEFAULT_CONCERN_KEY = "Msg_Consult"

# =============================================================================
# GENRE MAPPING
# =============================================================================

# Q4 tag -> DiagnosisGenre.slug. None means "no genre filter".
GENRE_TAG_TO_SLUG: Dict[str, Optional[str]] = {
    "Genre_KPOP": "kpop",
    "Genre_HIPHOP": "hiphop",
    "Genre_JAZZ": "jazz",
    "Genre_ThemePark": "themepark",
    "Genre_All": None,
}

# =============================================================================
# SCORING
# =============================================================================

BASE_SCORE = 100

LEVEL_NEAR_DEDUCTION = -10   # one step away
LEVEL_FAR_DEDUCTION = -30    # two or more steps away
AGE_MISMATCH_DEDUCTION = -15
TEACHER_MISMATCH_DEDUCTION = -5

LEVEL_NEAR_NOTE = "レベルが少し高め/低めですが、ついていける範囲です。"
LEVEL_FAR_NOTE = "レベル差が大きく、受講難易度が高そうです。"
AGE_MISMATCH_NOTE = "対象年代と少しずれています。"
TEACHER_MISMATCH_NOTE = "先生の指導スタイルがご希望とは少し違います。"


class BreakdownKey(str, Enum):
    """Dimensions a deduction can be attributed to."""
    LEVEL = "level"
    AGE = "age"
    TEACHER = "teacher"


# =============================================================================
# PATTERN CLASSIFICATION
# =============================================================================

class MatchPattern(str, Enum):
    """Informational match quality signal."""
    A = "A"  # strong match
    B = "B"  # compromise


PATTERN_A_THRESHOLD = 80

HEADER_LABEL = "あなたにおすすめの診断結果です"
PATTERN_B_MESSAGE = (
    "ご希望に完全に一致するクラスは見つかりませんでしたが、"
    "無理なく始められるクラスをご提案します。"
)

# =============================================================================
# RESULT SELECTION
# =============================================================================

class ResultMatchedBy(str, Enum):
    """Which precedence tier selected the Result row."""
    CONDITIONS = "conditions"
    FALLBACK = "fallback"
    FIRST = "first"


# =============================================================================
# INSTRUCTOR RELAXATION
# =============================================================================

class InstructorMatchedBy(str, Enum):
    """Relaxation step that produced the instructor list."""
    CAMPUS_GENRE_COURSE = "campus+genre+course"
    CAMPUS_GENRE = "campus+genre"
    CAMPUS_COURSE = "campus+course"
    CAMPUS = "campus"
    NONE = "none"


# =============================================================================
# SCHEDULE
# =============================================================================

WEEKDAY_ORDER: Tuple[str, ...] = ("MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN")
