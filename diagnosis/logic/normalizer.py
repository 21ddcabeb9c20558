"""
Answer Normalizer

Maps raw option selections (question id -> option id) to the semantic
values used downstream. Pure lookup over the catalog:
- NO DB access
- NO validation (required answers are checked before this runs)
"""

from typing import List, Mapping, Optional

from .catalog import QuestionCatalog, DEFAULT_CATALOG
from .constants import REQUIRED_QUESTION_IDS, GENRE_TAG_TO_SLUG, DEFAULT_CONCERN_KEY
from .contracts import NormalizedAnswers, MatchContext


def norm(value: object) -> str:
    """Stringify and trim; None becomes an empty string."""
    return str(value if value is not None else "").strip()


def find_missing_answers(
    answers: Mapping[str, Optional[str]],
    required: tuple = REQUIRED_QUESTION_IDS,
) -> List[str]:
    """Required question ids with no (or a blank) answer, in question order."""
    return [qid for qid in required if not norm(answers.get(qid))]


def map_genre_tag_to_slug(tag: Optional[str]) -> Optional[str]:
    """
    Q4 tag -> genre slug. Genre_All and unknown tags map to None (no genre filter).
    """
    if tag is None:
        return None
    return GENRE_TAG_TO_SLUG.get(tag)


class AnswerNormalizer:
    """Builds NormalizedAnswers / MatchContext from raw answers."""

    def __init__(self, catalog: QuestionCatalog = DEFAULT_CATALOG):
        self.catalog = catalog

    def normalize(self, answers: Mapping[str, Optional[str]]) -> NormalizedAnswers:
        q2 = self.catalog.option("Q2", answers.get("Q2"))
        q3 = self.catalog.option("Q3", answers.get("Q3"))
        q4 = self.catalog.option("Q4", answers.get("Q4"))
        q5 = self.catalog.option("Q5", answers.get("Q5"))
        q6 = self.catalog.option("Q6", answers.get("Q6"))

        campus_slug = norm(answers.get("Q1")) or None

        return NormalizedAnswers(
            campus_slug=campus_slug,
            level_tag=q2.tag if q2 else None,
            level_label=self.q2_value_for_course(answers),
            age_tag=q3.tag if q3 else None,
            genre_tag=q4.tag if q4 else None,
            teacher_style_tag=q5.tag if q5 else None,
            concern_key=q6.message_key if q6 else None,
        )

    def build_match_context(self, answers: Mapping[str, Optional[str]]) -> MatchContext:
        return self.normalize(answers).to_match_context()

    def q2_value_for_course(self, answers: Mapping[str, Optional[str]]) -> Optional[str]:
        """
        Value matched against DiagnosisCourse.q2_answer_tags.

        This is the selected option's display label, not its tag. When the
        option id is not in the catalog the raw answer is used as is.
        """
        raw = answers.get("Q2")
        option = self.catalog.option("Q2", raw)
        value = norm(option.label if option else raw)
        return value or None

    def concern_message(self, normalized: NormalizedAnswers) -> str:
        key = normalized.concern_key or DEFAULT_CONCERN_KEY
        message = self.catalog.concern_message(key)
        if message is None:
            message = self.catalog.concern_message(DEFAULT_CONCERN_KEY) or ""
        return message

