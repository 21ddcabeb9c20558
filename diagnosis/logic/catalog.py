"""
Question Catalog

Static definition of the six diagnosis questions (Q1..Q6) and the concern
messages keyed by the Q6 option's messageKey. Pure data, read-only; the
normalizer and resolver receive a QuestionCatalog at construction time.
"""

from typing import Dict, List, Optional, Tuple

from .contracts import Question, QuestionOption


class QuestionCatalog:
    """Immutable lookup over a list of questions."""

    def __init__(self, questions: List[Question], concern_messages: Dict[str, str]):
        self._questions: Tuple[Question, ...] = tuple(questions)
        self._by_id: Dict[str, Question] = {q.id: q for q in self._questions}
        self._concern_messages: Dict[str, str] = dict(concern_messages)

    @property
    def questions(self) -> Tuple[Question, ...]:
        return self._questions

    def question(self, question_id: str) -> Optional[Question]:
        return self._by_id.get(question_id)

    def option(self, question_id: str, option_id: Optional[str]) -> Optional[QuestionOption]:
        """Selected option for a question, or None when unanswered/unknown."""
        if not option_id:
            return None
        question = self._by_id.get(question_id)
        if question is None:
            return None
        for opt in question.options:
            if opt.id == option_id:
                return opt
        return None

    def concern_message(self, key: str) -> Optional[str]:
        return self._concern_messages.get(key)

    def level_tags_for_labels(self, labels: List[str]) -> List[str]:
        """Map Q2 option labels back to their level tags (unknown labels are dropped)."""
        q2 = self._by_id.get("Q2")
        if q2 is None:
            return []
        by_label = {opt.label.strip(): opt.tag for opt in q2.options if opt.tag}
        tags = []
        for label in labels:
            tag = by_label.get(str(label).strip())
            if tag and tag not in tags:
                tags.append(tag)
        return tags


# =============================================================================
# QUESTIONS
# =============================================================================

QUESTIONS: List[Question] = [
    # Q1: area / campus. Option ids are campus slugs.
    Question(
        id="Q1",
        title="最も通いやすい「エリア・校舎」は？",
        description="（継続するためには「通いやすさ」が一番大切です！）",
        key="area",
        options=[
            QuestionOption(id="shibuya", label="渋谷校"),
            QuestionOption(id="shinjuku", label="新宿校"),
            QuestionOption(id="ikebukuro", label="池袋校"),
            QuestionOption(id="online", label="【オンライン】自宅で受講", is_online=True),
        ],
    ),
    # Q2: experience level
    Question(
        id="Q2",
        title="Q2. 経験・運動レベル",
        description="今の自分に一番近いものを選んでください。",
        key="level",
        options=[
            QuestionOption(id="2-1", label="運動自体がニガテ…リズム感にも自信がない", tag="Lv0_超入門"),
            QuestionOption(id="2-2", label="運動は普通にできるけど、ダンスは未経験", tag="Lv1_入門"),
            QuestionOption(id="2-3", label="昔少し習っていた / 学校の体育でやった程度", tag="Lv2_初級"),
            QuestionOption(id="2-4", label="基本的なステップなら踊れる（初級レベル）", tag="Lv3_初中級"),
            QuestionOption(id="2-5", label="本格的に習った経験がある / バリバリ踊りたい", tag="Lv4_中上級"),
        ],
    ),
    # Q3: age / lifestyle
    Question(
        id="Q3",
        title="Q3. 年代・ライフスタイル",
        description="通う人の年代に近いものを選んでください。",
        key="age",
        options=[
            QuestionOption(id="3-1", label="未就学児（3歳〜6歳くらい）", tag="Age_Kids"),
            QuestionOption(id="3-2", label="小学生（キッズ）", tag="Age_Elementary"),
            QuestionOption(id="3-3", label="中学生・高校生", tag="Age_Teen"),
            QuestionOption(id="3-4", label="大学生・専門学生", tag="Age_Student"),
            QuestionOption(id="3-5", label="社会人（お仕事をしている方）", tag="Age_Adult_Work"),
            QuestionOption(id="3-6", label="主婦・主夫（日中の時間を活用）", tag="Age_Adult_Day"),
        ],
    ),
    # Q4: music / genre
    Question(
        id="Q4",
        title="Q4. 好みの音楽・雰囲気",
        description="一番「踊ってみたい！」と思うものを選んでください。",
        key="genre",
        options=[
            QuestionOption(id="4-1", label="K-POP・流行りの曲", tag="Genre_KPOP"),
            QuestionOption(id="4-2", label="重低音の効いたカッコいい洋楽", tag="Genre_HIPHOP"),
            QuestionOption(id="4-3", label="オシャレでゆったりした曲", tag="Genre_JAZZ"),
            QuestionOption(id="4-4", label="とにかく明るく楽しい曲", tag="Genre_ThemePark"),
            QuestionOption(id="4-5", label="まだ迷っている・色々見てみたい", tag="Genre_All"),
        ],
    ),
    # Q5: preferred teacher style
    Question(
        id="Q5",
        title="Q5. 理想の先生",
        description="どんな先生だと続けやすそうですか？",
        key="teacher",
        options=[
            QuestionOption(id="5-1", label="とにかく優しく！褒めて伸ばしてほしい", tag="Style_Healing"),
            QuestionOption(id="5-2", label="プロ志望！厳しくても本格的に指導してほしい", tag="Style_Hard"),
            QuestionOption(id="5-3", label="実績のあるベテラン講師に、基礎から丁寧に習いたい", tag="Style_Logical"),
            QuestionOption(id="5-4", label="先生というより「友達」みたいに接してほしい", tag="Style_Friendly"),
        ],
    ),
    # Q6: biggest concern (messageKey instead of tag)
    Question(
        id="Q6",
        title="Q6. 一番の不安",
        description="正直な気持ちに一番近いものを選んでください。",
        key="concern",
        options=[
            QuestionOption(id="6-1", label="周りのペースについていけるか", message_key="Msg_Pace"),
            QuestionOption(id="6-2", label="教室の雰囲気に馴染めるか", message_key="Msg_Atmosphere"),
            QuestionOption(id="6-3", label="リズム感・運動神経に自信がない", message_key="Msg_Sense"),
            QuestionOption(id="6-4", label="しっかり上達できるか・レベルが低すぎないか", message_key="Msg_LevelUp"),
            QuestionOption(id="6-5", label="まだ勇気が出ない・色々不安", message_key="Msg_Consult"),
        ],
    ),
]

# =============================================================================
# CONCERN MESSAGES
# =============================================================================

CONCERN_MESSAGES: Dict[str, str] = {
    "Msg_Pace": (
        "LINKsでは最大8名までの少人数制なので、周りのペースについていけない…という不安を感じにくい環境です。"
        "振付もゆっくり丁寧に進めるので、マイペースに通えます。"
    ),
    "Msg_Atmosphere": (
        "体験レッスンでは、クラスの雰囲気や生徒さんの年齢層もチェックできます。"
        "「合わないかも…」と感じた場合は、クラス変更のご相談も可能なのでご安心ください。"
    ),
    "Msg_Sense": (
        "リズム感や運動神経よりも大切なのは“慣れ”です。"
        "基礎から少しずつ積み上げていくカリキュラムなので、今の段階で自信がなくても全く問題ありません。"
    ),
    "Msg_LevelUp": (
        "上達したい方向けに、レベル別クラスやステップアップ用のクラスもご用意しています。"
        "物足りなくなった場合は、次のクラスへのご案内も可能です。"
    ),
    "Msg_Consult": (
        "いきなり申込むのが不安な方は、まずは体験レッスンで雰囲気を見ていただくのがおすすめです。"
        "スタッフが目的や不安をヒアリングしながら、最適なクラスをご提案します。"
    ),
}

DEFAULT_CATALOG = QuestionCatalog(QUESTIONS, CONCERN_MESSAGES)
