"""The 15 yes/no prompts, in question order."""

from __future__ import annotations

from dataclasses import dataclass

from timi.config.defaults import QUIZ_DEFAULTS


@dataclass(frozen=True)
class Question:
    id: int
    text: str
    choices: tuple[str, str] = (QUIZ_DEFAULTS["yes_label"], QUIZ_DEFAULTS["no_label"])


_TEXTS = (
    "새로운 프로젝트가 시작되면 먼저 팀원들과 만나서 이야기하고 싶다.",
    "회의 중에 자주 발언하고 의견을 나누는 편이다.",
    "팀 내에서 분위기 메이커 역할을 자주 한다.",
    "혼자만의 시간을 가지고 깊이 생각한 후에 의견을 말한다.",
    "프로젝트를 진행할 때 새로운 방식을 시도해보고 싶어한다.",
    "미래의 가능성과 잠재력을 중요하게 생각한다.",
    "문제를 해결할 때 논리적 분석을 먼저 한다.",
    "객관적인 기준과 효율성을 중시한다.",
    "팀원들의 화합과 분위기를 우선적으로 고려한다.",
    "아이디어를 발전시키고 확장하는 것을 좋아한다.",
    "결정을 내릴 때 팀원들의 감정과 상황을 고려한다.",
    "갈등 상황에서 모든 사람이 만족할 해결책을 찾으려 한다.",
    "계획을 세우기보다는 상황에 맞춰 유연하게 대응한다.",
    "검증된 방법과 구체적인 데이터를 선호한다.",
    "마감일보다는 완성도에 더 신경을 쓴다.",
)

QUESTIONS: tuple[Question, ...] = tuple(
    Question(id=i, text=text) for i, text in enumerate(_TEXTS, start=1)
)


def get_question(question_id: int) -> Question | None:
    """Return the question with a 1-based id, or None when out of range."""
    if isinstance(question_id, bool) or not isinstance(question_id, int):
        return None
    if 1 <= question_id <= len(QUESTIONS):
        return QUESTIONS[question_id - 1]
    return None
