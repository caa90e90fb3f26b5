# aceit/services/scorecard.py
import uuid

from typing import Dict, List, Optional

from aceit.exceptions import (
    IncompleteScorecard,
    InvalidFeedbackField,
    InvalidQuestion,
    ScorecardNotFound,
)
from aceit.schema.feedback import (
    FeedbackRecord,
    QuestionFeedback,
    QuestionSnapshot,
    QuestionView,
    ScorecardData,
)
from aceit.schema.grading import GradeInput, color_for, parse_grade
from aceit.logging_config import app_logger

NOTE_FIELDS = ("notes", "comment")


class Scorecard:
    """
    Accumulates per-question feedback for one interview and computes its
    total grade. Holds the only copy of the grader's selections; anything the
    client shows is derived from it.
    """

    def __init__(self, question_count: Optional[int] = None):
        self.question_count = question_count
        self._questions: Dict[int, QuestionFeedback] = {}

    def _check_question(self, question_number: int) -> None:
        if isinstance(question_number, bool) or not isinstance(question_number, int):
            raise InvalidQuestion(question_number, self.question_count)
        if question_number < 1:
            raise InvalidQuestion(question_number, self.question_count)
        if self.question_count and question_number > self.question_count:
            raise InvalidQuestion(question_number, self.question_count)

    def _entry(self, question_number: int) -> QuestionFeedback:
        self._check_question(question_number)
        if question_number not in self._questions:
            self._questions[question_number] = QuestionFeedback(
                question_number=question_number
            )
        return self._questions[question_number]

    def set_grade(self, question_number: int, level: GradeInput) -> None:
        # Resolve before touching state so a bad grade leaves no empty entry
        self._check_question(question_number)
        grade = parse_grade(level)
        self._entry(question_number).grade = grade

    def set_note(self, question_number: int, field: str, text: str) -> None:
        if field not in NOTE_FIELDS:
            raise InvalidFeedbackField(field)
        self._check_question(question_number)
        setattr(self._entry(question_number), field, text)

    def total_grade(self) -> float:
        return sum((q.weight for q in self._questions.values()), 0.0)

    def question(self, question_number: int) -> QuestionFeedback:
        """Current feedback for a question, empty if nothing was entered yet"""
        self._check_question(question_number)
        existing = self._questions.get(question_number)
        if existing is None:
            return QuestionFeedback(question_number=question_number)
        return existing.model_copy()

    def color_for_question(self, question_number: int) -> str:
        grade = self.question(question_number).grade
        return color_for(grade.weight if grade is not None else None)

    def question_numbers(self) -> List[int]:
        if self.question_count:
            return list(range(1, self.question_count + 1))
        return sorted(self._questions)

    def missing_grades(self) -> List[int]:
        return [
            n for n in self.question_numbers()
            if n not in self._questions or self._questions[n].grade is None
        ]

    def to_feedback_record(
        self,
        interviewee_name: str,
        admin_name: str,
        require_complete: bool = False,
    ) -> FeedbackRecord:
        if require_complete:
            missing = self.missing_grades()
            if missing or not self._questions:
                raise IncompleteScorecard(missing)

        return FeedbackRecord(
            interviewee_name=interviewee_name,
            admin_name=admin_name,
            questions={
                n: QuestionSnapshot.model_validate(q.model_dump())
                for n, q in sorted(self._questions.items())
            },
        )


class ScorecardRegistry:
    """
    Open scorecards of this process, one per grading session. Scorecards
    leave on submit or explicit close; past max_open, the oldest open
    one is dropped to make room.
    """

    def __init__(
        self,
        default_question_count: Optional[int] = None,
        max_open: Optional[int] = None,
    ):
        self.default_question_count = default_question_count
        self.max_open = max_open
        self._scorecards: Dict[str, Scorecard] = {}

    def __len__(self) -> int:
        return len(self._scorecards)

    def open(self, question_count: Optional[int] = None) -> str:
        if self.max_open:
            # dicts keep insertion order, so the first key is the oldest
            while len(self._scorecards) >= self.max_open:
                oldest = next(iter(self._scorecards))
                del self._scorecards[oldest]
                app_logger.warning(f"Evicted oldest open scorecard {oldest}")

        scorecard_id = str(uuid.uuid4())
        self._scorecards[scorecard_id] = Scorecard(
            question_count or self.default_question_count
        )
        return scorecard_id

    def get(self, scorecard_id: str) -> Scorecard:
        try:
            return self._scorecards[scorecard_id]
        except KeyError:
            raise ScorecardNotFound(scorecard_id) from None

    def close(self, scorecard_id: str) -> None:
        self._scorecards.pop(scorecard_id, None)


def describe(scorecard_id: str, scorecard: Scorecard) -> ScorecardData:
    return ScorecardData(
        id=scorecard_id,
        question_count=scorecard.question_count,
        total_grade=scorecard.total_grade(),
        questions=[
            QuestionView.from_feedback(scorecard.question(n))
            for n in scorecard.question_numbers()
        ],
    )
