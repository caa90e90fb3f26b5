# aceit/exceptions.py
from typing import Iterable, Optional


class AceItError(Exception):
    """Base class for errors raised by the dashboard core"""

    status_code: int = 400

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class InvalidGradeLevel(AceItError):
    status_code = 422

    def __init__(self, value):
        super().__init__(f"Invalid grade level: {value!r}")
        self.value = value


class InvalidQuestion(AceItError):
    status_code = 422

    def __init__(self, question_number, question_count: Optional[int] = None):
        if question_count:
            detail = (
                f"Question number must be between 1 and {question_count}, "
                f"got {question_number!r}"
            )
        else:
            detail = f"Question number must be >= 1, got {question_number!r}"
        super().__init__(detail)
        self.question_number = question_number


class InvalidFeedbackField(AceItError):
    status_code = 422

    def __init__(self, field):
        super().__init__(
            f"Unknown feedback field {field!r}, expected 'notes' or 'comment'"
        )
        self.field = field


class IncompleteScorecard(AceItError):
    status_code = 409

    def __init__(self, missing: Iterable[int]):
        self.missing = sorted(missing)
        if self.missing:
            detail = "Scorecard is missing grades for questions: " + ", ".join(
                str(n) for n in self.missing
            )
        else:
            detail = "Scorecard has no graded questions"
        super().__init__(detail)


class ScorecardNotFound(AceItError):
    status_code = 404

    def __init__(self, scorecard_id):
        super().__init__(f"Scorecard {scorecard_id} not found")
        self.scorecard_id = scorecard_id


class FeedbackSubmissionError(AceItError):
    status_code = 502
