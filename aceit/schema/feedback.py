# aceit/schema/feedback.py
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field, computed_field

from aceit.schema.grading import GradeLevel, color_for, label_for


class QuestionFeedback(BaseModel):
    """Feedback for one scorecard question"""
    question_number: int = Field(ge=1)
    grade: Optional[GradeLevel] = None
    notes: str = ""
    comment: str = ""

    @property
    def weight(self) -> float:
        """Contribution to the total; ungraded questions count as 0"""
        return self.grade.weight if self.grade is not None else 0.0


class QuestionSnapshot(QuestionFeedback):
    """Read-only copy of a question's feedback, as submitted"""
    model_config = {"frozen": True}


class FeedbackRecord(BaseModel):
    """Snapshot of a scorecard, ready to submit for one interview"""
    interviewee_name: str
    admin_name: str
    questions: Dict[int, QuestionSnapshot] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @computed_field
    @property
    def total_grade(self) -> float:
        return sum((q.weight for q in self.questions.values()), 0.0)


class FeedbackSummary(BaseModel):
    """A feedback entry as listed by the remote API"""
    id: Union[int, str]
    total_grade: float
    admin_name: str

    @property
    def label(self) -> str:
        return f"Score: {self.total_grade} from {self.admin_name}"


# Request / response models for the scorecard endpoints
class OpenScorecardRequest(BaseModel):
    question_count: Optional[int] = Field(default=None, ge=1)


class GradeUpdateRequest(BaseModel):
    grade: Union[float, str]


class NoteUpdateRequest(BaseModel):
    field: str = "notes"
    text: str = ""


class SubmitScorecardRequest(BaseModel):
    interviewee_name: str
    admin_name: str
    require_complete: Optional[bool] = None


class QuestionView(BaseModel):
    question_number: int
    grade: Optional[float] = None
    label: Optional[str] = None
    color: str
    notes: str = ""
    comment: str = ""

    @classmethod
    def from_feedback(cls, feedback: QuestionFeedback) -> "QuestionView":
        weight = feedback.grade.weight if feedback.grade is not None else None
        return cls(
            question_number=feedback.question_number,
            grade=weight,
            label=label_for(weight),
            color=color_for(weight),
            notes=feedback.notes,
            comment=feedback.comment,
        )


class ScorecardData(BaseModel):
    id: str
    question_count: Optional[int] = None
    total_grade: float
    questions: List[QuestionView]
