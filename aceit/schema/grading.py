# aceit/schema/grading.py
from enum import Enum
from typing import Optional, Union

from aceit.exceptions import InvalidGradeLevel

# Points a single question can contribute to the 100 point total
MAX_QUESTION_WEIGHT = 6.25

# Color shown for an unset or out-of-scale grade
FALLBACK_COLOR = "red"


class GradeLevel(float, Enum):
    """
    The four legal scorecard grades. The member value is the weight the grade
    contributes to the interview total.
    """
    EXCEPTIONAL = MAX_QUESTION_WEIGHT
    PROFICIENT = MAX_QUESTION_WEIGHT * 0.75
    DEVELOPING = MAX_QUESTION_WEIGHT * 0.5
    NOVICE = MAX_QUESTION_WEIGHT * 0.25

    @property
    def weight(self) -> float:
        return float(self.value)

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def color(self) -> str:
        return GRADE_COLORS[self]


GRADE_COLORS = {
    GradeLevel.EXCEPTIONAL: "green",
    GradeLevel.PROFICIENT: "gold",
    GradeLevel.DEVELOPING: "darkorange",
    GradeLevel.NOVICE: "red",
}


GradeInput = Union[GradeLevel, str, float]


def parse_grade(level: GradeInput) -> GradeLevel:
    """
    Resolve a grade given as a GradeLevel, its label ("Proficient") or its
    exact weight (4.6875). Raises InvalidGradeLevel for anything else.
    """
    if isinstance(level, GradeLevel):
        return level

    if isinstance(level, str):
        for member in GradeLevel:
            if member.label.lower() == level.strip().lower():
                return member
        raise InvalidGradeLevel(level)

    # bool is an int subclass, never a grade
    if isinstance(level, bool) or not isinstance(level, (int, float)):
        raise InvalidGradeLevel(level)

    for member in GradeLevel:
        if member.weight == level:
            return member
    raise InvalidGradeLevel(level)


def weight_of(level: GradeInput) -> float:
    return parse_grade(level).weight


def color_for(weight: Optional[float]) -> str:
    """
    Map a weight back to its presentation color. Unset and unknown weights
    read as red, the lowest-confidence state.
    """
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        return FALLBACK_COLOR
    for member in GradeLevel:
        if member.weight == weight:
            return member.color
    return FALLBACK_COLOR


def label_for(weight: Optional[float]) -> Optional[str]:
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        return None
    for member in GradeLevel:
        if member.weight == weight:
            return member.label
    return None
