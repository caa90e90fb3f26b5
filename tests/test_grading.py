import pytest

from aceit.exceptions import InvalidGradeLevel
from aceit.schema.grading import (
    GradeLevel,
    color_for,
    label_for,
    parse_grade,
    weight_of,
)


def test_weights_are_the_four_fixed_values():
    weights = [weight_of(level) for level in GradeLevel]
    assert weights == [6.25, 4.6875, 3.125, 1.5625]
    assert len(set(weights)) == 4


def test_labels():
    assert [level.label for level in GradeLevel] == [
        "Exceptional",
        "Proficient",
        "Developing",
        "Novice",
    ]


def test_weight_of_accepts_labels_and_exact_weights():
    assert weight_of("Proficient") == 4.6875
    assert weight_of(" novice ") == 1.5625
    assert weight_of(3.125) == 3.125
    assert parse_grade(6.25) is GradeLevel.EXCEPTIONAL


@pytest.mark.parametrize("value", [0, 5, 6.0, 100, -6.25, "Great", "", None, True, [6.25]])
def test_weight_of_rejects_anything_else(value):
    with pytest.raises(InvalidGradeLevel):
        weight_of(value)


def test_color_for_known_weights():
    assert color_for(6.25) == "green"
    assert color_for(4.6875) == "gold"
    assert color_for(3.125) == "darkorange"
    assert color_for(1.5625) == "red"


@pytest.mark.parametrize("value", [None, "", 0, 7.5, "6.25"])
def test_color_for_falls_back_to_red(value):
    assert color_for(value) == "red"


def test_label_for():
    assert label_for(4.6875) == "Proficient"
    assert label_for(None) is None
    assert label_for(2.0) is None
