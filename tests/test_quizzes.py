import pytest

from rustdrill.lessons.quizzes import (
    Append,
    ReportCard,
    Trim,
    Uppercase,
    as_letter,
    transformer,
)


def test_it_works():
    output = transformer([
        ("hello", Uppercase()),
        (" all roads lead to rome! ", Trim()),
        ("foo", Append(1)),
        ("bar", Append(5)),
    ])
    assert output[0] == "HELLO"
    assert output[1] == "all roads lead to rome!"
    assert output[2] == "foobar"
    assert output[3] == "barbarbarbarbarbar"


def test_append_zero_keeps_string():
    assert transformer([("foo", Append(0))]) == ["foo"]


def test_negative_append_raises():
    with pytest.raises(ValueError):
        Append(-1)


def test_unknown_command_raises():
    with pytest.raises(TypeError):
        transformer([("foo", "shout")])


def test_generate_numeric_report_card():
    card = ReportCard(2.1, "Tom Wriggle", 12, as_string=False)
    assert card.render() == "Tom Wriggle (12) - achieved a grade of 2.1"


def test_generate_alphabetic_report_card():
    card = ReportCard(2.1, "Gary Plotter", 11, as_string=True)
    assert card.render() == "Gary Plotter (11) - achieved a grade of A+"


def test_integral_grade_has_no_fraction():
    assert ReportCard(3.0, "Ann", 10).render() == "Ann (10) - achieved a grade of 3"


@pytest.mark.parametrize(
    "grade, letter", [(0.0, "F-"), (0.5, "F-"), (1.0, "F-"), (1.5, "A+"), (-0.5, "A+")]
)
def test_as_letter(grade, letter):
    assert as_letter(grade) == letter


def test_age_out_of_range_raises():
    with pytest.raises(ValueError):
        ReportCard(2.0, "Ann", 256)