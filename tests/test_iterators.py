import pytest

from rustdrill.lessons.iterators import (
    DivideByZeroError,
    DivisionError,
    NotDivisibleError,
    Progress,
    capitalize_first,
    capitalize_words_string,
    capitalize_words_vector,
    count_collection_progress,
    count_progress,
    divide,
    factorial,
    list_of_results,
    result_with_list,
)


def get_map():
    return {
        "variables1": Progress.COMPLETE,
        "functions1": Progress.COMPLETE,
        "hashmap1": Progress.COMPLETE,
        "arc1": Progress.SOME,
        "as_ref_mut": Progress.NONE,
        "from_str": Progress.NONE,
    }


def get_vec_map():
    other = {
        "variables2": Progress.COMPLETE,
        "functions2": Progress.COMPLETE,
        "if1": Progress.COMPLETE,
        "from_into": Progress.NONE,
        "try_from_into": Progress.NONE,
    }
    return [get_map(), other]


def test_success():
    assert capitalize_first("hello") == "Hello"


def test_empty():
    assert capitalize_first("") == ""


def test_capitalize_keeps_rest():
    assert capitalize_first("hELLO") == "HELLO"


def test_iterate_string_vec():
    assert capitalize_words_vector(["hello", "world"]) == ["Hello", "World"]


def test_iterate_into_string():
    assert capitalize_words_string(["hello", " ", "world"]) == "Hello World"


def test_divide_success():
    assert divide(81, 9) == 9


def test_not_divisible():
    with pytest.raises(NotDivisibleError) as info:
        divide(81, 6)
    assert info.value == NotDivisibleError(81, 6)
    assert (info.value.dividend, info.value.divisor) == (81, 6)


def test_divide_by_0():
    with pytest.raises(DivideByZeroError):
        divide(81, 0)


def test_divide_errors_share_a_base():
    with pytest.raises(DivisionError):
        divide(1, 0)


def test_divide_0_by_something():
    assert divide(0, 81) == 0


def test_divide_negative_exact():
    assert divide(-81, 9) == -9


def test_result_with_list():
    assert result_with_list() == [1, 11, 1426, 3]


def test_list_of_results():
    assert list_of_results() == [1, 11, 1426, 3]


@pytest.mark.parametrize("num, expected", [(0, 1), (1, 1), (2, 2), (4, 24)])
def test_factorial(num, expected):
    assert factorial(num) == expected


def test_factorial_largest_u64():
    assert factorial(20) == 2432902008176640000


def test_factorial_overflow():
    with pytest.raises(OverflowError):
        factorial(21)


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)


def test_count_complete():
    assert count_progress(get_map(), Progress.COMPLETE) == 3


def test_count_other_values():
    assert count_progress(get_map(), Progress.SOME) == 1
    assert count_progress(get_map(), Progress.NONE) == 2


def test_count_collection_complete():
    assert count_collection_progress(get_vec_map(), Progress.COMPLETE) == 6


def test_count_collection_none():
    assert count_collection_progress(get_vec_map(), Progress.NONE) == 4