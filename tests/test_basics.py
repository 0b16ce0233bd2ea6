import pytest

from rustdrill.lessons.basics import (
    bigger,
    calculate_price_of_apples,
    foo_if_fizz,
    is_even,
    longest,
    sale_price,
    square,
)


def test_verify_price_of_apples():
    assert calculate_price_of_apples(35) == 70
    assert calculate_price_of_apples(40) == 80
    assert calculate_price_of_apples(41) == 41
    assert calculate_price_of_apples(65) == 65


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_foo_for_fizz():
    assert foo_if_fizz("fizz") == "foo"


def test_bar_for_fuzz():
    assert foo_if_fizz("fuzz") == "bar"


def test_default_to_baz():
    assert foo_if_fizz("literally anything") == "baz"


def test_is_true_when_even():
    assert is_even(82) is True


def test_is_false_when_odd():
    assert is_even(81) is False


@pytest.mark.parametrize("price", [50, 51])
def test_sale_price_discount_depends_on_parity(price):
    discount = price - sale_price(price)
    assert discount == (10 if price % 2 == 0 else 3)


def test_square_of_three():
    assert square(3) == 9


def test_longest_picks_longer():
    assert longest("abcd", "xyz") == "abcd"
    assert longest("xyz", "long string is long") == "long string is long"


def test_longest_prefers_second_on_tie():
    assert longest("abc", "xyz") == "xyz"


def test_longest_counts_bytes():
    assert longest("é", "ab") == "ab"
    assert longest("éé", "abc") == "éé"