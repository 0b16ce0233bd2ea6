import pytest

from rustdrill.lessons.traits import (
    Licensed,
    OtherSoftware,
    SomeSoftware,
    SomeStruct,
    Wrapper,
    append_bar,
    compare_license_types,
    some_func,
)


def test_is_foo_bar():
    assert append_bar("Foo") == "FooBar"


def test_is_bar_bar():
    assert append_bar(append_bar("")) == "BarBar"


def test_is_vec_pop_eq_bar():
    foo = append_bar(["Foo"])
    assert foo.pop() == "Bar"
    assert foo.pop() == "Foo"


def test_append_bar_to_list_leaves_original_alone():
    original = ["Foo"]
    result = append_bar(original)
    assert original == ["Foo"]
    assert result == ["Foo", "Bar"]


def test_append_bar_rejects_other_types():
    with pytest.raises(TypeError):
        append_bar(42)


def test_is_licensing_info_the_same():
    licensing_info = "Some information"
    some_software = SomeSoftware(version_number=1)
    other_software = OtherSoftware(version_number="v2.0.0")
    assert some_software.licensing_info() == licensing_info
    assert other_software.licensing_info() == licensing_info


def test_version_as_string():
    assert SomeSoftware(1).version_as_string() == "1"
    assert OtherSoftware("v2.0.0").version_as_string() == "v2.0.0"


def test_licensed_is_abstract():
    with pytest.raises(TypeError):
        Licensed()


def test_compare_license_information():
    assert compare_license_types(SomeSoftware(1), OtherSoftware("v2.0.0")) is True


def test_compare_license_information_backwards():
    assert compare_license_types(OtherSoftware("v2.0.0"), SomeSoftware(1)) is True


def test_some_func_needs_both_capabilities():
    assert some_func(SomeStruct()) is True


def test_store_u32_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"