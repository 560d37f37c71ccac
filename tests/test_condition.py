import tomllib

import pytest

from pkgtree.condition import Condition, ConditionData


def parse(text):
    return Condition.from_dict(tomllib.loads(text))


def test_has_env_deserialization():
    c = parse('has_env = "foo"')
    assert c.has_env == "foo"
    assert c.env_eq is None
    assert c.in_image is None


def test_has_env_list_deserialization():
    c = parse('has_env = ["foo", "bar"]')
    assert c.has_env == ("foo", "bar")
    assert c.env_eq is None
    assert c.in_image is None


def test_env_eq_deserialization():
    c = parse('env_eq = { "foo" = "bar" }')
    assert c.has_env is None
    assert dict(c.env_eq) == {"foo": "bar"}
    assert c.in_image is None


def test_in_image_deserialization():
    c = parse('in_image = "foo"')
    assert c.has_env is None
    assert c.env_eq is None
    assert c.in_image == "foo"


def test_in_image_list_deserialization():
    c = parse('in_image = ["foo"]')
    assert c.has_env is None
    assert c.env_eq is None
    assert c.in_image == ("foo",)


def test_invalid_type_rejected():
    with pytest.raises(ValueError):
        Condition.from_dict({"has_env": 5})


def test_invalid_env_eq_rejected():
    with pytest.raises(ValueError):
        Condition.from_dict({"env_eq": {"A": 1}})


def test_round_trip():
    data = {"has_env": ["A", "B"], "env_eq": {"X": "1"}, "in_image": "img"}
    assert Condition.from_dict(data).to_dict() == data


def test_to_dict_leaves_out_unset():
    assert Condition(in_image="img").to_dict() == {"in_image": "img"}


def test_condition_empty():
    assert Condition().matches(ConditionData()) is True


def test_condition_no_image():
    condition = Condition(in_image="req_image")
    assert condition.matches(ConditionData()) is False


def test_condition_matching_image():
    data = ConditionData(image_name="required_image")
    assert Condition(in_image="required_image").matches(data) is True


def test_condition_nonmatching_image():
    data = ConditionData(image_name="required_image")
    assert Condition(in_image="other_image").matches(data) is False


def test_condition_image_list_any():
    data = ConditionData(image_name="b")
    assert Condition(in_image=["a", "b"]).matches(data) is True
    assert Condition(in_image=["a", "c"]).matches(data) is False


def test_condition_required_env_missing():
    assert Condition(has_env="A").matches(ConditionData()) is False


def test_condition_required_env_present():
    data = ConditionData(env=(("A", "1"),))
    assert Condition(has_env="A").matches(data) is True


def test_condition_required_env_list_all():
    data = ConditionData(env=(("A", "1"), ("B", "2")))
    assert Condition(has_env=["A", "B"]).matches(data) is True
    assert Condition(has_env=["A", "C"]).matches(data) is False


def test_condition_required_env_values_missing():
    assert Condition(env_eq={"A": "1"}).matches(ConditionData()) is False


def test_condition_required_env_values_present_but_different():
    data = ConditionData(env=(("A", "1"),))
    assert Condition(env_eq={"A": "2"}).matches(data) is False


def test_condition_required_env_values_present_and_equal():
    data = ConditionData(env=(("A", "1"),))
    assert Condition(env_eq={"A": "1"}).matches(data) is True


def test_condition_env_eq_uses_first_entry():
    data = ConditionData(env=(("A", "1"), ("A", "2")))
    assert Condition(env_eq={"A": "1"}).matches(data) is True
    assert Condition(env_eq={"A": "2"}).matches(data) is False


def test_all_requirements_must_hold():
    condition = Condition(has_env="A", in_image="img")
    assert condition.matches(ConditionData(image_name="img", env=(("A", "x"),))) is True
    assert condition.matches(ConditionData(image_name="other", env=(("A", "x"),))) is False