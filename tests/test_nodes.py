import pytest

from minirel.datatypes import Datatype, Operator
from minirel.nodes import (
    Alias,
    AliasError,
    AttrVal,
    Join,
    QualAttr,
    Select,
    Value,
    find_match_in_alias,
    merge_attr_value_list,
    replace_alias_in_condition,
    replace_alias_in_qualattr_list,
)

SOAPS = Alias("soaps", "s")
STARS = Alias("stars", "t")


def test_string_value_length():
    value = Value.string("Guiding Light")
    assert value.type == Datatype.STRING
    assert value.length == len("Guiding Light")


def test_numeric_values_have_zero_length():
    assert Value.integer(42).length == 0
    assert Value.real(2.5).length == 0
    assert Value.integer(42).type == Datatype.INTEGER


def test_real_value_is_single_precision():
    assert Value.real(0.5).value == 0.5
    once = Value.real(7.02).value
    assert Value.real(once).value == once
    assert abs(once - 7.02) < 1e-6


def test_merge_pairs_in_order():
    attrs = [AttrVal("soapid"), AttrVal("sname")]
    values = [Value.integer(3), Value.string("One Life to Live")]
    merged = merge_attr_value_list(attrs, values)
    assert [a.attrname for a in merged] == ["soapid", "sname"]
    assert [a.value for a in merged] == values


def test_merge_rejects_short_value_list():
    with pytest.raises(ValueError, match="shorter"):
        merge_attr_value_list([AttrVal("a"), AttrVal("b")], [Value.integer(1)])


def test_merge_rejects_long_value_list():
    with pytest.raises(ValueError, match="longer"):
        merge_attr_value_list([AttrVal("a")], [Value.integer(1), Value.integer(2)])


def test_find_match_by_relation_name():
    assert find_match_in_alias([SOAPS, STARS], "stars") == "stars"


def test_find_match_by_alias():
    assert find_match_in_alias([SOAPS, STARS], "s") == "soaps"
    assert find_match_in_alias([SOAPS, STARS], "t") == "stars"


def test_find_match_none_and_unknown():
    assert find_match_in_alias([SOAPS], None) is None
    assert find_match_in_alias([SOAPS], "x") is None
    assert find_match_in_alias([Alias("soaps")], "s") is None


def test_unqualified_attrs_take_single_relation():
    attrs = [QualAttr(None, "sname"), QualAttr("s", "rating")]
    result = replace_alias_in_qualattr_list([SOAPS], attrs)
    assert result == [QualAttr("soaps", "sname"), QualAttr("soaps", "rating")]


def test_unqualified_attr_with_many_relations_fails():
    with pytest.raises(AliasError):
        replace_alias_in_qualattr_list([SOAPS, STARS], [QualAttr(None, "soapid")])


def test_unknown_qualifier_fails():
    with pytest.raises(AliasError, match="zz"):
        replace_alias_in_qualattr_list([SOAPS], [QualAttr("zz", "soapid")])


def test_condition_none_passes_through():
    assert replace_alias_in_condition([SOAPS], None) is None


def test_select_condition_resolved():
    where = Select(QualAttr("s", "network"), Operator.EQ, Value.string("NBC"))
    result = replace_alias_in_condition([SOAPS, STARS], where)
    assert result.selattr == QualAttr("soaps", "network")
    assert result.op == Operator.EQ
    assert result.value == Value.string("NBC")


def test_join_condition_resolved():
    where = Join(QualAttr("s", "soapid"), Operator.EQ, QualAttr("t", "soapid"))
    result = replace_alias_in_condition([SOAPS, STARS], where)
    assert result.joinattr1 == QualAttr("soaps", "soapid")
    assert result.joinattr2 == QualAttr("stars", "soapid")


def test_join_unqualified_side_with_many_relations_fails():
    where = Join(QualAttr("s", "soapid"), Operator.EQ, QualAttr(None, "soapid"))
    with pytest.raises(AliasError):
        replace_alias_in_condition([SOAPS, STARS], where)


def test_select_unqualified_single_relation():
    where = Select(QualAttr(None, "rating"), Operator.GT, Value.real(5.0))
    result = replace_alias_in_condition([SOAPS], where)
    assert result.selattr.relname == "soaps"
    assert where.selattr.relname is None