import pytest

from minirel.datatypes import Operator
from minirel.echo import echo_query, format_op, format_qual, format_value
from minirel.nodes import (
    INT_FORMAT,
    REAL_FORMAT,
    AttrType,
    AttrVal,
    Build,
    Create,
    Delete,
    Destroy,
    Drop,
    Help,
    Insert,
    Join,
    Load,
    PrimAttr,
    Print,
    QualAttr,
    Query,
    Rebuild,
    Select,
    Value,
)


@pytest.mark.parametrize(
    "op, text",
    [
        (Operator.LT, " <"),
        (Operator.LTE, " <="),
        (Operator.EQ, " ="),
        (Operator.GT, " >"),
        (Operator.GTE, " >="),
        (Operator.NE, " <>"),
    ],
)
def test_format_op(op, text):
    assert format_op(op) == text


def test_format_op_unknown_is_empty():
    assert format_op(99) == ""


def test_format_value_integer():
    assert format_value(Value.integer(42)) == " 42"


def test_format_value_float_has_six_decimals():
    assert format_value(Value.real(1.5)) == " 1.500000"


def test_format_value_string_is_quoted():
    assert format_value(Value.string("abc")) == ' "abc"'


def test_format_qual_none():
    assert format_qual(None) == ""


def test_format_qual_select():
    qual = Select(QualAttr("r", "a"), Operator.EQ, Value.integer(7))
    text = format_qual(qual)
    assert text.startswith(" where r.a =")
    assert text.endswith(" 7")


def test_format_qual_join():
    qual = Join(QualAttr("r", "a"), Operator.LT, QualAttr("s", "b"))
    text = format_qual(qual)
    assert text.startswith(" where r.a <")
    assert text.endswith(" s.b")


def test_format_qual_rejects_other():
    with pytest.raises(TypeError):
        format_qual(Destroy("r"))


def test_echo_query_select_into():
    node = Query("out", (QualAttr("r", "a"), QualAttr("r", "b")))
    assert echo_query(node) == "select into out (r.a, r.b);"


def test_echo_query_select_with_qual():
    qual = Select(QualAttr("r", "a"), Operator.NE, Value.string("x"))
    node = Query(None, (QualAttr("r", "a"),), qual)
    text = echo_query(node)
    assert text.startswith("select (r.a)")
    assert format_qual(qual) in text
    assert text.endswith(";")


def test_echo_insert():
    node = Insert("r", (AttrVal("x", Value.integer(5)), AttrVal("y", Value.string("q"))))
    text = echo_query(node)
    assert text.startswith("insert r (")
    assert "x = 5" in text
    assert 'y = "q"' in text
    assert text.endswith(");")


def test_echo_insert_without_value_raises():
    with pytest.raises(ValueError):
        echo_query(Insert("r", (AttrVal("x"),)))


def test_echo_delete():
    assert echo_query(Delete("r")) == "delete r;"
    qual = Select(QualAttr("r", "a"), Operator.GT, Value.integer(3))
    assert echo_query(Delete("r", qual)) == "delete r" + format_qual(qual) + ";"


def test_echo_create():
    node = Create(
        "r",
        (AttrType("a", INT_FORMAT), AttrType("b", REAL_FORMAT), AttrType("c", 10)),
        PrimAttr("a", 4),
    )
    text = echo_query(node)
    assert text.startswith("create r (a = int, b = real, c = char(10))")
    assert "primary a numbuckets = 4" in text
    assert text.endswith(";")


def test_echo_simple_commands():
    assert echo_query(Destroy("soaps")) == "destroy soaps;"
    assert echo_query(Print("soaps")) == "print soaps;"
    assert echo_query(Help()) == "help;"
    assert echo_query(Help("soaps")) == "help soaps;"


def test_echo_index_commands():
    assert echo_query(Build("r", "a", 3)) == "buildindex r(a);"
    rebuilt = echo_query(Rebuild("r", "a", 3))
    assert rebuilt.startswith("rebuildindex r(a)")
    assert rebuilt.endswith("numbuckets = 3;")
    assert echo_query(Drop("r")) == "dropindex r;"
    assert echo_query(Drop("r", "a")) == "dropindex r(a);"


def test_echo_load():
    assert echo_query(Load("stars", "stars.data")) == 'load stars("stars.data");'


def test_echo_unknown_node():
    with pytest.raises(TypeError):
        echo_query(QualAttr("r", "a"))