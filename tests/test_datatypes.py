import pytest

from minirel.datatypes import JoinType, join_method_banner, join_method_from_arg


@pytest.mark.parametrize(
    "arg, expected",
    [
        ("SM", JoinType.SM_JOIN),
        ("HJ", JoinType.HASH_JOIN),
        (None, JoinType.NL_JOIN),
        ("NL", JoinType.NL_JOIN),
        ("sm", JoinType.NL_JOIN),
        ("", JoinType.NL_JOIN),
    ],
)
def test_join_method_from_arg(arg, expected):
    assert join_method_from_arg(arg) is expected


@pytest.mark.parametrize(
    "method, banner",
    [
        (JoinType.NL_JOIN, "Nested Loops Join Method"),
        (JoinType.HASH_JOIN, "Hash Join Method"),
        (JoinType.SM_JOIN, "Sort Merge Join Method"),
    ],
)
def test_join_method_banner(method, banner):
    assert join_method_banner(method) == banner


def test_banner_accepts_plain_int():
    assert join_method_banner(int(JoinType.HASH_JOIN)) == "Hash Join Method"


def test_banner_of_parsed_argument():
    assert join_method_banner(join_method_from_arg("SM")) == "Sort Merge Join Method"


def test_banner_rejects_unknown_method():
    with pytest.raises(ValueError):
        join_method_banner(42)