import pytest

from chardiff.myers import (
    DiffOperation,
    OpKind,
    common_prefix_len,
    common_suffix_len,
    find_middle_snake,
    myers_diff,
)


def M(c):
    return DiffOperation(OpKind.MATCH, c)


def I(c):
    return DiffOperation(OpKind.INSERTION, c)


def D(c):
    return DiffOperation(OpKind.DELETION, c)


def test_myers_diff_empty_a():
    assert myers_diff("", "abc") == (3, [I("a"), I("b"), I("c")])


def test_myers_diff_empty_b():
    assert myers_diff("abc", "") == (3, [D("a"), D("b"), D("c")])


def test_myers_diff_both_empty():
    assert myers_diff("", "") == (0, [])


def test_myers_diff_common_prefix_identical():
    assert myers_diff("abca", "abca") == (0, [M("a"), M("b"), M("c"), M("a")])


def test_myers_diff_common_prefix_b_extends():
    assert myers_diff("abca", "abcaf") == (
        1,
        [M("a"), M("b"), M("c"), M("a"), I("f")],
    )


def test_myers_diff_common_prefix_a_extends():
    assert myers_diff("abca", "abc") == (1, [M("a"), M("b"), M("c"), D("a")])


def test_myers_diff_common_suffix_b_prepends_middle():
    assert myers_diff("abca", "fabca") == (
        1,
        [I("f"), M("a"), M("b"), M("c"), M("a")],
    )


def test_myers_diff_common_suffix_a_prepends_middle():
    assert myers_diff("labca", "abca") == (
        1,
        [D("l"), M("a"), M("b"), M("c"), M("a")],
    )


def test_myers_diff_common_suffix_middle_differs():
    assert myers_diff("labca", "fabca") == (
        2,
        [D("l"), I("f"), M("a"), M("b"), M("c"), M("a")],
    )


def test_myers_diff_example_1():
    distance, path = myers_diff("abcabba", "cbabac")
    assert distance == 5
    assert path == [
        D("a"),
        I("c"),
        M("b"),
        D("c"),
        M("a"),
        M("b"),
        D("b"),
        M("a"),
        I("c"),
    ]


def test_myers_diff_accepts_lists():
    assert myers_diff(list("ab"), list("b")) == (1, [D("a"), M("b")])


@pytest.mark.parametrize(
    "before, after",
    [
        ("abcabba", "cbabac"),
        ("kitten", "sitting"),
        ("x", "abcde"),
        ("hello world", "help the world"),
        ("aaaaa", "bbbbb"),
        ("mississippi", "missouri"),
    ],
)
def test_script_rebuilds_both_sides(before, after):
    distance, path = myers_diff(before, after)
    rebuilt_before = "".join(op.char for op in path if op.kind is not OpKind.INSERTION)
    rebuilt_after = "".join(op.char for op in path if op.kind is not OpKind.DELETION)
    assert rebuilt_before == before
    assert rebuilt_after == after
    assert distance == sum(op.kind is not OpKind.MATCH for op in path)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("", "", 0),
        ("", "abc", 0),
        ("abc", "", 0),
        ("abc", "def", 0),
        ("apple", "apply", 4),
        ("hello", "hello", 5),
        ("cat", "caterpillar", 3),
        ("banana", "ban", 3),
        ("Apple", "apple", 0),
        ("!@#123", "!@#abc", 3),
    ],
)
def test_common_prefix_len(a, b, expected):
    assert common_prefix_len(a, b) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("", "", 0),
        ("", "abc", 0),
        ("abc", "", 0),
        ("abc", "def", 0),
        ("apple", "grapple", 5),
        ("testing", "flying", 3),
        ("hello", "hello", 5),
        ("ion", "action", 3),
        ("nation", "ion", 3),
        ("Ending", "ending", 5),
        ("abc!@#", "123!@#", 3),
        ("ax", "bx", 1),
        ("xa", "xb", 0),
    ],
)
def test_common_suffix_len(a, b, expected):
    assert common_suffix_len(a, b) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("", "", None),
        ("abcde", "abcde", (0, 0, 5, 5)),
        ("longidenticalstring", "longidenticalstring", (0, 0, 19, 19)),
        ("aaaaa", "bbbbb", None),
        ("BC", "XBC", (0, 1, 2, 3)),
        ("ABCABBA", "CBABAC", (3, 2, 5, 4)),
    ],
)
def test_find_middle_snake(a, b, expected):
    assert find_middle_snake(a, b) == expected


def test_diff_operation_equality_and_immutability():
    op = M("a")
    assert op == DiffOperation(OpKind.MATCH, "a")
    assert op != I("a")
    with pytest.raises(AttributeError):
        op.char = "b"