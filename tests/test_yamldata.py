import textwrap

import pytest

from tmplkit.yamldata import to_yaml, unmarshal, unmarshal_strict

STR_FIXTURE = "Hello World, I'm Foo Bar!".split(" ")

MAP_FIXTURE = {
    "int": 123,
    "float": 1.23,
    "string": "Foo bar",
    "list": [1, "two"],
    "listInt": [1, 2, 3],
    "map": {"sub1": 1, "sub2": "two"},
    "mapInt": {1: 1, 2: "two"},
}

DICT_FIXTURE = {
    "int": 123,
    "float": 1.23,
    "string": "Foo bar",
    "list": [1, "two"],
    "listInt": [1, 2, 3],
    "map": {"sub1": 1, "sub2": "two"},
    "mapInt": {"1": 1, "2": "two"},
}

DICT_YAML = textwrap.dedent(
    """\
    float: 1.23
    int: 123
    list:
    - 1
    - two
    listInt:
    - 1
    - 2
    - 3
    map:
      sub1: 1
      sub2: two
    mapInt:
      "1": 1
      "2": two
    string: Foo bar
    """
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ([], "[]\n"),
        ([1, 2, 3], "- 1\n- 2\n- 3\n"),
        (STR_FIXTURE, "- Hello\n- World,\n- I'm\n- Foo\n- Bar!\n"),
    ],
    ids=["Empty List", "List of int", "List of string"],
)
def test_list_to_yaml(value, expected):
    assert to_yaml(value) == expected


def test_dict_to_yaml():
    assert to_yaml({}) == "{}\n"
    assert to_yaml(MAP_FIXTURE) == DICT_YAML


def test_unmarshal_empty():
    assert unmarshal("{}\n") == {}


def test_unmarshal_round_trip():
    assert unmarshal(to_yaml(MAP_FIXTURE)) == DICT_FIXTURE


def test_unmarshal_bytes():
    assert unmarshal(DICT_YAML.encode()) == DICT_FIXTURE


def test_unmarshal_scalar():
    assert unmarshal("Invalid") == "Invalid"


def test_unmarshal_replaces_tabs():
    assert unmarshal("a:\n\tb: 1\n") == {"a": {"b": 1}}


def test_unmarshal_converts_keys_to_strings():
    assert unmarshal("1: one\ntrue: yes\n") == {"1": "one", "true": True}


def test_unmarshal_bad_yaml():
    with pytest.raises(ValueError):
        unmarshal("a: [1, 2")


def test_unmarshal_strict():
    assert unmarshal_strict("{}\n") == {}
    assert unmarshal_strict(to_yaml(MAP_FIXTURE)) == DICT_FIXTURE


def test_unmarshal_strict_rejects_scalar():
    with pytest.raises(ValueError):
        unmarshal_strict("Invalid")


def test_duplicate_keys():
    assert unmarshal("a: 1\na: 2\n") == {"a": 2}
    with pytest.raises(ValueError):
        unmarshal_strict("a: 1\na: 2\n")