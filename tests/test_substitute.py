import pytest

from tmplkit.substitute import init_replacers, substitute


def test_simple_regex():
    replacers = init_replacers(r"/\b(\w{2})\b/$1$1", r"/\b(\w)\b/-$1-")
    assert substitute("This is a test", *replacers) == "This isis -a- test"


def test_delete_lines():
    replacers = init_replacers("/^#.*$/d")
    assert substitute("a\n# c\nb\n", *replacers) == "a\nb\n"


def test_named_group_and_dollar():
    replacers = init_replacers("|(?P<x>b)|${x}$$")
    assert substitute("abc", *replacers) == "ab$c"


@pytest.mark.parametrize("bad", ["", "/onlyone", "//x"])
def test_bad_replacer(bad):
    with pytest.raises(ValueError):
        init_replacers(bad)