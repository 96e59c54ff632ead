import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from change_case_cli.core.utils import case_convert
from change_case_cli.core.utils.case_convert import split_words


def test_split_on_separators():
    assert split_words("test string") == ["test", "string"]
    assert split_words("@foo BAR") == ["foo", "BAR"]
    assert split_words("foo_bar-baz.qux/quux") == ["foo", "bar", "baz", "qux", "quux"]


def test_split_on_case_boundaries():
    assert split_words("fooBarBaz") == ["foo", "Bar", "Baz"]
    assert split_words("XMLHttpRequest_v2") == ["XML", "Http", "Request", "v2"]
    assert split_words("version1Beta") == ["version1", "Beta"]


def test_split_without_words():
    assert split_words("") == []
    assert split_words("@@ --- __") == []


def test_split_keeps_unicode_letters():
    assert split_words("héllo wörld") == ["héllo", "wörld"]


def test_transforms_on_plain_words():
    value = "test string"
    assert case_convert.camel_case(value) == "testString"
    assert case_convert.capital_case(value) == "Test String"
    assert case_convert.constant_case(value) == "TEST_STRING"
    assert case_convert.dot_case(value) == "test.string"
    assert case_convert.kebab_case(value) == "test-string"
    assert case_convert.no_case(value) == "test string"
    assert case_convert.pascal_case(value) == "TestString"
    assert case_convert.pascal_snake_case(value) == "Test_String"
    assert case_convert.path_case(value) == "test/string"
    assert case_convert.sentence_case(value) == "Test string"
    assert case_convert.snake_case(value) == "test_string"
    assert case_convert.train_case(value) == "Test-String"


def test_transforms_from_mixed_input():
    assert case_convert.snake_case("fooBAR baz") == "foo_bar_baz"
    assert case_convert.camel_case("Foo_BAR") == "fooBar"
    assert case_convert.camel_case("héllo wörld") == "hélloWörld"


def test_transforms_without_words_return_empty():
    for fn in (case_convert.camel_case, case_convert.pascal_case, case_convert.sentence_case, case_convert.kebab_case):
        assert fn("!!!") == ""


def test_camel_and_pascal_separate_leading_digits():
    assert case_convert.camel_case("version 1") == "version_1"
    assert case_convert.pascal_case("version 1") == "Version_1"
    assert case_convert.pascal_case("version 1 beta") == "Version_1Beta"
    assert case_convert.camel_case("version1 beta") == "version1Beta"
    assert case_convert.camel_case("1st place") == "1stPlace"
