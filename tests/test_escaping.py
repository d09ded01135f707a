import pytest
from delimited_name.escaping import (
    DEFAULT_DELIMITER,
    ESCAPE_CHARACTER,
    has_dangling_escape,
    has_unmasked_delimiter,
    is_valid_delimiter,
    join,
    mask,
    split,
    to_data_component,
    unmask,
)


def test_constants():
    assert DEFAULT_DELIMITER == "."
    assert ESCAPE_CHARACTER == "\\"


def test_mask_escapes_delimiter_and_escape():
    assert mask("a.b") == r"a\.b"
    assert mask("a\\b") == r"a\\b"
    assert mask("a#b.c", "#") == r"a\#b.c"
    assert mask("") == ""


def test_unmask_removes_masking():
    assert unmask(r"a\.b") == "a.b"
    assert unmask(r"a\\b") == "a\\b"
    assert unmask(r"a\#b", "#") == "a#b"


def test_unmask_keeps_unknown_escape_sequences():
    # "\b" is not a masked delimiter or escape, stays as is
    assert unmask(r"a\.b\b") == r"a.b\b"
    # Masking for another delimiter is not ours to strip
    assert unmask(r"a\.b", "#") == r"a\.b"
    # Trailing lone escape is literal
    assert unmask("a\\") == "a\\"


def test_unmask_scans_left_to_right():
    # Escaped backslash followed by escaped dot
    assert unmask(r"\\\.") == r"\."
    assert unmask(r"\\\\") == "\\\\"


def test_to_data_component_remasks_for_default_delimiter():
    assert to_data_component("a.b", "#") == r"a\.b"
    assert to_data_component(r"a\#b", "#") == "a#b"
    assert to_data_component(r"a\\b", "#") == r"a\\b"
    assert to_data_component(r"a\.b", ".") == r"a\.b"


def test_split_empty_is_one_empty_component():
    assert split("") == [""]


def test_split_on_unescaped_delimiters():
    assert split("oss.cs.fau.de") == ["oss", "cs", "fau", "de"]
    assert split("a#b.c", "#") == ["a", "b.c"]
    assert split("a.") == ["a", ""]
    assert split(".") == ["", ""]


def test_split_preserves_masking():
    assert split(r"a\.b.c") == [r"a\.b", "c"]
    assert split(r"a\.b\b.c.") == [r"a\.b\b", "c", ""]
    assert split(r"a\\.b") == [r"a\\", "b"]


@pytest.mark.parametrize("components, delimiter", [
    (["a", "b", "c"], "."),
    ([r"a\.b", r"c\\", ""], "."),
    ([r"x\#y", "z.w"], "#"),
    (["", "", ""], "/"),
])
def test_split_join_round_trip(components, delimiter):
    assert split(join(components, delimiter), delimiter) == components


def test_has_unmasked_delimiter():
    assert has_unmasked_delimiter("a.b", ".")
    assert not has_unmasked_delimiter(r"a\.b", ".")
    assert has_unmasked_delimiter(r"a\\.b", ".")
    assert not has_unmasked_delimiter("a.b", "#")


def test_has_dangling_escape():
    assert has_dangling_escape("b\\")
    assert has_dangling_escape("b\\\\\\")
    assert not has_dangling_escape(r"b\\")
    assert not has_dangling_escape(r"a\.b")
    assert not has_dangling_escape("")


def test_is_valid_delimiter():
    assert is_valid_delimiter(".")
    assert is_valid_delimiter("#")
    assert not is_valid_delimiter("")
    assert not is_valid_delimiter("::")
    assert not is_valid_delimiter("\\")
    assert not is_valid_delimiter(None)
