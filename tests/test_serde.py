from types import MappingProxyType

import pytest

from arccid.serde import as_str_object_dict, require_string


def test_as_str_object_dict_normalizes_keys() -> None:
    assert as_str_object_dict(MappingProxyType({1: "a", "b": 2}), field_name="x") == {"1": "a", "b": 2}


@pytest.mark.parametrize("value", [None, [], "text", 1])
def test_as_str_object_dict_rejects_non_mappings(value: object) -> None:
    with pytest.raises(TypeError, match="x must be a mapping"):
        as_str_object_dict(value, field_name="x")


def test_require_string() -> None:
    assert require_string("ok", field_name="x") == "ok"


@pytest.mark.parametrize("value", [None, "", 1, b"bytes"])
def test_require_string_rejects(value: object) -> None:
    with pytest.raises(TypeError, match="x must be a non-empty string"):
        require_string(value, field_name="x")
