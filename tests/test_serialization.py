import json

import pytest

from ontology_api.serialization import dumps


@pytest.mark.parametrize(
    "value",
    [
        {"success": True, "class": "Trait", "subclasses": [{"id": "a", "name": "Ä \"q\"", "subclasses": []}]},
        [],
        {},
        [1, 2.5, None, False, "x"],
        "plain",
    ],
)
@pytest.mark.parametrize("indent", [None, 0, 2])
def test_dumps_matches_json_module(value, indent):
    separators = (",", ":") if indent is None else (",", ": ")

    expected = json.dumps(value, indent=indent, separators=separators, ensure_ascii=False)

    assert dumps(value, indent=indent, ensure_ascii=False) == expected


def test_dumps_escapes_non_ascii_by_default():
    assert dumps({"name": "é"}) == '{"name":"\\u00e9"}'


def test_dumps_handles_nesting_beyond_recursion_limit():
    depth = 5000
    value: list = []
    for _ in range(depth):
        value = [value]

    assert dumps(value) == "[" * (depth + 1) + "]" * (depth + 1)
