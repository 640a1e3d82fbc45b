"""Tests for turning raw model output into Suggestion objects."""

import json

from writewell.services.analysis import analyze_text
from writewell.services.postprocess import coerce_suggestion, parse_suggestions, strip_code_fences


def _dump(suggestions):
    return [s.model_dump(by_alias=True) for s in suggestions]


def test_strip_code_fences():
    assert strip_code_fences('```json\n[{"id": "1"}]\n```') == '[{"id": "1"}]'
    assert strip_code_fences("```\n[]\n```") == "[]"
    assert strip_code_fences("  []  ") == "[]"


def test_bogus_type_gets_defaults():
    out = _dump(parse_suggestions('[{"type": "bogus"}]'))

    assert out == [
        {
            "id": "1",
            "type": "improvement",
            "title": "",
            "description": "",
            "original": "",
            "suggested": "",
        }
    ]


def test_well_formed_suggestion_is_unchanged():
    item = {
        "id": "x5",
        "type": "grammar",
        "title": "t",
        "description": "d",
        "original": "o",
        "suggested": "s",
    }
    assert _dump(parse_suggestions(json.dumps([item]))) == [item]


def test_fenced_output_is_parsed():
    raw = '```json\n[{"id": "a", "type": "tone", "title": "Too casual"}]\n```'
    out = parse_suggestions(raw)

    assert len(out) == 1
    assert out[0].kind == "tone"
    assert out[0].title == "Too casual"


def test_missing_ids_follow_position():
    out = parse_suggestions('[{"id": "keep"}, {}, {"id": ""}, {"id": 0}]')
    assert [s.id for s in out] == ["keep", "2", "3", "4"]


def test_numeric_id_is_stringified():
    assert parse_suggestions('[{"id": 7}]')[0].id == "7"


def test_invalid_json_is_empty(caplog):
    assert parse_suggestions("Sure! Here are some suggestions: ...") == []
    assert "non-JSON" in caplog.text


def test_non_list_is_empty():
    assert parse_suggestions('{"suggestions": [{"id": "1"}]}') == []
    assert parse_suggestions('"just a string"') == []
    assert parse_suggestions("null") == []


def test_empty_output_is_empty():
    assert parse_suggestions("") == []


def test_non_object_element_is_coerced():
    s = coerce_suggestion("not an object", 2)
    assert s.id == "3"
    assert s.kind == "improvement"
    assert s.original_snippet == ""


def test_pathologically_nested_json_is_empty(caplog):
    raw = "[" * 200000 + "]" * 200000
    assert parse_suggestions(raw) == []
    assert "non-JSON" in caplog.text


async def test_analyze_survives_nested_json(fake_llm_cls):
    llm = fake_llm_cls(json_output="[" * 200000 + "]" * 200000)
    assert await analyze_text(llm, "text") == []
