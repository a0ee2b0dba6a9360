"""Tests codec JSON — round-trip, types, mode strict/lenient, garde de profondeur."""
import json
import logging

import pytest

from page_content import (
    PageContent, ImageBlock, EmbedBlock, CodeBlock, QuoteBlock, ButtonBlock, HtmlBlock,
    ContentValidationError, to_dict, from_dict, dumps, loads,
)
from conftest import nested_columns


# ── Round-trip ────────────────────────────────────────────────────────────────

def test_round_trip_sample(sample_doc):
    assert loads(dumps(sample_doc)) == sample_doc


def test_round_trip_every_variant(sample_doc):
    sample_doc.blocks.extend([
        EmbedBlock(id="embed", order=6, url="https://youtu.be/x", width=560, height=315.5),
        CodeBlock(id="code", order=7, content="print('x')", language="python"),
        QuoteBlock(id="quote", order=8, content="Citation", citation="Auteur"),
        ButtonBlock(id="btn", order=9, text="Contact", url="/contact", style="primary", align="right"),
        HtmlBlock(id="html", order=10, content="<hr/>"),
    ])
    restored = loads(dumps(sample_doc, indent=2))
    assert restored == sample_doc
    assert isinstance(restored.blocks[6].height, float)
    assert isinstance(restored.blocks[6].width, int)


def test_round_trip_deep_nesting():
    doc = nested_columns(32)
    assert from_dict(to_dict(doc)) == doc


def test_to_dict_uses_wire_names_and_omits_absent(sample_doc):
    data = to_dict(sample_doc)
    assert data["version"] == "1.0"
    image = data["blocks"][1]
    assert image == {"id": "img-1", "order": 1, "type": "image", "url": "a.png", "alt": "Logo"}
    assert data["blocks"][3]["listType"] == "unordered"
    assert data["blocks"][4]["hasHeader"] is True
    assert data["blocks"][2]["columns"][0]["width"] == 50


def test_dumps_keeps_unicode(sample_doc):
    assert "Nos partenaires" in dumps(sample_doc)
    doc = PageContent(blocks=[ImageBlock(id="i", url="é.png")])
    assert "é.png" in dumps(doc)


# ── Champs inconnus ───────────────────────────────────────────────────────────

def _doc_with_extra():
    return {
        "version": "1.0",
        "blocks": [
            {"id": "p", "order": 0, "type": "paragraph", "content": "x", "color": "red"},
            {"id": "c", "order": 1, "type": "columns", "columns": [
                {"width": 100, "gutter": 8, "blocks": [
                    {"id": "i", "order": 0, "type": "image", "url": "a.png", "legacy": True},
                ]},
            ]},
        ],
        "meta": {"author": "x"},
    }


def test_strict_mode_rejects_unknown_fields():
    with pytest.raises(ContentValidationError, match="color"):
        from_dict(_doc_with_extra(), strict=True)


def test_lenient_mode_drops_unknown_fields(caplog):
    with caplog.at_level(logging.WARNING):
        doc = from_dict(_doc_with_extra(), strict=False)
    assert doc.blocks[0].content == "x"
    assert doc.blocks[1].columns[0].blocks[0].url == "a.png"
    assert "color" in caplog.text
    assert "gutter" in caplog.text
    assert "legacy" in caplog.text
    assert "meta" in caplog.text


def test_lenient_mode_still_rejects_unknown_type():
    data = {"version": "1.0", "blocks": [{"id": "v", "order": 0, "type": "video", "url": "x"}]}
    with pytest.raises(ContentValidationError):
        from_dict(data, strict=False)


# ── Entrées invalides ─────────────────────────────────────────────────────────

def test_loads_invalid_json():
    with pytest.raises(ContentValidationError, match="JSON invalide"):
        loads("{not json")


def test_loads_json_nested_beyond_decoder_limit():
    text = '{"version": "1.0", "blocks": ' + "[" * 200000 + "]" * 200000 + "}"
    with pytest.raises(ContentValidationError, match="JSON invalide"):
        loads(text)


@pytest.mark.parametrize("block", [
    {"id": "t", "order": 0, "type": "table", "rows": [["a"]], "hasHeader": "yes"},
    {"id": "s", "order": 0, "type": "spacer", "height": "5"},
    {"id": "h", "order": 0, "type": "heading", "content": "T", "level": "2"},
    {"id": "i", "order": 0, "type": "image", "url": "a.png", "width": "640"},
    {"id": "c", "order": 0, "type": "columns", "columns": [{"width": "50", "blocks": []}]},
    {"id": "p", "order": "0", "type": "paragraph", "content": "x"},
])
def test_values_of_wrong_type_are_not_coerced(block):
    with pytest.raises(ContentValidationError, match="Document invalide"):
        loads(json.dumps({"version": "1.0", "blocks": [block]}))


def test_numbers_keep_exact_type():
    doc = loads(json.dumps({"version": "1.0", "blocks": [
        {"id": "e", "order": 0, "type": "embed", "url": "https://youtu.be/x", "width": 560, "height": 315.5},
    ]}))
    assert doc.blocks[0].width == 560 and type(doc.blocks[0].width) is int
    assert doc.blocks[0].height == 315.5


def test_from_dict_requires_object():
    with pytest.raises(ContentValidationError):
        from_dict([1, 2, 3])


def test_loads_validates_version():
    text = json.dumps({"version": "0.1", "blocks": []})
    with pytest.raises(ContentValidationError, match="Version"):
        loads(text)
    assert loads(text, validate=False).version == "0.1"


def test_loads_rejects_duplicate_ids():
    text = json.dumps({"version": "1.0", "blocks": [
        {"id": "a", "order": 0, "type": "spacer", "height": 8},
        {"id": "a", "order": 1, "type": "spacer", "height": 8},
    ]})
    with pytest.raises(ContentValidationError, match="dupliqué"):
        loads(text)


def test_raw_depth_guard_before_model_validation():
    # Profondeur bien au-delà de la pile Python : la garde itérative doit couper avant pydantic
    node = {"id": "leaf", "order": 0, "type": "spacer", "height": 1}
    for level in range(5000):
        node = {"id": f"c{level}", "order": 0, "type": "columns",
                "columns": [{"width": 100, "blocks": [node]}]}
    with pytest.raises(ContentValidationError, match="Profondeur") as exc:
        from_dict({"version": "1.0", "blocks": [node]})
    assert len(exc.value.path) == 32 * 2 + 1
