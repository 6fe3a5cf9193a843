import pytest

from ws_ts_gen.pipeline.errors import SchemaStructureError
from ws_ts_gen.pipeline.schema_ast import REQUIRED_SECTIONS, validate_document


def test_valid_document_is_returned_unchanged(ping_pong_document):
    assert validate_document(ping_pong_document) is ping_pong_document


@pytest.mark.parametrize("section", REQUIRED_SECTIONS)
def test_missing_section_is_reported(ping_pong_document, section):
    del ping_pong_document[section]

    with pytest.raises(SchemaStructureError) as exc_info:
        validate_document(ping_pong_document)
    assert exc_info.value.section == section


def test_first_missing_section_wins(ping_pong_document):
    del ping_pong_document["channels"]
    del ping_pong_document["info"]

    with pytest.raises(SchemaStructureError) as exc_info:
        validate_document(ping_pong_document)
    assert exc_info.value.section == "info"


def test_empty_version_counts_as_missing(ping_pong_document):
    ping_pong_document["asyncapi"] = ""

    with pytest.raises(SchemaStructureError, match="Missing asyncapi section"):
        validate_document(ping_pong_document)


def test_null_components_counts_as_missing(ping_pong_document):
    ping_pong_document["components"] = None

    with pytest.raises(SchemaStructureError, match="components"):
        validate_document(ping_pong_document)


def test_non_mapping_document():
    with pytest.raises(SchemaStructureError) as exc_info:
        validate_document(["asyncapi"])
    assert exc_info.value.section == "document"
