"""Tests for Unity YAML document loading."""

import pytest

from salvage_rewards.core.document import load_documents, load_first_document
from salvage_rewards.core.errors import DocumentParseError, EmptyDocumentError

from conftest import UNITY_HEADER, make_asset_text


class TestLoadDocuments:
    """Test parsing of Unity YAML streams."""

    def test_unity_tags_build_plain_mappings(self) -> None:
        """Test that !u! class-id tags are accepted and ignored."""
        document = load_first_document(make_asset_text())
        assert isinstance(document, dict)
        assert document["MonoBehaviour"]["m_Name"] == "SALV_CopperWire"

    def test_flow_mappings_and_scalar_types(self) -> None:
        """Test that nested values keep their YAML types."""
        monobehaviour = load_first_document(make_asset_text())["MonoBehaviour"]
        assert monobehaviour["m_Script"]["type"] == 3
        assert monobehaviour["m_Data"]["m_Weight"] == 0.25
        assert monobehaviour["m_EditorClassIdentifier"] is None

    def test_stripped_marker_is_ignored(self) -> None:
        """Test headers carrying Unity's "stripped" marker."""
        text = UNITY_HEADER.replace("&11400000", "&11400000 stripped") + "MonoBehaviour:\n  m_Name: X\n"
        assert load_first_document(text) == {"MonoBehaviour": {"m_Name": "X"}}

    def test_tag_handle_declared_once_for_many_documents(self) -> None:
        """Test that later documents may use !u! without their own %TAG line."""
        text = (
            UNITY_HEADER
            + "MonoBehaviour:\n  m_Name: First\n"
            + "--- !u!114 &11400002\n"
            + "MonoBehaviour:\n  m_Name: Second\n"
        )
        documents = load_documents(text)
        assert [d["MonoBehaviour"]["m_Name"] for d in documents] == ["First", "Second"]

    def test_crlf_line_endings(self) -> None:
        """Test files saved with Windows line endings."""
        text = make_asset_text().replace("\n", "\r\n")
        assert load_first_document(text)["MonoBehaviour"]["m_Name"] == "SALV_CopperWire"

    def test_plain_yaml_without_header(self) -> None:
        """Test that untagged YAML loads as well."""
        assert load_first_document("MonoBehaviour:\n  m_Name: Plain\n") == {
            "MonoBehaviour": {"m_Name": "Plain"}
        }

    def test_first_document_only(self) -> None:
        """Test that extra documents are ignored by load_first_document."""
        text = "---\na: 1\n---\na: 2\n"
        assert load_first_document(text) == {"a": 1}

    def test_invalid_yaml_raises(self) -> None:
        """Test that malformed YAML is reported with its source."""
        with pytest.raises(DocumentParseError, match="SALV_Broken.asset"):
            load_documents("MonoBehaviour: [unclosed\n", "SALV_Broken.asset")

    def test_invalid_later_document_raises(self) -> None:
        """Test that the whole stream must parse, not just the first document."""
        with pytest.raises(DocumentParseError):
            load_first_document("---\na: 1\n---\nb: [unclosed\n")

    def test_unknown_tag_raises(self) -> None:
        """Test that non-Unity custom tags are still rejected."""
        with pytest.raises(DocumentParseError):
            load_documents("value: !python/object:os.system ls\n")

    def test_empty_stream(self) -> None:
        """Test that a stream with no documents is an error."""
        assert load_documents("") == []
        with pytest.raises(EmptyDocumentError):
            load_first_document("# only a comment\n", "SALV_Empty.asset")

    def test_null_document_is_not_empty(self) -> None:
        """Test that an explicit but empty document still counts."""
        assert load_first_document("---\n") is None


class TestScalarTyping:
    """Test how plain scalars are typed."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1e-7", 1e-7),
            ("2e3", 2000.0),
            ("1.5", 1.5),
            ("-.inf", float("-inf")),
            ("42", 42),
            ("+42", 42),
            ("0x1F", 31),
            ("0o17", 15),
            ("9223372036854775807", 9223372036854775807),
            ("9223372036854775808", 9.223372036854776e18),
            ("0x8000000000000000", "0x8000000000000000"),
            ("true", True),
            ("false", False),
            ("~", None),
            ("null", None),
            ("", None),
        ],
    )
    def test_typed_scalars(self, text: str, expected: object) -> None:
        """Test scalars that load as numbers, booleans or null."""
        value = load_first_document(f"value: {text}\n")["value"]
        assert value == expected
        assert type(value) is type(expected)

    @pytest.mark.parametrize(
        "text",
        ["yes", "No", "ON", "off", "True", "FALSE", "Null", "1:30", "1_000", "0b101", "2001-12-14", "="],
    )
    def test_yaml11_forms_stay_strings(self, text: str) -> None:
        """Test that YAML 1.1-only forms are left as strings."""
        assert load_first_document(f"value: {text}\n") == {"value": text}

    def test_merge_key_is_plain_key(self) -> None:
        """Test that "<<" is an ordinary mapping key."""
        assert load_first_document("<<: 1\n") == {"<<": 1}
