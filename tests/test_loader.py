"""Tests for the XML loader."""

import pytest

from unattend_validator.domain.errors import UnattendParseError
from unattend_validator.validators.loader import load_document

from unattend_factory import complete_unattend, write


class TestLoadDocument:
    def test_loads_well_formed_file(self, tmp_path):
        doc = load_document(write(tmp_path, complete_unattend()))
        assert doc.getroot().tag == "{urn:schemas-microsoft-com:unattend}unattend"

    def test_accepts_str_path(self, tmp_path):
        path = write(tmp_path, complete_unattend())
        assert load_document(str(path)).getroot() is not None

    def test_malformed_xml_raises_with_line(self, tmp_path):
        path = write(tmp_path, "<unattend>\n<settings pass='x'>\n</unattend>")
        with pytest.raises(UnattendParseError, match="XML syntax error") as exc_info:
            load_document(path)
        assert exc_info.value.line is not None

    def test_empty_file_is_a_parse_error(self, tmp_path):
        path = write(tmp_path, "")
        with pytest.raises(UnattendParseError):
            load_document(path)

    def test_missing_file_is_a_parse_error(self, tmp_path):
        with pytest.raises(UnattendParseError, match="Unable to read file"):
            load_document(tmp_path / "nope.xml")

    def test_entities_are_not_expanded(self, tmp_path):
        xml = (
            '<?xml version="1.0"?>\n'
            '<!DOCTYPE unattend [<!ENTITY secret SYSTEM "file:///etc/passwd">]>\n'
            "<unattend>&secret;</unattend>"
        )
        doc = load_document(write(tmp_path, xml))
        assert "root:" not in (doc.getroot().text or "")
