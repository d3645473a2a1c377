"""Load an unattend answer file into an lxml document tree."""

from __future__ import annotations

import logging
from pathlib import Path

from lxml import etree

from unattend_validator.domain.errors import UnattendParseError

logger = logging.getLogger(__name__)


def _make_parser() -> etree.XMLParser:
    # Strict parse without recovery or entity expansion
    return etree.XMLParser(recover=False, resolve_entities=False, no_network=True)


def load_document(path: Path | str) -> etree._ElementTree:
    """Read and parse an XML file.

    Parameters
    ----------
    path : Path | str
        Path to the unattend.xml file.

    Returns
    -------
    etree._ElementTree
        The parsed, read-only document.

    Raises
    ------
    UnattendParseError
        If the file cannot be read or is not well-formed XML.
    """
    file_path = Path(path)
    try:
        content = file_path.read_bytes()
    except OSError as exc:
        logger.warning("Unable to read %s: %s", file_path, exc)
        raise UnattendParseError(f"Unable to read file: {exc}") from exc

    try:
        root = etree.fromstring(content, _make_parser())
    except etree.XMLSyntaxError as exc:
        logger.warning("XML syntax error in %s: %s", file_path, exc)
        raise UnattendParseError(f"XML syntax error: {exc}", line=exc.lineno) from exc

    logger.debug("Parsed %s (root <%s>)", file_path, etree.QName(root).localname)
    return root.getroottree()
