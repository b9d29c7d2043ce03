"""Handle for a single tiapp.xml project file."""

import logging
import os
from pathlib import Path

from lxml import etree

from tiapp.config import load_settings
from tiapp.errors import TiappArgumentError, TiappNotFoundError, TiappParseError
from tiapp.locator import TIAPP_FILENAME, find_tiapp

logger = logging.getLogger(__name__)


def _validate_path(path) -> str | None:
    """Return path as a string, or None when it was omitted or empty.

    os.PathLike values such as pathlib.Path are accepted and converted with
    os.fspath; anything else that is not a string is rejected.
    """
    if path is None:
        return None
    if not isinstance(path, (str, os.PathLike)):
        raise TiappArgumentError(
            "Bad argument. If defined, path must be a string.", path
        )
    return os.fspath(path) or None


class Tiapp:
    """
    A tiapp.xml file and its parsed XML document.

    Create one from an explicit path, or with no arguments to search the
    current directory and its parents for a tiapp.xml:

        tiapp = Tiapp()
        tiapp = Tiapp("/path/to/tiapp.xml")

    If no file is found the handle is left empty (``path`` and ``doc`` are
    None) and can be populated later with :meth:`load` or :meth:`parse`.

    Args:
        path: Path to the tiapp.xml file to load. If omitted, :meth:`find`
            is used to locate one.
        strict: Raise TiappParseError on malformed XML instead of letting
            the parser recover. Defaults to the ``strict`` setting from
            .tiapp.toml or the TIAPP_STRICT environment variable.

    Raises:
        TiappArgumentError: If path is defined but not a string or os.PathLike
        TiappNotFoundError: If an explicit path does not exist
    """

    def __init__(self, path: str | os.PathLike | None = None, *, strict=None):
        path = _validate_path(path)
        if strict is None:
            strict = load_settings().strict
        self.strict = bool(strict)

        self._path: str | None = None
        self._doc: etree._ElementTree | None = None

        path = path or self.find()
        if path:
            self.load(path)

    @property
    def path(self) -> str | None:
        """Path to the loaded tiapp.xml. Only :meth:`load` changes it."""
        return self._path

    @property
    def doc(self) -> etree._ElementTree | None:
        """lxml element tree produced by the last successful :meth:`parse`."""
        return self._doc

    # Long-form alias
    document = doc

    @property
    def root(self) -> etree._Element | None:
        """Root element of the document, or None before the first parse."""
        if self._doc is None:
            return None
        return self._doc.getroot()

    def find(self, start_path: str | os.PathLike | None = None) -> str | None:
        """
        Determine the location of the tiapp.xml file.

        Searches the starting directory and every directory above it, in
        order, up to the outermost directory below the filesystem root.

        Args:
            start_path: Directory to start from (defaults to cwd)

        Returns:
            Path to the tiapp.xml file, or None if not found
        """
        return find_tiapp(start_path)

    def load(self, path: str | os.PathLike | None = None) -> "Tiapp":
        """
        Read and parse a tiapp.xml file, replacing the current path and document.

        When path is omitted the file is located again with :meth:`find`;
        the previously loaded path is not reused.

        Args:
            path: Path to the tiapp.xml file

        Returns:
            This Tiapp object

        Raises:
            TiappArgumentError: If path is defined but not a string or os.PathLike
            TiappNotFoundError: If no file was found or path does not exist
            TiappParseError: If the file contents cannot be parsed
        """
        path = _validate_path(path) or self.find()
        if not path or not Path(path).is_file():
            raise TiappNotFoundError(f"{TIAPP_FILENAME} not found", path)

        logger.debug("Loading %s", path)
        xml = Path(path).read_text(errors="replace")

        self.parse(xml)
        self._path = path
        return self

    def parse(self, xml: str) -> "Tiapp":
        """
        Parse an XML string and replace the current document with it.

        In lenient mode (the default) the parser recovers from malformed
        markup where it can, so a document may be produced from broken input.
        In strict mode any syntax error raises TiappParseError.

        Args:
            xml: XML string, presumably the contents of a tiapp.xml

        Returns:
            This Tiapp object

        Raises:
            TiappArgumentError: If xml is empty or not a string
            TiappParseError: If no document can be built from xml
        """
        if not isinstance(xml, str) or not xml:
            raise TiappArgumentError("Bad argument. xml must be a string.", xml)

        # The string is already decoded, so ignore any declared encoding
        parser = etree.XMLParser(
            encoding="utf-8", recover=not self.strict, resolve_entities=False
        )
        try:
            root = etree.fromstring(xml.encode("utf-8"), parser)
        except etree.XMLSyntaxError as e:
            raise TiappParseError(f"Invalid XML: {e}", xml) from e

        if root is None:
            raise TiappParseError("Invalid XML: no root element", xml)

        self._doc = root.getroottree()
        return self

    def __repr__(self) -> str:
        tag = self.root.tag if self.root is not None else None
        return f"Tiapp(path={self._path!r}, root={tag!r})"
