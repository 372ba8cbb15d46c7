"""PDB file parser.

Reads a PDB file from a path (plain or gzip-compressed), a file-like
object, or in-memory text/bytes, runs the record dispatcher over it and
wraps the result in a :class:`PdbFile`.
"""

from __future__ import annotations

import gzip
import logging
from pathlib import Path
from typing import BinaryIO, Optional, TextIO, Union

from pdbrecords.config import ParserConfig
from pdbrecords.dispatcher import RecordDispatcher, decode_input
from pdbrecords.pdb_file import PdbFile


logger = logging.getLogger(__name__)


class PdbParser:
    """Parser for PDB format files.

    Only the records modeled by the configured grammars are captured;
    parsing stops at the first record no grammar accepts (typically the
    coordinate section).
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        """Initialize the parser.

        Args:
            config: Parser configuration (defaults to ``ParserConfig()``)
        """
        self.config = config or ParserConfig()
        self.dispatcher = RecordDispatcher(self.config)

    def parse(self, file_or_path: Union[str, Path, TextIO, BinaryIO]) -> PdbFile:
        """Parse a PDB file.

        Args:
            file_or_path: Path to a ``.pdb``/``.ent`` file (optionally
                ``.gz``) or a file-like object

        Returns:
            Parsed PdbFile
        """
        content = self._read_file(file_or_path)
        return self.parse_string(content)

    def parse_string(self, content: Union[str, bytes]) -> PdbFile:
        """Parse PDB text already held in memory."""
        result = self.dispatcher.parse(decode_input(content))
        return PdbFile(result.records, remaining=result.remaining)

    def _read_file(self, file_or_path: Union[str, Path, TextIO, BinaryIO]) -> Union[str, bytes]:
        """Read file content from path or file object."""
        if isinstance(file_or_path, (str, Path)):
            path = Path(file_or_path)
            logger.debug(f"Reading PDB file {path}")
            if path.suffix == ".gz":
                with gzip.open(path, "rb") as f:
                    return f.read()
            else:
                with open(path, "rb") as f:
                    return f.read()
        else:
            return file_or_path.read()
