"""pdbrecords: strict parser for the Protein Data Bank flat-file format.

This package provides tools for:
- Parsing PDB header, journal and primary-structure records into
  immutable, typed record objects
- Folding multi-line continuation records into logical values
- Parsing COMPND/SOURCE specification tokens
- Querying parsed records by section through a read-only façade
"""

from pdbrecords.config import ErrorPolicy, ParserConfig
from pdbrecords.dispatcher import ParseResult, RecordDispatcher, parse
from pdbrecords.parser import PdbParser
from pdbrecords.pdb_file import PdbFile

__version__ = "0.1.0"
__all__ = [
    "ErrorPolicy",
    "ParseResult",
    "ParserConfig",
    "PdbFile",
    "PdbParser",
    "RecordDispatcher",
    "parse",
    "__version__",
]
