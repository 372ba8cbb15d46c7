"""Pytest configuration and fixtures for pdbrecords tests."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest


# =============================================================================
# Sample PDB Text Fixtures
# =============================================================================


@pytest.fixture
def ejg_header() -> str:
    """Title section and primary citation of entry 1EJG (crambin)."""
    return """HEADER    PLANT PROTEIN                           02-MAR-00   1EJG
TITLE     CRAMBIN AT ULTRAHIGH RESOLUTION VALENCE ELECTRON DENSITY
COMPND    MOL_ID: 1;
COMPND   2 MOLECULE: CRAMBIN (PRO22,SER22/LEU25,ILE25);
COMPND   3 CHAIN: A;
COMPND   4 FRAGMENT: CRAMBIN
SOURCE    MOL_ID: 1;
SOURCE   2 ORGANISM_SCIENTIFIC: CRAMBE HISPANICA SUBSP ABYSSINICA;
SOURCE   3 STRAIN: SUBSP ABYSSINICA
KEYWDS    VALENCE ELECTRON DENSITY, MULTI-SUBSTATE, MULTIPOLE REFINEMENT, PLANT
KEYWDS   2 PROTEIN
AUTHOR    C.JELSCH,M.M.TEETER,V.LAMZIN,V.PICHON-LESME,B.BLESSING,C.LECOMTE
JRNL        AUTH   C.JELSCH,M.M.TEETER,V.LAMZIN,V.PICHON-PESME,R.H.BLESSING,
JRNL        AUTH 2 C.LECOMTE
JRNL        TITL   ACCURATE PROTEIN CRYSTALLOGRAPHY AT ULTRA-HIGH RESOLUTION:
JRNL        TITL 2 VALENCE ELECTRON DISTRIBUTION IN CRAMBIN.
JRNL        REF    PROC.NATL.ACAD.SCI.USA        V.  97  3171 2000
JRNL        REFN                   ISSN 0027-8424
JRNL        PMID   10737790
JRNL        DOI    10.1073/PNAS.97.7.3171
"""


@pytest.fixture
def revdat_1bxo() -> str:
    """REVDAT history of entry 1BXO, including a continued modification."""
    return """REVDAT   7   13-JUL-11 1BXO    1       VERSN
REVDAT   6   24-FEB-09 1BXO    1       VERSN
REVDAT   5   01-APR-03 1BXO    1       JRNL
REVDAT   4   26-SEP-01 1BXO    3       ATOM   CONECT
REVDAT   3   24-JAN-01 1BXO    3       ATOM
REVDAT   2   22-DEC-99 1BXO    4       HEADER COMPND REMARK JRNL
REVDAT   2 2                           ATOM   SOURCE SEQRES
REVDAT   1   14-OCT-98 1BXO    0
"""


@pytest.fixture
def hemoglobin_compnd() -> str:
    """COMPND record with list, EC and yes/no tokens."""
    return """COMPND    MOL_ID:  1;
COMPND   2 MOLECULE:  HEMOGLOBIN ALPHA CHAIN;
COMPND   3 CHAIN: A,  C;
COMPND  10 SYNONYM:  DEOXYHEMOGLOBIN BETA CHAIN;
COMPND   4 EC:  3.2.1.14, 3.2.1.17;
COMPND  11 ENGINEERED: YES;
COMPND  12 MUTATION:  NO
"""


@pytest.fixture
def insulin_primary() -> str:
    """REMARK, DBREF, SEQADV, SEQRES and MODRES records followed by HET."""
    return """REMARK   2
REMARK   2 RESOLUTION.    1.74 ANGSTROMS.
REMARK   3
DBREF  2JHQ A    1   226  UNP    Q9KPK8   UNG_VIBCH        1    226
SEQADV 2OKW LEU A   64  UNP  P0A6F5    MET    64 ENGINEERED MUTATION
SEQRES   1 A   21  GLY ILE VAL GLU GLN CYS CYS THR SER ILE CYS SER LEU
SEQRES   2 A   21  TYR GLN LEU GLU ASN TYR CYS ASN
SEQRES   1 B   30  PHE VAL ASN GLN HIS LEU CYS GLY SER HIS LEU VAL GLU
SEQRES   2 B   30  ALA LEU TYR LEU VAL CYS GLY GLU ARG GLY PHE PHE TYR
SEQRES   3 B   30  THR PRO LYS THR
MODRES 2R0L ASN A   74  ASN  GLYCOSYLATION SITE
HET    NAG  A 901      14
"""


@pytest.fixture
def atom_line() -> str:
    """A coordinate record, which no record grammar accepts."""
    return "ATOM      1  N   THR A   1      17.047  14.099   3.625  1.00 13.79           N\n"


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def raise_config():
    """Configuration that raises on unparsable records."""
    from pdbrecords.config import ErrorPolicy, ParserConfig

    return ParserConfig(error_policy=ErrorPolicy.RAISE)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests that parse complete multi-record files"
    )
