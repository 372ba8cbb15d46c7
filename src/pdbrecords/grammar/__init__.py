"""Record grammars for the PDB flat-file format.

This package provides:
- The primitive lexicon shared by all grammars
- Continuation folding for multi-line records
- The COMPND/SOURCE token grammar
- One grammar per supported record type, each callable as
  ``parser(text, config=None) -> (record, remaining_text)``
"""

from pdbrecords.grammar.base import ContinuationGrammar, RecordGrammar, SingleLineGrammar
from pdbrecords.grammar.compound import (
    author_list_parser,
    author_record_parser,
    cmpnd_record_parser,
    expdta_record_parser,
    keywds_record_parser,
    revdat_record_parser,
    source_record_parser,
)
from pdbrecords.grammar.continuation import (
    Continuation,
    ContinuationFolder,
    ContinuationLayout,
    fold_remainders,
)
from pdbrecords.grammar.journal import (
    jrnl_auth_record_parser,
    jrnl_doi_record_parser,
    jrnl_edit_record_parser,
    jrnl_pmid_record_parser,
    jrnl_publ_record_parser,
    jrnl_ref_record_parser,
    jrnl_refn_record_parser,
    jrnl_titl_record_parser,
)
from pdbrecords.grammar.lines import SourceLines, split_lines
from pdbrecords.grammar.primary import (
    dbref1_record_parser,
    dbref2_record_parser,
    dbref_pair_record_parser,
    dbref_record_parser,
    modres_record_parser,
    seqadv_record_parser,
    seqres_record_parser,
)
from pdbrecords.grammar.remark import remark_record_parser
from pdbrecords.grammar.title import (
    caveat_record_parser,
    header_record_parser,
    mdltyp_record_parser,
    nummdl_record_parser,
    obslte_record_parser,
    split_record_parser,
    sprsde_record_parser,
    title_record_parser,
)
from pdbrecords.grammar.tokens import parse_token_list, token_parser, tokens_parser

# Every grammar, keyed by the name used in ParserConfig.record_priority.
GRAMMARS = {
    grammar.name: grammar
    for grammar in (
        header_record_parser,
        obslte_record_parser,
        title_record_parser,
        split_record_parser,
        caveat_record_parser,
        sprsde_record_parser,
        cmpnd_record_parser,
        source_record_parser,
        keywds_record_parser,
        expdta_record_parser,
        nummdl_record_parser,
        mdltyp_record_parser,
        author_record_parser,
        revdat_record_parser,
        jrnl_auth_record_parser,
        jrnl_titl_record_parser,
        jrnl_edit_record_parser,
        jrnl_refn_record_parser,
        jrnl_ref_record_parser,
        jrnl_publ_record_parser,
        jrnl_pmid_record_parser,
        jrnl_doi_record_parser,
        remark_record_parser,
        dbref_record_parser,
        dbref_pair_record_parser,
        seqadv_record_parser,
        seqres_record_parser,
        modres_record_parser,
        dbref1_record_parser,
        dbref2_record_parser,
    )
}

__all__ = [
    "GRAMMARS",
    "Continuation",
    "ContinuationFolder",
    "ContinuationGrammar",
    "ContinuationLayout",
    "RecordGrammar",
    "SingleLineGrammar",
    "SourceLines",
    "author_list_parser",
    "author_record_parser",
    "caveat_record_parser",
    "cmpnd_record_parser",
    "dbref1_record_parser",
    "dbref2_record_parser",
    "dbref_pair_record_parser",
    "dbref_record_parser",
    "expdta_record_parser",
    "fold_remainders",
    "header_record_parser",
    "jrnl_auth_record_parser",
    "jrnl_doi_record_parser",
    "jrnl_edit_record_parser",
    "jrnl_pmid_record_parser",
    "jrnl_publ_record_parser",
    "jrnl_ref_record_parser",
    "jrnl_refn_record_parser",
    "jrnl_titl_record_parser",
    "keywds_record_parser",
    "mdltyp_record_parser",
    "modres_record_parser",
    "nummdl_record_parser",
    "obslte_record_parser",
    "parse_token_list",
    "remark_record_parser",
    "revdat_record_parser",
    "seqadv_record_parser",
    "seqres_record_parser",
    "source_record_parser",
    "split_lines",
    "split_record_parser",
    "sprsde_record_parser",
    "title_record_parser",
    "token_parser",
    "tokens_parser",
]
