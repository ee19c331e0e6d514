from __future__ import annotations

from typing import Dict, Tuple

# Column groups of the FDIC BankFind institutions file. Column meanings follow the
# FDIC "institutions definitions" document; see README.md for the reference table.

ID_COLUMN: str = "CERT"

# MM/DD/YYYY in the raw feed. ENDEFYMD carries DATE_SENTINEL for institutions that
# are still open; it becomes NaT and is counted apart from parse failures.
DATE_COLUMNS: Tuple[str, ...] = (
    "ESTYMD",
    "ENDEFYMD",
    "DATEUPDT",
    "INSDATE",
    "EFFDATE",
    "PROCDATE",
    "RUNDATE",
    "REPDTE",
    "RISDATE",
)

# "not applicable" placeholder, e.g. ENDEFYMD of an institution that is still open
DATE_SENTINEL: str = "12/31/9999"

# Non-standard date strings with a 12/31/9999 "not applicable" sentinel: kept as text.
SENTINEL_TEXT_COLUMNS: Tuple[str, ...] = (
    "CFPBEFFDTE",
    "CFPBENDDTE",
)

CHANGE_CODE_COLUMNS: Tuple[str, ...] = tuple(f"CHANGEC{i}" for i in range(1, 16))

BOOLEAN_COLUMNS: Tuple[str, ...] = (
    "ACTIVE",
    "INACTIVE",
    "CONSERVE",
    "DENOVO",
    "FEDCHRTR",
    "STCHRTR",
    "INSFDIC",
    "INSBIF",
    "INSCOML",
    "INSDIF",
    "INSSAIF",
    "INSSAVE",
    "MUTUAL",
    "IBA",
    "OAKAR",
    "SASSER",
    "CFPBFLAG",
    "CBSA_METRO_FLG",
    "CBSA_MICRO_FLG",
    "CBSA_DIV_FLG",
    "CSA_FLG",
    "SUBCHAPS",
    "FORM31",
)

# Open vocabularies: tagged as category for storage, values left untouched.
OPEN_CATEGORY_COLUMNS: Tuple[str, ...] = (
    "STNAME",
    "STALP",
    "CITY",
    "COUNTY",
    "CBSA",
    "CBSA_NO",
    "CBSA_METRO",
    "CBSA_METRO_NAME",
    "CBSA_DIV",
    "CBSA_DIV_NO",
    "CSA",
    "CSA_NO",
    "MSA",
    "MSA_NO",
    "CMSA",
    "CMSA_NO",
    "REGAGNT",
    "REGAGENT2",
    "CHRTAGNT",
    "INSAGNT1",
    "INSAGNT2",
    "FDICSUPV",
    "FLDOFF",
    "OCCDIST",
    "OTSREGNM",
    "SPECGRPN",
    "INSTCRCD",
    "CLCODE",
    "QBPRCOML",
)

# Closed vocabularies, recoded through core/data/category_labels.csv.
CODED_COLUMNS: Tuple[str, ...] = (
    "BKCLASS",
    "FED",
    "FDICREGN",
    "FDICDBS",
    "OTSDIST",
)

# FDICDBS (region office code) and FDICREGN (region name) partition the rows
# identically; the code column is dropped once both are recoded and compared.
REDUNDANT_COLUMNS: Tuple[str, str] = ("FDICREGN", "FDICDBS")

# Columns pandas' default inference gets wrong on the raw file.
DTYPE_OVERRIDES: Dict[str, str] = {
    # codes that look numeric
    "FED": "string",
    "FDICDBS": "string",
    "OTSDIST": "string",
    "OCCDIST": "string",
    "CLCODE": "string",
    "SPECGRPN": "string",
    "QBPRCOML": "string",
    # mostly blank -> float, or mostly 0/1 -> bool, but really codes
    "INSAGNT2": "string",
    "REGAGENT2": "string",
    **{c: "string" for c in CHANGE_CODE_COLUMNS},
    # leading zeros
    "ZIP": "string",
    "STCNTY": "string",
    "STNUM": "string",
    "CBSA_NO": "string",
    "CBSA_DIV_NO": "string",
    "CSA_NO": "string",
    "MSA_NO": "string",
    "CMSA_NO": "string",
    # sentinel strings
    **{c: "string" for c in SENTINEL_TEXT_COLUMNS},
    # identifiers with blanks
    "CERT": "Int64",
    "NEWCERT": "Int64",
    "ULTCERT": "Int64",
    "PARCERT": "Int64",
    "CERTCONS": "Int64",
    "FED_RSSD": "Int64",
    "RSSDHCR": "Int64",
    "UNINUM": "Int64",
    "DOCKET": "Int64",
}

KNOWN_COLUMNS: frozenset = frozenset(
    (ID_COLUMN,)
    + DATE_COLUMNS
    + SENTINEL_TEXT_COLUMNS
    + CHANGE_CODE_COLUMNS
    + BOOLEAN_COLUMNS
    + OPEN_CATEGORY_COLUMNS
    + CODED_COLUMNS
    + tuple(DTYPE_OVERRIDES)
    + (
        "NAME",
        "ADDRESS",
        "WEBADDR",
        "NAMEHCR",
        "CITYHCR",
        "STALPHCR",
        "ASSET",
        "DEP",
        "DEPDOM",
        "EQ",
        "NETINC",
        "NETINCQ",
        "OFFDOM",
        "OFFFOR",
        "OFFOA",
        "ROA",
        "ROAPTX",
        "ROAPTXQ",
        "ROAQ",
        "ROE",
        "ROEQ",
        "HCTMULT",
        "STMULT",
        "INSTAG",
        "SPECGRP",
        "TRACT",
        "CB",
        "SUPRV_FD",
        "LAW_SASSER_FLG",
        "REPDCD",
    )
)
