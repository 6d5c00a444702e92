"""Validation of postal codes against per-country patterns."""

from __future__ import annotations

import re
from enum import IntEnum

__all__ = ["PostalCodeStatus", "PostalCodeValidator", "is_country_code"]


class PostalCodeStatus(IntEnum):
    """Outcome of validating a postal code."""

    VALID = 0
    UNRECOGNIZED_COUNTRY_CODE = 1
    INVALID_FORMAT = 2

    def __str__(self) -> str:
        return _STATUS_NAMES[self]


_STATUS_NAMES = {
    PostalCodeStatus.VALID: "Valid",
    PostalCodeStatus.UNRECOGNIZED_COUNTRY_CODE: "Unrecognized country code",
    PostalCodeStatus.INVALID_FORMAT: "Invalid format",
}

_COUNTRY_CODES = frozenset(
    """
    AD AE AF AG AI AL AM AO AQ AR AS AT AU AW AX AZ BA BB BD BE BF BG BH BI
    BJ BL BM BN BO BQ BR BS BT BV BW BY BZ CA CC CD CF CG CH CI CK CL CM CN
    CO CR CU CV CW CX CY CZ DE DJ DK DM DO DZ EC EE EG EH ER ES ET FI FJ FK
    FM FO FR GA GB GD GE GF GG GH GI GL GM GN GP GQ GR GS GT GU GW GY HK HM
    HN HR HT HU ID IE IL IM IN IO IQ IR IS IT JE JM JO JP KE KG KH KI KM KN
    KP KR KW KY KZ LA LB LC LI LK LR LS LT LU LV LY MA MC MD ME MF MG MH MK
    ML MM MN MO MP MQ MR MS MT MU MV MW MX MY MZ NA NC NE NF NG NI NL NO NP
    NR NU NZ OM PA PE PF PG PH PK PL PM PN PR PS PT PW PY QA RE RO RS RU RW
    SA SB SC SD SE SG SH SI SJ SK SL SM SN SO SR SS ST SV SX SY SZ TC TD TF
    TG TH TJ TK TL TM TN TO TR TT TV TW TZ UA UG UM US UY UZ VA VC VE VG VI
    VN VU WF WS XK YE YT ZA ZM ZW
    """.split()
)

_UK = "|".join(
    (
        r"[A-Z][0-9] [0-9][A-Z]{2}",
        r"[A-Z][0-9]{2} [0-9][A-Z]{2}",
        r"[A-Z]{2}[0-9] [0-9][A-Z]{2}",
        r"[A-Z]{2}[0-9]{2} [0-9][A-Z]{2}",
        r"[A-Z][0-9][A-Z] [0-9][A-Z]{2}",
        r"[A-Z]{2}[0-9][A-Z] [0-9][A-Z]{2}",
    )
)

_PATTERNS: dict[str, re.Pattern[str]] = {
    code: re.compile(pattern)
    for code, pattern in {
        "AL": r"[0-9]{4}",
        "DZ": r"[0-9]{5}",
        "AD": r"[A-Z]{2}[0-9]{3}",
        "AO": r"[0-9]{3}",
        "AR": r"[A-Z][0-9]{4}[A-Z]{3}",
        "AM": r"[0-9]{4}",
        "AU": r"[0-9]{4}",
        "AT": r"[0-9]{4}",
        "BH": r"[0-9]{3}",
        "BD": r"[0-9]{4}",
        "BY": r"[0-9]{6}",
        "BE": r"[0-9]{4}",
        "BJ": r"[0-9]{5}",
        "BM": r"[A-Z]{2}[0-9]{2}",
        "BA": r"[0-9]{5}",
        "BR": r"[0-9]{5}-[0-9]{3}",
        "BN": r"[A-Z]{2}[0-9]{4}",
        "BG": r"[0-9]{4}",
        "CM": r"[0-9]{3}",
        "CA": r"[A-Z][0-9][A-Z] [0-9][A-Z][0-9]",
        "CV": r"[0-9]{4}",
        "CL": r"[0-9]{8}-[0-9]",
        "CN": r"[0-9]{6}",
        "CO": r"[0-9]{6}",
        "CR": r"[0-9]{5}-[0-9]{4}",
        "HR": r"[0-9]{5}",
        "CY": r"[0-9]{4}",
        "CZ": r"[0-9]{5}",
        "CD": r"[0-9]{3}",
        "DK": r"[0-9]{4}",
        "DO": r"[0-9]{5}",
        "EC": r"[0-9]{6}",
        "EG": r"[0-9]{5}",
        "GQ": r"[0-9]{3}",
        "EE": r"[0-9]{5}",
        "SZ": r"[0-9]{4}",
        "FI": r"[0-9]{5}",
        "FR": r"[0-9]{5}",
        "GE": r"[0-9]{4}",
        "DE": r"[0-9]{5}",
        "GI": r"[A-Z]{2}[0-9]{3}[A-Z]{2}",
        "GR": r"[0-9]{5}",
        "GT": r"[0-9]{5}",
        "GG": r"[A-Z]{2}[0-9]{2}[A-Z]{2}",
        "HN": r"[0-9]{5}",
        "HU": r"[0-9]{4}",
        "IS": r"[0-9]{3}",
        "IN": r"[0-9]{6}",
        "ID": r"[0-9]{5}",
        "IL": r"[0-9]{7}",
        "IT": r"[0-9]{5}",
        "JM": r"[0-9]{5}",
        "JP": r"[0-9]{3}-[0-9]{4}",
        "JE": r"[A-Z]{2}[0-9]{2}[A-Z]{2}",
        "JO": r"[0-9]{5}",
        "KZ": r"[0-9]{6}",
        "KE": r"[0-9]{5}",
        "XK": r"[0-9]{5}",
        "KW": r"[0-9]{5}",
        "KG": r"[0-9]{6}",
        "LV": r"[0-9]{4}",
        "LI": r"[0-9]{4}",
        "LT": r"[A-Z]{2}-[0-9]{5}",
        "LU": r"[0-9]{4}",
        "MY": r"[0-9]{5}",
        "ML": r"[A-Z]{2}[0-9]{4}",
        "MT": r"[A-Z]{3}[0-9]{4}",
        "MU": r"[0-9]{5}",
        "MX": r"[0-9]{5}",
        "MD": r"[0-9]{2}-[0-9]{2}",
        "MC": r"[0-9]{5}",
        "MN": r"[0-9]{6}",
        "ME": r"[0-9]{5}",
        "MA": r"[0-9]{5}",
        "NP": r"[0-9]{5}",
        "NL": r"[0-9]{4} [A-Z]{2}",
        "NZ": r"[0-9]{4}",
        "NE": r"[A-Z]{2}[0-9]{4}",
        "NG": r"[0-9]{6}",
        "MP": r"[0-9]{5}",
        "MK": r"[0-9]{4}",
        "NO": r"[0-9]{4}",
        "OM": r"[0-9]{3}",
        "PK": r"[0-9]{5}",
        "PA": r"[0-9]{3}",
        "PY": r"[0-9]{4}",
        "PE": r"[0-9]{5}",
        "PH": r"[0-9]{4}",
        "PL": r"[0-9]{2}-[0-9]{3}",
        "PT": r"[0-9]{4}-[0-9]{3}",
        "PR": r"[0-9]{5}",
        "QA": r"[0-9]{5}",
        "RO": r"[0-9]{6}",
        "RU": r"[0-9]{6}",
        "SM": r"[0-9]{5}",
        "SA": r"[0-9]{5}",
        "SN": r"[0-9]{3}",
        "RS": r"[0-9]{5}",
        "SC": r"[0-9]{4}",
        "SG": r"[0-9]{6}",
        "SK": r"[0-9]{5}",
        "SI": r"[0-9]{4}",
        "ZA": r"[0-9]{2}-[0-9]{2}",
        "KR": r"[0-9]{5}",
        "ES": r"[0-9]{5}",
        "LK": r"[0-9]{5}",
        "SE": r"[0-9]{5}",
        "CH": r"[0-9]{4}",
        "TW": r"[0-9]{3}",
        "TZ": r"[0-9]{5}",
        "TH": r"[0-9]{5}",
        "TN": r"[0-9]{4}",
        "TR": r"[0-9]{5}",
        "UA": r"[0-9]{5}",
        "AE": r"[0-9]{6}",
        "GB": _UK,
        "US": r"[0-9]{5}",
        "UY": r"[0-9]{5}",
        "UZ": r"[0-9]{6}",
        "VE": r"[0-9]{4}",
        "ZM": r"[0-9]{5}",
    }.items()
}


def is_country_code(code: str) -> bool:
    """Return True if ``code`` is a known two-letter country code (case sensitive)."""
    return code in _COUNTRY_CODES


class PostalCodeValidator:
    """Validates postal codes against the pattern of their country."""

    def validate(self, country_code: str, postal_code: str) -> PostalCodeStatus:
        """Return the status of ``postal_code`` for ``country_code``.

        Countries without a known pattern accept any postal code.
        """
        if not is_country_code(country_code):
            return PostalCodeStatus.UNRECOGNIZED_COUNTRY_CODE
        pattern = _PATTERNS.get(country_code)
        if pattern is not None and pattern.search(postal_code) is None:
            return PostalCodeStatus.INVALID_FORMAT
        return PostalCodeStatus.VALID