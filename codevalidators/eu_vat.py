"""Validation of EU VAT numbers by length, national pattern and checksum."""

from __future__ import annotations

import re
from collections.abc import Callable
from enum import IntEnum

from .checksums import CHECKSUMS

__all__ = ["VatStatus", "VatValidator", "is_vies_country_code"]


class VatStatus(IntEnum):
    """Outcome of validating an EU VAT number."""

    VALID = 0
    INCORRECT_LENGTH = 1
    UNRECOGNIZED_COUNTRY_CODE = 2
    INVALID_FORMAT = 3
    INCORRECT_CHECKSUM = 4

    def __str__(self) -> str:
        return _STATUS_NAMES[self]


_STATUS_NAMES = {
    VatStatus.VALID: "Valid",
    VatStatus.INCORRECT_LENGTH: "Incorrect length",
    VatStatus.UNRECOGNIZED_COUNTRY_CODE: "Unrecognized country code",
    VatStatus.INVALID_FORMAT: "Invalid format",
    VatStatus.INCORRECT_CHECKSUM: "Incorrect checksum",
}

_PATTERNS: dict[str, re.Pattern[str]] = {
    code: re.compile(pattern)
    for code, pattern in {
        "AT": r"U[0-9]{8}",
        "BE": r"[0-1][0-9]{9}",
        "BG": r"[0-9]{9,10}",
        "HR": r"[0-9]{11}",
        "CY": r"[0-9]{8}[A-Z]",
        "CZ": r"[0-9]{8,10}",
        "DK": r"[0-9]{8}",
        "EE": r"[0-9]{9}",
        "FI": r"[0-9]{8}",
        "FR": r"[0-9A-Z]{2}[0-9]{9}",
        "DE": r"[0-9]{9}",
        "EL": r"[0-9]{9}",
        "HU": r"[0-9]{8}",
        "IE": r"[0-9]S[0-9]{5}[A-Z]|[0-9]{7}[A-W][A-I]",
        "IT": r"[0-9]{11}",
        "LV": r"[0-9]{11}",
        "LT": r"[0-9]{9}|[0-9]{12}",
        "LU": r"[0-9]{8}",
        "MT": r"[0-9]{8}",
        "NL": r"[0-9]{9}B[0-9]{2}",
        "XI": r"[0-9]{9}|[0-9]{12}|(GD|HA)[0-9]{3}",
        "PL": r"[0-9]{10}",
        "PT": r"[0-9]{9}",
        "RO": r"[0-9]{2,10}",
        "SK": r"[0-9]{10}",
        "SI": r"[0-9]{8}",
        "ES": r"[A-Z][0-9]{7}[A-Z]|[0-9]{8}[A-Z]|[A-Z][0-9]{8}",
        "SE": r"[0-9]{12}",
    }.items()
}

_VIES_COUNTRY_CODES = frozenset(_PATTERNS)


def is_vies_country_code(code: str) -> bool:
    """Return True if ``code`` is a VIES member-state prefix (case sensitive)."""
    return code in _VIES_COUNTRY_CODES


class VatValidator:
    """Validates EU VAT numbers, optionally checking registration in VIES.

    ``registry`` is a callable that receives the full VAT number (for
    example ``"PL7251868136"``) and returns whether it is registered.
    """

    def __init__(
        self,
        check_registered: bool = False,
        registry: Callable[[str], bool] | None = None,
    ) -> None:
        if check_registered and registry is None:
            raise ValueError("registration checks need a registry")
        self.check_registered = check_registered
        self.registry = registry

    def validate(
        self, eu_vat: str, check_registered: bool | None = None
    ) -> tuple[VatStatus, bool]:
        """Validate ``eu_vat`` and return its status and registration flag.

        The flag is True only when a registration check was made and the
        registry confirmed the number. ``check_registered`` overrides the
        validator-wide setting when given. Errors raised by the registry
        propagate.
        """
        if len(eu_vat) < 3:
            return VatStatus.INCORRECT_LENGTH, False

        country_code, vat_number = eu_vat[:2], eu_vat[2:]
        if not is_vies_country_code(country_code):
            return VatStatus.UNRECOGNIZED_COUNTRY_CODE, False

        pattern = _PATTERNS.get(country_code)
        if pattern is not None and pattern.search(vat_number) is None:
            return VatStatus.INVALID_FORMAT, False

        checksum = CHECKSUMS.get(country_code)
        if checksum is not None and not checksum(vat_number):
            return VatStatus.INCORRECT_CHECKSUM, False

        if check_registered is None:
            check_registered = self.check_registered
        registered = False
        if check_registered:
            if self.registry is None:
                raise ValueError("registration checks need a registry")
            registered = bool(self.registry(eu_vat))
        return VatStatus.VALID, registered