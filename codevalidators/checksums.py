"""Check-digit algorithms for the national parts of EU VAT numbers."""

from __future__ import annotations

from collections.abc import Callable

__all__ = [
    "checksum_poland",
    "checksum_germany",
    "checksum_italy",
    "checksum_belgium",
]


def _digit(char: str) -> int:
    return ord(char) - ord("0")


def checksum_poland(vat_number: str) -> bool:
    """Return True if a 10-digit Polish VAT number has a correct check digit."""
    if len(vat_number) != 10:
        return False
    weights = (6, 5, 7, 2, 3, 4, 5, 6, 7)
    total = sum(_digit(char) * weight for char, weight in zip(vat_number, weights))
    return total % 11 == _digit(vat_number[9])


def checksum_germany(vat_number: str) -> bool:
    """Return True if a 9-digit German VAT number has a correct check digit."""
    if len(vat_number) != 9:
        return False
    product = 0
    for char in vat_number[:8]:
        value = (product + _digit(char)) % 10 or 10
        product = (2 * value) % 11
    return 11 - product == _digit(vat_number[8])


def checksum_italy(vat_number: str) -> bool:
    """Return True if an 11-digit Italian VAT number passes the Luhn-style check."""
    if len(vat_number) != 11:
        return False
    total = 0
    for position, char in enumerate(vat_number):
        value = _digit(char)
        if position % 2:
            value *= 2
            if value > 9:
                value -= 9
        total += value
    return total % 10 == 0


def checksum_belgium(vat_number: str) -> bool:
    """Return True if a 10-digit Belgian VAT number passes the modulo-97 check."""
    if len(vat_number) != 10:
        return False
    base = 0
    for char in vat_number[:8]:
        base = 10 * base + _digit(char)
    check = 10 * _digit(vat_number[8]) + _digit(vat_number[9])
    return 97 - base % 97 == check


# Country codes whose VAT numbers are verified with a check-digit algorithm.
CHECKSUMS: dict[str, Callable[[str], bool]] = {
    "DE": checksum_germany,
    "IT": checksum_italy,
    "PL": checksum_poland,
}