"""Validators for EU VAT numbers, their check digits, and postal codes."""

__version__ = "1.0.0"

__all__ = ["checksums", "eu_vat", "postal_code"]