import pytest

from codevalidators.eu_vat import VatStatus, VatValidator, is_vies_country_code

REGISTERED = {"PL7251868136"}


class FakeRegistry:
    def __init__(self):
        self.calls = []

    def __call__(self, eu_vat):
        self.calls.append(eu_vat)
        return eu_vat in REGISTERED


def failing_registry(eu_vat):
    raise ConnectionError("registry unavailable")


@pytest.mark.parametrize(
    ("eu_vat", "check", "status", "registered"),
    [
        ("PL7251868136", False, VatStatus.VALID, False),
        ("PL7251868136", True, VatStatus.VALID, True),
        ("PL0000000000", False, VatStatus.VALID, False),
        ("PL0000000000", True, VatStatus.VALID, False),
        ("PL", None, VatStatus.INCORRECT_LENGTH, False),
        ("XX0000000000", None, VatStatus.UNRECOGNIZED_COUNTRY_CODE, False),
        ("PL_123456789", None, VatStatus.INVALID_FORMAT, False),
        ("PL7251868137", None, VatStatus.INCORRECT_CHECKSUM, False),
    ],
)
def test_validate_cases(eu_vat, check, status, registered):
    validator = VatValidator(registry=FakeRegistry())
    assert validator.validate(eu_vat, check) == (status, registered)


@pytest.mark.parametrize(
    "eu_vat",
    [
        "ATU12345678",
        "BE0456810810",
        "CY12345678X",
        "DE321281763",
        "EL123456789",
        "ESA1234567B",
        "FRAB123456789",
        "IE1S12345A",
        "IE1234567WA",
        "IT03690530104",
        "NL123456789B01",
        "XIGD123",
        "SE123456789012",
    ],
)
def test_well_formed_numbers_are_valid(eu_vat):
    assert VatValidator().validate(eu_vat) == (VatStatus.VALID, False)


@pytest.mark.parametrize(
    "eu_vat", ["AT12345678", "NL123456789X01", "CY123456789", "SE12345678901"]
)
def test_malformed_numbers_are_rejected(eu_vat):
    assert VatValidator().validate(eu_vat)[0] is VatStatus.INVALID_FORMAT


def test_german_and_italian_checksums_apply():
    validator = VatValidator()
    assert validator.validate("DE321281762")[0] is VatStatus.INCORRECT_CHECKSUM
    assert validator.validate("IT03690530103")[0] is VatStatus.INCORRECT_CHECKSUM


def test_belgian_numbers_are_not_checksummed():
    assert VatValidator().validate("BE0456810811") == (VatStatus.VALID, False)


def test_pattern_is_searched_not_anchored():
    # Ten digits are found inside, but the checksum sees the whole remainder.
    result = VatValidator().validate("PLx7251868136y")
    assert result == (VatStatus.INCORRECT_CHECKSUM, False)


def test_country_code_is_case_sensitive():
    assert VatValidator().validate("pl7251868136")[0] is (
        VatStatus.UNRECOGNIZED_COUNTRY_CODE
    )


def test_greece_uses_el_prefix():
    assert is_vies_country_code("EL") is True
    assert is_vies_country_code("GR") is False
    assert is_vies_country_code("XI") is True


def test_global_flag_is_used_when_argument_omitted():
    registry = FakeRegistry()
    validator = VatValidator(check_registered=True, registry=registry)
    assert validator.validate("PL7251868136") == (VatStatus.VALID, True)
    assert registry.calls == ["PL7251868136"]


def test_argument_overrides_global_flag():
    registry = FakeRegistry()
    validator = VatValidator(check_registered=True, registry=registry)
    assert validator.validate("PL7251868136", False) == (VatStatus.VALID, False)
    assert registry.calls == []


def test_registry_not_called_for_invalid_number():
    registry = FakeRegistry()
    validator = VatValidator(check_registered=True, registry=registry)
    assert validator.validate("PL7251868137")[0] is VatStatus.INCORRECT_CHECKSUM
    assert registry.calls == []


def test_registry_errors_propagate():
    validator = VatValidator(registry=failing_registry)
    with pytest.raises(ConnectionError):
        validator.validate("PL7251868136", True)


def test_check_without_registry_raises():
    with pytest.raises(ValueError):
        VatValidator().validate("PL7251868136", True)


def test_global_check_without_registry_raises():
    with pytest.raises(ValueError):
        VatValidator(check_registered=True)


@pytest.mark.parametrize(
    ("status", "text", "value"),
    [
        (VatStatus.VALID, "Valid", 0),
        (VatStatus.INCORRECT_LENGTH, "Incorrect length", 1),
        (VatStatus.UNRECOGNIZED_COUNTRY_CODE, "Unrecognized country code", 2),
        (VatStatus.INVALID_FORMAT, "Invalid format", 3),
        (VatStatus.INCORRECT_CHECKSUM, "Incorrect checksum", 4),
    ],
)
def test_status_names(status, text, value):
    assert str(status) == text
    assert int(status) == value