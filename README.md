# codevalidators

Format and check-digit checks for two kinds of codes that turn up in
business data:

* **EU VAT numbers**: the country prefix, the number format for that
  country and, where one is defined, the check digit.
* **Postal codes**: the format used in a given country.

The package has no runtime dependencies.

## Installation

```
pip install codevalidators
```

## EU VAT numbers

```python
from codevalidators.eu_vat import VatValidator, is_vies_country_code

validator = VatValidator()
status, registered = validator.validate("PL7251868136")
print(status)        # Valid
print(registered)    # False: no registration lookup was requested
```

`validate` returns a pair: a `VatStatus` and a registration flag. It applies
its checks in a fixed order and stops at the first one that fails. `str()`
on a `VatStatus` gives a readable name:

| Check | Result when it fails |
|-------|----------------------|
| the value has at least three characters | `Incorrect length` |
| the first two characters are a VIES country code (case sensitive) | `Unrecognized country code` |
| the rest contains a match for that country's number pattern | `Invalid format` |
| the check digit is right (Germany, Italy and Poland) | `Incorrect checksum` |

A number that passes every check is `Valid`. The registration flag is
`False` for every status other than `Valid`.

The country patterns are searched for within the number rather than
matched against the whole of it, so extra characters around a matching run
do not by themselves make the format invalid; the check-digit step, where
there is one, also requires the exact length.

`is_vies_country_code("DE")` tells you whether a two-letter prefix is one of
the recognised VIES country codes. Greece uses `EL` and Northern Ireland
`XI`.

### Registration lookup

A `VatValidator` can also ask whether a well-formed number is registered.
You supply the lookup yourself as `registry`: a callable that receives the
full number, prefix included, and returns whether it is registered.
`check_registered` sets the default for the validator, and you can override
it on each call:

```python
def my_registry(eu_vat: str) -> bool:
    ...

validator = VatValidator(check_registered=True, registry=my_registry)
status, registered = validator.validate("PL7251868136")
status, registered = validator.validate("PL7251868136", check_registered=False)
```

The lookup runs only after every other check has passed. Errors raised by
the lookup are passed on to the caller. Asking for a registration check
without a registry raises `ValueError`, both when constructing the
validator and when calling `validate`.

### Check-digit functions

The check-digit routines in `codevalidators.checksums` can be called on
their own. Each takes the number without its country prefix and returns
`False` when the length is wrong:

```python
from codevalidators.checksums import (
    checksum_belgium,
    checksum_germany,
    checksum_italy,
    checksum_poland,
)

checksum_poland("7251868136")    # True
checksum_germany("321281763")    # True
checksum_italy("03690530104")    # True
checksum_belgium("0456810810")   # True
```

`checksum_belgium` is available here but is not applied by
`VatValidator.validate`.

## Postal codes

```python
from codevalidators.postal_code import PostalCodeValidator, is_country_code

validator = PostalCodeValidator()
print(validator.validate("PL", "98-100"))   # Valid
print(validator.validate("PL", "AA-AAA"))   # Invalid format
print(validator.validate("XX", "98-100"))   # Unrecognized country code
```

The result is a `PostalCodeStatus`. The country code is an ISO 3166-1
alpha-2 code and is case sensitive. As with VAT numbers, the country's
pattern is searched for within the postal code rather than matched against
all of it. If a country is recognised but has no pattern on record, every
postal code for it is accepted. `is_country_code` tells you whether a code
is recognised.

## What the package does not do

* It has no built-in client for the VIES service. A registration check
  works only through the `registry` callable you pass in.
* It has no command-line tool; it is used as a library.

## Running the tests

```
pip install "codevalidators[test]"
pytest
```