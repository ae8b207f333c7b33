"""
CPF (Brazilian individual tax id) normalization and check-digit validation.

A CPF is 11 digits: 9 base digits followed by two mod-11 check digits.
Punctuation ("529.982.247-25") is ignored; records store the digits only.
"""
import re

CPF_LENGTH = 11

_NON_DIGITS = re.compile(r"\D")


class InvalidTaxIdError(ValueError):
    """Raised when a CPF is malformed or fails its check digits."""

    def __init__(self, message: str, *, malformed: bool):
        super().__init__(message)
        self.malformed = malformed


def normalize_cpf(value: str) -> str:
    """Strip every non-digit character."""
    return _NON_DIGITS.sub("", value or "")


def _check_digit(digits: list[int]) -> int:
    # weights run from len+1 down to 2
    weight = len(digits) + 1
    total = sum(d * (weight - i) for i, d in enumerate(digits))
    result = 11 - (total % 11)
    return 0 if result >= 10 else result


def cpf_check_digits(base: str) -> str:
    """Return the two check digits for a 9-digit base."""
    digits = [int(c) for c in base]
    if len(digits) != CPF_LENGTH - 2:
        raise ValueError("CPF base must have 9 digits")
    first = _check_digit(digits)
    second = _check_digit(digits + [first])
    return f"{first}{second}"


def validate_cpf(value: str) -> str:
    """
    Validate a CPF and return its canonical (digits-only) form.

    Raises InvalidTaxIdError with malformed=True when the value does not
    reduce to 11 digits or repeats a single digit, and malformed=False when
    only the check digits are wrong.
    """
    digits = normalize_cpf(value)

    if len(digits) != CPF_LENGTH or len(set(digits)) == 1:
        raise InvalidTaxIdError("CPF mal formado", malformed=True)

    if digits[9:] != cpf_check_digits(digits[:9]):
        raise InvalidTaxIdError("CPF inválido", malformed=False)

    return digits


def is_valid_cpf(value: str) -> bool:
    try:
        validate_cpf(value)
    except InvalidTaxIdError:
        return False
    return True
