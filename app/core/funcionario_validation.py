"""
Validation and normalization of employee records before they reach the store.

validate_funcionario() is pure: it never touches the database. Tax id
uniqueness is checked separately by the caller (see funcionario_store).
"""
from __future__ import annotations

from typing import Any, Iterable

from pydantic import ValidationError

from app.schemas.funcionario import FuncionarioCreate, FuncionarioUpdate
from app.schemas.validation import FieldError

INVALID_DATA_MESSAGE = "Dados inválidos"

# pydantic error types renamed for API consumers
_CODE_ALIASES = {
    "missing": "required",
}


class FuncionarioValidationError(Exception):
    """Carries every offending field of a rejected record."""

    def __init__(self, errors: list[FieldError]):
        super().__init__(INVALID_DATA_MESSAGE)
        self.errors = errors

    def to_detail(self) -> dict:
        return {
            "message": INVALID_DATA_MESSAGE,
            "errors": [e.model_dump() for e in self.errors],
        }


def field_errors_from_pydantic(errors: Iterable[dict], *, skip_loc_prefix: int = 0) -> list[FieldError]:
    out: list[FieldError] = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ())][skip_loc_prefix:]
        code = err.get("type", "invalid")
        out.append(
            FieldError(
                field=".".join(loc) or "__root__",
                code=_CODE_ALIASES.get(code, code),
                message=err.get("msg", "Invalid value"),
            )
        )
    return out


def validate_funcionario(data: Any, *, partial: bool = False) -> dict[str, Any]:
    """
    Validate a candidate record and return the normalized attributes.

    partial=False (create): required fields must be present, flags get their
    defaults, and every known attribute is returned.
    partial=True (update): only supplied attributes are checked and returned.
    """
    if not isinstance(data, dict):
        raise FuncionarioValidationError(
            [FieldError(field="__root__", code="dict_type", message="Expected a JSON object")]
        )

    schema = FuncionarioUpdate if partial else FuncionarioCreate
    try:
        parsed = schema.model_validate(data)
    except ValidationError as e:
        raise FuncionarioValidationError(field_errors_from_pydantic(e.errors())) from None

    if partial:
        return parsed.model_dump(exclude_unset=True)
    return parsed.model_dump()
