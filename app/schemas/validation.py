from pydantic import BaseModel


class FieldError(BaseModel):
    """Individual validation error"""
    field: str
    code: str  # required, cpf_malformed, cpf_checksum, value_error, date_from_datetime_parsing, etc.
    message: str


class ValidationErrorResponse(BaseModel):
    """Body returned with a 400 for rejected input"""
    message: str
    errors: list[FieldError]
