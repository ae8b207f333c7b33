from datetime import date

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic_core import PydanticCustomError

from app.core.tax_id import InvalidTaxIdError, validate_cpf

BRAZILIAN_STATES = frozenset({
    "AC", "AL", "AP", "AM", "BA", "CE", "DF", "ES", "GO", "MA", "MT", "MS", "MG", "PA",
    "PB", "PR", "PE", "PI", "RJ", "RN", "RS", "RO", "RR", "SC", "SP", "SE", "TO",
})


def _check_nome(v: str) -> str:
    v = v.strip()
    if not v:
        raise PydanticCustomError("required", "Nome é obrigatório")
    return v


def _check_cpf(v: str) -> str:
    if not v.strip():
        raise PydanticCustomError("required", "CPF é obrigatório")
    try:
        return validate_cpf(v)
    except InvalidTaxIdError as e:
        code = "cpf_malformed" if e.malformed else "cpf_checksum"
        raise PydanticCustomError(code, str(e))


class FuncionarioFields(BaseModel):
    """Optional attributes shared by create and update payloads."""
    model_config = ConfigDict(extra="ignore")

    empresa_id: int | None = None
    rg: str | None = Field(default=None, max_length=20)
    data_nascimento: date | None = None
    funcao: str | None = Field(default=None, max_length=100)
    data_admissao: date | None = None
    ctps_numero: str | None = Field(default=None, max_length=20)
    ctps_serie: str | None = Field(default=None, max_length=20)
    pis: str | None = Field(default=None, max_length=20)
    telefone: str | None = Field(default=None, max_length=20)
    whatsapp: str | None = Field(default=None, max_length=50)
    email: EmailStr | None = None
    endereco: str | None = None
    cidade: str | None = Field(default=None, max_length=100)
    estado: str | None = None
    cep: str | None = Field(default=None, max_length=10)

    @field_validator("email", "data_nascimento", "data_admissao", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        # "" means "no value"; a cleared date must reach the store as NULL
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("email")
    @classmethod
    def check_email_length(cls, v):
        if v is not None and len(v) > 100:
            raise PydanticCustomError("string_too_long", "E-mail deve ter no máximo 100 caracteres")
        return v

    @field_validator("estado", mode="before")
    @classmethod
    def check_estado(cls, v):
        if v is None:
            return None
        if not isinstance(v, str):
            raise PydanticCustomError("string_type", "Input should be a valid string")
        v = v.strip().upper()
        if not v:
            return None
        if v not in BRAZILIAN_STATES:
            raise PydanticCustomError("estado_invalid", "Estado inválido")
        return v


class FuncionarioCreate(FuncionarioFields):
    nome: str = Field(max_length=255)
    cpf: str
    ativo: bool = True
    supervisor: bool = False

    @field_validator("nome")
    @classmethod
    def check_nome(cls, v: str) -> str:
        return _check_nome(v)

    @field_validator("cpf")
    @classmethod
    def check_cpf(cls, v: str) -> str:
        return _check_cpf(v)


class FuncionarioUpdate(FuncionarioFields):
    """
    Partial update. Required attributes default to None only so they can be
    omitted; an explicit null is still rejected by the type check.
    """
    nome: str = Field(default=None, max_length=255)
    cpf: str = Field(default=None)
    ativo: bool = Field(default=None)
    supervisor: bool = Field(default=None)

    @field_validator("nome")
    @classmethod
    def check_nome(cls, v: str) -> str:
        return _check_nome(v)

    @field_validator("cpf")
    @classmethod
    def check_cpf(cls, v: str) -> str:
        return _check_cpf(v)


class FuncionarioOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    empresa_id: int | None
    nome: str
    cpf: str
    rg: str | None
    data_nascimento: date | None
    funcao: str | None
    data_admissao: date | None
    ctps_numero: str | None
    ctps_serie: str | None
    pis: str | None
    telefone: str | None
    whatsapp: str | None
    email: str | None
    endereco: str | None
    cidade: str | None
    estado: str | None
    cep: str | None
    ativo: bool
    supervisor: bool


class FuncionarioPage(BaseModel):
    """Page of records plus the unpaginated total"""
    funcionarios: list[FuncionarioOut]
    total: int
    page: int
    totalPages: int
