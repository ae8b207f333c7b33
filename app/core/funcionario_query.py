"""
Filtered, sorted and paginated listing of employee records.
"""
from __future__ import annotations

import re
from typing import Literal

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.core.tax_id import normalize_cpf
from app.models.funcionario import Funcionario

SortOrder = Literal["asc", "desc"]

PUNCTUATED_TAX_ID = re.compile(r"[\d.\-\s]+")

# Only these names may drive ORDER BY; anything else falls back to id desc.
SORTABLE_COLUMNS = {
    "id": Funcionario.id,
    "empresa_id": Funcionario.empresa_id,
    "nome": Funcionario.nome,
    "cpf": Funcionario.cpf,
    "rg": Funcionario.rg,
    "data_nascimento": Funcionario.data_nascimento,
    "funcao": Funcionario.funcao,
    "data_admissao": Funcionario.data_admissao,
    "ctps_numero": Funcionario.ctps_numero,
    "ctps_serie": Funcionario.ctps_serie,
    "pis": Funcionario.pis,
    "telefone": Funcionario.telefone,
    "whatsapp": Funcionario.whatsapp,
    "email": Funcionario.email,
    "endereco": Funcionario.endereco,
    "cidade": Funcionario.cidade,
    "estado": Funcionario.estado,
    "cep": Funcionario.cep,
    "ativo": Funcionario.ativo,
    "supervisor": Funcionario.supervisor,
}


def parse_ativo(value: str | None) -> bool | None:
    """'true' / 'false' select a value; anything else leaves the filter unset."""
    if value == "true":
        return True
    if value == "false":
        return False
    return None


def build_conditions(
    *,
    search: str | None = None,
    funcao: str | None = None,
    ativo: bool | None = None,
) -> list:
    conditions = []

    if search:
        # % and _ in the term are literals, not wildcards
        matches = [
            Funcionario.nome.icontains(search, autoescape=True),
            Funcionario.cpf.icontains(search, autoescape=True),
            Funcionario.email.icontains(search, autoescape=True),
            Funcionario.funcao.icontains(search, autoescape=True),
        ]
        # cpf is stored as digits, so a punctuated "529.982" should still hit it
        if PUNCTUATED_TAX_ID.fullmatch(search):
            digits = normalize_cpf(search)
            if digits and digits != search:
                matches.append(Funcionario.cpf.contains(digits, autoescape=True))
        conditions.append(or_(*matches))

    if funcao:
        conditions.append(Funcionario.funcao == funcao)

    if ativo is not None:
        conditions.append(Funcionario.ativo == ativo)

    return conditions


def build_ordering(sort_by: str | None, sort_order: SortOrder = "desc") -> list:
    column = SORTABLE_COLUMNS.get(sort_by) if sort_by else None
    if column is None:
        return [Funcionario.id.desc()]

    ordering = [column.desc() if sort_order == "desc" else column.asc()]
    if sort_by != "id":
        ordering.append(Funcionario.id.desc())
    return ordering


def page_offset(page: int, page_size: int) -> int:
    return (page - 1) * page_size


def total_pages(total: int, page_size: int) -> int:
    if page_size <= 0:
        return 0
    return (total + page_size - 1) // page_size


def query_funcionarios(
    db: Session,
    *,
    search: str | None = None,
    funcao: str | None = None,
    ativo: bool | None = None,
    page: int = 1,
    page_size: int = 10,
    sort_by: str | None = None,
    sort_order: SortOrder = "desc",
) -> tuple[list[Funcionario], int]:
    """
    Return (records on the requested page, total matching records).

    The slice and the count share the same predicate; the count ignores
    limit/offset. Pages past the end yield an empty slice.
    """
    conditions = build_conditions(search=search, funcao=funcao, ativo=ativo)

    query = db.query(Funcionario).filter(*conditions)

    # Get total count before pagination
    total = query.count()

    offset = page_offset(page, page_size)
    if offset >= total:
        return [], total

    records = (
        query.order_by(*build_ordering(sort_by, sort_order))
        .offset(offset)
        .limit(page_size)
        .all()
    )
    return records, total
