from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.core.funcionario_query import SortOrder, parse_ativo, query_funcionarios, total_pages
from app.core.funcionario_store import (
    TaxIdConflictError,
    create_funcionario,
    delete_funcionario,
    get_funcionario,
    tax_id_exists,
    update_funcionario,
)
from app.core.funcionario_validation import FuncionarioValidationError, validate_funcionario
from app.core.security import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.funcionario import FuncionarioOut, FuncionarioPage

router = APIRouter(prefix="/api/funcionarios", tags=["funcionarios"])

NOT_FOUND_MESSAGE = "Funcionário não encontrado"
CPF_TAKEN_MESSAGE = "CPF já cadastrado"
CPF_TAKEN_BY_OTHER_MESSAGE = "CPF já cadastrado para outro funcionário"


def _validated(payload: Any, *, partial: bool) -> dict[str, Any]:
    try:
        return validate_funcionario(payload, partial=partial)
    except FuncionarioValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.to_detail())


@router.get("", response_model=FuncionarioPage)
def list_funcionarios(
    search: str | None = Query(default=None, description="Matches nome, cpf, email or funcao"),
    funcao: str | None = Query(default=None, description="Exact job title"),
    ativo: str | None = Query(default=None, description="'true' or 'false'"),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1),
    sortBy: str | None = Query(default=None),
    sortOrder: SortOrder = Query(default="desc"),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    """
    List employees, newest first unless sortBy names a sortable attribute.
    """
    records, total = query_funcionarios(
        db,
        search=search,
        funcao=funcao,
        ativo=parse_ativo(ativo),
        page=page,
        page_size=limit,
        sort_by=sortBy,
        sort_order=sortOrder,
    )
    return FuncionarioPage(
        funcionarios=[FuncionarioOut.model_validate(f) for f in records],
        total=total,
        page=page,
        totalPages=total_pages(total, limit),
    )


@router.get("/{funcionario_id}", response_model=FuncionarioOut)
def get_one(
    funcionario_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    funcionario = get_funcionario(db, funcionario_id)
    if not funcionario:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    return FuncionarioOut.model_validate(funcionario)


@router.post("", response_model=FuncionarioOut, status_code=status.HTTP_201_CREATED)
def create(
    payload: Any = Body(default=None),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    data = _validated(payload, partial=False)

    if tax_id_exists(db, data["cpf"]):
        raise HTTPException(status_code=400, detail=CPF_TAKEN_MESSAGE)

    try:
        funcionario = create_funcionario(db, data)
    except TaxIdConflictError:
        raise HTTPException(status_code=400, detail=CPF_TAKEN_MESSAGE)
    return FuncionarioOut.model_validate(funcionario)


@router.put("/{funcionario_id}", response_model=FuncionarioOut)
def update(
    funcionario_id: int,
    payload: Any = Body(default=None),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    """
    Partial update: attributes missing from the body keep their stored values.
    """
    changes = _validated(payload, partial=True)

    if "cpf" in changes and tax_id_exists(db, changes["cpf"], exclude_id=funcionario_id):
        raise HTTPException(status_code=400, detail=CPF_TAKEN_BY_OTHER_MESSAGE)

    try:
        funcionario = update_funcionario(db, funcionario_id, changes)
    except TaxIdConflictError:
        raise HTTPException(status_code=400, detail=CPF_TAKEN_BY_OTHER_MESSAGE)

    if not funcionario:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    return FuncionarioOut.model_validate(funcionario)


@router.delete("/{funcionario_id}")
def delete(
    funcionario_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    if not delete_funcionario(db, funcionario_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    return {"message": "Funcionário excluído com sucesso"}
