"""
Write/read operations on the funcionarios table.

The cpf pre-check (tax_id_exists) is advisory: two concurrent writers can both
pass it. The unique constraint decides, and its violation is reported as
TaxIdConflictError rather than a server fault.
"""
from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.tax_id import normalize_cpf
from app.models.funcionario import Funcionario

logger = logging.getLogger(__name__)


class TaxIdConflictError(Exception):
    """A write would give two records the same cpf."""


def _is_cpf_violation(exc: IntegrityError) -> bool:
    # postgres: 'duplicate key value violates unique constraint "uq_funcionarios_cpf"'
    # sqlite:   'UNIQUE constraint failed: funcionarios.cpf'
    return "cpf" in str(exc.orig).lower()


def _flush_or_conflict(db: Session) -> None:
    try:
        db.flush()
    except IntegrityError as e:
        db.rollback()
        if _is_cpf_violation(e):
            logger.warning("cpf unique constraint rejected a write")
            raise TaxIdConflictError() from e
        raise


def get_funcionario(db: Session, funcionario_id: int) -> Funcionario | None:
    return db.get(Funcionario, funcionario_id)


def tax_id_exists(db: Session, cpf: str, exclude_id: int | None = None) -> bool:
    query = db.query(Funcionario.id).filter(Funcionario.cpf == normalize_cpf(cpf))
    if exclude_id is not None:
        query = query.filter(Funcionario.id != exclude_id)
    return query.first() is not None


def create_funcionario(db: Session, data: dict[str, Any]) -> Funcionario:
    funcionario = Funcionario(**data)
    db.add(funcionario)
    _flush_or_conflict(db)
    db.refresh(funcionario)
    logger.info("Created funcionario id=%s", funcionario.id)
    return funcionario


def update_funcionario(db: Session, funcionario_id: int, changes: dict[str, Any]) -> Funcionario | None:
    """Apply only the supplied attributes. Returns None when the id is unknown."""
    funcionario = db.get(Funcionario, funcionario_id)
    if not funcionario:
        return None

    for key, value in changes.items():
        setattr(funcionario, key, value)

    _flush_or_conflict(db)
    db.refresh(funcionario)
    logger.info("Updated funcionario id=%s fields=%s", funcionario_id, sorted(changes))
    return funcionario


def delete_funcionario(db: Session, funcionario_id: int) -> bool:
    removed = (
        db.query(Funcionario)
        .filter(Funcionario.id == funcionario_id)
        .delete()
    )
    if removed:
        logger.info("Deleted funcionario id=%s", funcionario_id)
    return removed > 0
