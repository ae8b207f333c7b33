from datetime import date

from sqlalchemy import Boolean, Date, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
import sqlalchemy as sa

from app.db.base import Base


class Funcionario(Base):
    __tablename__ = "funcionarios"
    __table_args__ = (
        UniqueConstraint("cpf", name="uq_funcionarios_cpf"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    empresa_id: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Personal data
    nome: Mapped[str] = mapped_column(String(255), nullable=False)
    # Digits only, see app.core.tax_id.normalize_cpf
    cpf: Mapped[str] = mapped_column(String(14), nullable=False)
    rg: Mapped[str | None] = mapped_column(String(20), nullable=True)
    data_nascimento: Mapped[date | None] = mapped_column(Date, nullable=True)

    # Employment data
    funcao: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True)
    data_admissao: Mapped[date | None] = mapped_column(Date, nullable=True)
    ctps_numero: Mapped[str | None] = mapped_column(String(20), nullable=True)
    ctps_serie: Mapped[str | None] = mapped_column(String(20), nullable=True)
    pis: Mapped[str | None] = mapped_column(String(20), nullable=True)

    # Contact
    telefone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    whatsapp: Mapped[str | None] = mapped_column(String(50), nullable=True)
    email: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # Address
    endereco: Mapped[str | None] = mapped_column(Text, nullable=True)
    cidade: Mapped[str | None] = mapped_column(String(100), nullable=True)
    estado: Mapped[str | None] = mapped_column(String(2), nullable=True)
    cep: Mapped[str | None] = mapped_column(String(10), nullable=True)

    ativo: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default=sa.text("true"))
    supervisor: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=sa.text("false"))
