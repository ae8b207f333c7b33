"""
Seed a handful of demo employees. Safe to run repeatedly: records are keyed by cpf.

    python -m scripts.seed_funcionarios
"""
from datetime import date

from dotenv import load_dotenv

load_dotenv()

from app.core.funcionario_store import create_funcionario, tax_id_exists  # noqa: E402
from app.core.funcionario_validation import validate_funcionario  # noqa: E402
from app.db.session import SessionLocal  # noqa: E402

DEMO_FUNCIONARIOS = [
    {
        "nome": "Ana Souza",
        "cpf": "529.982.247-25",
        "funcao": "Analista de RH",
        "data_admissao": date(2021, 3, 1).isoformat(),
        "email": "ana.souza@empresa.com.br",
        "cidade": "São Paulo",
        "estado": "SP",
        "supervisor": True,
    },
    {
        "nome": "Bruno Lima",
        "cpf": "111.444.777-35",
        "funcao": "Eletricista",
        "data_admissao": date(2022, 7, 18).isoformat(),
        "telefone": "(11) 3333-4444",
        "cidade": "Campinas",
        "estado": "SP",
    },
    {
        "nome": "Carla Mendes",
        "cpf": "935.411.347-80",
        "funcao": "Eletricista",
        "data_admissao": date(2019, 11, 4).isoformat(),
        "ativo": False,
        "cidade": "Belo Horizonte",
        "estado": "MG",
    },
]


def upsert_funcionario(db, payload: dict):
    data = validate_funcionario(payload)
    if tax_id_exists(db, data["cpf"]):
        return None
    return create_funcionario(db, data)


def main():
    db = SessionLocal()
    try:
        print("Seeded funcionarios:")
        for payload in DEMO_FUNCIONARIOS:
            f = upsert_funcionario(db, payload)
            if f:
                print(f.id, f.cpf, f.nome)
            else:
                print("exists", payload["cpf"])
        db.commit()
    finally:
        db.close()

if __name__ == "__main__":
    main()
