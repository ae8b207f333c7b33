import itertools

from fastapi.testclient import TestClient

from app.models.funcionario import Funcionario
from app.models.user import User


def make_cpf(base: str) -> str:
    """Complete a 9-digit base with its two check digits (weights 10..2, then 11..2)."""
    digits = [int(c) for c in base]
    for weight in (10, 11):
        total = sum(d * w for d, w in zip(digits, range(weight, 1, -1)))
        check = 11 - total % 11
        digits.append(0 if check >= 10 else check)
    return "".join(str(d) for d in digits)


def format_cpf(cpf: str) -> str:
    return f"{cpf[:3]}.{cpf[3:6]}.{cpf[6:9]}-{cpf[9:]}"


# Known-good CPFs
CPF_ANA = "52998224725"
CPF_BRUNO = "11144477735"
CPF_CARLA = "93541134780"  # second check digit maps 10 -> 0

_cpf_seq = itertools.count(1)


def login(client: TestClient, *, user_id="u-1", name="Maria Admin", email="maria@empresa.com.br"):
    return client.post(
        "/api/auth/login",
        json={"token": "mock-microsoft-token", "user": {"id": user_id, "name": name, "email": email}},
    )


def create_user(db, external_id: str = "u-1", email="user@test.com", full_name="User", is_active=True) -> User:
    u = User(external_id=external_id, email=email, full_name=full_name, is_active=is_active)
    db.add(u)
    db.commit()
    db.refresh(u)
    return u


def create_funcionario(db, nome: str, cpf: str | None = None, **fields) -> Funcionario:
    if cpf is None:
        cpf = make_cpf(f"{100000000 + next(_cpf_seq) * 7919:09d}")
    f = Funcionario(nome=nome, cpf=cpf, **fields)
    db.add(f)
    db.commit()
    db.refresh(f)
    return f


def valid_payload(**overrides) -> dict:
    payload = {
        "nome": "Ana Souza",
        "cpf": format_cpf(CPF_ANA),
        "rg": "12.345.678-9",
        "data_nascimento": "1990-05-17",
        "funcao": "Analista de RH",
        "data_admissao": "2021-03-01",
        "ctps_numero": "1234567",
        "ctps_serie": "0012",
        "pis": "120.5678.901-2",
        "telefone": "(11) 3333-4444",
        "whatsapp": "(11) 99999-8888",
        "email": "ana.souza@empresa.com.br",
        "endereco": "Rua das Flores, 100",
        "cidade": "São Paulo",
        "estado": "SP",
        "cep": "01001-000",
    }
    payload.update(overrides)
    return payload
