from datetime import date

import pytest

from app.core.funcionario_validation import FuncionarioValidationError, validate_funcionario
from tests.helpers import CPF_ANA, valid_payload


def _codes(exc: FuncionarioValidationError) -> dict[str, str]:
    return {e.field: e.code for e in exc.errors}


def test_create_normalizes_record():
    data = validate_funcionario(valid_payload(nome="  Ana Souza  "))
    assert data["nome"] == "Ana Souza"
    assert data["cpf"] == CPF_ANA
    assert data["data_nascimento"] == date(1990, 5, 17)
    assert data["ativo"] is True
    assert data["supervisor"] is False


def test_create_reports_every_missing_required_field():
    with pytest.raises(FuncionarioValidationError) as exc:
        validate_funcionario({"funcao": "Eletricista"})
    assert _codes(exc.value) == {"nome": "required", "cpf": "required"}


def test_blank_name_rejected():
    with pytest.raises(FuncionarioValidationError) as exc:
        validate_funcionario(valid_payload(nome="   "))
    assert _codes(exc.value) == {"nome": "required"}


def test_blank_cpf_rejected():
    with pytest.raises(FuncionarioValidationError) as exc:
        validate_funcionario(valid_payload(cpf=""))
    assert _codes(exc.value) == {"cpf": "required"}


def test_cpf_checksum_and_malformed_have_distinct_codes():
    with pytest.raises(FuncionarioValidationError) as exc:
        validate_funcionario(valid_payload(cpf="529.982.247-24"))
    assert _codes(exc.value) == {"cpf": "cpf_checksum"}

    with pytest.raises(FuncionarioValidationError) as exc:
        validate_funcionario(valid_payload(cpf="111.111.111-11"))
    assert _codes(exc.value) == {"cpf": "cpf_malformed"}


def test_empty_email_becomes_null():
    assert validate_funcionario(valid_payload(email=""))["email"] is None


def test_invalid_email_rejected():
    with pytest.raises(FuncionarioValidationError) as exc:
        validate_funcionario(valid_payload(email="not-an-email"))
    assert "email" in _codes(exc.value)


def test_empty_dates_become_null():
    data = validate_funcionario(valid_payload(data_nascimento="", data_admissao=""))
    assert data["data_nascimento"] is None
    assert data["data_admissao"] is None


def test_invalid_date_rejected():
    with pytest.raises(FuncionarioValidationError) as exc:
        validate_funcionario(valid_payload(data_admissao="2021-02-30"))
    assert "data_admissao" in _codes(exc.value)


def test_estado_is_upper_cased_and_checked():
    assert validate_funcionario(valid_payload(estado="rj"))["estado"] == "RJ"
    assert validate_funcionario(valid_payload(estado=""))["estado"] is None

    with pytest.raises(FuncionarioValidationError) as exc:
        validate_funcionario(valid_payload(estado="XX"))
    assert _codes(exc.value) == {"estado": "estado_invalid"}


def test_unknown_fields_are_ignored():
    data = validate_funcionario(valid_payload(salario=1000, id=99))
    assert "salario" not in data
    assert "id" not in data


def test_multiple_errors_reported_together():
    with pytest.raises(FuncionarioValidationError) as exc:
        validate_funcionario(valid_payload(nome="", cpf="123", email="x@"))
    assert set(_codes(exc.value)) == {"nome", "cpf", "email"}


def test_partial_returns_only_supplied_fields():
    assert validate_funcionario({"ativo": False}, partial=True) == {"ativo": False}


def test_partial_checks_supplied_fields():
    with pytest.raises(FuncionarioValidationError) as exc:
        validate_funcionario({"cpf": "000.000.000-00"}, partial=True)
    assert _codes(exc.value) == {"cpf": "cpf_malformed"}


def test_partial_rejects_null_for_required_field():
    with pytest.raises(FuncionarioValidationError) as exc:
        validate_funcionario({"nome": None}, partial=True)
    assert "nome" in _codes(exc.value)


def test_partial_can_clear_a_date():
    assert validate_funcionario({"data_admissao": ""}, partial=True) == {"data_admissao": None}


def test_non_object_rejected():
    with pytest.raises(FuncionarioValidationError) as exc:
        validate_funcionario(["nome", "cpf"])
    assert _codes(exc.value) == {"__root__": "dict_type"}


def test_error_detail_shape():
    with pytest.raises(FuncionarioValidationError) as exc:
        validate_funcionario({})
    detail = exc.value.to_detail()
    assert detail["message"] == "Dados inválidos"
    assert {"field", "code", "message"} <= set(detail["errors"][0])
