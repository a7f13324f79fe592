# tests/domain/test_validadores.py
import random

import pytest

from cadastro.domain.documentos.validadores import (
    apenas_digitos,
    digitos_verificadores_cnpj,
    digitos_verificadores_cpf,
    validar_cnpj,
    validar_cpf,
)


def test_apenas_digitos_remove_pontuacao_e_letras():
    assert apenas_digitos("111.444.777-35") == "11144477735"
    assert apenas_digitos("ab1c2") == "12"
    assert apenas_digitos(None) == ""
    assert apenas_digitos("") == ""


def test_cpf_referencia_valido():
    assert validar_cpf("11144477735") is True
    assert validar_cpf("111.444.777-35") is True


def test_cpf_ultimo_digito_corrompido():
    assert validar_cpf("11144477736") is False


@pytest.mark.parametrize("digito", "0123456789")
def test_cpf_digitos_iguais_sempre_invalido(digito: str):
    assert validar_cpf(digito * 11) is False


def test_cpf_gerados_sao_validos():
    rng = random.Random(20240501)
    for _ in range(200):
        base = "".join(rng.choice("0123456789") for _ in range(9))
        if len(set(base)) == 1:
            continue
        assert validar_cpf(base + digitos_verificadores_cpf(base)) is True


@pytest.mark.parametrize("entrada", ["", None, "123", "1114447773", "111444777350", "abc"])
def test_cpf_entradas_invalidas_nao_lancam(entrada):
    assert validar_cpf(entrada) is False


def test_cpf_digitos_verificadores_referencia():
    assert digitos_verificadores_cpf("111444777") == "35"
    assert digitos_verificadores_cpf("529982247") == "25"


def test_cnpj_referencia_valido():
    assert validar_cnpj("11.222.333/0001-81") is True
    assert validar_cnpj("33000167000101") is True


def test_cnpj_digito_corrompido():
    assert validar_cnpj("11222333000182") is False
    assert validar_cnpj("11222333000191") is False


def test_cnpj_digitos_verificadores_referencia():
    assert digitos_verificadores_cnpj("112223330001") == "81"


def test_cnpj_gerados_sao_validos():
    rng = random.Random(7)
    for _ in range(200):
        base = "".join(rng.choice("0123456789") for _ in range(12))
        if len(set(base)) == 1:
            continue
        assert validar_cnpj(base + digitos_verificadores_cnpj(base)) is True


@pytest.mark.parametrize("entrada", ["", None, "00000000000000", "11111111111111", "1122233300018", "abc"])
def test_cnpj_entradas_invalidas_nao_lancam(entrada):
    assert validar_cnpj(entrada) is False
