# tests/domain/test_mascaras.py
import pytest

from cadastro.domain.documentos.mascaras import (
    MASCARAS,
    cep_mask,
    cnpj_mask,
    cpf_mask,
    data_mask,
    formatar_cnpj,
    formatar_cpf,
    telefone_mask,
)


def test_cpf_mask_completo():
    assert cpf_mask("11144477735") == "111.444.777-35"


@pytest.mark.parametrize(
    ("entrada", "esperado"),
    [
        ("1", "1"),
        ("1114", "111.4"),
        ("1114447", "111.444.7"),
        ("1114447773", "111.444.777-3"),
        ("", ""),
        (None, ""),
    ],
)
def test_cpf_mask_parcial(entrada, esperado):
    assert cpf_mask(entrada) == esperado


@pytest.mark.parametrize(
    "entrada",
    ["11144477735", "111.444.777-35", "1114447", "111444777359999", "abc123", "", "12.34"],
)
def test_mascaras_idempotentes(entrada):
    for mascara in MASCARAS.values():
        assert mascara(mascara(entrada)) == mascara(entrada)


def test_cpf_mask_trunca_digitos_excedentes():
    assert cpf_mask("111444777359999") == "111.444.777-35"


def test_cnpj_mask():
    assert cnpj_mask("11222333000181") == "11.222.333/0001-81"
    assert cnpj_mask("11222") == "11.222"
    assert cnpj_mask("112223330") == "11.222.333/0"


def test_telefone_fixo_dez_digitos():
    assert telefone_mask("1133334444") == "(11) 3333-4444"


def test_telefone_celular_onze_digitos():
    assert telefone_mask("11987654321") == "(11) 98765-4321"


def test_telefone_parcial():
    assert telefone_mask("11") == "11"
    assert telefone_mask("119") == "(11) 9"


def test_data_mask():
    assert data_mask("01022020") == "01/02/2020"
    assert data_mask("0102") == "01/02"


def test_cep_mask():
    assert cep_mask("01001000") == "01001-000"
    assert cep_mask("01001") == "01001"


def test_formatar_documentos_completos():
    assert formatar_cpf("11144477735") == "111.444.777-35"
    assert formatar_cnpj("11222333000181") == "11.222.333/0001-81"


def test_formatar_tamanho_errado_devolve_digitos():
    assert formatar_cpf("111.444") == "111444"
    assert formatar_cnpj("11.222") == "11222"
