# tests/domain/test_cadastro_entities.py
from decimal import Decimal

import pytest

from cadastro.domain.documentos.value_objects import CNPJ, CPF
from cadastro.domain.entidade.entities import Entidade, TipoEntidade
from cadastro.domain.indice.entities import IndiceCorrecao
from cadastro.domain.municipio.entities import Municipio
from cadastro.domain.usuario.entities import PERMISSOES_PADRAO, Usuario


def test_entidade_razao_social_aparada():
    e = Entidade(
        id="1",
        cnpj=CNPJ("11222333000181"),
        razao_social="  Camara Municipal  ",
        tipo_entidade=TipoEntidade.CAMARA,
        rua="Rua A",
        numero="1",
        bairro="Centro",
        cidade="Itu",
        cep="13300000",
        telefone="1140001000",
    )
    assert e.razao_social == "Camara Municipal"


def test_municipio_codigo_ibge_sete_digitos():
    with pytest.raises(ValueError, match="IBGE"):
        Municipio(id="1", nome="Itu", codigo_ibge="352390", quantidade_habitantes=1, distancia_km=Decimal("0"))


def test_municipio_habitantes_negativo():
    with pytest.raises(ValueError, match="habitantes"):
        Municipio(id="1", nome="Itu", codigo_ibge="3523909", quantidade_habitantes=-1, distancia_km=Decimal("0"))


def test_indice_mes_invalido():
    with pytest.raises(ValueError, match="Mes"):
        IndiceCorrecao(id="1", nome="IPCA", mes="13", ano=2024, valor=Decimal("1"))


def test_indice_nome_do_mes():
    i = IndiceCorrecao(id="1", nome="IPCA", mes="03", ano=2024, valor=Decimal("0.16"))
    assert i.mes_nome == "Marco"


def test_usuario_permissao_padrao_e_view():
    u = Usuario(id="1", nome="Ana", cpf=CPF("11144477735"), senha_hash="x")
    assert u.permissoes == PERMISSOES_PADRAO == frozenset({"view"})
    assert u.is_admin is False


def test_usuario_repr_nao_expoe_hash():
    u = Usuario(id="1", nome="Ana", cpf=CPF("11144477735"), senha_hash="segredo")
    assert "segredo" not in repr(u)
    assert "11144477735" not in repr(u)


def test_usuario_permissao_desconhecida():
    with pytest.raises(ValueError, match="desconhecidas"):
        Usuario(id="1", nome="Ana", cpf=CPF("11144477735"), senha_hash="x", permissoes=frozenset({"root"}))
