# tests/domain/test_permissoes.py
from dataclasses import dataclass

import pytest

from cadastro.domain.acesso.permissoes import (
    Permissao,
    PoliticaPermissoes,
    normalizar_permissoes,
    tem_permissao,
)


@dataclass(frozen=True)
class _Titular:
    is_admin: bool
    permissoes: frozenset[str] | None


def _usuario(*permissoes: str, admin: bool = False) -> _Titular:
    return _Titular(is_admin=admin, permissoes=frozenset(permissoes))


def test_view_nao_concede_edit():
    assert tem_permissao(_usuario("view"), "edit") is False


def test_all_concede_delete():
    assert tem_permissao(_usuario("all"), "delete") is True


def test_admin_sem_permissoes_concede_tudo():
    assert tem_permissao(_usuario(admin=True), "delete") is True


def test_sem_usuario():
    assert tem_permissao(None, Permissao.CONSULTAR) is False


def test_conjunto_vazio_ou_ausente():
    assert tem_permissao(_usuario(), "view") is False
    assert tem_permissao(_Titular(is_admin=False, permissoes=None), "view") is False


@pytest.mark.parametrize("permissao", list(Permissao))
def test_all_implica_todas(permissao: Permissao):
    assert tem_permissao(_usuario("all"), permissao) is True


def test_all_concede_permissao_fora_do_enum():
    assert tem_permissao(_usuario("all"), "export") is True
    assert tem_permissao(_usuario("view", "create"), "export") is False


def test_permissao_direta_aceita_enum_ou_texto():
    usuario = _usuario("view", "create")
    assert tem_permissao(usuario, Permissao.INCLUIR) is True
    assert tem_permissao(usuario, "create") is True
    assert tem_permissao(usuario, Permissao.EXCLUIR) is False


def test_politica_configuravel():
    politica = PoliticaPermissoes(implicacoes={"edit": frozenset({"view"})})
    assert tem_permissao(_usuario("edit"), "view", politica) is True
    assert tem_permissao(_usuario("edit"), "delete", politica) is False
    assert tem_permissao(_usuario("all"), "view", politica) is True


def test_perfis_nomeados():
    politica = PoliticaPermissoes()
    assert politica.permissoes_do_perfil("consulta") == frozenset({"view"})
    assert "all" in politica.permissoes_do_perfil("administrador")
    with pytest.raises(ValueError, match="Perfil desconhecido"):
        politica.permissoes_do_perfil("root")


def test_normalizar_permissoes():
    assert normalizar_permissoes([" View ", "edit"]) == frozenset({"view", "edit"})
    with pytest.raises(ValueError, match="desconhecidas"):
        normalizar_permissoes(["view", "sudo"])
