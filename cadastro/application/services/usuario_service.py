# cadastro/application/services/usuario_service.py
#
# Cadastro de usuarios. Difere dos demais cadastros em:
#   - a senha chega em texto puro e so o hash e gravado;
#   - na alteracao, senha omitida mantem o hash atual;
#   - mudar senha, admin ou permissoes (ou excluir) encerra as sessoes
#     abertas do usuario, que carregam as permissoes do momento do login.
from __future__ import annotations

from cadastro.domain.documentos.value_objects import CPF
from cadastro.domain.erros import SenhaInvalidaError
from cadastro.domain.registro.duplicidade import usuario_duplicado
from cadastro.domain.registro.repository import RegistroRepository
from cadastro.domain.usuario.entities import Usuario
from cadastro.infrastructure.senha_service import gerar_hash_senha
from cadastro.infrastructure.sessao_store import SessaoStore
from cadastro.log import log

from ..dtos.usuario_dto import UsuarioDTO, UsuarioInDTO
from .registro_service import RegistroService


class UsuarioService(RegistroService[Usuario, UsuarioDTO]):
    def __init__(self, repo: RegistroRepository[Usuario], sessao_store: SessaoStore) -> None:
        super().__init__(repo, usuario_duplicado, UsuarioDTO.de_dominio)
        self._sessoes = sessao_store

    def _montar(self, dados: UsuarioInDTO, registro_id: str, atual: Usuario | None) -> Usuario:  # type: ignore[override]
        if dados.senha:
            senha_hash = gerar_hash_senha(dados.senha)
        elif atual is not None:
            senha_hash = atual.senha_hash
        else:
            raise SenhaInvalidaError("Senha obrigatoria na inclusao de usuario")
        return dados.para_dominio(registro_id, senha_hash)

    def _apos_alterar(self, anterior: Usuario, atual: Usuario) -> None:
        mudou_acesso = (
            anterior.senha_hash != atual.senha_hash
            or anterior.is_admin != atual.is_admin
            or anterior.permissoes != atual.permissoes
        )
        if mudou_acesso:
            encerradas = self._sessoes.encerrar_do_usuario(atual.id)
            log(f"Acesso de {atual.cpf.mascarado} alterado, {encerradas} sessao(oes) encerrada(s)")

    def _apos_excluir(self, registro_id: str) -> None:
        self._sessoes.encerrar_do_usuario(registro_id)


def novo_administrador(registro_id: str, nome: str, cpf: CPF, senha: str) -> Usuario:
    return Usuario(
        id=registro_id,
        nome=nome,
        cpf=cpf,
        senha_hash=gerar_hash_senha(senha),
        is_admin=True,
        permissoes=frozenset({"all"}),
    )
