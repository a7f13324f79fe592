# cadastro/application/services/auth_service.py
#
# Login, logout e troca de senha.
#
# Invariantes:
#   - Falha de login nao distingue CPF inexistente de senha errada.
#   - CPF so aparece em log mascarado.
#   - Administrador inicial so e criado com a tabela de usuarios vazia.
#   - Trocar a propria senha encerra as demais sessoes do usuario, nao a atual.
from __future__ import annotations

import uuid
from dataclasses import replace

from cadastro.domain.acesso.sessao import Sessao
from cadastro.domain.documentos.value_objects import CPF
from cadastro.domain.erros import CredenciaisInvalidasError, SenhaInvalidaError
from cadastro.infrastructure.config import Settings
from cadastro.infrastructure.repositories.duckdb_usuario_repo import DuckDBUsuarioRepo
from cadastro.infrastructure.senha_service import gerar_hash_senha, verificar_senha
from cadastro.infrastructure.sessao_store import SessaoStore
from cadastro.log import log

from ..dtos.auth_dto import AlterarSenhaInDTO
from ..dtos.usuario_dto import SENHA_MINIMA
from .usuario_service import novo_administrador


class AuthService:
    def __init__(self, usuario_repo: DuckDBUsuarioRepo, sessao_store: SessaoStore) -> None:
        self._usuario_repo = usuario_repo
        self._sessoes = sessao_store

    def login(self, cpf_raw: str, senha: str) -> Sessao:
        try:
            cpf = CPF(cpf_raw)
        except ValueError as err:
            log("Login recusado: CPF invalido")
            raise CredenciaisInvalidasError("CPF ou senha invalidos") from err

        usuario = self._usuario_repo.buscar_por_cpf(cpf)
        if usuario is None or not verificar_senha(senha, usuario.senha_hash):
            log(f"Login recusado: {cpf.mascarado}")
            raise CredenciaisInvalidasError("CPF ou senha invalidos")

        sessao = self._sessoes.abrir(usuario)
        log(f"Login: {cpf.mascarado}")
        return sessao

    def logout(self, sessao: Sessao) -> None:
        self._sessoes.encerrar(sessao.token)
        log(f"Logout: {sessao.cpf.mascarado}")

    def alterar_senha(self, sessao: Sessao, dados: AlterarSenhaInDTO) -> None:
        if len(dados.nova_senha) < SENHA_MINIMA:
            raise SenhaInvalidaError(f"A nova senha deve ter pelo menos {SENHA_MINIMA} caracteres")
        if dados.nova_senha != dados.confirmacao:
            raise SenhaInvalidaError("As senhas nao coincidem")

        usuario = self._usuario_repo.obter(sessao.usuario_id)
        if usuario is None:
            raise CredenciaisInvalidasError("Usuario da sessao nao existe mais")
        if not verificar_senha(dados.senha_atual, usuario.senha_hash):
            raise SenhaInvalidaError("Senha atual incorreta")

        self._usuario_repo.alterar(replace(usuario, senha_hash=gerar_hash_senha(dados.nova_senha)))
        encerradas = self._sessoes.encerrar_do_usuario(usuario.id, exceto=sessao.token)
        log(f"Senha alterada: {sessao.cpf.mascarado}, {encerradas} outra(s) sessao(oes) encerrada(s)")

    def garantir_administrador(self, settings: Settings) -> bool:
        """Cria o administrador configurado quando nao ha nenhum usuario.

        Returns:
            True se o administrador foi criado.
        """
        if self._usuario_repo.contar() > 0:
            return False
        if not (settings.admin_cpf and settings.admin_senha):
            log("Nenhum usuario cadastrado e ADMIN_CPF/ADMIN_SENHA ausentes")
            return False

        cpf = CPF(settings.admin_cpf)
        self._usuario_repo.incluir(
            novo_administrador(str(uuid.uuid4()), settings.admin_nome, cpf, settings.admin_senha)
        )
        log(f"Administrador inicial criado: {cpf.mascarado}")
        return True
