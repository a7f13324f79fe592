# cadastro/interfaces/api/dependencies.py
from collections.abc import Callable
from functools import lru_cache

import duckdb
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from cadastro.application.dtos.contrato_dto import ContratoDTO
from cadastro.application.dtos.entidade_dto import EntidadeDTO
from cadastro.application.dtos.indice_dto import IndiceDTO
from cadastro.application.dtos.modalidade_dto import ModalidadeDTO
from cadastro.application.dtos.municipio_dto import MunicipioDTO
from cadastro.application.dtos.responsavel_dto import ResponsavelDTO
from cadastro.application.dtos.sistema_dto import SistemaDTO
from cadastro.application.services.auth_service import AuthService
from cadastro.application.services.municipio_service import MunicipioService
from cadastro.application.services.registro_service import RegistroService
from cadastro.application.services.relatorio_service import RelatorioService
from cadastro.application.services.usuario_service import UsuarioService
from cadastro.domain.acesso.permissoes import Permissao, tem_permissao
from cadastro.domain.acesso.sessao import Sessao
from cadastro.domain.registro import duplicidade
from cadastro.infrastructure.config import get_settings
from cadastro.infrastructure.duckdb_connection import get_cursor
from cadastro.infrastructure.repositories.duckdb_contrato_repo import DuckDBContratoRepo
from cadastro.infrastructure.repositories.duckdb_entidade_repo import DuckDBEntidadeRepo
from cadastro.infrastructure.repositories.duckdb_indice_repo import DuckDBIndiceRepo
from cadastro.infrastructure.repositories.duckdb_modalidade_repo import DuckDBModalidadeRepo
from cadastro.infrastructure.repositories.duckdb_municipio_repo import DuckDBMunicipioRepo
from cadastro.infrastructure.repositories.duckdb_responsavel_repo import DuckDBResponsavelRepo
from cadastro.infrastructure.repositories.duckdb_sistema_repo import DuckDBSistemaRepo
from cadastro.infrastructure.repositories.duckdb_stats_repo import DuckDBStatsRepo
from cadastro.infrastructure.repositories.duckdb_usuario_repo import DuckDBUsuarioRepo
from cadastro.infrastructure.sessao_store import SessaoStore

_bearer = HTTPBearer(auto_error=False)


@lru_cache(maxsize=1)
def get_sessao_store() -> SessaoStore:
    return SessaoStore(ttl_minutos=get_settings().sessao_ttl_minutos)


def get_sessao(
    credenciais: HTTPAuthorizationCredentials | None = Depends(_bearer),  # noqa: B008
    store: SessaoStore = Depends(get_sessao_store),  # noqa: B008
) -> Sessao:
    sessao = store.obter(credenciais.credentials) if credenciais else None
    if sessao is None:
        raise HTTPException(
            status_code=401,
            detail="Sessao ausente ou expirada",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return sessao


def exigir_permissao(permissao: Permissao) -> Callable[[Sessao], Sessao]:
    def _verificar(sessao: Sessao = Depends(get_sessao)) -> Sessao:  # noqa: B008
        if not tem_permissao(sessao, permissao):
            raise HTTPException(status_code=403, detail=f"Permissao '{permissao.value}' necessaria")
        return sessao

    return _verificar


def get_entidade_service(cursor: duckdb.DuckDBPyConnection = Depends(get_cursor)) -> RegistroService:  # noqa: B008
    return RegistroService(DuckDBEntidadeRepo(cursor), duplicidade.entidade_duplicada, EntidadeDTO.de_dominio)


def get_municipio_service(cursor: duckdb.DuckDBPyConnection = Depends(get_cursor)) -> RegistroService:  # noqa: B008
    return MunicipioService(DuckDBMunicipioRepo(cursor), duplicidade.municipio_duplicado, MunicipioDTO.de_dominio)


def get_indice_service(cursor: duckdb.DuckDBPyConnection = Depends(get_cursor)) -> RegistroService:  # noqa: B008
    return RegistroService(DuckDBIndiceRepo(cursor), duplicidade.indice_duplicado, IndiceDTO.de_dominio)


def get_modalidade_service(cursor: duckdb.DuckDBPyConnection = Depends(get_cursor)) -> RegistroService:  # noqa: B008
    return RegistroService(DuckDBModalidadeRepo(cursor), duplicidade.modalidade_duplicada, ModalidadeDTO.de_dominio)


def get_responsavel_service(cursor: duckdb.DuckDBPyConnection = Depends(get_cursor)) -> RegistroService:  # noqa: B008
    return RegistroService(
        DuckDBResponsavelRepo(cursor), duplicidade.responsavel_duplicado, ResponsavelDTO.de_dominio
    )


def get_sistema_service(cursor: duckdb.DuckDBPyConnection = Depends(get_cursor)) -> RegistroService:  # noqa: B008
    return RegistroService(DuckDBSistemaRepo(cursor), duplicidade.sistema_duplicado, SistemaDTO.de_dominio)


def get_contrato_service(cursor: duckdb.DuckDBPyConnection = Depends(get_cursor)) -> RegistroService:  # noqa: B008
    return RegistroService(DuckDBContratoRepo(cursor), duplicidade.contrato_duplicado, ContratoDTO.de_dominio)


def get_usuario_service(
    cursor: duckdb.DuckDBPyConnection = Depends(get_cursor),  # noqa: B008
    store: SessaoStore = Depends(get_sessao_store),  # noqa: B008
) -> RegistroService:
    return UsuarioService(DuckDBUsuarioRepo(cursor), store)


def get_auth_service(
    cursor: duckdb.DuckDBPyConnection = Depends(get_cursor),  # noqa: B008
    store: SessaoStore = Depends(get_sessao_store),  # noqa: B008
) -> AuthService:
    return AuthService(DuckDBUsuarioRepo(cursor), store)


def get_relatorio_service() -> RelatorioService:
    return RelatorioService()


def get_stats_repo(cursor: duckdb.DuckDBPyConnection = Depends(get_cursor)) -> DuckDBStatsRepo:  # noqa: B008
    return DuckDBStatsRepo(cursor)
