# cadastro/interfaces/api/routes/stats_routes.py
from fastapi import APIRouter, Depends

from cadastro.application.dtos.stats_dto import StatsDTO
from cadastro.domain.acesso.permissoes import Permissao
from cadastro.domain.acesso.sessao import Sessao
from cadastro.infrastructure.repositories.duckdb_stats_repo import DuckDBStatsRepo
from cadastro.interfaces.api.dependencies import exigir_permissao, get_stats_repo

router = APIRouter()


@router.get("/stats", response_model=StatsDTO)
def get_stats(
    repo: DuckDBStatsRepo = Depends(get_stats_repo),  # noqa: B008
    _sessao: Sessao = Depends(exigir_permissao(Permissao.CONSULTAR)),  # noqa: B008
) -> StatsDTO:
    data = repo.obter_stats()
    return StatsDTO(**data)  # type: ignore[arg-type]
