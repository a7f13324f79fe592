# cadastro/interfaces/api/routes/registro_routes.py
#
# Rotas CRUD identicas para todos os cadastros, geradas por criar_router.
#
# Design decisions:
#   - /{recurso}/relatorio e registrada ANTES de /{recurso}/{registro_id}
#     (path conflict).
#   - Erros de dominio viram HTTP aqui, no mesmo lugar para todos os
#     cadastros: nao encontrado 404, duplicado 409, regra violada 422.
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response
from pydantic import BaseModel

from cadastro.application.services.registro_service import RegistroService
from cadastro.application.services.relatorio_service import RelatorioService
from cadastro.domain.acesso.permissoes import Permissao
from cadastro.domain.acesso.sessao import Sessao
from cadastro.domain.erros import RegistroDuplicadoError, RegistroNaoEncontradoError
from cadastro.interfaces.api.dependencies import exigir_permissao, get_relatorio_service


@contextmanager
def erros_de_dominio() -> Iterator[None]:
    try:
        yield
    except RegistroNaoEncontradoError as err:
        raise HTTPException(status_code=404, detail=str(err)) from err
    except RegistroDuplicadoError as err:
        raise HTTPException(status_code=409, detail=str(err)) from err
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err


def criar_router(
    recurso: str,
    titulo: str,
    entrada: type[BaseModel],
    saida: type[BaseModel],
    get_service: Callable[..., RegistroService],
    gestao: Permissao | None = None,
) -> APIRouter:
    """Gera as rotas de um cadastro.

    Com `gestao`, toda rota do cadastro exige essa permissao no lugar de
    view/create/edit/delete.
    """
    router = APIRouter(prefix=f"/{recurso}", tags=[titulo])

    def _exigir(permissao: Permissao) -> Callable[..., Sessao]:
        return exigir_permissao(gestao or permissao)

    consultar = _exigir(Permissao.CONSULTAR)

    @router.get("", response_model=list[saida])  # type: ignore[valid-type]
    def listar(
        termo: str = "",
        service: RegistroService = Depends(get_service),  # noqa: B008
        _sessao: Sessao = Depends(consultar),  # noqa: B008
    ) -> list[BaseModel]:
        return service.listar(termo)

    @router.get("/relatorio")
    def relatorio(
        formato: Literal["csv", "json", "pdf"] = Query(...),
        termo: str = "",
        service: RegistroService = Depends(get_service),  # noqa: B008
        relatorio_service: RelatorioService = Depends(get_relatorio_service),  # noqa: B008
        _sessao: Sessao = Depends(consultar),  # noqa: B008
    ) -> Response:
        registros = service.listar(termo)
        colunas = saida.colunas_relatorio  # type: ignore[attr-defined]

        if formato == "json":
            return Response(
                content=relatorio_service.exportar_json(registros),
                media_type="application/json",
            )
        if formato == "csv":
            return Response(
                content=relatorio_service.exportar_csv(titulo, colunas, registros),
                media_type="text/csv",
                headers={"Content-Disposition": f"attachment; filename={recurso}.csv"},
            )
        # pdf
        try:
            from cadastro.infrastructure.pdf_generator import gerar_pdf_relatorio

            pdf_bytes = gerar_pdf_relatorio(
                titulo, [t for _, t in colunas], relatorio_service.linhas(colunas, registros)
            )
        except RuntimeError as err:
            raise HTTPException(status_code=501, detail=str(err)) from err
        return Response(
            content=pdf_bytes,
            media_type="application/pdf",
            headers={"Content-Disposition": f"attachment; filename={recurso}.pdf"},
        )

    @router.get("/{registro_id}", response_model=saida)
    def obter(
        registro_id: str,
        service: RegistroService = Depends(get_service),  # noqa: B008
        _sessao: Sessao = Depends(consultar),  # noqa: B008
    ) -> BaseModel:
        with erros_de_dominio():
            return service.obter(registro_id)

    @router.post("", response_model=saida, status_code=201)
    def incluir(
        dados: entrada,  # type: ignore[valid-type]
        service: RegistroService = Depends(get_service),  # noqa: B008
        _sessao: Sessao = Depends(_exigir(Permissao.INCLUIR)),  # noqa: B008
    ) -> BaseModel:
        with erros_de_dominio():
            return service.incluir(dados)

    @router.put("/{registro_id}", response_model=saida)
    def alterar(
        registro_id: str,
        dados: entrada,  # type: ignore[valid-type]
        service: RegistroService = Depends(get_service),  # noqa: B008
        _sessao: Sessao = Depends(_exigir(Permissao.ALTERAR)),  # noqa: B008
    ) -> BaseModel:
        with erros_de_dominio():
            return service.alterar(registro_id, dados)

    @router.delete("/{registro_id}", status_code=204)
    def excluir(
        registro_id: str,
        service: RegistroService = Depends(get_service),  # noqa: B008
        _sessao: Sessao = Depends(_exigir(Permissao.EXCLUIR)),  # noqa: B008
    ) -> Response:
        with erros_de_dominio():
            service.excluir(registro_id)
        return Response(status_code=204)

    return router
