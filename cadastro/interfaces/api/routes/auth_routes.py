# cadastro/interfaces/api/routes/auth_routes.py
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from cadastro.application.dtos.auth_dto import AlterarSenhaInDTO, LoginDTO, LoginInDTO, SessaoDTO
from cadastro.application.services.auth_service import AuthService
from cadastro.domain.acesso.sessao import Sessao
from cadastro.domain.erros import CredenciaisInvalidasError, SenhaInvalidaError
from cadastro.interfaces.api.dependencies import get_auth_service, get_sessao

router = APIRouter(prefix="/auth", tags=["Autenticacao"])


@router.post("/login", response_model=LoginDTO)
def login(
    dados: LoginInDTO,
    service: AuthService = Depends(get_auth_service),  # noqa: B008
) -> LoginDTO:
    try:
        sessao = service.login(dados.cpf, dados.senha)
    except CredenciaisInvalidasError as err:
        raise HTTPException(status_code=401, detail=str(err)) from err
    return LoginDTO(token=sessao.token, sessao=SessaoDTO.de_sessao(sessao))


@router.post("/logout", status_code=204)
def logout(
    sessao: Sessao = Depends(get_sessao),  # noqa: B008
    service: AuthService = Depends(get_auth_service),  # noqa: B008
) -> Response:
    service.logout(sessao)
    return Response(status_code=204)


@router.get("/me", response_model=SessaoDTO)
def me(sessao: Sessao = Depends(get_sessao)) -> SessaoDTO:  # noqa: B008
    return SessaoDTO.de_sessao(sessao)


@router.put("/senha", status_code=204)
def alterar_senha(
    dados: AlterarSenhaInDTO,
    sessao: Sessao = Depends(get_sessao),  # noqa: B008
    service: AuthService = Depends(get_auth_service),  # noqa: B008
) -> Response:
    try:
        service.alterar_senha(sessao, dados)
    except SenhaInvalidaError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err
    except CredenciaisInvalidasError as err:
        raise HTTPException(status_code=401, detail=str(err)) from err
    return Response(status_code=204)
