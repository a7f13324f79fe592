from pydantic import BaseModel, Field

from cadastro.domain.acesso.sessao import Sessao

from .campos import FormularioDTO


class LoginInDTO(FormularioDTO):
    cpf: str = Field(min_length=1)
    senha: str = Field(min_length=1)


class AlterarSenhaInDTO(FormularioDTO):
    senha_atual: str = Field(min_length=1)
    nova_senha: str
    confirmacao: str


class SessaoDTO(BaseModel):
    usuario_id: str
    nome: str
    cpf: str  # mascarado
    is_admin: bool
    permissoes: list[str]
    expira_em: str

    @classmethod
    def de_sessao(cls, s: Sessao) -> "SessaoDTO":
        return cls(
            usuario_id=s.usuario_id,
            nome=s.nome,
            cpf=s.cpf.mascarado,
            is_admin=s.is_admin,
            permissoes=sorted(s.permissoes),
            expira_em=s.expira_em.isoformat(),
        )


class LoginDTO(BaseModel):
    token: str
    tipo: str = "bearer"
    sessao: SessaoDTO
