from datetime import date
from typing import ClassVar

from pydantic import BaseModel, Field, field_validator

from cadastro.domain.acesso.permissoes import normalizar_permissoes
from cadastro.domain.documentos.datas import is_maior_de_idade
from cadastro.domain.documentos.value_objects import CPF
from cadastro.domain.usuario.entities import PERMISSOES_PADRAO, Usuario

from .campos import CPFCampo, DataCampo, FormularioDTO

SENHA_MINIMA = 6


class UsuarioInDTO(FormularioDTO):
    """Formulario de usuario.

    `senha` e obrigatoria na inclusao; na alteracao, omitida mantem a senha
    atual. A regra fica no UsuarioService, que conhece o modo.
    """

    nome: str = Field(min_length=3)
    cpf: CPFCampo
    data_nascimento: DataCampo | None = None
    senha: str | None = Field(default=None, min_length=SENHA_MINIMA)
    is_admin: bool = False
    permissoes: list[str] = Field(default_factory=lambda: sorted(PERMISSOES_PADRAO))

    @field_validator("data_nascimento")
    @classmethod
    def _maior_de_idade(cls, valor: date | None) -> date | None:
        if valor is None:
            return None
        if valor > date.today():
            raise ValueError("Data de nascimento no futuro")
        if not is_maior_de_idade(valor):
            raise ValueError("Usuario deve ter pelo menos 18 anos")
        return valor

    @field_validator("permissoes")
    @classmethod
    def _permissoes_validas(cls, valor: list[str]) -> list[str]:
        return sorted(normalizar_permissoes(valor))

    def para_dominio(self, registro_id: str, senha_hash: str) -> Usuario:
        return Usuario(
            id=registro_id,
            nome=self.nome,
            cpf=CPF(self.cpf),
            senha_hash=senha_hash,
            data_nascimento=self.data_nascimento,
            is_admin=self.is_admin,
            permissoes=frozenset(self.permissoes),
        )


class UsuarioDTO(BaseModel):
    colunas_relatorio: ClassVar[tuple[tuple[str, str], ...]] = (
        ("nome", "Nome"),
        ("cpf", "CPF"),
        ("is_admin", "Administrador"),
        ("permissoes", "Permissoes"),
    )

    id: str
    nome: str
    cpf: str  # mascarado
    data_nascimento: str | None
    is_admin: bool
    permissoes: list[str]

    @classmethod
    def de_dominio(cls, u: Usuario) -> "UsuarioDTO":
        return cls(
            id=u.id,
            nome=u.nome,
            cpf=u.cpf.mascarado,
            data_nascimento=u.data_nascimento.isoformat() if u.data_nascimento else None,
            is_admin=u.is_admin,
            permissoes=sorted(u.permissoes),
        )
