# cadastro/domain/registro/duplicidade.py
#
# Verificacao de chave natural repetida, executada pela camada de aplicacao
# antes de incluir ou alterar. O banco nao declara UNIQUE nessas colunas.
#
# Invariantes:
#   - Funcoes puras: nenhuma consulta ao banco, a colecao existente e
#     recebida pronta.
#   - Um registro cujo id == exclude_id nunca conflita consigo mesmo (modo
#     edicao).
#   - Candidato sem chave (ex.: CNPJ vazio) nunca e duplicado; a validacao de
#     formato e responsabilidade do schema do formulario.
from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass
from typing import Any

from cadastro.domain.documentos.validadores import apenas_digitos

ChaveNatural = Callable[[Any], Hashable]


def _campo(obj: Any, nome: str) -> Any:
    if isinstance(obj, dict):
        return obj.get(nome)
    return getattr(obj, nome, None)


def _texto(valor: Any) -> str:
    if valor is None:
        return ""
    return str(getattr(valor, "valor", valor))


def chave_digitos(campo: str) -> ChaveNatural:
    """Chave por documento (CPF/CNPJ) comparado apenas pelos digitos."""
    return lambda obj: apenas_digitos(_texto(_campo(obj, campo)))


def chave_texto(campo: str) -> ChaveNatural:
    """Chave textual sem diferenciar maiusculas/minusculas."""
    return lambda obj: _texto(_campo(obj, campo)).strip().casefold()


def chave_exata(campo: str) -> ChaveNatural:
    return lambda obj: _texto(_campo(obj, campo)).strip()


def chave_composta(*partes: ChaveNatural) -> ChaveNatural:
    return lambda obj: tuple(p(obj) for p in partes)


def _vazia(chave: Hashable) -> bool:
    if isinstance(chave, tuple):
        return any(_vazia(c) for c in chave)
    return chave == ""


def is_duplicado(
    candidato: Any,
    existentes: Iterable[Any],
    chave: ChaveNatural,
    exclude_id: str | None = None,
) -> bool:
    alvo = chave(candidato)
    if _vazia(alvo):
        return False
    for existente in existentes:
        if exclude_id is not None and str(_campo(existente, "id")) == str(exclude_id):
            continue
        if chave(existente) == alvo:
            return True
    return False


@dataclass(frozen=True)
class VerificadorDuplicidade:
    """Verificador pronto para um tipo de cadastro."""

    registro: str
    campo: str  # nome exibido na mensagem de conflito
    chave: ChaveNatural

    def __call__(
        self,
        candidato: Any,
        existentes: Iterable[Any],
        exclude_id: str | None = None,
    ) -> bool:
        return is_duplicado(candidato, existentes, self.chave, exclude_id)


def _ano(obj: Any) -> str:
    valor = _campo(obj, "ano")
    return "" if valor is None else str(int(valor))


def _mes(obj: Any) -> str:
    valor = _texto(_campo(obj, "mes")).strip()
    return valor.zfill(2) if valor else ""


entidade_duplicada = VerificadorDuplicidade("Entidade", "cnpj", chave_digitos("cnpj"))
municipio_duplicado = VerificadorDuplicidade("Municipio", "codigo_ibge", chave_exata("codigo_ibge"))
indice_duplicado = VerificadorDuplicidade(
    "Indice", "nome/mes/ano", chave_composta(chave_texto("nome"), _mes, _ano)
)
modalidade_duplicada = VerificadorDuplicidade("Modalidade", "descricao", chave_texto("descricao"))
responsavel_duplicado = VerificadorDuplicidade("Responsavel", "cpf", chave_digitos("cpf"))
sistema_duplicado = VerificadorDuplicidade("Sistema", "sigla", chave_texto("sigla"))
usuario_duplicado = VerificadorDuplicidade("Usuario", "cpf", chave_digitos("cpf"))
contrato_duplicado = VerificadorDuplicidade(
    "Contrato",
    "numero_contrato/ano_contrato",
    chave_composta(chave_texto("numero_contrato"), chave_exata("ano_contrato")),
)
entidade_vinculada_duplicada = VerificadorDuplicidade(
    "Entidade vinculada", "cnpj", chave_digitos("cnpj")
)
