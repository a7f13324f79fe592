# cadastro/application/services/municipio_service.py
from __future__ import annotations

from cadastro.domain.erros import RegistroDuplicadoError
from cadastro.domain.municipio.entities import Municipio
from cadastro.domain.registro.duplicidade import entidade_vinculada_duplicada

from ..dtos.municipio_dto import MunicipioDTO
from .registro_service import RegistroService


class MunicipioService(RegistroService[Municipio, MunicipioDTO]):
    """Alem do codigo IBGE, nao aceita a mesma entidade vinculada duas vezes."""

    def _validar(self, registro: Municipio) -> None:
        vinculadas = registro.entidades_vinculadas
        for i, vinculada in enumerate(vinculadas):
            if entidade_vinculada_duplicada(vinculada, vinculadas[:i]):
                raise RegistroDuplicadoError(
                    entidade_vinculada_duplicada.registro,
                    entidade_vinculada_duplicada.campo,
                    vinculada.cnpj.formatado,
                )
