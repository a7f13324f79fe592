# cadastro/application/services/relatorio_service.py
#
# Relatorios impressos das listagens. As colunas de cada cadastro vem de
# <DTO>.colunas_relatorio (campo, titulo).
from __future__ import annotations

import csv
import io
import json
from collections.abc import Sequence

from pydantic import BaseModel

Colunas = Sequence[tuple[str, str]]


def _celula(valor: object) -> str:
    if valor is None:
        return ""
    if isinstance(valor, bool):
        return "Sim" if valor else "Nao"
    if isinstance(valor, list):
        return ", ".join(str(v) for v in valor)
    return str(valor)


class RelatorioService:
    def linhas(self, colunas: Colunas, registros: Sequence[BaseModel]) -> list[list[str]]:
        return [[_celula(getattr(r, campo)) for campo, _ in colunas] for r in registros]

    def exportar_json(self, registros: Sequence[BaseModel]) -> str:
        return json.dumps([r.model_dump(mode="json") for r in registros], indent=2, ensure_ascii=False)

    def exportar_csv(self, titulo: str, colunas: Colunas, registros: Sequence[BaseModel]) -> str:
        output = io.StringIO()
        output.write(f"# {titulo.upper()}\n")
        writer = csv.writer(output)
        writer.writerow([t for _, t in colunas])
        writer.writerows(self.linhas(colunas, registros))
        output.write(f"# Total: {len(registros)}\n")
        return output.getvalue()
