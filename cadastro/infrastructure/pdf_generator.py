# cadastro/infrastructure/pdf_generator.py
from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from html import escape


def gerar_pdf_relatorio(titulo: str, cabecalho: Sequence[str], linhas: Sequence[Sequence[str]]) -> bytes:
    """Gera o relatorio impresso de uma listagem.

    Raises RuntimeError if weasyprint is not installed.
    """
    try:
        from weasyprint import HTML  # type: ignore[import-untyped,import-not-found]
    except ImportError as err:
        msg = "PDF export requires weasyprint. Install with: pip install cadastro-contratos[pdf]"
        raise RuntimeError(msg) from err

    html = montar_html(titulo, cabecalho, linhas)
    return HTML(string=html).write_pdf()  # type: ignore[no-any-return]


def montar_html(titulo: str, cabecalho: Sequence[str], linhas: Sequence[Sequence[str]]) -> str:
    th = "".join(f"<th>{escape(c)}</th>" for c in cabecalho)
    rows = "".join(
        "<tr>" + "".join(f"<td>{escape(v) or '-'}</td>" for v in linha) + "</tr>" for linha in linhas
    )
    gerado_em = datetime.now().strftime("%d/%m/%Y %H:%M")

    return f"""<!DOCTYPE html>
<html lang="pt-BR">
<head>
<meta charset="utf-8">
<title>{escape(titulo)}</title>
<style>
    body {{ font-family: Arial, sans-serif; margin: 40px; font-size: 11px; color: #333; }}
    h1 {{ font-size: 18px; border-bottom: 2px solid #333; padding-bottom: 8px; }}
    table {{ width: 100%; border-collapse: collapse; margin-top: 8px; }}
    th, td {{ border: 1px solid #ddd; padding: 6px 8px; text-align: left; }}
    th {{ background-color: #f5f5f5; font-weight: bold; }}
    .rodape {{ font-size: 10px; color: #888; font-style: italic; margin-top: 16px; }}
</style>
</head>
<body>
<h1>{escape(titulo)}</h1>
<table>
    <tr>{th}</tr>
    {rows}
</table>
<p class="rodape">Total de registros: {len(linhas)} | Gerado em {gerado_em}</p>
</body>
</html>"""
