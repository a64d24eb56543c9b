# meg_dashboard/main.py
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import uvicorn
from fastapi import Depends, FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel
from sqlalchemy.engine import Engine
from sqlmodel import Session

from .config import Settings
from .dashboard import buscar_dashboard
from .db import get_session, make_engine
from .entrega import EntregaResultado, marcar_entregue
from .errors import PedidoIdInvalido, PedidoNaoEncontrado
from .filtros import FiltrosDashboard, parse_pedido_id
from .logging_config import get_logger, setup_logger
from .models import MegPedido, MegPedidoItem

# -----------------------------------------------------------------------------
# Config
# -----------------------------------------------------------------------------
LOGGER_NAME = "meg_dashboard"
_UI_PATH = Path(__file__).parent / "public" / "mercado_dashboard_pg.html"

logger = get_logger(LOGGER_NAME)

# -----------------------------------------------------------------------------
# Models
# -----------------------------------------------------------------------------
class DashboardResponse(BaseModel):
    pedidos: List[MegPedido]
    itens: List[MegPedidoItem]


def _erro(status_code: int, mensagem: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": mensagem})

# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------
def home() -> HTMLResponse:
    if not _UI_PATH.exists():
        return HTMLResponse("<h3>mercado_dashboard_pg.html não encontrado</h3>", status_code=404)
    return HTMLResponse(_UI_PATH.read_text(encoding="utf-8"))


def health() -> dict:
    return {"status": "ok"}


def dashboard(
    date_start: Optional[str] = Query(None, alias="dateStart"),
    date_end: Optional[str] = Query(None, alias="dateEnd"),
    status: Optional[str] = Query(None),
    cliente: Optional[str] = Query(None),
    pedido_id: Optional[str] = Query(None, alias="pedidoId"),
    produto: Optional[str] = Query(None),
    session: Session = Depends(get_session),
):
    """
    Pedidos + itens para o dashboard.
    Datas em formato inválido são ignoradas; pedidoId inválido responde 400.
    """
    try:
        filtros = FiltrosDashboard.from_query(
            date_start=date_start,
            date_end=date_end,
            status=status,
            cliente=cliente,
            pedido_id=pedido_id,
            produto=produto,
        )
    except PedidoIdInvalido:
        return _erro(400, "pedidoId inválido")

    try:
        resultado = buscar_dashboard(session, filtros)
    except Exception:
        logger.exception("Erro /api/meg/dashboard")
        return _erro(500, "Erro interno ao buscar dados do dashboard")

    return DashboardResponse(pedidos=resultado.pedidos, itens=resultado.itens)


def entregar(id: str, session: Session = Depends(get_session)):
    """Marca o pedido (e seus itens) como ENTREGUE."""
    try:
        pid = parse_pedido_id(id)
    except PedidoIdInvalido:
        return _erro(400, "ID de pedido inválido")

    try:
        return marcar_entregue(session, pid)
    except PedidoNaoEncontrado:
        return _erro(404, "Pedido não encontrado")
    except Exception:
        logger.exception("Erro /api/meg/pedido/%s/entregar", id)
        return _erro(500, "Erro interno ao atualizar status do pedido")

# -----------------------------------------------------------------------------
# App
# -----------------------------------------------------------------------------
def create_app(engine: Optional[Engine] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Monta a aplicação. O Engine (pool de conexões) é injetado; sem ele,
    é criado a partir das variáveis PG* do ambiente.
    """
    settings = settings or Settings.from_env()
    setup_logger(LOGGER_NAME, level=settings.log_level, filename=settings.log_file)

    app = FastAPI(title="Dashboard MEG", version="1.0")
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
    app.state.engine = engine if engine is not None else make_engine(settings.database_url)
    app.state.settings = settings

    app.add_api_route("/", home, methods=["GET"], response_class=HTMLResponse)
    app.add_api_route("/health", health, methods=["GET"])
    app.add_api_route("/api/meg/dashboard", dashboard, methods=["GET"], response_model=DashboardResponse)
    app.add_api_route("/api/meg/pedido/{id}/entregar", entregar, methods=["POST"], response_model=EntregaResultado)
    return app


# uvicorn meg_dashboard.main:create_app --factory
def run() -> None:
    settings = Settings.from_env()
    app = create_app(settings=settings)
    logger.info("Dashboard MEG rodando na porta %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
