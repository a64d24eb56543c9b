from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from sqlmodel import Session, select

from .filtros import FiltrosDashboard, predicados_item, predicados_pedido
from .models import MegPedido, MegPedidoItem


@dataclass
class DashboardResultado:
    pedidos: List[MegPedido] = field(default_factory=list)
    itens: List[MegPedidoItem] = field(default_factory=list)


def buscar_dashboard(session: Session, filtros: FiltrosDashboard) -> DashboardResultado:
    """
    Duas consultas em sequência (somente leitura):
      1) pedidos filtrados, ordenados por (data, id)
      2) itens dos pedidos retornados, ordenados por (data, pedido_id)
    Sem pedidos, a consulta de itens nem é executada.
    O cliente associa itens a pedidos por pedido_id.
    """
    stmt = (
        select(MegPedido)
        .where(*(p.expressao() for p in predicados_pedido(filtros)))
        .order_by(MegPedido.data, MegPedido.id)
    )
    pedidos = list(session.exec(stmt).all())
    if not pedidos:
        return DashboardResultado()

    ids = [p.id for p in pedidos]
    stmt_itens = (
        select(MegPedidoItem)
        .where(*(p.expressao() for p in predicados_item(filtros, ids)))
        .order_by(MegPedidoItem.data, MegPedidoItem.pedido_id)
    )
    itens = list(session.exec(stmt_itens).all())
    return DashboardResultado(pedidos=pedidos, itens=itens)
