from __future__ import annotations

from typing import Union

from pydantic import BaseModel
from sqlalchemy import update
from sqlmodel import Session

from .errors import PedidoNaoEncontrado
from .models import STATUS_ENTREGUE, MegPedido, MegPedidoItem


class EntregaResultado(BaseModel):
    id: int
    status: str


def marcar_entregue(session: Session, pedido_id: Union[int, float]) -> EntregaResultado:
    """
    Marca o pedido e todos os seus itens como ENTREGUE numa única transação.

    Pedido inexistente lança PedidoNaoEncontrado e nada é alterado. Qualquer
    erro no meio desfaz as duas atualizações (rollback do session.begin()).
    Chamar de novo num pedido já entregue apenas regrava o mesmo valor.
    """
    with session.begin():
        row = session.execute(
            update(MegPedido)
            .where(MegPedido.id == pedido_id)
            .values(status=STATUS_ENTREGUE)
            .returning(MegPedido.id, MegPedido.status)
            .execution_options(synchronize_session=False)
        ).first()
        if row is None:
            raise PedidoNaoEncontrado(pedido_id)

        session.execute(
            update(MegPedidoItem)
            .where(MegPedidoItem.pedido_id == row.id)
            .values(status=STATUS_ENTREGUE)
            .execution_options(synchronize_session=False)
        )
    return EntregaResultado(id=row.id, status=row.status)
