# meg_dashboard/models.py
from __future__ import annotations
from datetime import date
from typing import Optional
from sqlmodel import Field, SQLModel

STATUS_AGUARDANDO = "AGUARDANDO ENTREGA"
STATUS_ENTREGUE = "ENTREGUE"

class MegPedido(SQLModel, table=True):
    __tablename__ = "meg_pedido"

    id: Optional[int] = Field(default=None, primary_key=True)
    data: date
    cliente: str
    nome: str
    endereco: str
    total: float
    status: str = STATUS_AGUARDANDO
    step: Optional[str] = None  # etapa do pedido, definida fora deste sistema

class MegPedidoItem(SQLModel, table=True):
    __tablename__ = "meg_pedido_item"

    id: Optional[int] = Field(default=None, primary_key=True)
    data: date
    produto: str
    preco: float
    quantidade: int
    status: str = STATUS_AGUARDANDO  # espelha o status do pedido
    pedido_id: int = Field(foreign_key="meg_pedido.id", index=True)
