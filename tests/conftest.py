from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, select

from meg_dashboard.config import Settings
from meg_dashboard.db import init_db, make_engine
from meg_dashboard.main import create_app
from meg_dashboard.models import MegPedido, MegPedidoItem

AGUARDANDO = "AGUARDANDO ENTREGA"

PEDIDOS = [
    # id, data, cliente, status
    (1, date(2025, 1, 10), "Mercado Central", AGUARDANDO),
    (2, date(2025, 1, 15), "Padaria Boa Vista", AGUARDANDO),
    (3, date(2025, 1, 15), "Mercado Central", "ENTREGUE"),
    (4, date(2025, 1, 31), "Mercado Central", AGUARDANDO),
    (5, date(2025, 2, 1), "Padaria Boa Vista", AGUARDANDO),
]

ITENS = [
    # id, pedido_id, produto
    (10, 1, "Arroz"),
    (11, 1, "Feijão"),
    (20, 2, "Arroz"),
    (30, 3, "Café"),
    (40, 4, "Arroz"),
    (41, 4, "Leite"),
    (50, 5, "Feijão"),
]


def memory_engine():
    return make_engine("sqlite://", poolclass=StaticPool)


@pytest.fixture
def engine():
    eng = memory_engine()
    init_db(eng)
    datas = {}
    with Session(eng) as s:
        for pid, dia, cliente, status in PEDIDOS:
            datas[pid] = dia
            s.add(MegPedido(id=pid, data=dia, cliente=cliente, nome=f"Contato {pid}",
                            endereco=f"Rua {pid}, 100", total=10.0 * pid, status=status, step="1"))
        s.flush()
        for iid, pid, produto in ITENS:
            status = "ENTREGUE" if pid == 3 else AGUARDANDO
            s.add(MegPedidoItem(id=iid, data=datas[pid], produto=produto, preco=5.0,
                                quantidade=2, status=status, pedido_id=pid))
        s.commit()
    yield eng
    eng.dispose()


@pytest.fixture
def statements(engine):
    """SQL emitido pelo engine durante o teste."""
    captured = []

    def _capture(conn, cursor, statement, parameters, context, executemany):
        captured.append(statement)

    event.listen(engine, "before_cursor_execute", _capture)
    yield captured
    event.remove(engine, "before_cursor_execute", _capture)


def make_client(eng):
    return TestClient(create_app(engine=eng, settings=Settings(url_override="sqlite://")))


@pytest.fixture
def client(engine):
    return make_client(engine)


def status_de(eng, pedido_id):
    with Session(eng) as s:
        pedido = s.get(MegPedido, pedido_id)
        itens = [i.status for i in s.exec(select(MegPedidoItem).where(MegPedidoItem.pedido_id == pedido_id).order_by(MegPedidoItem.id))]
        return (pedido.status if pedido else None), itens
