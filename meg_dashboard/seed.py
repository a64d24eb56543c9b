# meg_dashboard/seed.py
from __future__ import annotations
from datetime import date, timedelta
from random import Random
from typing import Optional
from sqlalchemy import delete, func
from sqlalchemy.engine import Engine
from sqlmodel import Session, select
from .config import Settings
from .db import init_db, make_engine
from .logging_config import setup_logger
from .models import STATUS_AGUARDANDO, MegPedido, MegPedidoItem

# ---------- Parâmetros do seed (ajuste à vontade) ----------
PEDIDOS = 120
ITENS_POR_PEDIDO_MIN = 1
ITENS_POR_PEDIDO_MAX = 4
DATA_INICIAL = date(2025, 1, 2)
DIAS = 90
CLIENTES = ["Mercado Central", "Padaria Boa Vista", "Restaurante Sabor", "Lanchonete do Zé",
            "Hortifruti Verde", "Empório São Jorge"]
NOMES = ["Ana Souza", "Bruno Lima", "Carla Dias", "Diego Alves", "Elisa Rocha", "Fábio Nunes"]
RUAS = ["Rua das Flores", "Av. Brasil", "Rua XV de Novembro", "Av. Paulista", "Rua do Comércio"]
PRODUTOS = {
    "Arroz": 27.90, "Feijão": 8.49, "Açúcar": 4.99, "Café": 18.90, "Óleo": 7.59,
    "Leite": 5.29, "Farinha": 6.10, "Macarrão": 4.35,
}

logger = setup_logger("meg_dashboard.seed")

def popular(session: Session, pedidos: int = PEDIDOS, seed: int = 42) -> int:
    """Insere pedidos e itens AGUARDANDO ENTREGA; determinístico para um mesmo seed."""
    rnd = Random(seed)
    for _ in range(pedidos):
        dia = DATA_INICIAL + timedelta(days=rnd.randint(0, DIAS - 1))
        ped = MegPedido(
            data=dia,
            cliente=rnd.choice(CLIENTES),
            nome=rnd.choice(NOMES),
            endereco=f"{rnd.choice(RUAS)}, {rnd.randint(1, 2000)}",
            total=0.0,
            status=STATUS_AGUARDANDO,
            step="1",
        )
        session.add(ped); session.flush()  # libera ped.id

        total = 0.0
        for produto in rnd.sample(sorted(PRODUTOS), rnd.randint(ITENS_POR_PEDIDO_MIN, ITENS_POR_PEDIDO_MAX)):
            q = rnd.randint(1, 10)
            preco = PRODUTOS[produto]
            session.add(MegPedidoItem(data=dia, produto=produto, preco=preco, quantidade=q,
                                      status=STATUS_AGUARDANDO, pedido_id=ped.id))
            total += q * preco
        ped.total = round(total, 2)

    session.commit()
    return pedidos

def run(engine: Optional[Engine] = None, pedidos: int = PEDIDOS) -> None:
    engine = engine if engine is not None else make_engine(Settings.from_env().database_url)
    init_db(engine)

    with Session(engine) as s:
        # limpa na ordem certa (FKs)
        s.execute(delete(MegPedidoItem))
        s.execute(delete(MegPedido))
        s.commit()

        popular(s, pedidos=pedidos)

        def count(model): return s.exec(select(func.count()).select_from(model)).one()
        logger.info("Contagens após seed: pedidos=%s itens=%s", count(MegPedido), count(MegPedidoItem))

if __name__ == "__main__":
    run()
