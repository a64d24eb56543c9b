from typing import Iterator

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.engine import Engine, make_url
from sqlmodel import SQLModel, Session, create_engine

def _on_sqlite_connect(dbapi_conn, _conn_record):
    cur = dbapi_conn.cursor()
    cur.execute("PRAGMA foreign_keys = ON;")
    cur.close()

def make_engine(url, **kwargs) -> Engine:
    """
    Cria o Engine (e o pool de conexões) para a URL informada.
    Em produção é PostgreSQL (postgresql+psycopg); SQLite serve para dev/testes.
    """
    is_sqlite = make_url(url).get_backend_name() == "sqlite"
    if is_sqlite:
        connect_args = dict(kwargs.pop("connect_args", {}))
        connect_args.setdefault("check_same_thread", False)
        kwargs["connect_args"] = connect_args
    kwargs.setdefault("pool_pre_ping", True)
    engine = create_engine(url, **kwargs)
    if is_sqlite:
        # registra o hook no Engine síncrono
        event.listen(engine, "connect", _on_sqlite_connect)
    return engine

def init_db(engine: Engine) -> None:
    """Cria meg_pedido e meg_pedido_item (apenas dev/testes; em produção as tabelas já existem)."""
    from . import models  # registra tabelas
    SQLModel.metadata.create_all(engine)

def get_session(request: Request) -> Iterator[Session]:
    with Session(request.app.state.engine) as session:
        yield session
