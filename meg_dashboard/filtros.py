# meg_dashboard/filtros.py
"""
Validação dos parâmetros do dashboard e montagem dos filtros das consultas.

Cada filtro ativo vira um `Predicado` (coluna, operador, valor). O valor sempre
segue como parâmetro vinculado pelo SQLAlchemy; nenhum texto de SQL é montado
por concatenação.
"""

from __future__ import annotations

import math
import operator
import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Callable, List, NamedTuple, Optional, Sequence, Union

from sqlmodel import col

from .errors import PedidoIdInvalido
from .models import STATUS_AGUARDANDO, MegPedido, MegPedidoItem

# YYYY-MM-DD estrito (só dígitos ASCII)
_ISO_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")

# decimal simples, com expoente opcional (sem "_", "nan", "inf")
_NUMBER_RE = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")

# literais inteiros 0x.., 0b.., 0o.. (sem sinal, como Number() do JS)
_RADIX_RE = re.compile(r"^0([xX][0-9a-fA-F]+|[bB][01]+|[oO][0-7]+)$")

PedidoId = Union[int, float]


def iso_date_only(raw: Optional[str]) -> Optional[date]:
    """
    Aceita só 'YYYY-MM-DD'. Qualquer outro formato (ou data impossível,
    como 2024-02-30) é tratado como filtro ausente, sem erro.
    """
    if not raw:
        return None
    raw = str(raw).strip()
    if not _ISO_DATE_RE.match(raw):
        return None
    try:
        return date.fromisoformat(raw)
    except ValueError:
        return None


def parse_pedido_id(raw: str) -> PedidoId:
    """
    Converte o texto em número finito. Valores inteiros voltam como int.
    Segue Number() do JS: texto vazio vale 0 e 0x/0b/0o são aceitos.
    Lança PedidoIdInvalido se não for número.
    """
    txt = (raw or "").strip()
    if not txt:
        return 0
    if _RADIX_RE.match(txt):
        return int(txt, 0)
    if not _NUMBER_RE.match(txt):
        raise PedidoIdInvalido(raw)
    num = float(txt)
    if not math.isfinite(num):
        raise PedidoIdInvalido(raw)
    return int(num) if num.is_integer() else num


class Predicado(NamedTuple):
    coluna: Any
    operador: Callable[[Any, Any], Any]
    valor: Any

    def expressao(self):
        return self.operador(self.coluna, self.valor)


def _in(coluna, valores):
    return col(coluna).in_(valores)


@dataclass
class FiltrosDashboard:
    date_start: Optional[date] = None
    date_end: Optional[date] = None
    status: Optional[str] = STATUS_AGUARDANDO
    cliente: Optional[str] = None
    pedido_id: Optional[PedidoId] = None
    produto: Optional[str] = None

    @classmethod
    def from_query(
        cls,
        date_start: Optional[str] = None,
        date_end: Optional[str] = None,
        status: Optional[str] = None,
        cliente: Optional[str] = None,
        pedido_id: Optional[str] = None,
        produto: Optional[str] = None,
    ) -> "FiltrosDashboard":
        """
        Normaliza a query string do dashboard:
          - datas fora do formato viram None
          - status vazio/ausente usa o padrão AGUARDANDO ENTREGA
          - strings vazias (após strip) significam "sem filtro"
          - pedidoId inválido lança PedidoIdInvalido
        """
        status_txt = (status or STATUS_AGUARDANDO).strip()
        pid_txt = (pedido_id or "").strip()
        return cls(
            date_start=iso_date_only(date_start),
            date_end=iso_date_only(date_end),
            status=status_txt or None,
            cliente=(cliente or "").strip() or None,
            pedido_id=parse_pedido_id(pid_txt) if pid_txt else None,
            produto=(produto or "").strip() or None,
        )


def predicados_pedido(filtros: FiltrosDashboard) -> List[Predicado]:
    preds: List[Predicado] = []
    if filtros.date_start:
        preds.append(Predicado(MegPedido.data, operator.ge, filtros.date_start))
    if filtros.date_end:
        # inclusivo no fim: data < fim + 1 dia
        preds.append(Predicado(MegPedido.data, operator.lt, filtros.date_end + timedelta(days=1)))
    if filtros.status:
        preds.append(Predicado(MegPedido.status, operator.eq, filtros.status))
    if filtros.cliente:
        preds.append(Predicado(MegPedido.cliente, operator.eq, filtros.cliente))
    if filtros.pedido_id is not None:
        preds.append(Predicado(MegPedido.id, operator.eq, filtros.pedido_id))
    return preds


def predicados_item(filtros: FiltrosDashboard, pedido_ids: Sequence[int]) -> List[Predicado]:
    preds = [Predicado(MegPedidoItem.pedido_id, _in, list(pedido_ids))]
    if filtros.produto:
        preds.append(Predicado(MegPedidoItem.produto, operator.eq, filtros.produto))
    return preds
