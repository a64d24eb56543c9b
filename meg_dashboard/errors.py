class PedidoIdInvalido(ValueError):
    """O texto recebido não é um número finito."""

    def __init__(self, raw: str):
        super().__init__(f"ID de pedido inválido: {raw!r}")
        self.raw = raw


class PedidoNaoEncontrado(LookupError):
    """Nenhuma linha de meg_pedido com o id informado."""

    def __init__(self, pedido_id):
        super().__init__(f"Pedido não encontrado: {pedido_id}")
        self.pedido_id = pedido_id
