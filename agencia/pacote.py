"""Tour packages made of several tourism products."""

from __future__ import annotations

from dataclasses import dataclass, field

from agencia.produtos import ProdutoTuristico

DESCONTO_PADRAO = 10.0


@dataclass(eq=False)
class PacoteTuristico:
    """A bundle of products sold together at a discount."""

    id: str
    nome: str
    descricao: str
    produtos: list[ProdutoTuristico] = field(default_factory=list)

    def adicionar_produto(self, produto: ProdutoTuristico | None) -> None:
        """Add a product to the package; ``None`` is ignored."""
        if produto is not None:
            self.produtos.append(produto)

    def calcular_preco(self, desconto_percentual: float = DESCONTO_PADRAO) -> float:
        """Sum of product prices, discounted when the percentage is in (0, 100)."""
        total = sum(produto.preco() for produto in self.produtos)
        if 0.0 < desconto_percentual < 100.0:
            return total * (1.0 - desconto_percentual / 100.0)
        return total

    def verificar_disponibilidade(self, quantidade: int = 1) -> bool:
        """True when the package has products and each has enough stock."""
        return bool(self.produtos) and all(
            produto.disponibilidade >= quantidade for produto in self.produtos
        )

    def detalhes(self) -> str:
        linhas = [
            f"Pacote Turístico: {self.nome}\n",
            f"  Descrição: {self.descricao}\n",
            f"  Preço com Desconto: R$ {self.calcular_preco():.2f}\n",
            "  Itens Inclusos:\n",
        ]
        linhas.extend(f"  - {produto.nome}\n" for produto in self.produtos)
        return "".join(linhas)