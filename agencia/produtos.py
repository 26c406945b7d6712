"""Tourism products that can be sold on their own or inside a package."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

TAXA_VOO = 50.0


@dataclass(eq=False)
class ProdutoTuristico(ABC):
    """A sellable product with a base price and a limited stock."""

    id: str
    nome: str
    descricao: str
    preco_base: float
    disponibilidade: int

    @abstractmethod
    def preco(self) -> float:
        """Final price of one unit of the product."""

    def atualizar_disponibilidade(self, quantidade_vendida: int) -> None:
        """Remove sold units from the stock, never going below zero."""
        self.disponibilidade = max(self.disponibilidade - quantidade_vendida, 0)

    @abstractmethod
    def detalhes(self) -> str:
        """Human-readable description of the product."""


@dataclass(eq=False)
class Voo(ProdutoTuristico):
    """A flight between two cities."""

    origem: str
    destino: str
    data_partida: str
    data_chegada: str
    companhia_aerea: str

    def preco(self) -> float:
        """Base price plus the fixed flight fee."""
        return self.preco_base + TAXA_VOO

    def detalhes(self) -> str:
        return (
            f"Voo: {self.nome} ({self.companhia_aerea})\n"
            f"  De: {self.origem} Para: {self.destino}\n"
            f"  Partida: {self.data_partida} Chegada: {self.data_chegada}\n"
            f"  Preço: R$ {self.preco():.2f}\n"
            f"  Disponíveis: {self.disponibilidade} assentos."
        )