"""Users of the agency system and their roles."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from enum import Enum


class TipoRole(Enum):
    """Role a user plays in the system."""

    VIAJANTE = "viajante"
    ADMINISTRADOR = "administrador"
    AGENTE_VIAGEM = "agente_viagem"


class Usuario(ABC):
    """Base class for every user account."""

    def __init__(self, id: str, nome: str, email: str, senha: str, role: TipoRole) -> None:
        self.id = id
        self.nome = nome
        self.email = email
        self.senha_hash = senha
        self.role = role

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, nome={self.nome!r})"

    @abstractmethod
    def painel(self) -> str:
        """Header text of the user's panel."""


class Viajante(Usuario):
    """A traveller who books packages."""

    def __init__(self, id: str, nome: str, email: str, senha: str) -> None:
        super().__init__(id, nome, email, senha, TipoRole.VIAJANTE)

    def painel(self) -> str:
        return f"\n--- Painel do Viajante: {self.nome} ---\n"


class Administrador(Usuario):
    """An administrator who can inspect the registered clients."""

    def __init__(self, id: str, nome: str, email: str, senha: str) -> None:
        super().__init__(id, nome, email, senha, TipoRole.ADMINISTRADOR)

    def painel(self) -> str:
        return f"\n--- Painel do Administrador: {self.nome} ---\n"

    def ver_clientes(self, viajantes: Iterable[Viajante]) -> str:
        """Listing of the given travellers with their total count."""
        viajantes = list(viajantes)
        linhas = [
            "\n--- Clientes com Reserva ---\n",
            f"Total de viajantes cadastrados: {len(viajantes)}\n",
        ]
        linhas.extend(f" - {viajante.nome}\n" for viajante in viajantes)
        return "".join(linhas)