"""Bookings of tour packages by travellers."""

from __future__ import annotations

from enum import Enum

from agencia.pacote import PacoteTuristico
from agencia.usuarios import Viajante


class StatusReserva(Enum):
    """Lifecycle state of a booking, valued by its display label."""

    PENDENTE = "Pendente"
    CONFIRMADA = "Confirmada"
    CANCELADA = "Cancelada"
    CONCLUIDA = "Concluída"


class ReservaError(ValueError):
    """Raised when a booking cannot be created or confirmed."""


class Reserva:
    """A traveller's booking of one or more packages."""

    def __init__(self, id: str, viajante: Viajante, data_reserva: str) -> None:
        if viajante is None:
            raise ReservaError("Viajante não pode ser nulo.")
        self.id = id
        self.viajante = viajante
        self.data_reserva = data_reserva
        self.pacotes: list[PacoteTuristico] = []
        self.status = StatusReserva.PENDENTE
        self.preco_total = 0.0

    def adicionar_pacote(self, pacote: PacoteTuristico | None) -> None:
        """Add a package and refresh the total; ``None`` is ignored."""
        if pacote is not None:
            self.pacotes.append(pacote)
            self.calcular_preco_total()

    def calcular_preco_total(self) -> float:
        """Recompute and store the sum of the discounted package prices."""
        self.preco_total = sum(pacote.calcular_preco() for pacote in self.pacotes)
        return self.preco_total

    def confirmar(self) -> bool:
        """Confirm a pending booking, taking one unit of every product.

        Returns False when the booking is not pending; raises ReservaError
        when a package is not available, leaving the stock untouched.
        """
        if self.status is not StatusReserva.PENDENTE:
            return False
        for pacote in self.pacotes:
            if not pacote.verificar_disponibilidade(1):
                raise ReservaError(f"Pacote {pacote.nome} não disponível.")
        for pacote in self.pacotes:
            for produto in pacote.produtos:
                produto.atualizar_disponibilidade(1)
        self.status = StatusReserva.CONFIRMADA
        return True

    def cancelar(self) -> bool:
        """Cancel a pending or confirmed booking."""
        if self.status in (StatusReserva.PENDENTE, StatusReserva.CONFIRMADA):
            self.status = StatusReserva.CANCELADA
            return True
        return False

    def detalhes(self) -> str:
        nome = self.viajante.nome if self.viajante is not None else "N/A"
        linhas = [
            f"Detalhes da Reserva ID: {self.id}\n",
            f"  Viajante: {nome}\n",
            f"  Status: {self.status.value}\n",
            f"  Preço Total: R$ {self.preco_total:.2f}\n",
        ]
        if self.pacotes:
            linhas.append("  Pacotes:\n")
            linhas.extend(f"  - {pacote.nome}\n" for pacote in self.pacotes)
        return "".join(linhas)