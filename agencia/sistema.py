"""The agency system holding users and packages, with its interactive menus."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from agencia.agente import AgenteDeViagem
from agencia.pacote import PacoteTuristico
from agencia.usuarios import Administrador, Viajante

_MENU_VIAJANTE = (
    "\n--- Menu do Viajante ---\n"
    "Escolha uma opção:\n"
    "1. Ver pacotes de viagem nacional\n"
    "2. Ver pacotes de viagem internacional\n"
    "3. Minhas viagens\n"
    "4. Voltar para o menu principal\n"
)
_PAUSA = "\nPressione Enter para voltar ao menu..."
_SAIR = 4


def _ler_escolha(entrada: TextIO) -> int | None:
    """Read the next menu choice.

    Blank lines are skipped. Returns None for input that is not an integer;
    raises EOFError when the input is exhausted.
    """
    while True:
        linha = entrada.readline()
        if not linha:
            raise EOFError
        tokens = linha.split()
        if tokens:
            try:
                return int(tokens[0])
            except ValueError:
                return None


@dataclass
class SistemaAgencia:
    """Registered users and the national and international package catalogues."""

    viajantes: list[Viajante] = field(default_factory=list)
    admins: list[Administrador] = field(default_factory=list)
    agentes: list[AgenteDeViagem] = field(default_factory=list)
    pacotes_nacionais: list[PacoteTuristico] = field(default_factory=list)
    pacotes_internacionais: list[PacoteTuristico] = field(default_factory=list)

    def _listar(self, titulo: str, pacotes: list[PacoteTuristico], entrada: TextIO, saida: TextIO) -> None:
        saida.write(f"\n--- {titulo} ---\n")
        for pacote in pacotes:
            saida.write(pacote.detalhes() + "\n")
        saida.write(_PAUSA)
        entrada.readline()

    def menu_viajante(self, entrada: TextIO | None = None, saida: TextIO | None = None) -> None:
        """Run the traveller menu until option 4 is chosen or the input ends."""
        entrada = sys.stdin if entrada is None else entrada
        saida = sys.stdout if saida is None else saida

        while True:
            saida.write(_MENU_VIAJANTE)
            try:
                escolha = _ler_escolha(entrada)
            except EOFError:
                return

            if escolha == 1:
                self._listar("Pacotes Nacionais Disponíveis", self.pacotes_nacionais, entrada, saida)
            elif escolha == 2:
                self._listar(
                    "Pacotes Internacionais Disponíveis", self.pacotes_internacionais, entrada, saida
                )
            elif escolha == 3:
                saida.write("\n--- Minhas Viagens ---\n")
                saida.write("Não há nenhuma viagem reservada.\n")
                saida.write(_PAUSA)
                entrada.readline()
            elif escolha == _SAIR:
                return
            else:
                saida.write("Opção inválida. Tente novamente.\n")