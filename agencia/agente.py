"""Travel agents, who create new tour packages."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any, TextIO

from agencia.pacote import PacoteTuristico
from agencia.produtos import Voo
from agencia.usuarios import TipoRole, Usuario

DISPONIBILIDADE_PADRAO = 20
A_DEFINIR = "a definir"


def _ler_linha(entrada: TextIO) -> str:
    """Read one line without its line terminator; raise EOFError at end of input."""
    linha = entrada.readline()
    if not linha:
        raise EOFError("a entrada terminou antes do esperado")
    return linha.rstrip("\r\n")


def _ler_valores(entrada: TextIO, *conversores: Callable[[str], Any]) -> list[Any]:
    """Read whitespace-separated values across lines, discarding the rest of the last line."""
    valores: list[Any] = []
    while len(valores) < len(conversores):
        for token in _ler_linha(entrada).split():
            if len(valores) == len(conversores):
                break
            valores.append(conversores[len(valores)](token))
    return valores


class AgenteDeViagem(Usuario):
    """A travel agent who can register new packages."""

    def __init__(self, id: str, nome: str, email: str, senha: str) -> None:
        super().__init__(id, nome, email, senha, TipoRole.AGENTE_VIAGEM)

    def painel(self) -> str:
        return f"\n--- Painel do Agente de Viagem: {self.nome} ---\n"

    def criar_pacote(
        self,
        pacotes_nacionais: list[PacoteTuristico],
        pacotes_internacionais: list[PacoteTuristico],
        entrada: TextIO | None = None,
        saida: TextIO | None = None,
    ) -> PacoteTuristico:
        """Ask for the package data, build it and store it in the chosen list.

        Choice 1 files the package as national; any other choice as
        international. Raises ValueError on malformed numbers and EOFError
        when the input ends early.
        """
        entrada = sys.stdin if entrada is None else entrada
        saida = sys.stdout if saida is None else saida

        saida.write("\n--- Criar Novo Pacote ---\n")
        saida.write("Cidade de Origem: ")
        origem = _ler_linha(entrada)
        saida.write("Cidade de Destino: ")
        destino = _ler_linha(entrada)
        saida.write("Quantidade de dias: ")
        saida.write("Preço: ")
        dias, preco = _ler_valores(entrada, int, float)

        nome = f"{origem} - {destino}"
        descricao = f"Pacote de {dias} dias para {destino}"
        numero = len(pacotes_nacionais) + len(pacotes_internacionais) + 1
        pacote = PacoteTuristico(f"pct{numero}", nome, descricao)
        pacote.adicionar_produto(
            Voo(
                "voo_gen",
                nome,
                descricao,
                preco,
                DISPONIBILIDADE_PADRAO,
                origem,
                destino,
                A_DEFINIR,
                A_DEFINIR,
                A_DEFINIR,
            )
        )

        saida.write("Pacote Nacional ou Internacional? (1 - Nacional, 2 - Internacional): ")
        (tipo,) = _ler_valores(entrada, int)
        destino_lista = pacotes_nacionais if tipo == 1 else pacotes_internacionais
        destino_lista.append(pacote)
        saida.write("Novo pacote criado com sucesso!\n")
        return pacote