import io

import pytest

from agencia.pacote import PacoteTuristico
from agencia.produtos import Voo
from agencia.sistema import SistemaAgencia


def _pacote(nome):
    pacote = PacoteTuristico(f"id-{nome}", nome, f"desc {nome}")
    pacote.adicionar_produto(Voo("v", f"Voo {nome}", "d", 100.0, 5, "A", "B", "x", "y", "Z"))
    return pacote


@pytest.fixture
def sistema():
    return SistemaAgencia(
        pacotes_nacionais=[_pacote("Nordeste")],
        pacotes_internacionais=[_pacote("Europa")],
    )


def _rodar(sistema, texto):
    saida = io.StringIO()
    sistema.menu_viajante(io.StringIO(texto), saida)
    return saida.getvalue()


def test_sair_imediatamente(sistema):
    saida = _rodar(sistema, "4\n")
    assert saida.count("--- Menu do Viajante ---") == 1
    assert "4. Voltar para o menu principal" in saida


def test_pacotes_nacionais(sistema):
    saida = _rodar(sistema, "1\n\n4\n")
    assert "--- Pacotes Nacionais Disponíveis ---" in saida
    assert sistema.pacotes_nacionais[0].detalhes() in saida
    assert "Europa" not in saida
    assert saida.count("--- Menu do Viajante ---") == 2


def test_pacotes_internacionais(sistema):
    saida = _rodar(sistema, "2\n\n4\n")
    assert "--- Pacotes Internacionais Disponíveis ---" in saida
    assert sistema.pacotes_internacionais[0].detalhes() in saida
    assert "Nordeste" not in saida


def test_minhas_viagens(sistema):
    saida = _rodar(sistema, "3\n\n4\n")
    assert "Não há nenhuma viagem reservada." in saida
    assert "Pressione Enter para voltar ao menu..." in saida


@pytest.mark.parametrize("texto", ["9\n4\n", "abc\n4\n"])
def test_opcao_invalida(sistema, texto):
    saida = _rodar(sistema, texto)
    assert saida.count("Opção inválida. Tente novamente.") == 1
    assert saida.count("--- Menu do Viajante ---") == 2


def test_linhas_em_branco_ignoradas(sistema):
    saida = _rodar(sistema, "\n\n4\n")
    assert saida.count("--- Menu do Viajante ---") == 1
    assert "Opção inválida" not in saida


def test_fim_da_entrada_encerra(sistema):
    saida = _rodar(sistema, "3\n\n")
    assert saida.count("--- Menu do Viajante ---") == 2
    assert "Não há nenhuma viagem reservada." in saida


def test_sistema_vazio_por_padrao():
    sistema = SistemaAgencia()
    saida = _rodar(sistema, "1\n\n4\n")
    assert sistema.viajantes == []
    assert "Pacote Turístico" not in saida