import io

import pytest

from agencia.agente import AgenteDeViagem
from agencia.pacote import PacoteTuristico
from agencia.usuarios import TipoRole


@pytest.fixture
def agente():
    return AgenteDeViagem("ag1", "Carla", "carla@example.com", "password")


def _criar(agente, texto, nacionais=None, internacionais=None):
    nacionais = [] if nacionais is None else nacionais
    internacionais = [] if internacionais is None else internacionais
    saida = io.StringIO()
    pacote = agente.criar_pacote(nacionais, internacionais, io.StringIO(texto), saida)
    return pacote, nacionais, internacionais, saida.getvalue()


def test_role_e_painel(agente):
    assert agente.role is TipoRole.AGENTE_VIAGEM
    assert agente.painel() == "\n--- Painel do Agente de Viagem: Carla ---\n"


def test_cria_pacote_nacional(agente):
    pacote, nacionais, internacionais, saida = _criar(agente, "Recife\nNatal\n5\n300\n1\n")
    assert nacionais == [pacote]
    assert internacionais == []
    assert pacote.id == "pct1"
    assert pacote.nome == "Recife - Natal"
    assert pacote.descricao == "Pacote de 5 dias para Natal"
    assert "Novo pacote criado com sucesso!" in saida


def test_voo_gerado(agente):
    pacote, _, _, _ = _criar(agente, "Recife\nNatal\n5\n300\n1\n")
    (voo,) = pacote.produtos
    assert voo.id == "voo_gen"
    assert voo.preco_base == 300.0
    assert voo.disponibilidade == 20
    assert voo.origem == "Recife"
    assert voo.destino == "Natal"
    assert voo.companhia_aerea == "a definir"
    assert voo.data_partida == "a definir"


@pytest.mark.parametrize("tipo", ["2", "7"])
def test_tipo_diferente_de_um_e_internacional(agente, tipo):
    pacote, nacionais, internacionais, _ = _criar(agente, f"Rio\nLisboa\n10\n2000\n{tipo}\n")
    assert nacionais == []
    assert internacionais == [pacote]


def test_id_conta_pacotes_existentes(agente):
    nacionais = [PacoteTuristico("a", "A", "a")]
    internacionais = [PacoteTuristico("b", "B", "b"), PacoteTuristico("c", "C", "c")]
    pacote, _, _, _ = _criar(agente, "X\nY\n1\n10\n1\n", nacionais, internacionais)
    assert pacote.id == "pct4"
    assert len(nacionais) == 2


def test_numeros_na_mesma_linha(agente):
    pacote, nacionais, _, _ = _criar(agente, "X\nY\n3 150.5 resto\n1\n")
    assert pacote.produtos[0].preco_base == 150.5
    assert pacote.descricao == "Pacote de 3 dias para Y"
    assert nacionais == [pacote]


def test_numero_invalido(agente):
    with pytest.raises(ValueError):
        _criar(agente, "X\nY\nmuitos\n10\n1\n")


def test_entrada_termina_cedo(agente):
    nacionais = []
    with pytest.raises(EOFError):
        _criar(agente, "X\nY\n3\n", nacionais)
    assert nacionais == []