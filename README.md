# agencia

A small model of a travel agency. It covers tourist products such as flights
and the tour packages built from them. It also covers the people who use the
agency (travellers, administrators and travel agents) and the bookings that tie
travellers to packages. All text the package produces is in Brazilian
Portuguese.

## Modules

### `agencia.produtos`

- `ProdutoTuristico` is the abstract base for anything the agency sells. Its
  fields are `id`, `nome`, `descricao`, `preco_base` and `disponibilidade`.
  `atualizar_disponibilidade(quantidade_vendida)` takes sold units off the
  stock and never goes below zero.
- `Voo` is a flight. It adds `origem`, `destino`, `data_partida`,
  `data_chegada` and `companhia_aerea`. `preco()` returns the base price plus a
  fixed fee of 50.00. `detalhes()` describes the flight, including its price
  and the seats left.

### `agencia.pacote`

`PacoteTuristico` is a bundle of products.

- `adicionar_produto(produto)` adds a product and ignores `None`.
- `calcular_preco(desconto_percentual=10.0)` sums the product prices. It
  applies the discount only when the percentage is strictly between 0 and 100.
- `verificar_disponibilidade(quantidade=1)` is true only when the package has
  products and every one of them has at least `quantidade` units in stock.
- `detalhes()` lists the name, the description, the discounted price and the
  included items.

### `agencia.usuarios`

- `TipoRole` is the role of a user.
- `Usuario` is the base account.
- `Viajante` and `Administrador` are user types. `painel()` returns the
  header text of a user's panel.
- `Administrador.ver_clientes(viajantes)` returns a listing of the given
  travellers with their total count.

### `agencia.reserva`

`Reserva(id, viajante, data_reserva)` is a traveller's booking. It starts in
`StatusReserva.PENDENTE`. Creating one with no traveller raises
`ReservaError`.

- `adicionar_pacote(pacote)` adds a package and refreshes `preco_total`.
- `calcular_preco_total()` recomputes the sum of the discounted package prices.
- `confirmar()` behaves as follows:
  - It returns `False` if the booking is not pending.
  - It raises `ReservaError` if a package is unavailable, and leaves the stock
    untouched.
  - Otherwise it takes one unit from every product in every package, marks the
    booking `CONFIRMADA` and returns `True`.
- `cancelar()` cancels a pending or confirmed booking.
- `detalhes()` describes the booking.

### `agencia.agente`

`AgenteDeViagem` is a travel agent.

`criar_pacote(pacotes_nacionais, pacotes_internacionais, entrada=None, saida=None)`
prompts for the following, from `entrada` (default stdin) to `saida` (default
stdout):

- origin city
- destination city
- number of days
- price
- package type

It builds a package named `"<origem> - <destino>"` holding one flight with 20
seats. Choice `1` appends it to the national list and any other choice to the
international list. The method returns the new package. It raises `ValueError`
on malformed numbers and `EOFError` if the input ends early.

### `agencia.sistema`

`SistemaAgencia` holds the agency's data:

- `viajantes`
- `admins`
- `agentes`
- `pacotes_nacionais`
- `pacotes_internacionais`

`menu_viajante(entrada=None, saida=None)` runs the traveller menu over the
given streams. The options are:

1. list the national packages
2. list the international packages
3. "my trips"
4. return

The menu runs until option 4 is chosen or the input ends.

## Example

```python
from agencia.produtos import Voo
from agencia.pacote import PacoteTuristico
from agencia.usuarios import Viajante
from agencia.reserva import Reserva

voo = Voo(
    "voo1", "Recife - Lisboa", "Voo direto", 1000.0, 20,
    "Recife", "Lisboa", "2025-01-10", "2025-01-11", "Companhia Exemplo",
)
pacote = PacoteTuristico("pct1", "Lisboa", "Sete dias em Lisboa")
pacote.adicionar_produto(voo)

print(pacote.calcular_preco())   # 945.0 (10% off 1050.0)
print(pacote.detalhes())

viajante = Viajante("v1", "Ana", "ana@example.com", "password")
reserva = Reserva("r1", viajante, "2025-01-01")
reserva.adicionar_pacote(pacote)
reserva.confirmar()
print(voo.disponibilidade)        # 19
print(reserva.detalhes())
```

## What it does not do

- The package has no command to run and no main menu.
- It has no login.
- It has no interactive menus for administrators or travel agents beyond the
  methods above.
- It does not load any initial catalogue of users or packages. A
  `SistemaAgencia` starts empty unless you fill its lists.
- Bookings are not linked to the "my trips" menu entry. That entry always
  reports that there are no trips.
- Nothing is saved to storage.

## Tests

Install the package with the `test` extra and run `pytest`.