from src.services.metrics_service import compute_holdings, grand_total_investment
from src.services.sector_service import SECTOR_COLORS, aggregate_sectors, sector_color, summarize_sectors


def test_sector_totals_and_return(make_holding) -> None:
    computed = compute_holdings(
        [
            make_holding(symbol="A", sector="Tech", purchase_price=100, quantity=10, cmp=120),
            make_holding(symbol="B", sector="Tech", purchase_price=300, quantity=10, cmp=270),
        ]
    )
    [tech] = aggregate_sectors(computed)

    assert tech.sector == "Tech"
    assert tech.total_investment == 4000
    assert tech.total_value == 3900
    assert tech.sector_gain == -100
    assert tech.sector_return == -2.5
    assert tech.sector_return_display == "-2.50"
    assert tech.color == sector_color("Tech")


def test_grouping_is_ordered_partition(make_holding) -> None:
    holdings = [
        make_holding(symbol="A", sector="Power"),
        make_holding(symbol="B", sector="Tech"),
        make_holding(symbol="C", sector="Power"),
        make_holding(symbol="D", sector="Consumer"),
        make_holding(symbol="E", sector="Tech"),
    ]
    sectors = aggregate_sectors(compute_holdings(holdings))

    assert [s.sector for s in sectors] == ["Power", "Tech", "Consumer"]
    assert [[h.symbol for h in s.holdings] for s in sectors] == [["A", "C"], ["B", "E"], ["D"]]
    members = [h.symbol for s in sectors for h in s.holdings]
    assert sorted(members) == ["A", "B", "C", "D", "E"]
    assert sum(s.total_investment for s in sectors) == grand_total_investment(holdings)


def test_zero_investment_sector_return(make_holding) -> None:
    [sector] = aggregate_sectors(compute_holdings([make_holding(sector="Gifted", purchase_price=0, cmp=40)]))

    assert sector.total_investment == 0
    assert sector.sector_gain == 400
    assert sector.sector_return == 0.0
    assert sector.sector_return_display == "0.00"


def test_empty_input_has_no_sectors() -> None:
    assert aggregate_sectors([]) == []


def test_sector_color_is_deterministic() -> None:
    assert sector_color("Tech") == sector_color("Tech")
    # T(84) + e(101) + c(99) + h(104) = 388 -> index 8
    assert sector_color("Tech") == "from-red-600 to-red-500"
    assert sector_color("") == SECTOR_COLORS[0]
    assert all(sector_color(name) in SECTOR_COLORS for name in ["Financial", "Power", "Pipe", "Others"])


def test_sector_color_ignores_grouping_order(make_holding) -> None:
    forward = aggregate_sectors(compute_holdings([make_holding(symbol="A", sector="Power"), make_holding(symbol="B", sector="Pipe")]))
    backward = aggregate_sectors(compute_holdings([make_holding(symbol="B", sector="Pipe"), make_holding(symbol="A", sector="Power")]))

    assert {s.sector: s.color for s in forward} == {s.sector: s.color for s in backward}


def test_summarize_sectors(make_holding) -> None:
    summary = summarize_sectors(
        [
            make_holding(symbol="A", sector="Tech", purchase_price=100, quantity=10, cmp=120),
            make_holding(symbol="B", sector="Power", purchase_price=10, quantity=5, cmp=9),
            make_holding(symbol="C", sector="Tech", purchase_price=300, quantity=10, cmp=270),
        ]
    )

    assert [(s.sector, s.investment, s.gain_loss) for s in summary] == [
        ("Tech", 4000, -100),
        ("Power", 50, -5),
    ]
