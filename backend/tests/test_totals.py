from decimal import Decimal

from backend.app.domain.item import LineItem
from backend.app.ocr.totals import ObservedTotals, derive_totals, extract_totals


def test_totals_row_on_one_line():
    observed = extract_totals(["Salário 5.000,00", "Totais em R$ 5.000,00 1.000,00 4.000,00"])
    assert observed == ObservedTotals(Decimal("5000.00"), Decimal("1000.00"), Decimal("4000.00"))


def test_totals_row_spread_over_following_lines():
    observed = extract_totals(["Totais em R$", "5.000,00", "1.000,00 4.000,00"])
    assert (observed.gross, observed.deductions, observed.net) == (
        Decimal("5000.00"), Decimal("1000.00"), Decimal("4000.00"),
    )


def test_totals_row_window_is_limited():
    lines = ["Totais", "a", "b", "c", "d", "e", "5.000,00 1.000,00 4.000,00"]
    assert extract_totals(lines) == ObservedTotals()


def test_totals_row_needs_three_values():
    assert extract_totals(["Totais 5.000,00 1.000,00"]) == ObservedTotals()


def test_net_label_beats_totals_row_in_any_order():
    row = "Totais em R$ 5.000,00 1.000,00 4.000,00"
    label = "Total Líquido a receber 3.900,00"
    assert extract_totals([row, label]).net == Decimal("3900.00")
    assert extract_totals([label, row]).net == Decimal("3900.00")
    assert extract_totals([label, row]).gross == Decimal("5000.00")


def test_last_net_label_wins():
    observed = extract_totals(["Total liquido 100,00", "Total líquido 80,00 90,00"])
    assert observed.net == Decimal("90.00")
    assert observed.gross is None


PAYMENTS = [LineItem(description="Soldo", value=Decimal("5000.00")),
            LineItem(description="Adicional", value=Decimal("500.00"))]
DEDUCTIONS = [LineItem(description="IRRF", value=Decimal("700.00"))]


def test_derive_from_items():
    totals = derive_totals(ObservedTotals(), PAYMENTS, DEDUCTIONS)
    assert totals.gross == Decimal("5500.00")
    assert totals.deductions == Decimal("700.00")
    assert totals.net == Decimal("4800.00")


def test_derive_net_floored_at_zero():
    totals = derive_totals(ObservedTotals(), DEDUCTIONS[:0], DEDUCTIONS)
    assert totals.gross == 0
    assert totals.net == 0


def test_observed_net_kept_with_item_sums():
    totals = derive_totals(ObservedTotals(net=Decimal("4000.00")), PAYMENTS, DEDUCTIONS)
    assert (totals.gross, totals.deductions, totals.net) == (
        Decimal("5500.00"), Decimal("700.00"), Decimal("4000.00"),
    )


def test_derive_third_total_from_two_observed():
    totals = derive_totals(ObservedTotals(gross=Decimal("5000.00"), net=Decimal("4000.00")), PAYMENTS, DEDUCTIONS)
    assert totals.deductions == Decimal("1000.00")

    totals = derive_totals(ObservedTotals(deductions=Decimal("1000.00"), net=Decimal("4000.00")), [], [])
    assert totals.gross == Decimal("5000.00")

    totals = derive_totals(ObservedTotals(gross=Decimal("900.00"), deductions=Decimal("1000.00")), [], [])
    assert totals.net == 0
