import pytest

from prize_wheel.prizes import PALETTE, label_color, prize_for, prize_label


@pytest.mark.parametrize("color, value", [
    ("#FF78A3", 100),
    ("#47D495", 50),
    ("#FFCC8D", 20),
    ("#87C9EA", 10),
    ("#C088D2", 5),
    ("#DDDDDD", 1),
])
def test_prize_table(color, value):
    assert prize_for(color) == value


def test_lookup_ignores_case_and_spaces():
    assert prize_for(" #ff78a3 ") == 100


def test_unknown_color_is_worth_nothing():
    assert prize_for("#000000") == 0
    assert prize_for(None) == 0
    assert prize_label("#000000") is None


def test_palette_order_is_highest_prize_first():
    values = [prize_for(c) for c in PALETTE]

    assert values == sorted(values, reverse=True)
    assert len(PALETTE) == 6


def test_labels():
    assert prize_label("#47D495") == "R$ 50"
    assert label_color("#47D495") == "#47D495"
    # cinza claro usa um tom mais escuro no texto
    assert label_color("#DDDDDD") == "#AAAAAA"
