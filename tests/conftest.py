import pytest

from prize_wheel.sectors import build_wheel

TOP_COLORS = ["#FF78A3", "#47D495", "#FFCC8D"]


@pytest.fixture
def three_equal_wheel():
    # 3 setores de 120° a partir do topo
    return build_wheel(TOP_COLORS, [1.0, 1.0, 1.0])
