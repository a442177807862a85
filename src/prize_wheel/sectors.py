# src/prize_wheel/sectors.py
# Geração da roleta: setores com pesos aleatórios e cores/prêmios sorteados.

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

# A roleta começa no topo (12 horas) e fecha uma volta completa
WHEEL_START = -math.pi / 2
WHEEL_END = 3 * math.pi / 2
FULL_TURN = 2 * math.pi

DEFAULT_SECTOR_COUNT = 20
# Limite inferior > 0 evita setores degenerados de largura zero
DEFAULT_WEIGHT_RANGE = (0.4, 1.2)


@dataclass(frozen=True)
class Sector:
    start_angle: float
    end_angle: float
    weight: float
    color: str

    @property
    def span(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def mid_angle(self) -> float:
        return self.start_angle + self.span / 2

    def contains(self, angle: float) -> bool:
        # Intervalo semiaberto: inclui o início, exclui o fim
        return self.start_angle <= angle < self.end_angle


@dataclass(frozen=True)
class SectorWheel:
    sectors: Tuple[Sector, ...]
    total_weight: float

    @property
    def sector_count(self) -> int:
        return len(self.sectors)

    @property
    def colors(self) -> Tuple[str, ...]:
        return tuple(s.color for s in self.sectors)

    @property
    def weights(self) -> Tuple[float, ...]:
        return tuple(s.weight for s in self.sectors)

    def __len__(self):
        return len(self.sectors)

    def __iter__(self):
        return iter(self.sectors)

    def __getitem__(self, index) -> Sector:
        return self.sectors[index]


def build_wheel(colors: Sequence[str], weights: Sequence[float]) -> SectorWheel:
    """
    Monta a roleta a partir de cores e pesos já definidos.

    Cada setor ocupa (peso / peso_total) * 2π radianos, em sequência a partir
    de -π/2. O início de cada setor é exatamente o fim do anterior e o último
    termina exatamente em 3π/2, sem frestas nem sobreposição.
    """
    if len(colors) != len(weights):
        raise ValueError("colors e weights precisam ter o mesmo tamanho")
    if not colors:
        raise ValueError("a roleta precisa de pelo menos um setor")
    if any(w <= 0 for w in weights):
        raise ValueError("todos os pesos precisam ser positivos")

    total_weight = float(sum(weights))
    sectors = []
    current_angle = WHEEL_START
    last = len(colors) - 1
    for i, (color, weight) in enumerate(zip(colors, weights)):
        span = (weight / total_weight) * FULL_TURN
        end_angle = WHEEL_END if i == last else current_angle + span
        sectors.append(Sector(current_angle, end_angle, float(weight), color))
        current_angle = end_angle

    return SectorWheel(tuple(sectors), total_weight)


def assign_colors(palette: Sequence[str], sector_count: int, rng: np.random.Generator):
    """Uma cópia de cada cor (cobertura total) + sorteios uniformes, embaralhados."""
    assignments = list(palette)
    while len(assignments) < sector_count:
        assignments.append(palette[int(rng.integers(len(palette)))])

    # Fisher-Yates, para as cores "semente" não ficarem agrupadas no início
    for i in range(len(assignments) - 1, 0, -1):
        j = int(rng.integers(i + 1))
        assignments[i], assignments[j] = assignments[j], assignments[i]
    return assignments


def generate_wheel(palette: Sequence[str],
                   sector_count: int = DEFAULT_SECTOR_COUNT,
                   rng: np.random.Generator = None,
                   weight_range: Tuple[float, float] = DEFAULT_WEIGHT_RANGE) -> SectorWheel:
    """
    Sorteia uma roleta nova.

    Args:
        palette: cores possíveis (cada uma aparece pelo menos uma vez).
        sector_count: total de setores, >= len(palette).
        rng: gerador injetável (np.random.default_rng(seed) nos testes).
        weight_range: intervalo [min, max) dos pesos de cada setor.
    """
    palette = list(palette)
    if not palette:
        raise ValueError("a paleta não pode ser vazia")
    if sector_count < len(palette):
        raise ValueError(
            f"sector_count ({sector_count}) menor que a paleta ({len(palette)})")
    low, high = weight_range
    if not 0 < low < high:
        raise ValueError(f"intervalo de pesos inválido: {weight_range}")

    if rng is None:
        rng = np.random.default_rng()

    colors = assign_colors(palette, sector_count, rng)
    weights = rng.uniform(low, high, size=sector_count)
    return build_wheel(colors, [float(w) for w in weights])
