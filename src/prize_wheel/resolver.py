# src/prize_wheel/resolver.py
# Descobre para qual setor da roleta o raio (direção da cabeça) aponta.

import math

from .sectors import FULL_TURN, WHEEL_END, WHEEL_START

# Resultado quando ainda não existe roleta gerada
NO_SECTOR = None


def normalize_angle(angle: float) -> float:
    """Leva o ângulo para [-π/2, 3π/2), o mesmo domínio dos setores."""
    while angle < WHEEL_START:
        angle += FULL_TURN
    while angle >= WHEEL_END:
        angle -= FULL_TURN
    return angle


def ray_angle(heading, display_is_mirrored: bool = True) -> float:
    """
    Ângulo do raio que o usuário VÊ.

    Com a tela espelhada (scaleX(-1) na imagem), o raio desenhado é
    (-x, y) em relação ao vetor calculado. O setor precisa ser escolhido
    pelo raio desenhado, senão o prêmio mostrado não bate com o que o
    participante está apontando.
    """
    x, y = heading[0], heading[1]
    if display_is_mirrored:
        x = -x
    return normalize_angle(math.atan2(y, x))


def locate_angle(wheel, angle: float) -> int:
    """Índice do setor com start <= angle < end (varredura linear)."""
    angle = normalize_angle(angle)
    for i, sector in enumerate(wheel.sectors):
        if sector.start_angle <= angle < sector.end_angle:
            return i
    # Só acontece por resíduo de ponto flutuante perto de 3π/2:
    # a partição fecha exatamente lá, então o último setor é o correto.
    return wheel.sector_count - 1


def resolve_sector(heading, wheel, display_is_mirrored: bool = True):
    """Índice do setor apontado, ou NO_SECTOR se a roleta não existe."""
    if wheel is None or not wheel.sectors:
        return NO_SECTOR
    return locate_angle(wheel, ray_angle(heading, display_is_mirrored))


class GazeSectorResolver:
    def __init__(self, display_is_mirrored: bool = True):
        self.display_is_mirrored = bool(display_is_mirrored)

    def ray_angle(self, heading) -> float:
        return ray_angle(heading, self.display_is_mirrored)

    def resolve(self, heading, wheel):
        if wheel is None or not wheel.sectors:
            return NO_SECTOR
        return locate_angle(wheel, self.ray_angle(heading))
