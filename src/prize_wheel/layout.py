# src/prize_wheel/layout.py
# Geometria em pixels da roleta para a UI. Só lê a roleta: um resize
# recalcula isto aqui, nunca os ângulos/pesos dos setores.

import math
from typing import NamedTuple, Optional, Tuple

from .prizes import label_color, prize_label

BORDER_DEG = 0.5            # fatia branca entre setores
COVER_MARGIN_PX = 50
LABEL_PAD_X = 60
LABEL_PAD_Y = 40


class SectorLayout(NamedTuple):
    index: int
    color: str
    # Ângulos no padrão do tk.Canvas: graus, anti-horário a partir das 3h
    tk_start: float
    tk_extent: float
    border_start: float
    border_extent: float
    label: Optional[str]
    label_color: str
    label_xy: Tuple[float, float]


def screen_center(width, height):
    return width / 2, height / 2


def cover_radius(width, height, margin=COVER_MARGIN_PX):
    """Raio grande o bastante para a roleta cobrir a tela toda."""
    cx, cy = screen_center(width, height)
    return math.hypot(cx, cy) + margin


def mirror_x(x, width):
    return width - x


def ray_endpoint(heading, width, height, scale=1.5, display_is_mirrored=False):
    """Ponta do raio que sai do centro da tela na direção da cabeça."""
    cx, cy = screen_center(width, height)
    ray_length = max(width, height) * scale
    end_x = cx + heading[0] * ray_length
    end_y = cy + heading[1] * ray_length
    if display_is_mirrored:
        end_x = mirror_x(end_x, width)
    return end_x, end_y


def label_position(angle, width, height, pad_x=LABEL_PAD_X, pad_y=LABEL_PAD_Y):
    """
    Interseção da reta centro->ângulo com a borda da janela (com margem).
    Ângulos em coordenadas de tela (y para baixo).
    """
    cx, cy = screen_center(width, height)
    dir_x = math.cos(angle)
    dir_y = math.sin(angle)

    t = math.inf
    if dir_x > 0:
        t_right = (width - cx - pad_x) / dir_x
        if t_right > 0:
            t = min(t, t_right)
    elif dir_x < 0:
        t_left = (pad_x - cx) / dir_x
        if t_left > 0:
            t = min(t, t_left)

    if dir_y > 0:
        t_bottom = (height - cy - pad_y) / dir_y
        if t_bottom > 0:
            t = min(t, t_bottom)
    elif dir_y < 0:
        t_top = (pad_y - cy) / dir_y
        if t_top > 0:
            t = min(t, t_top)

    if math.isinf(t):
        # Janela menor que as margens
        return cx, cy
    return cx + dir_x * t, cy + dir_y * t


def sector_layouts(wheel, width, height, border_deg=BORDER_DEG):
    """Lista de setores prontos para desenhar numa janela width x height."""
    if wheel is None:
        return []

    layouts = []
    for i, sector in enumerate(wheel.sectors):
        span_deg = math.degrees(sector.span)
        border = min(border_deg, span_deg)
        # y da tela cresce para baixo; no tk os ângulos crescem para cima
        start_deg = -math.degrees(sector.start_angle)
        layouts.append(SectorLayout(
            index=i,
            color=sector.color,
            tk_start=start_deg,
            tk_extent=-(span_deg - border),
            border_start=start_deg - (span_deg - border),
            border_extent=-border,
            label=prize_label(sector.color),
            label_color=label_color(sector.color),
            label_xy=label_position(sector.mid_angle, width, height),
        ))
    return layouts
