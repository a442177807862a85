# src/tracking/heading.py
# Converte os landmarks 3D do Face Mesh em um vetor 2D de direção da cabeça.

from typing import NamedTuple

import numpy as np

# Índices do MediaPipe Face Mesh
NOSE_TIP = 1
LEFT_EAR_TRAGION = 234
RIGHT_EAR_TRAGION = 454

# Os landmarks são normalizados (0-1), então a diferença nariz-orelhas é
# minúscula. O fator amplifica o desvio para um raio visível.
DEFAULT_SENSITIVITY = 20.0


class MissingLandmark(LookupError):
    """Um dos landmarks necessários não veio no frame."""

    def __init__(self, index: int, name: str):
        super().__init__(f"landmark {name} ({index}) ausente")
        self.index = index
        self.name = name


class HeadingVector(NamedTuple):
    x: float
    y: float


def _point(landmarks, index, name):
    """Extrai (x, y, z) de um landmark do MediaPipe, tupla ou linha numpy."""
    try:
        lm = landmarks[index]
    except (IndexError, KeyError, TypeError):
        raise MissingLandmark(index, name) from None
    if lm is None:
        raise MissingLandmark(index, name)

    if hasattr(lm, "x"):
        return np.array([lm.x, lm.y, getattr(lm, "z", 0.0)], dtype=float)
    coords = np.asarray(lm, dtype=float).ravel()
    if coords.size < 2:
        raise MissingLandmark(index, name)
    if coords.size == 2:
        coords = np.append(coords, 0.0)
    return coords[:3]


class HeadingEstimator:
    """
    Simula um PnP simplificado: compara a ponta do nariz com o centro da
    cabeça (aproximado pelo ponto médio entre os tragus das orelhas).

    O vetor NÃO é normalizado: a magnitude acompanha o desvio da cabeça e
    é usada apenas para o comprimento do raio desenhado.
    """

    def __init__(self, sensitivity: float = DEFAULT_SENSITIVITY):
        self.sensitivity = float(sensitivity)

    def estimate(self, landmarks) -> HeadingVector:
        nose = _point(landmarks, NOSE_TIP, "NOSE_TIP")
        left_ear = _point(landmarks, LEFT_EAR_TRAGION, "LEFT_EAR_TRAGION")
        right_ear = _point(landmarks, RIGHT_EAR_TRAGION, "RIGHT_EAR_TRAGION")

        # Centro aproximado do eixo de rotação da cabeça (z = profundidade)
        mid_point = (left_ear + right_ear) / 2.0

        # Só o desvio no plano importa para o raio 2D
        direction = nose[:2] - mid_point[:2]
        direction = direction * self.sensitivity
        return HeadingVector(float(direction[0]), float(direction[1]))
