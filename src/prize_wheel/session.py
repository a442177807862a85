# src/prize_wheel/session.py
# Sessão de jogo: dona da roleta e do pipeline por frame
# (landmarks -> direção -> setor -> prêmio).

from typing import NamedTuple, Optional

from tracking.heading import HeadingEstimator, HeadingVector, MissingLandmark

from .prizes import prize_for
from .resolver import NO_SECTOR, GazeSectorResolver
from .sectors import generate_wheel
from .settings import default_settings


class FrameResult(NamedTuple):
    heading: Optional[HeadingVector]
    sector_index: Optional[int]
    prize: Optional[int]
    skipped: bool = False


SKIPPED_FRAME = FrameResult(None, NO_SECTOR, None, skipped=True)


class GameSession:
    """
    Guarda a roleta gerada e o último prêmio exibido.

    A roleta é criada uma vez (generate) e só muda num reset explícito.
    Redesenhar a tela (resize) usa a mesma instância.
    """

    def __init__(self, settings: dict = None, rng=None):
        self.settings = settings or default_settings()
        self.rng = rng
        self.estimator = HeadingEstimator(self.settings["sensitivity"])
        self.resolver = GazeSectorResolver(self.settings["display_is_mirrored"])
        self._wheel = None
        self.last_prize = 0
        self.last_heading = None
        self.last_sector_index = NO_SECTOR

    @property
    def wheel(self):
        return self._wheel

    @property
    def sectors(self):
        return self._wheel.sectors if self._wheel is not None else ()

    def generate(self, palette=None, sector_count=None):
        """Sorteia (ou re-sorteia, num reset) a roleta da sessão."""
        palette = palette if palette is not None else self.settings["palette"]
        sector_count = sector_count if sector_count is not None else self.settings["sector_count"]
        self._wheel = generate_wheel(
            palette, sector_count, rng=self.rng,
            weight_range=(self.settings["weight_min"], self.settings["weight_max"]),
        )
        self.last_sector_index = NO_SECTOR
        return self._wheel

    def load_wheel(self, wheel):
        """Usa uma roleta já montada (ex.: build_wheel com layout fixo)."""
        self._wheel = wheel
        self.last_sector_index = NO_SECTOR
        return self._wheel

    def current_prize_color(self):
        if self._wheel is None or self.last_sector_index is NO_SECTOR:
            return None
        return self._wheel[self.last_sector_index].color

    def process_landmarks(self, landmarks) -> FrameResult:
        try:
            heading = self.estimator.estimate(landmarks)
        except MissingLandmark:
            # Frame ignorado: o prêmio exibido continua o anterior
            return SKIPPED_FRAME

        self.last_heading = heading
        index = self.resolver.resolve(heading, self._wheel)
        if index is NO_SECTOR:
            return FrameResult(heading, NO_SECTOR, None)

        prize = prize_for(self._wheel[index].color)
        self.last_sector_index = index
        self.last_prize = prize
        return FrameResult(heading, index, prize)

    def process_faces(self, faces) -> FrameResult:
        """Processa todos os rostos do frame; o último resolvido prevalece."""
        result = SKIPPED_FRAME
        for landmarks in faces or ():
            frame_result = self.process_landmarks(landmarks)
            if not frame_result.skipped:
                result = frame_result
        return result
