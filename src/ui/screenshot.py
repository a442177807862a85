# src/ui/screenshot.py
# Captura da tela no fim da contagem + moldura decorativa por cima.
import os
from datetime import datetime

from PIL import Image, ImageGrab

FRAME_IMAGE_PATH = "resources/images/win_frame.png"


def build_filename(now: datetime = None) -> str:
    """Nome do arquivo com data/hora, ex.: PartyGame_20261018_213005.png"""
    now = now or datetime.now()
    return f"PartyGame_{now.strftime('%Y%m%d_%H%M%S')}.png"


def load_frame_image(path=FRAME_IMAGE_PATH):
    try:
        return Image.open(path).convert("RGBA")
    except (OSError, ValueError) as e:
        print(f"ERRO ao carregar a moldura '{path}': {e}")
        return None


def compose_with_frame(screenshot: Image.Image, frame_img: Image.Image) -> Image.Image:
    """
    Escala a captura para COBRIR a área da moldura (mantendo a proporção),
    centraliza e desenha a moldura por cima.
    """
    frame_w, frame_h = frame_img.size
    shot_w, shot_h = screenshot.size

    scale = max(frame_w / shot_w, frame_h / shot_h)
    scaled_w = max(1, round(shot_w * scale))
    scaled_h = max(1, round(shot_h * scale))
    offset_x = (frame_w - scaled_w) // 2
    offset_y = (frame_h - scaled_h) // 2

    final = Image.new("RGBA", (frame_w, frame_h), (0, 0, 0, 0))
    scaled = screenshot.convert("RGBA").resize((scaled_w, scaled_h), Image.LANCZOS)
    final.paste(scaled, (offset_x, offset_y))
    final.alpha_composite(frame_img.convert("RGBA"))
    return final


def capture_screen(bbox=None, frame_path=FRAME_IMAGE_PATH) -> Image.Image:
    """
    Captura a área bbox (x0, y0, x1, y1) da tela. Se a moldura não puder
    ser carregada, devolve só a captura.
    """
    shot = ImageGrab.grab(bbox=bbox, all_screens=True)
    frame_img = load_frame_image(frame_path)
    if frame_img is None:
        return shot.convert("RGBA")
    return compose_with_frame(shot, frame_img)


def save_image(image: Image.Image, output_dir: str, now: datetime = None):
    """Salva a imagem no diretório de saída. Retorna o caminho ou None."""
    try:
        os.makedirs(output_dir, exist_ok=True)
        filepath = os.path.join(output_dir, build_filename(now))
        image.save(filepath, format="PNG")
        print(f"[Captura] Imagem salva em {filepath}")
        return filepath
    except OSError as e:
        print(f"ERRO ao salvar a captura: {e}")
        return None
