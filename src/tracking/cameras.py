# src/tracking/cameras.py
# Descoberta das câmeras para a tela inicial.

import cv2

CAM_SCAN_MAX = 4


def camera_label(index: int, width: int = 0, height: int = 0, configured: bool = False) -> str:
    label = f"Câmera {index}"
    if width and height:
        label += f" ({width}x{height})"
    if configured:
        label += " - perfil"
    return label


def discover_cameras(configured_index: int = 0, max_test: int = CAM_SCAN_MAX,
                     width: int = None, height: int = None):
    """
    Lista as câmeras que abrem, começando pela câmera configurada no perfil.

    Se width/height forem dados, a câmera é aberta já na resolução do jogo,
    e o rótulo mostra a resolução que o driver aceitou.

    Returns:
        list[dict]: itens {"index", "label"}; nunca vazia (na falta de
        câmeras, devolve a configurada para o jogo tentar abrir depois).
    """
    order = [configured_index] + [i for i in range(max_test) if i != configured_index]
    cams = []
    for i in order:
        cap = cv2.VideoCapture(i)
        try:
            if not cap.isOpened():
                continue
            if width and height:
                cap.set(cv2.CAP_PROP_FRAME_WIDTH, width)
                cap.set(cv2.CAP_PROP_FRAME_HEIGHT, height)
            got_w = int(cap.get(cv2.CAP_PROP_FRAME_WIDTH) or 0)
            got_h = int(cap.get(cv2.CAP_PROP_FRAME_HEIGHT) or 0)
            cams.append({"index": i,
                         "label": camera_label(i, got_w, got_h, i == configured_index)})
        finally:
            cap.release()

    if not cams:
        print(f"AVISO: nenhuma câmera respondeu; usando a câmera {configured_index}.")
        cams = [{"index": configured_index,
                 "label": camera_label(configured_index, configured=True)}]
    return cams


def find_camera(cams, label: str = None, index: int = None):
    """Câmera pelo rótulo do menu ou pelo índice; a primeira da lista se nada bater."""
    for cam in cams:
        if (label is not None and cam["label"] == label) or (index is not None and cam["index"] == index):
            return cam
    return cams[0]
