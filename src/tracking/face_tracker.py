# src/tracking/face_tracker.py
# Thread da câmera: lê frames, roda o Face Mesh e publica os landmarks.
# O cálculo de prêmio NÃO roda aqui: a UI consome os landmarks no seu
# próprio loop, então a roleta só é lida por uma thread.

import threading
import time

import cv2
import mediapipe as mp

FACE_MESH_CONFIG = {
    'max_num_faces': 1,
    'refine_landmarks': True,
    'min_detection_confidence': 0.5,
    'min_tracking_confidence': 0.5
}


class FaceTracker(threading.Thread):

    def __init__(self, camera_index: int = 0, width: int = 640, height: int = 480):
        super().__init__(daemon=True, name="FaceTrackerThread")
        self.camera_index = camera_index
        self.width = width
        self.height = height
        self.lock = threading.RLock()
        self.running = False
        self.cap = None
        self.face_mesh = None

        self._latest_frame = None
        self._latest_faces = []
        self._frame_id = 0
        self._face_detected_in_frame = False

    def run(self):
        """Loop principal da thread: captura e detecta rostos."""
        self.face_mesh = mp.solutions.face_mesh.FaceMesh(**FACE_MESH_CONFIG)
        self.cap = cv2.VideoCapture(self.camera_index)

        if not self.cap or not self.cap.isOpened():
            print(f"ERRO: Não foi possível abrir a câmera índice {self.camera_index}")
            self.running = False
            self._release()
            return

        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.height)
        # stop() pode ter chegado enquanto a câmera abria
        if not self.running:
            self._release()
            return
        print(f"[Tracker] Câmera {self.camera_index} aberta.")

        while self.running:
            ret, frame = self.cap.read()
            if not ret:
                time.sleep(0.005)
                continue

            rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
            results = self.face_mesh.process(rgb)

            faces = []
            if results.multi_face_landmarks:
                faces = [face.landmark for face in results.multi_face_landmarks]

            detected = bool(faces)
            if detected != self._face_detected_in_frame:
                print("[Tracker] Rosto detectado." if detected else "[Tracker] Rosto perdido.")

            # --- ATUALIZA O ESTADO COMPARTILHADO ---
            with self.lock:
                self._latest_frame = rgb
                self._latest_faces = faces
                self._face_detected_in_frame = detected
                self._frame_id += 1

            time.sleep(0.001)

        self._release()

    def get_latest_frame_and_status(self):
        """Chamado pela UI para o preview da câmera (frame já em RGB)."""
        with self.lock:
            frame = self._latest_frame.copy() if self._latest_frame is not None else None
            face_detected = self._face_detected_in_frame
        return frame, face_detected

    def get_faces(self, last_seen_id: int = -1):
        """
        Landmarks do frame mais recente, se for novo.

        Returns:
            (frame_id, faces); faces é None se nada mudou desde last_seen_id.
        """
        with self.lock:
            if self._frame_id == last_seen_id:
                return self._frame_id, None
            return self._frame_id, list(self._latest_faces)

    def start(self):
        if self.is_alive():
            return
        self.running = True
        super().start()

    def stop(self):
        """Pede o fim do loop; a própria thread libera câmera e Face Mesh."""
        self.running = False
        if self.is_alive() and threading.current_thread() is not self:
            self.join(timeout=1.0)

    def _release(self):
        try:
            if self.cap:
                self.cap.release()
                self.cap = None
        except cv2.error as e:
            print(f"ERRO ao liberar a câmera: {e}")
        if self.face_mesh:
            self.face_mesh.close()
            self.face_mesh = None
        print(f"[Tracker] Câmera {self.camera_index} liberada.")
