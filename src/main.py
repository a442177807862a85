# src/main.py
import argparse
import os
import tkinter as tk
from types import SimpleNamespace

import cv2
import numpy as np
import pyautogui
import pygame
import screeninfo
from PIL import Image, ImageOps, ImageTk

# --- Importações das Views ---
from ui.game_view import GameFrame
from ui.result_modal import ResultModal
from ui import screenshot

from tracking.cameras import discover_cameras, find_camera
from tracking.face_tracker import FaceTracker
from prize_wheel import settings as game_settings
from prize_wheel.countdown import Countdown
from prize_wheel.session import GameSession

# --- CONSTANTES ---
PREVIEW_SIZE = (320, 240)  # Usado pela tela de startup
UPDATE_INTERVAL_MS = 33
CAPTURE_DELAY_MS = 100     # tempo para o tk desenhar o texto de vitória
# --- CONSTANTES DE AUDIO ---
SOUND_DIR = "resources/sounds"
TICK_SOUND = os.path.join(SOUND_DIR, "tick.mp3")
WIN_SOUND = os.path.join(SOUND_DIR, "win.mp3")


def parse_args():
    """Parse input arguments."""
    parser = argparse.ArgumentParser(
        description='Roleta da sorte controlada pela direção da cabeça.')
    parser.add_argument(
        '--profile', dest='profile', help='Nome do perfil de configuração (pasta profiles/)',
        default=None, type=str)
    parser.add_argument(
        '--seed', dest='seed', help='Semente do sorteio da roleta (reprodutível)',
        default=None, type=int)
    return parser.parse_args()


# --- CLASSE PRINCIPAL (CONTROLLER) ---
class App(tk.Tk):
    def __init__(self, settings: dict = None, seed: int = None):
        super().__init__()

        self.title("Roleta da Sorte")
        self.configure(bg="#222")
        self.minsize(560, 520)

        # --- Estado do Jogo ---
        self.settings = settings or game_settings.default_settings()
        self.session = GameSession(self.settings, rng=np.random.default_rng(seed))
        self.session.generate()
        self.countdown = Countdown(self.settings["countdown_seconds"])
        self._countdown_job = None
        self._last_frame_id = -1
        self._face_was_missing = False

        # --- Estado Geral do App ---
        self.tracker = None
        self.selected_monitor_index = 0
        self.camera_index = self.settings["camera_index"]

        # --- Estado de Navegação e UI ---
        self.current_screen = None  # A instância da View ativa
        self._update_loop_job = None
        self.result_modal = None

        # Monitores e Câmeras
        self.available_monitors = self._get_monitores_com_fallback()
        print("Monitores detectados:")
        for i, m in enumerate(self.available_monitors):
            print(f"  {i}: {m.width}x{m.height} @ ({m.x},{m.y})")
        self._camera_list = discover_cameras(self.camera_index,
                                             width=self.settings["camera_width"],
                                             height=self.settings["camera_height"])

        # --- Estado do Preview da Tela Inicial ---
        self._preview_cap = None
        self._preview_job = None

        self._init_audio()

        # Tela inicial
        self._build_startup_frame()

    # -------- Utilidades de Hardware/OS ----------
    def _get_monitores_com_fallback(self):
        try:
            mons = screeninfo.get_monitors()
            if mons:
                return mons
        except screeninfo.ScreenInfoError as e:
            print(f"AVISO: screeninfo falhou ({e}), usando pyautogui.")
        size = pyautogui.size()
        return [SimpleNamespace(width=size.width, height=size.height, x=0, y=0)]

    def get_active_monitor(self):
        idx = getattr(self, "selected_monitor_index", 0)
        if 0 <= idx < len(self.available_monitors):
            return self.available_monitors[idx]
        return self.available_monitors[0]

    def move_root_to_monitor(self, idx=None, fullscreen_like=True):
        if idx is not None:
            self.selected_monitor_index = idx
        mon = self.get_active_monitor()
        self.geometry(f"{mon.width}x{mon.height}+{mon.x}+{mon.y}")
        if fullscreen_like:
            try:
                self.attributes("-fullscreen", True)
            except tk.TclError as e:
                print(f"AVISO: tela cheia indisponível: {e}")

    def _init_audio(self):
        """Inicializa o mixer do pygame e carrega os sons."""
        self._tick_sound = None
        self._win_sound = None
        try:
            pygame.mixer.init()
            self._tick_sound = pygame.mixer.Sound(TICK_SOUND)
            self._win_sound = pygame.mixer.Sound(WIN_SOUND)
            print("[Audio] Sons carregados com sucesso.")
        except (pygame.error, FileNotFoundError) as e:
            print(f"[Audio] ERRO ao inicializar ou carregar sons: {e}")

    def play_sound(self, sound_type: str):
        if sound_type == 'tick' and self._tick_sound:
            self._tick_sound.play()
        elif sound_type == 'win' and self._win_sound:
            self._win_sound.play()

    # --------- UI: Tela inicial (Startup) ----------

    def _startup_option(self, frame, title, var, options, command=None):
        tk.Label(frame, text=title, font=("Arial", 14), bg="#222", fg="white").pack()
        tk.OptionMenu(frame, var, *options, command=command).pack(pady=(5, 12))

    def _build_startup_frame(self):
        """Tela inicial: monitor, câmera (com preview) e o resumo da roleta sorteada."""
        self._clear_root()
        frame = tk.Frame(self, bg="#222")
        frame.pack(expand=True, fill="both", padx=30, pady=20)

        tk.Label(frame, text="Roleta da Sorte",
                 font=("Arial", 20, "bold"), bg="#222", fg="white").pack(pady=(0, 4))
        wheel = self.session.wheel
        tk.Label(frame, text=f"{wheel.sector_count} setores - contagem de "
                             f"{self.settings['countdown_seconds']} s",
                 font=("Arial", 11), bg="#222", fg="#AAAAAA").pack(pady=(0, 14))

        monitor_options = [f"Monitor {i} ({m.width}x{m.height})" for i, m in enumerate(self.available_monitors)]
        self.start_monitor_var = tk.StringVar(value=monitor_options[0])
        self._startup_option(frame, "Monitor:", self.start_monitor_var, monitor_options)

        # A câmera do perfil vem primeiro na lista
        cam = find_camera(self._camera_list, index=self.camera_index)
        self.start_camera_var = tk.StringVar(value=cam["label"])
        self._startup_option(frame, "Câmera:", self.start_camera_var,
                             [c["label"] for c in self._camera_list],
                             command=self._on_start_cam_change)

        self.preview_holder = tk.Label(frame, bg="#000")
        self.preview_holder.pack(pady=(4, 10))
        self._start_camera_preview(cam["index"])

        tk.Label(frame, text="Espaço: contagem   F5: nova roleta   C: câmera   Esc: sair",
                 font=("Arial", 10), bg="#222", fg="#AAAAAA").pack()

        btns = tk.Frame(frame, bg="#222")
        btns.pack(pady=10)
        tk.Button(btns, text="Iniciar", font=("Arial", 14, "bold"),
                  command=self._confirmar_startup).pack(side="left", padx=10)
        tk.Button(btns, text="Sair", font=("Arial", 14),
                  command=self.quit_app).pack(side="left", padx=10)

        mon0 = self.available_monitors[0]
        w, h = 600, 620
        self.geometry(f"{w}x{h}+{mon0.x + (mon0.width - w) // 2}+{mon0.y + (mon0.height - h) // 2}")
        self.protocol("WM_DELETE_WINDOW", self.quit_app)

    def _on_start_cam_change(self, selected_label):
        self._start_camera_preview(find_camera(self._camera_list, label=selected_label)["index"])

    def _start_camera_preview(self, cam_index: int):
        self._stop_camera_preview()
        self._preview_cap = cv2.VideoCapture(cam_index)
        self._preview_cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.settings["camera_width"])
        self._preview_cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.settings["camera_height"])
        self._preview_loop()

    def _preview_loop(self):
        """Mostra a câmera como o jogo vai mostrar (espelhada se configurado)."""
        if not self._preview_cap:
            return
        ret, frame = self._preview_cap.read()
        if ret:
            img = Image.fromarray(cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)).resize(PREVIEW_SIZE)
            if self.settings["display_is_mirrored"]:
                img = ImageOps.mirror(img)
            imgtk = ImageTk.PhotoImage(img)
            self.preview_holder.configure(image=imgtk, text="")
            self.preview_holder.image = imgtk
        self._preview_job = self.after(UPDATE_INTERVAL_MS, self._preview_loop)

    def _stop_camera_preview(self):
        if self._preview_job is not None:
            self.after_cancel(self._preview_job)
            self._preview_job = None
        if self._preview_cap is not None:
            self._preview_cap.release()
            self._preview_cap = None

    def _confirmar_startup(self):
        # O preview solta a câmera antes do tracker abri-la
        self._stop_camera_preview()

        try:
            self.selected_monitor_index = int(self.start_monitor_var.get().split()[1])
        except (IndexError, ValueError):
            self.selected_monitor_index = 0
        self.camera_index = find_camera(self._camera_list, label=self.start_camera_var.get())["index"]

        self.move_root_to_monitor(self.selected_monitor_index)
        self.create_game_view()

    # --------- Lógica de Navegação e UI ----------

    def create_game_view(self):
        """Navega para a View do jogo e liga a câmera."""
        self._clear_root()
        self.title("Roleta da Sorte")

        game_view = GameFrame(self, controller=self)
        game_view.pack(fill="both", expand=True)
        self.current_screen = game_view

        self._start_tracker()

        self.bind("<space>", self.start_countdown)
        self.bind("<F5>", self.reset_wheel)
        self.bind("<c>", self.toggle_camera)
        self.bind("<Escape>", lambda event: self.quit_app())
        self.protocol("WM_DELETE_WINDOW", self.quit_app)

        self.update_loop()  # Inicia o loop

    # --------- Câmera ----------

    def _start_tracker(self):
        self.tracker = FaceTracker(
            camera_index=self.camera_index,
            width=self.settings["camera_width"],
            height=self.settings["camera_height"],
        )
        self._last_frame_id = -1
        self.tracker.start()

    def _stop_tracker(self):
        if self.tracker:
            self.tracker.stop()
            self.tracker = None

    def toggle_camera(self, event=None):
        """Liga/desliga a câmera. Desligada, vídeo e raio somem; o prêmio fica."""
        view = self.current_screen
        if not isinstance(view, GameFrame):
            return
        if self.tracker:
            self._stop_tracker()
            view.clear_video()
            view.update_ray(None)
            print("[Tracker] Câmera desligada pelo usuário.")
        else:
            self._start_tracker()

    def reset_wheel(self, event=None):
        """Reset explícito: sorteia uma roleta nova."""
        if self.countdown.running:
            return
        self.session.generate()
        print(f"[Roleta] Nova roleta com {self.session.wheel.sector_count} setores.")
        if isinstance(self.current_screen, GameFrame):
            self.current_screen.redraw_wheel()

    def update_loop(self):
        """Pipeline por frame: landmarks -> direção -> setor -> prêmio."""
        view = self.current_screen
        if self.tracker and isinstance(view, GameFrame):
            frame, _ = self.tracker.get_latest_frame_and_status()
            view.update_video(frame)

            frame_id, faces = self.tracker.get_faces(self._last_frame_id)
            if faces is not None:
                self._last_frame_id = frame_id
                result = self.session.process_faces(faces)
                if result.skipped:
                    # Sem rosto ou landmark faltando: mantém o último prêmio
                    if faces and not self._face_was_missing:
                        print("[Roleta] Landmark ausente, frame ignorado.")
                    self._face_was_missing = True
                    view.update_ray(None)
                else:
                    self._face_was_missing = False
                    view.update_ray(self.session.last_heading)
                    if result.prize is not None:
                        view.set_money_text(f"Você tocou: R$ {result.prize}")

        self._update_loop_job = self.after(UPDATE_INTERVAL_MS, self.update_loop)

    # --------- Contagem regressiva e captura ----------

    def start_countdown(self, event=None):
        if not isinstance(self.current_screen, GameFrame):
            return
        if not self.countdown.start():
            return  # já está contando
        self.current_screen.set_countdown_text(self.countdown.display)
        self.play_sound('tick')
        self._countdown_job = self.after(1000, self._countdown_tick)

    def _countdown_tick(self):
        self._countdown_job = None
        view = self.current_screen
        if not isinstance(view, GameFrame):
            return
        finished = self.countdown.tick()
        view.set_countdown_text(self.countdown.display)
        if finished:
            self._finish_countdown()
            return
        self.play_sound('tick')
        self._countdown_job = self.after(1000, self._countdown_tick)

    def _finish_countdown(self):
        view = self.current_screen
        original_text = view.get_money_text()
        view.set_money_text(f"Parabéns! Você ganhou R$ {self.session.last_prize}")
        self.play_sound('win')
        self.update_idletasks()
        self.after(CAPTURE_DELAY_MS, lambda: self._capture_result(original_text))

    def _capture_result(self, original_text):
        view = self.current_screen
        if not isinstance(view, GameFrame):
            return
        try:
            image = screenshot.capture_screen(view.get_capture_bbox())
        except OSError as e:
            print(f"ERRO na captura de tela: {e}")
            image = None
        finally:
            # Captura feita: restaura o texto e a contagem
            view.set_money_text(original_text)
            self.countdown.reset_display()
            view.set_countdown_text(self.countdown.display)

        if image is None:
            return
        self.result_modal = ResultModal(self, self.get_active_monitor(), on_close=self._save_result)
        self.result_modal.set_image(image)

    def _save_result(self, image):
        screenshot.save_image(image, self.settings["output_dir"])
        self.result_modal = None

    def _clear_root(self):
        if self._update_loop_job is not None:
            self.after_cancel(self._update_loop_job)
            self._update_loop_job = None
        if self._countdown_job is not None:
            self.after_cancel(self._countdown_job)
            self._countdown_job = None

        if self.current_screen and hasattr(self.current_screen, "on_destroy"):
            self.current_screen.on_destroy()
        self.current_screen = None

        for key in ("<space>", "<F5>", "<c>", "<Escape>"):
            self.unbind(key)

        for w in self.winfo_children():
            w.destroy()

    def quit_app(self):
        try:
            self._stop_camera_preview()
            self._clear_root()
            self._stop_tracker()
            pygame.quit()
        finally:
            self.destroy()


def main():
    args = parse_args()
    settings = None
    if args.profile:
        settings = game_settings.load_settings(args.profile)
        if settings is None:
            print("Usando a configuração padrão.")
    app = App(settings=settings, seed=args.seed)
    app.mainloop()


if __name__ == "__main__":
    main()
