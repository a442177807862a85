# src/ui/game_view.py
import tkinter as tk
from PIL import Image, ImageOps, ImageTk

from prize_wheel.layout import cover_radius, ray_endpoint, screen_center, sector_layouts

# Tamanho do vídeo no centro da roleta
VIDEO_WIDTH = 640
VIDEO_HEIGHT = 480

RAY_COLOR = "#0062FF"
RAY_WIDTH = 6
RAY_START_RADIUS = 10
LABEL_FONT = ("Segoe UI", 28, "bold")
OUTLINE_OFFSETS = [(-2, 0), (2, 0), (0, -2), (0, 2), (-2, -2), (2, 2), (-2, 2), (2, -2)]


class GameFrame(tk.Frame):
    """
    A "Visão" (View) do jogo: roleta em tela cheia, vídeo no centro, o raio
    da cabeça por cima e os painéis de prêmio e contagem.
    O 'controller' é a instância principal da classe App.
    """

    def __init__(self, parent, controller):
        self.controller = controller
        super().__init__(parent, bg="white")

        self.display_is_mirrored = controller.settings["display_is_mirrored"]
        self.ray_scale = controller.settings["ray_scale"]
        self._video_ref = None

        self.canvas = tk.Canvas(self, bg="white", highlightthickness=0)
        self.canvas.pack(fill="both", expand=True)

        # --- Painel do prêmio (topo) ---
        self.money_label = tk.Label(self, text="Você tocou: R$ 0",
                                    font=("Arial", 26, "bold"), bg="#222", fg="white",
                                    padx=20, pady=8)
        self.money_label.place(relx=0.5, rely=0.02, anchor="n")

        # --- Contagem regressiva (base) ---
        self.countdown_label = tk.Label(self, text="00 : 05",
                                        font=("Arial", 30, "bold"), bg="#222", fg="#00FF00",
                                        padx=20, pady=8)
        self.countdown_label.place(relx=0.5, rely=0.98, anchor="s")

        # Resize só redesenha: a roleta da sessão não muda
        self.canvas.bind("<Configure>", self.redraw_wheel)

    # --------- Roleta ----------
    def redraw_wheel(self, event=None):
        width = self.canvas.winfo_width()
        height = self.canvas.winfo_height()
        if width <= 1 or height <= 1:
            return

        self.canvas.delete("wheel")
        cx, cy = screen_center(width, height)
        radius = cover_radius(width, height)
        bbox = (cx - radius, cy - radius, cx + radius, cy + radius)

        layouts = sector_layouts(self.controller.session.wheel, width, height)
        for item in layouts:
            self.canvas.create_arc(*bbox, start=item.tk_start, extent=item.tk_extent,
                                   fill=item.color, outline="", style=tk.PIESLICE, tags="wheel")
            self.canvas.create_arc(*bbox, start=item.border_start, extent=item.border_extent,
                                   fill="#FFFFFF", outline="", style=tk.PIESLICE, tags="wheel")

        for item in layouts:
            if not item.label:
                continue
            x, y = item.label_xy
            # Contorno branco para o texto ficar legível sobre qualquer cor
            for dx, dy in OUTLINE_OFFSETS:
                self.canvas.create_text(x + dx, y + dy, text=item.label, font=LABEL_FONT,
                                        fill="#FFFFFF", tags="wheel")
            self.canvas.create_text(x, y, text=item.label, font=LABEL_FONT,
                                    fill=item.label_color, tags="wheel")

        self.canvas.tag_lower("wheel")

    # --------- Vídeo e raio ----------
    def update_video(self, frame):
        """Recebe o frame RGB da câmera e desenha no centro."""
        if frame is None:
            return
        width = self.canvas.winfo_width()
        height = self.canvas.winfo_height()
        img = Image.fromarray(frame).resize((VIDEO_WIDTH, VIDEO_HEIGHT))
        if self.display_is_mirrored:
            img = ImageOps.mirror(img)
        imgtk = ImageTk.PhotoImage(img)
        self.canvas.delete("video")
        self.canvas.create_image(width / 2, height / 2, image=imgtk, tags="video")
        self._video_ref = imgtk  # guardamos referência pra não ser coletado
        self.canvas.tag_raise("video")
        self.canvas.tag_raise("ray")

    def update_ray(self, heading):
        self.canvas.delete("ray")
        if heading is None:
            return
        width = self.canvas.winfo_width()
        height = self.canvas.winfo_height()
        cx, cy = screen_center(width, height)
        end_x, end_y = ray_endpoint(heading, width, height, self.ray_scale,
                                    display_is_mirrored=self.display_is_mirrored)

        self.canvas.create_line(cx, cy, end_x, end_y, fill=RAY_COLOR, width=RAY_WIDTH,
                                capstyle=tk.ROUND, tags="ray")
        r = RAY_START_RADIUS
        self.canvas.create_oval(cx - r, cy - r, cx + r, cy + r, fill="#FFFFFF",
                                outline="#00008B", width=2, tags="ray")

    # --------- Painéis ----------
    def set_money_text(self, text):
        self.money_label.configure(text=text)

    def get_money_text(self):
        return self.money_label.cget("text")

    def set_countdown_text(self, text):
        self.countdown_label.configure(text=text)

    def get_capture_bbox(self):
        """Área da tela (x0, y0, x1, y1) ocupada pelo jogo."""
        x = self.winfo_rootx()
        y = self.winfo_rooty()
        return x, y, x + self.winfo_width(), y + self.winfo_height()

    def clear_video(self):
        self.canvas.delete("video")
        self._video_ref = None

    def on_destroy(self):
        """Método de limpeza chamado pelo controller antes de destruir."""
        self.canvas.unbind("<Configure>")
        self._video_ref = None
