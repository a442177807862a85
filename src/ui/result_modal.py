# src/ui/result_modal.py
import tkinter as tk
from PIL import ImageTk


class ResultModal(tk.Toplevel):
    """
    Pop-up com a captura do resultado. Ao fechar, a imagem é entregue ao
    callback on_close (que salva o arquivo).
    """

    def __init__(self, parent, monitor, on_close=None):
        super().__init__(parent)
        self.title("Resultado")
        self.configure(bg="#222")
        self.resizable(False, False)
        self.on_close = on_close
        self.image = None
        self._imgtk = None
        self._max_size = (int(monitor.width * 0.8), int(monitor.height * 0.8))

        w, h = self._max_size[0], self._max_size[1] + 90
        x = monitor.x + (monitor.width - w) // 2
        y = monitor.y + (monitor.height - h) // 2
        self.geometry(f"{w}x{h}+{x}+{y}")

        self.transient(parent)
        self.grab_set()

        self.body = tk.Label(self, text="Carregando...", bg="#222", fg="white",
                             font=("Arial", 18))
        self.body.pack(expand=True, fill="both", padx=20, pady=(20, 10))

        close_button = tk.Button(self, text="Salvar e Fechar", font=("Arial", 16, "bold"),
                                 command=self.close, width=16)
        close_button.pack(pady=(0, 20))

        self.protocol("WM_DELETE_WINDOW", self.close)

    def set_image(self, image):
        self.image = image
        preview = image.copy()
        preview.thumbnail(self._max_size)
        self._imgtk = ImageTk.PhotoImage(preview)
        self.body.configure(image=self._imgtk, text="")

    def close(self):
        if self.on_close and self.image is not None:
            self.on_close(self.image)
        self.grab_release()
        self.destroy()
