# src/prize_wheel/countdown.py
# Contagem regressiva disparada pela barra de espaço.

DEFAULT_SECONDS = 5


def format_time(seconds: int) -> str:
    return f"00 : {max(seconds, 0):02d}"


class Countdown:
    """
    Estado da contagem; a UI chama tick() uma vez por segundo.

    tick() devolve True uma única vez, quando a contagem passa de 00:00.
    O display fica em 00:00 até reset_display(), para a captura de tela
    mostrar o tempo esgotado.
    """

    def __init__(self, seconds: int = DEFAULT_SECONDS):
        self.seconds = int(seconds)
        self.time_left = self.seconds
        self.running = False
        self.display = format_time(self.seconds)

    def start(self) -> bool:
        if self.running:
            return False  # ignora disparos repetidos
        self.running = True
        self.time_left = self.seconds
        self.display = format_time(self.time_left)
        return True

    def tick(self) -> bool:
        if not self.running:
            return False
        self.time_left -= 1
        if self.time_left >= 0:
            self.display = format_time(self.time_left)
            return False
        self.running = False
        return True

    def reset_display(self):
        self.display = format_time(self.seconds)
