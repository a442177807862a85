# src/prize_wheel/prizes.py
# Tabela fixa de prêmios por cor da roleta.

# Ordem da paleta = do maior para o menor prêmio
PRIZE_VALUES = {
    "#FF78A3": 100,
    "#47D495": 50,
    "#FFCC8D": 20,
    "#87C9EA": 10,
    "#C088D2": 5,
    "#DDDDDD": 1,
}

PALETTE = tuple(PRIZE_VALUES)

# Cinza claro fica ilegível sobre fundo branco
_LABEL_COLOR_OVERRIDES = {
    "#DDDDDD": "#AAAAAA",
}

CURRENCY = "R$"


def _key(color):
    return str(color).strip().upper()


def prize_for(color) -> int:
    """Valor do prêmio da cor; 0 para cor desconhecida."""
    return PRIZE_VALUES.get(_key(color), 0)


def prize_label(color):
    """Texto desenhado na borda da tela (ex.: 'R$ 100'), ou None."""
    key = _key(color)
    if key not in PRIZE_VALUES:
        return None
    return f"{CURRENCY} {PRIZE_VALUES[key]}"


def label_color(color) -> str:
    key = _key(color)
    return _LABEL_COLOR_OVERRIDES.get(key, key)
