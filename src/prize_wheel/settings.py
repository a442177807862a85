# src/prize_wheel/settings.py
# Configuração do jogo: valores padrão + perfis salvos em JSON.

import json
import os

from .prizes import PALETTE
from .sectors import DEFAULT_SECTOR_COUNT, DEFAULT_WEIGHT_RANGE

# O diretório onde os perfis de configuração são salvos
PROFILES_DIR = "profiles"

DEFAULT_SETTINGS = {
    "sensitivity": 20.0,
    "sector_count": DEFAULT_SECTOR_COUNT,
    "weight_min": DEFAULT_WEIGHT_RANGE[0],
    "weight_max": DEFAULT_WEIGHT_RANGE[1],
    # A imagem da câmera e o canvas do raio são exibidos espelhados
    "display_is_mirrored": True,
    "palette": list(PALETTE),
    "countdown_seconds": 5,
    "camera_index": 0,
    "camera_width": 640,
    "camera_height": 480,
    "ray_scale": 1.5,
    "output_dir": os.path.join(os.path.expanduser("~"), "Pictures", "PartyGame"),
}

# Tipos aceitos por chave (bool é subclasse de int: tratado em _check_value)
_TYPES = {
    "sensitivity": (int, float),
    "sector_count": (int,),
    "weight_min": (int, float),
    "weight_max": (int, float),
    "display_is_mirrored": (bool,),
    "palette": (list, tuple),
    "countdown_seconds": (int,),
    "camera_index": (int,),
    "camera_width": (int,),
    "camera_height": (int,),
    "ray_scale": (int, float),
    "output_dir": (str,),
}


def default_settings() -> dict:
    settings = dict(DEFAULT_SETTINGS)
    settings["palette"] = list(DEFAULT_SETTINGS["palette"])
    return settings


def _check_value(key, value):
    expected = _TYPES[key]
    if isinstance(value, bool) and bool not in expected:
        raise ValueError(f"'{key}' não aceita booleano")
    if not isinstance(value, expected):
        raise ValueError(f"'{key}' com tipo inválido: {type(value).__name__}")


def validate_settings(settings: dict):
    """Levanta ValueError se a combinação de valores não formar um jogo válido."""
    palette = settings["palette"]
    if not palette or not all(isinstance(c, str) for c in palette):
        raise ValueError("'palette' precisa ser uma lista de cores")
    if settings["sector_count"] < len(palette):
        raise ValueError("'sector_count' menor que o número de cores da paleta")
    if not 0 < settings["weight_min"] < settings["weight_max"]:
        raise ValueError("intervalo de pesos inválido")
    if settings["countdown_seconds"] < 1:
        raise ValueError("'countdown_seconds' precisa ser >= 1")


def merge_settings(overrides: dict) -> dict:
    """
    Aplica os valores de um perfil sobre os padrões.

    Chaves desconhecidas são ignoradas; valores de tipo errado ou uma
    combinação inválida levantam ValueError.
    """
    settings = default_settings()
    for key, value in (overrides or {}).items():
        if key not in _TYPES:
            print(f"AVISO: chave de configuração desconhecida ignorada: '{key}'")
            continue
        _check_value(key, value)
        settings[key] = list(value) if key == "palette" else value
    validate_settings(settings)
    return settings


def ensure_profiles_dir():
    """Garante que o diretório de perfis exista."""
    os.makedirs(PROFILES_DIR, exist_ok=True)


def _profile_path(profile_name: str) -> str:
    # Limpa o nome do arquivo para evitar caracteres inválidos
    safe_filename = "".join(c for c in profile_name if c.isalnum() or c in (' ', '-', '_')).rstrip()
    return os.path.join(PROFILES_DIR, f"{safe_filename}.json")


def save_settings(profile_name: str, settings: dict):
    """
    Salva a configuração em um arquivo JSON com o nome do perfil.

    Returns:
        str: O caminho do arquivo salvo, ou None em caso de erro.
    """
    ensure_profiles_dir()
    filepath = _profile_path(profile_name)

    try:
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(settings, f, indent=4)
        print(f"Perfil '{profile_name}' salvo em {filepath}")
        return filepath
    except (OSError, TypeError) as e:
        print(f"ERRO ao salvar o perfil '{profile_name}': {e}")
        return None


def load_settings(profile_name: str):
    """
    Carrega um perfil e o mescla sobre os padrões.

    Returns:
        dict: A configuração completa, ou None se o perfil não existir ou
        for inválido.
    """
    ensure_profiles_dir()
    filepath = _profile_path(profile_name)

    if not os.path.exists(filepath):
        print(f"ERRO: Perfil '{profile_name}' não encontrado.")
        return None

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("o arquivo não contém um objeto JSON")
        settings = merge_settings(data)
    except (OSError, ValueError) as e:
        print(f"ERRO ao carregar o perfil '{profile_name}': {e}")
        return None

    print(f"Perfil '{profile_name}' carregado de {filepath}")
    return settings


def list_settings():
    """Lista os nomes dos perfis disponíveis."""
    ensure_profiles_dir()
    profiles = []
    for filename in sorted(os.listdir(PROFILES_DIR)):
        if filename.endswith(".json"):
            # Remove a extensão .json para obter o nome do perfil
            profiles.append(os.path.splitext(filename)[0])
    return profiles
