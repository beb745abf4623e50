import configparser
from pathlib import Path

from acesup.Core import GameConfig
from acesup_ui.ui_config import CARD_SCALE_ORDER, DEFAULT_HINT_SECONDS

SETTINGS_PATH = Path(__file__).with_name("settings.ini")
SECTION = "game"

DEFAULT_SETTINGS = {
    "seed": "",
    "hint_seconds": str(DEFAULT_HINT_SECONDS),
    "card_scale": "1",
}


def _sanitize(settings):
    data = dict(DEFAULT_SETTINGS)
    data.update({k: v for k, v in settings.items() if k in DEFAULT_SETTINGS})

    raw_seed = str(data["seed"]).strip()
    if raw_seed in ("", "None"):
        data["seed"] = ""
    else:
        try:
            data["seed"] = str(int(raw_seed))
        except ValueError:
            data["seed"] = DEFAULT_SETTINGS["seed"]

    try:
        hint_seconds = float(data["hint_seconds"])
    except (TypeError, ValueError):
        hint_seconds = DEFAULT_HINT_SECONDS
    if hint_seconds <= 0:
        hint_seconds = DEFAULT_HINT_SECONDS
    data["hint_seconds"] = str(hint_seconds)

    try:
        scale = int(data["card_scale"])
    except (TypeError, ValueError):
        scale = int(DEFAULT_SETTINGS["card_scale"])
    if scale not in CARD_SCALE_ORDER:
        scale = int(DEFAULT_SETTINGS["card_scale"])
    data["card_scale"] = str(scale)
    return data


def load_settings(path: Path | None = None):
    path = Path(path) if path is not None else SETTINGS_PATH
    if not path.exists():
        return dict(DEFAULT_SETTINGS)
    parser = configparser.ConfigParser()
    try:
        parser.read(path, encoding="utf-8")
    except configparser.Error:
        return dict(DEFAULT_SETTINGS)
    if SECTION not in parser:
        return dict(DEFAULT_SETTINGS)
    return _sanitize(dict(parser[SECTION]))


def save_settings(settings, path: Path | None = None):
    path = Path(path) if path is not None else SETTINGS_PATH
    parser = configparser.ConfigParser()
    parser[SECTION] = _sanitize(settings)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        parser.write(f)


def build_config(settings) -> GameConfig:
    data = _sanitize(settings)
    seed = int(data["seed"]) if data["seed"] else None
    return GameConfig(seed=seed, hintSeconds=float(data["hint_seconds"]))
