import json
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "csvman")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
DEFAULT_PATH_DEFAULT = "testdata.csv"
DELIMITER_DEFAULT = ","
PLACEHOLDER_DEFAULT = "_"
MENU_KEYWORD_DEFAULT = "menu"
PAUSE_SECONDS_DEFAULT = 2
SAVE_DIR_DEFAULT = None


def ensure_config_dirs():
    try:
        os.makedirs(CONFIG_DIR, exist_ok=True)
    except OSError:
        pass


def _non_empty_str(value):
    return isinstance(value, str) and value != ""


def load_config():
    cfg = {
        "DEFAULT_PATH": DEFAULT_PATH_DEFAULT,
        "DELIMITER": DELIMITER_DEFAULT,
        "PLACEHOLDER": PLACEHOLDER_DEFAULT,
        "MENU_KEYWORD": MENU_KEYWORD_DEFAULT,
        "PAUSE_SECONDS": PAUSE_SECONDS_DEFAULT,
        "SAVE_DIR": SAVE_DIR_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return cfg
    if not isinstance(data, dict):
        return cfg

    if _non_empty_str(data.get("default_path")):
        cfg["DEFAULT_PATH"] = data["default_path"]

    delimiter = data.get("delimiter")
    if isinstance(delimiter, str) and len(delimiter) == 1 and delimiter not in "\r\n\"":
        cfg["DELIMITER"] = delimiter

    if _non_empty_str(data.get("placeholder")):
        cfg["PLACEHOLDER"] = data["placeholder"]

    keyword = data.get("menu_keyword")
    if _non_empty_str(keyword) and keyword.strip() == keyword:
        cfg["MENU_KEYWORD"] = keyword

    pause = data.get("pause_seconds")
    if isinstance(pause, (int, float)) and not isinstance(pause, bool) and pause >= 0:
        cfg["PAUSE_SECONDS"] = pause

    if _non_empty_str(data.get("save_dir")):
        cfg["SAVE_DIR"] = os.path.expanduser(data["save_dir"])

    return cfg
