import json
import logging
import os

logger = logging.getLogger(__name__)

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "rowedit")
HISTORY_PATH = os.path.join(CONFIG_DIR, "history.log")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
DELIMITER_DEFAULT = ","
PAGE_SIZE_DEFAULT = 10
COLOR_DEFAULT = True
RELOAD_EACH_COMMAND_DEFAULT = True
ROLLBACK_ON_SAVE_FAILURE_DEFAULT = False
HISTORY_SIZE_DEFAULT = 100


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)


def _positive_int(value):
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


def load_config():
    cfg = {
        "DELIMITER": DELIMITER_DEFAULT,
        "PAGE_SIZE": PAGE_SIZE_DEFAULT,
        "COLOR": COLOR_DEFAULT,
        "RELOAD_EACH_COMMAND": RELOAD_EACH_COMMAND_DEFAULT,
        "ROLLBACK_ON_SAVE_FAILURE": ROLLBACK_ON_SAVE_FAILURE_DEFAULT,
        "HISTORY_SIZE": HISTORY_SIZE_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Ignoring unreadable config %s: %s", CONFIG_JSON, e)
        return cfg

    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top level is not an object", CONFIG_JSON)
        return cfg

    delimiter = data.get("delimiter")
    if isinstance(delimiter, str) and len(delimiter) == 1:
        cfg["DELIMITER"] = delimiter
    elif delimiter is not None:
        logger.warning("Ignoring delimiter %r: must be a single character", delimiter)

    for key, name in (("page_size", "PAGE_SIZE"), ("history_size", "HISTORY_SIZE")):
        value = data.get(key)
        if _positive_int(value):
            cfg[name] = value
        elif value is not None:
            logger.warning("Ignoring %s %r: must be a positive integer", key, value)

    for key, name in (
        ("color", "COLOR"),
        ("reload_each_command", "RELOAD_EACH_COMMAND"),
        ("rollback_on_save_failure", "ROLLBACK_ON_SAVE_FAILURE"),
    ):
        value = data.get(key)
        if isinstance(value, bool):
            cfg[name] = value
        elif value is not None:
            logger.warning("Ignoring %s %r: must be true or false", key, value)

    return cfg
