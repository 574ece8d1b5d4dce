# File: PSO_ENGINE/Logs/logger.py
# Console logger shared by every PSO_ENGINE module.
# Usage: log_info("message", module_name) with module_name = Path(__file__).stem

import sys
import datetime

from PSO_ENGINE import CONFIG

# --- Runtime switches (seeded from CONFIG, changeable via the setters) ---
ENABLE_COLOR = CONFIG.ENABLE_COLOR
DEBUG = CONFIG.DEBUG

MODULE_PADDING = 12


# --- ANSI Escape Codes ---
class Colors:
    RESET = "\033[0m"
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[0;33m"
    BLUE = "\033[0;34m"
    PURPLE = "\033[0;35m"
    CYAN = "\033[0;36m"
    WHITE = "\033[0;37m"
    BOLD_RED = "\033[1;31m"
    BOLD_GREEN = "\033[1;32m"
    BOLD_YELLOW = "\033[1;33m"
    BOLD_BLUE = "\033[1;34m"


# --- Semantic Color Mapping ---
COLOR_MAP = {
    "default": Colors.RESET,
    "error": Colors.BOLD_RED,
    "warning": Colors.BOLD_YELLOW,
    "info": Colors.CYAN,
    "success": Colors.BOLD_GREEN,
    "debug": Colors.PURPLE,
    "header": Colors.BOLD_BLUE,
    "detail": Colors.WHITE,
}


def set_debug(enabled: bool):
    """Turns log_debug output on or off for the whole process."""
    global DEBUG
    DEBUG = bool(enabled)


def set_color(enabled: bool):
    global ENABLE_COLOR
    ENABLE_COLOR = bool(enabled)


def _use_color(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    return ENABLE_COLOR and callable(isatty) and isatty()


def log(message: str, module_name: str = "INFO", color_name: str = "default", stream=None):
    """
    Prints a timestamped, module-tagged log line.

    Args:
        message (str): The message to print.
        module_name (str): Name of the calling module, usually Path(__file__).stem.
        color_name (str): Key into COLOR_MAP ("info", "warning", "error", ...).
        stream: Output stream. Defaults to sys.stdout, looked up at call time
                so pytest's capture sees the output.
    """
    stream = stream if stream is not None else sys.stdout
    timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    if _use_color(stream):
        color_code = COLOR_MAP.get(color_name.lower(), Colors.RESET)
        reset_code = Colors.RESET
    else:
        color_code = ""
        reset_code = ""

    padded_module = f"[{module_name:<{MODULE_PADDING}}]"
    print(f"{timestamp} {padded_module} {color_code}{message}{reset_code}", file=stream)
    stream.flush()


# --- Helper Functions for Common Levels ---

def log_error(message: str, module_name: str = "ERROR"):
    log(message, module_name, "error")


def log_warning(message: str, module_name: str = "WARNING"):
    log(message, module_name, "warning")


def log_info(message: str, module_name: str = "INFO"):
    log(message, module_name, "info")


def log_success(message: str, module_name: str = "SUCCESS"):
    log(message, module_name, "success")


def log_debug(message: str, module_name: str = "DEBUG"):
    if DEBUG:
        log(message, module_name, "debug")


def log_header(message: str, module_name: str = "HEADER"):
    log(message, module_name, "header")
