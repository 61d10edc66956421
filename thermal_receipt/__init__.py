"""
Пакет thermal_receipt
=====================

Форматирование и кодирование чеков для термопринтеров ESC/POS.

The package turns a JSON receipt description into ESC/POS bytes:

    - Strict parsing and validation of the description (typed errors, no
      partial output)
    - Fixed-width layout: column word wrap, padding, multi-column rows
    - Device-neutral printer commands
    - Byte-exact ESC/POS encoding (UTF-8 text payload)
    - A transport interface for handing bytes to a printer

Basic usage:
    >>> from thermal_receipt import encode_description, get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> payload = '''{
    ...   "config": {"charsPerLine": 32},
    ...   "elements": [
    ...     {"type": "text", "value": "Store Receipt", "align": "center", "bold": true},
    ...     {"type": "row", "columns": [{"text": "Item", "width": 16},
    ...                                 {"text": "Price", "width": 16, "align": "right"}]},
    ...     {"type": "cut"}
    ...   ]
    ... }'''
    >>> data = encode_description(payload)
    >>> logger.info("Encoded %d bytes of ESC/POS", len(data))

Configuration:
    >>> import os
    >>> os.environ['RECEIPT_LOG_LEVEL'] = 'DEBUG'
    >>>
    >>> from thermal_receipt import load_config
    >>> config = load_config()
    >>> config['chars_per_line']
    32

Версия: 0.1.0
Лицензия: MIT
Python: 3.11+
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# =============================================================================
# МЕТАДАННЫЕ ВЕРСИИ
# =============================================================================

__version__ = "0.1.0"
__author__ = "thermal_receipt Development Team"
__description__ = "JSON receipt descriptions to ESC/POS thermal printer bytes"
__license__ = "MIT"
__python_requires__ = ">=3.11"

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

# =============================================================================
# ПРОВЕРКА ВЕРСИИ PYTHON
# =============================================================================

if sys.version_info < (3, 11):
    raise RuntimeError(
        f"thermal_receipt требует Python 3.11 или выше. "
        f"Текущая версия: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================

LOGGER_NAMESPACE = "thermal_receipt"
LOG_FORMAT = "[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _setup_logging() -> None:
    """
    Initialize package-wide logging.

    Configures the ``thermal_receipt`` logger with:
    - a console handler (stderr) for WARNING and above;
    - a rotating file handler for all enabled levels, only when the
      RECEIPT_LOG_FILE environment variable names a file.

    The level comes from RECEIPT_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR,
    CRITICAL; default INFO). Idempotent: repeated calls do nothing.
    """
    log_level_str = os.environ.get("RECEIPT_LOG_LEVEL", "INFO").upper()
    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.INFO)

    root_logger = logging.getLogger(LOGGER_NAMESPACE)
    if root_logger.handlers:
        return

    root_logger.setLevel(log_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file = os.environ.get("RECEIPT_LOG_FILE")
    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_path,
                maxBytes=10 * 1024 * 1024,  # 10 МБ
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(
                "Не удалось инициализировать файловое логирование: %s. "
                "Используется только консоль.",
                e,
            )

    root_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Return a logger inside the ``thermal_receipt`` namespace.

    Args:
        module_name: Usually ``__name__``. Names outside the package are
            prefixed with ``thermal_receipt.``; ``__main__`` becomes
            ``thermal_receipt.main``.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.warning("Printer not connected")
    """
    if module_name.startswith(LOGGER_NAMESPACE):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{LOGGER_NAMESPACE}.main")
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{module_name.lstrip('.')}")


# =============================================================================
# УПРАВЛЕНИЕ КОНФИГУРАЦИЕЙ
# =============================================================================

DEFAULT_CONFIG_FILE = "receipt_config.json"

_DEFAULT_CONFIG: Dict[str, Any] = {
    "chars_per_line": 32,
    "printer_width_mm": 80,
    "printer_name": "Thermal Printer",
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from a JSON file merged over the defaults.

    Keys:
        - chars_per_line: int - line width used when a description omits it
        - printer_width_mm: int - paper width, informational
        - printer_name: str - display name of the printer

    Args:
        config_path: Path to the JSON file. Defaults to
            ``receipt_config.json`` in the current directory.

    Returns:
        Dict with every default key; file values override defaults. A missing,
        unreadable or malformed file logs a warning (or info, when missing)
        and yields the defaults.
    """
    logger = get_logger(__name__)

    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_FILE)

    config = _DEFAULT_CONFIG.copy()

    if not config_path.exists():
        logger.info(
            "Файл конфигурации %s не найден. Используется конфигурация по умолчанию.",
            config_path,
        )
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = json.load(f)

        if not isinstance(user_config, dict):
            raise ValueError(
                f"Файл конфигурации должен содержать JSON-объект, "
                f"получен {type(user_config).__name__}"
            )

        config.update(user_config)
        logger.info("Конфигурация загружена из %s", config_path)
        logger.debug("Конфигурация: %s", config)

    except json.JSONDecodeError as e:
        logger.warning(
            "Не удалось разобрать %s: недопустимый JSON в строке %d, столбце %d. "
            "Используется конфигурация по умолчанию.",
            config_path,
            e.lineno,
            e.colno,
        )
    except OSError as e:
        logger.warning(
            "Не удалось прочитать %s: %s. Используется конфигурация по умолчанию.",
            config_path,
            e,
        )
    except ValueError as e:
        logger.warning(
            "Недопустимый формат конфигурации: %s. Используется конфигурация по умолчанию.",
            e,
        )

    return config


def check_dependencies() -> Dict[str, bool]:
    """
    Report which optional packages are importable.

    Checked:
        - pytest: test runner (``test`` extra)

    Returns:
        Mapping of distribution name to availability.
    """
    dependencies: Dict[str, bool] = {}

    try:
        import pytest  # noqa: F401

        dependencies["pytest"] = True
    except ImportError:
        dependencies["pytest"] = False

    return dependencies


_setup_logging()

# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================

from thermal_receipt.errors import (  # noqa: E402
    LayoutError,
    NotConnectedError,
    PrintError,
    ReceiptError,
    RenderError,
    ValidationError,
)
from thermal_receipt.escpos.encoder import EscPosEncoder, encode, to_hex  # noqa: E402
from thermal_receipt.layout.engine import (  # noqa: E402
    LayoutEngine,
    LayoutLine,
    LineKind,
    layout,
)
from thermal_receipt.model import (  # noqa: E402
    Align,
    Column,
    DividerElement,
    LineFeedElement,
    PaperCutElement,
    PrintElement,
    PrinterConfig,
    Receipt,
    RowElement,
    TextElement,
    TextStyle,
)
from thermal_receipt.parser.receipt_parser import ReceiptParser, parse  # noqa: E402
from thermal_receipt.pipeline import (  # noqa: E402
    build_commands,
    build_layout,
    describe_bytes,
    encode_description,
    encode_receipt,
    print_description,
    printer_info,
)
from thermal_receipt.render import (  # noqa: E402
    LineFeedCommand,
    PaperCutCommand,
    PrinterCommand,
    TextCommand,
    TextRenderer,
    render,
)
from thermal_receipt.transport import CompositeTransport, PrinterTransport  # noqa: E402

__all__ = [
    # Metadata
    "__version__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    # Logging and configuration
    "get_logger",
    "load_config",
    "check_dependencies",
    # Errors
    "ReceiptError",
    "ValidationError",
    "LayoutError",
    "RenderError",
    "NotConnectedError",
    "PrintError",
    # Model
    "Align",
    "Column",
    "DividerElement",
    "LineFeedElement",
    "PaperCutElement",
    "PrintElement",
    "PrinterConfig",
    "Receipt",
    "RowElement",
    "TextElement",
    "TextStyle",
    # Stages
    "ReceiptParser",
    "parse",
    "LayoutEngine",
    "LayoutLine",
    "LineKind",
    "layout",
    "TextRenderer",
    "render",
    "TextCommand",
    "LineFeedCommand",
    "PaperCutCommand",
    "PrinterCommand",
    "EscPosEncoder",
    "encode",
    "to_hex",
    # Pipeline
    "build_layout",
    "build_commands",
    "encode_receipt",
    "encode_description",
    "describe_bytes",
    "print_description",
    "printer_info",
    # Transport
    "PrinterTransport",
    "CompositeTransport",
]
