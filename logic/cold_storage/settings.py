from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parents[2] / "data" / "cold_storage"
SETTINGS_FILE = DATA_DIR / "settings.json"

DEFAULT_ROW = {
    "product_name": "",
    "weight": 0.0,
    "temperature": 4.0,
    "density": 500.0,
    "category": "default",
}

DEFAULT_EXPORT = {
    "sheet_name": "Cold Storage Data",
    "file_prefix": "cold_storage_calculator",
    "output_dir": ".",
}

DEFAULT_UI = {
    "theme": "light",
}


@dataclass
class Settings:
    default_row: Dict[str, Any] = field(default_factory=lambda: DEFAULT_ROW.copy())
    sheet_name: str = DEFAULT_EXPORT["sheet_name"]
    file_prefix: str = DEFAULT_EXPORT["file_prefix"]
    output_dir: Path = Path(DEFAULT_EXPORT["output_dir"])
    theme: str = DEFAULT_UI["theme"]
    log_level: str = "INFO"


def _read_json(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("No se pudo leer %s (%s); usando valores por defecto", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("%s no contiene un objeto JSON; usando valores por defecto", path)
        return {}
    return data


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = data.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        logger.warning("Sección %r inválida en settings (%s); usando valores por defecto", name, type(value).__name__)
        return {}
    return value


def load_settings(path: Optional[Path | str] = None) -> Settings:
    """
    Lee ``settings.json`` y lo mezcla sobre los valores por defecto.
    Un archivo ausente o inválido no es error: se usan los defaults.
    """
    data = _read_json(Path(path) if path else SETTINGS_FILE)

    row = DEFAULT_ROW.copy()
    row.update({k: v for k, v in _section(data, "default_row").items() if k in DEFAULT_ROW})
    export = DEFAULT_EXPORT.copy()
    export.update(_section(data, "export"))
    ui = DEFAULT_UI.copy()
    ui.update(_section(data, "ui"))

    theme = str(ui.get("theme") or "light").lower()
    if theme not in ("light", "dark"):
        logger.warning("Tema desconocido %r; usando 'light'", theme)
        theme = "light"

    return Settings(
        default_row=row,
        sheet_name=str(export["sheet_name"] or DEFAULT_EXPORT["sheet_name"]),
        file_prefix=str(export["file_prefix"] or DEFAULT_EXPORT["file_prefix"]),
        output_dir=Path(export["output_dir"] or "."),
        theme=theme,
        log_level=str(data.get("log_level") or "INFO").upper(),
    )
