# main.py — Arranque de la app
# Configura el logging según settings.json y, si existen, aplica
# overlays QSS de resources/ sobre el tema de la ventana.

import logging
import sys
from pathlib import Path
from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QFile, QTextStream

from gui.main_window import ColdStorageApp
from logic.cold_storage import load_settings


# -----------------------------------------------
# Utilidad: leer y concatenar archivos QSS en orden
# -----------------------------------------------
def _read_qss(path: Path) -> str:
    f = QFile(str(path))
    if f.open(QFile.ReadOnly | QFile.Text):
        css = QTextStream(f).readAll()
        f.close()
        return css
    logging.getLogger(__name__).warning("No se pudo abrir %s", path)
    return ""


def load_styles(app: QApplication) -> None:
    """
    Aplica estilos globales opcionales (si existen):
      1) resources/base.qss
      2) resources/readability_override.qss
    El tema claro/oscuro lo maneja la ventana principal.
    """
    resources = Path(__file__).resolve().parent / "resources"
    qss_total = ""
    for name in ("base.qss", "readability_override.qss"):
        p = resources / name
        if p.exists():
            qss_total += "\n\n" + _read_qss(p)
    if qss_total:
        app.setStyleSheet(qss_total)


def main() -> int:
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(sys.argv)
    load_styles(app)

    win = ColdStorageApp(settings)
    win.show()
    return app.exec()


# -----------------------------------------------
# Punto de entrada
# -----------------------------------------------
if __name__ == "__main__":
    sys.exit(main())
