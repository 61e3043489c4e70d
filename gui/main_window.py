from PySide6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QFrame, QLabel, QScrollArea
)
from PySide6.QtCore import Qt

from gui.pages.cold_storage_page import ColdStoragePage
from gui.widgets import ActionButton
from logic.cold_storage import RowStore, Settings, load_settings


# ------------------------------------------------------------------
#  TEMAS (QSS)
# ------------------------------------------------------------------
_BASE_QSS = """
QMainWindow {{ background: {bg}; }}
QFrame {{ background: transparent; }}
QLabel {{ color: {text}; }}
#Muted {{ color: {muted}; font-size: 13px; }}
#Card {{ background: {card}; border: 1px solid {border}; border-radius: 12px; }}
#CardTitle {{ font-size: 18px; font-weight: 800; }}
#CardSubtitle {{ color: {muted}; }}
QLineEdit, QComboBox {{
    background: {input};
    color: {text};
    border: 1px solid {border};
    border-radius: 6px;
    padding: 4px 6px;
    selection-background-color: #0f62fe;
}}
QComboBox::drop-down {{ width: 18px; }}
QComboBox QAbstractItemView {{ background: {input}; color: {text}; selection-background-color: #cbe4ff; }}
QTableWidget {{ background: {card}; color: {text}; gridline-color: {border}; border: none; }}
QTableWidget::item {{ padding: 4px; }}
QTableWidget::item:alternate {{ background: {alt}; }}
QHeaderView::section {{ background: {alt}; color: {text}; font-weight: 700; border: none; padding: 6px; }}

#TopBar {{
    background: qlineargradient(x1:0, y1:0, x2:1, y2:0,
                                stop:0 #0f62fe, stop:1 #22d3ee);
    border-radius: 14px;
}}
#TopTitle {{ color: #ffffff; font-size: 22px; font-weight: 800; }}
#TopSubtitle {{ color: #e7eefc; font-size: 12px; font-weight: 600; }}
"""

THEMES = {
    "light": dict(bg="#f3f6fb", text="#0f172a", muted="#475569", card="#ffffff",
                  border="#d8deeb", input="#ffffff", alt="#f5f7fb"),
    "dark": dict(bg="#0c1220", text="#e5edff", muted="#94a3b8", card="#111827",
                 border="#1f2937", input="#1f2937", alt="#172033"),
}


def theme_qss(name: str) -> str:
    return _BASE_QSS.format(**THEMES.get(name, THEMES["light"]))


class ColdStorageApp(QMainWindow):
    def __init__(self, settings: Settings | None = None):
        super().__init__()
        self.settings = settings or load_settings()
        self.theme = self.settings.theme
        self.setWindowTitle("Cold Storage Calculator")
        self.resize(1400, 820)

        self._build_ui()
        self._apply_theme()

    # ------------------------------------------------------------------
    #  CONSTRUCCIÓN DE LA INTERFAZ
    # ------------------------------------------------------------------
    def _build_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(12)

        root.addWidget(self._create_top_bar())

        self.page = ColdStoragePage(RowStore(self.settings))
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        scroll.setWidget(self.page)
        root.addWidget(scroll, 1)

    def _create_top_bar(self) -> QWidget:
        top = QFrame()
        top.setObjectName("TopBar")
        top.setFixedHeight(96)
        layout = QHBoxLayout(top)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(14)

        title_wrap = QVBoxLayout()
        title = QLabel("❄ Cold Storage Calculator")
        title.setObjectName("TopTitle")
        subtitle = QLabel("Calculate technical requirements for cold storage facilities")
        subtitle.setObjectName("TopSubtitle")
        title_wrap.addWidget(title)
        title_wrap.addWidget(subtitle)

        layout.addLayout(title_wrap)
        layout.addStretch(1)

        self.btn_theme = ActionButton("", variant="outline", small=True)
        self.btn_theme.clicked.connect(self._toggle_theme)
        layout.addWidget(self.btn_theme, alignment=Qt.AlignVCenter)
        return top

    # ------------------------------------------------------------------
    #  Tema claro / oscuro
    # ------------------------------------------------------------------
    def _apply_theme(self):
        self.setStyleSheet(theme_qss(self.theme))
        self.btn_theme.setText("☀ Light" if self.theme == "dark" else "☾ Dark")

    def _toggle_theme(self):
        self.theme = "light" if self.theme == "dark" else "dark"
        self._apply_theme()
