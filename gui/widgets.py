# gui/widgets.py
from PySide6.QtWidgets import QPushButton, QGraphicsDropShadowEffect, QFrame, QVBoxLayout, QLabel
from PySide6.QtGui     import QColor
from PySide6.QtCore    import Qt

# colores por variante: (normal, hover, pressed, texto)
_VARIANTS = {
    "primary":     ("#0f62fe", "#1a6eff", "#0d4fcc", "#ffffff"),
    "outline":     ("#ffffff", "#eef3ff", "#dde7fb", "#0f62fe"),
    "destructive": ("#dc2626", "#ef4444", "#b91c1c", "#ffffff"),
}


class ActionButton(QPushButton):
    """Botón de acción con variante de color y sombra suave."""

    def __init__(self, text: str, variant: str = "primary", small: bool = False):
        super().__init__(text)
        bg, hover, pressed, fg = _VARIANTS.get(variant, _VARIANTS["primary"])
        border = f"1px solid {fg}" if variant == "outline" else "none"
        pad = "4px 10px" if small else "10px 18px"
        self.setCursor(Qt.PointingHandCursor)
        self.setStyleSheet(
            f"QPushButton{{background:{bg};color:{fg};font-weight:700;"
            f"border:{border};border-radius:8px;padding:{pad};}}"
            f"QPushButton:hover{{background:{hover};}}"
            f"QPushButton:pressed{{background:{pressed};}}"
            "QPushButton:disabled{background:#cbd5e1;color:#f8fafc;}"
        )
        if not small:
            effect = QGraphicsDropShadowEffect(self)
            effect.setBlurRadius(14)
            effect.setOffset(0, 3)
            effect.setColor(QColor(0, 0, 0, 70))
            self.setGraphicsEffect(effect)


class Card(QFrame):
    """Tarjeta blanca con título opcional."""

    def __init__(self, title: str = "", subtitle: str = ""):
        super().__init__()
        self.setObjectName("Card")
        self.body = QVBoxLayout(self)
        self.body.setContentsMargins(20, 16, 20, 16)
        self.body.setSpacing(8)
        if title:
            t = QLabel(title); t.setObjectName("CardTitle")
            self.body.addWidget(t)
        if subtitle:
            s = QLabel(subtitle); s.setObjectName("CardSubtitle")
            self.body.addWidget(s)
        self.setGraphicsEffect(
            QGraphicsDropShadowEffect(blurRadius=12, xOffset=0, yOffset=3, color=QColor(0, 0, 0, 40)))
