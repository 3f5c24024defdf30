"""QSS dark theme stylesheet for the demo window."""

COLORS = {
    "bg": "#0a0b0e",
    "surface": "#12141a",
    "surface2": "#1a1d26",
    "border": "#252830",
    "text": "#e8e9ed",
    "text_dim": "#8b8e99",
    "accent": "#4fd1c5",
    "accent_hover": "#38b2ac",
}

DARK_THEME = """
/* ── Global ── */
QMainWindow, QWidget {
    background-color: %(bg)s;
    color: %(text)s;
    font-family: -apple-system, "Segoe UI", "Helvetica Neue", Arial, sans-serif;
    font-size: 12px;
}

QLabel {
    color: %(text)s;
    background: transparent;
    padding: 0px;
}

/* ── Folder header ── */
QLabel#sectionLabel {
    color: %(accent)s;
    font-size: 10px;
    font-weight: 600;
    letter-spacing: 1px;
    padding: 4px 0px 2px 0px;
}

QLabel#sliderLabel {
    color: %(text_dim)s;
    font-size: 11px;
}

QLabel#valueLabel {
    color: %(text)s;
    font-family: monospace;
    font-size: 11px;
}

/* ── Inputs ── */
QLineEdit, QComboBox {
    background-color: %(surface2)s;
    color: %(text)s;
    border: 1px solid %(border)s;
    border-radius: 3px;
    padding: 2px 6px;
}

QLineEdit:read-only {
    color: %(text_dim)s;
}

QComboBox:hover, QLineEdit:focus {
    border-color: %(accent)s;
}

QCheckBox {
    spacing: 6px;
    background: transparent;
}

QCheckBox::indicator {
    width: 14px;
    height: 14px;
    border: 1px solid %(border)s;
    border-radius: 3px;
    background-color: %(surface2)s;
}

QCheckBox::indicator:checked {
    background-color: %(accent)s;
    border-color: %(accent)s;
}

/* ── QSlider ── */
QSlider::groove:horizontal {
    height: 4px;
    background: %(border)s;
    border-radius: 2px;
}

QSlider::handle:horizontal {
    background: %(accent)s;
    width: 12px;
    height: 12px;
    margin: -4px 0;
    border-radius: 6px;
}

QSlider::handle:horizontal:hover {
    background: %(accent_hover)s;
}

QSlider::sub-page:horizontal {
    background: %(accent)s;
    border-radius: 2px;
}

/* ── Scroll area ── */
QScrollArea {
    border: none;
    background-color: %(surface)s;
}

QScrollBar:vertical {
    background: %(surface)s;
    width: 8px;
}

QScrollBar::handle:vertical {
    background: %(border)s;
    border-radius: 4px;
    min-height: 20px;
}

QStatusBar {
    background-color: %(surface)s;
    color: %(text_dim)s;
    border-top: 1px solid %(border)s;
}
""" % COLORS
