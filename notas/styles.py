"""
Notas - light theme stylesheet (QSS).
Soft surface cards, a tinted search field and a round floating add button.
"""

from notas.ui.home.constants import FAB_COLOR, FAB_SIZE, OVERDUE_COLOR

# ── Palette ──────────────────────────────────────
BG_PRIMARY = "#fffbfe"
SURFACE_VARIANT = "#e7e0ec"
SURFACE_HOVER = "#ddd5e3"

PRIMARY = "#6750a4"
FAB_PRESSED = "#7cc4f2"

TEXT_PRIMARY = "#1d1b20"
TEXT_SECONDARY = "#49454f"
TEXT_MUTED = "#79747e"

BORDER = "#cac4d0"

MAIN_STYLESHEET = f"""
/* ── Base ── */
QWidget {{
    background-color: {BG_PRIMARY};
    color: {TEXT_PRIMARY};
    font-family: "Roboto", "Segoe UI", sans-serif;
    font-size: 14px;
}}

/* ── Header ── */
QLabel#headerLabel {{
    font-size: 30px;
    font-weight: 900;
    padding: 4px 0px;
}}
QPushButton#sortButton {{
    background: transparent;
    border: none;
    border-radius: 18px;
}}
QPushButton#sortButton:hover {{
    background-color: rgba(103, 80, 164, 0.08);
}}
QPushButton#sortButton:pressed {{
    background-color: rgba(103, 80, 164, 0.16);
}}

QFrame#separator {{
    background-color: {BORDER};
    max-height: 1px;
    min-height: 1px;
    border: none;
}}

/* ── Search ── */
QLineEdit#searchInput {{
    background-color: {BG_PRIMARY};
    border: 1px solid {TEXT_MUTED};
    border-radius: 4px;
    padding: 12px 14px;
    color: {TEXT_PRIMARY};
    selection-background-color: {PRIMARY};
    selection-color: white;
}}
QLineEdit#searchInput:focus {{
    border: 2px solid {PRIMARY};
}}

/* ── Tabs ── */
QTabBar#entryTabs::tab {{
    background: transparent;
    color: {TEXT_SECONDARY};
    padding: 12px 0px;
    border: none;
    border-bottom: 1px solid {BORDER};
    font-weight: 500;
}}
QTabBar#entryTabs::tab:selected {{
    color: {PRIMARY};
    border-bottom: 3px solid {PRIMARY};
}}

/* ── Lists ── */
QScrollArea {{
    background: transparent;
    border: none;
}}
QScrollArea > QWidget > QWidget {{
    background: transparent;
}}
QScrollBar:vertical {{
    background: transparent;
    width: 5px;
    margin: 4px 1px;
    border-radius: 2px;
}}
QScrollBar::handle:vertical {{
    background: {BORDER};
    min-height: 40px;
    border-radius: 2px;
}}
QScrollBar::add-line:vertical, QScrollBar::sub-line:vertical {{
    height: 0px;
}}

/* ── Cards ── */
QFrame#entryCard {{
    background-color: {SURFACE_VARIANT};
    border: none;
    border-radius: 16px;
}}
QFrame#entryCard:hover {{
    background-color: {SURFACE_HOVER};
}}
QFrame#entryCard QWidget {{
    background: transparent;
}}
QLabel#entryTitle {{
    font-size: 22px;
    font-weight: 900;
}}
QLabel#entryDescription {{
    color: {TEXT_SECONDARY};
}}
QLabel#sideLine {{
    font-style: italic;
}}
QLabel#taskStatusDone {{
    color: rgba(29, 27, 32, 0.8);
    font-size: 16px;
    font-style: italic;
    font-weight: 500;
}}
QLabel#taskStatusOverdue {{
    color: {OVERDUE_COLOR};
    font-size: 16px;
    font-style: italic;
    font-weight: 500;
}}

QLabel#emptyLabel {{
    color: {TEXT_MUTED};
    padding: 30px 10px;
}}

/* ── Floating add button ── */
QPushButton#addButton {{
    background-color: {FAB_COLOR};
    border: none;
    border-radius: {FAB_SIZE // 2}px;
}}
QPushButton#addButton:pressed {{
    background-color: {FAB_PRESSED};
}}

QToolTip {{
    background-color: {TEXT_PRIMARY};
    color: {BG_PRIMARY};
    border: none;
    padding: 6px 8px;
    border-radius: 4px;
    font-size: 12px;
}}
"""
