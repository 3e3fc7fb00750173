import os
from datetime import datetime

import pytest

# Widgets are built without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtCore import QLocale  # noqa: E402
from PyQt6.QtWidgets import QApplication  # noqa: E402

# Wednesday
FIXED_NOW = datetime(2022, 6, 15, 10, 30, 45)


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def english():
    return QLocale(QLocale.Language.English, QLocale.Country.UnitedStates)


@pytest.fixture
def clock():
    return lambda: FIXED_NOW
