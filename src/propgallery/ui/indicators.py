"""Dot indicators for the hero slideshow."""

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QHBoxLayout, QPushButton, QWidget

from .styles import SPACING_MD


class SlideIndicators(QWidget):
    indicator_clicked: Signal = Signal(int)  # type: ignore[misc]

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._dots: list[QPushButton] = []
        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(SPACING_MD)
        self._layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

    def set_count(self, count: int) -> None:
        for dot in self._dots:
            self._layout.removeWidget(dot)
            dot.deleteLater()
        self._dots = []

        for index in range(count):
            dot = QPushButton()
            dot.setObjectName("indicatorDot")
            dot.setCheckable(True)
            dot.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            dot.setAccessibleName(f"Go to slide {index + 1}")
            _ = dot.clicked.connect(lambda _checked=False, i=index: self.indicator_clicked.emit(i))
            self._layout.addWidget(dot)
            self._dots.append(dot)

        self.setVisible(count > 1)

    def dot_count(self) -> int:
        return len(self._dots)

    def dot_at(self, index: int) -> QPushButton:
        return self._dots[index]

    def set_current(self, index: int) -> None:
        for i, dot in enumerate(self._dots):
            dot.setChecked(i == index)
