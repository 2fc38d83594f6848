"""Card widget displaying a single item."""

# Impaired
# Copyright (C) 2025  Impaired developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import Optional

from PyQt6 import QtWidgets
from PyQt6.QtCore import Qt, pyqtSignal

from impaired.models import ItemCard


class ItemCardWidget(QtWidgets.QFrame):
    """Clickable card showing an item's title, subtitle and description."""

    clicked = pyqtSignal()

    def __init__(
        self,
        card: Optional[ItemCard] = None,
        shortcut_hint: str = "",
        clickable: bool = True,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._clickable = clickable
        self.setFrameShape(QtWidgets.QFrame.Shape.StyledPanel)
        self.setMinimumWidth(260)
        self.setStyleSheet("""
            ItemCardWidget {
                background-color: #ffffff;
                border: 1px solid #d0d4da;
                border-radius: 8px;
            }
            ItemCardWidget:hover {
                border-color: #2d5a27;
            }
        """)
        if clickable:
            self.setCursor(Qt.CursorShape.PointingHandCursor)

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(8)

        self.hint_label = QtWidgets.QLabel(shortcut_hint)
        self.hint_label.setStyleSheet("color: #888888;")
        self.hint_label.setVisible(bool(shortcut_hint))
        layout.addWidget(self.hint_label)

        self.title_label = QtWidgets.QLabel()
        font = self.title_label.font()
        font.setPointSize(16)
        font.setBold(True)
        self.title_label.setFont(font)
        self.title_label.setWordWrap(True)
        layout.addWidget(self.title_label)

        self.subtitle_label = QtWidgets.QLabel()
        self.subtitle_label.setOpenExternalLinks(True)
        layout.addWidget(self.subtitle_label)

        self.description_label = QtWidgets.QLabel()
        self.description_label.setWordWrap(True)
        layout.addWidget(self.description_label)
        layout.addStretch()

        self.set_card(card)

    def set_card(self, card: Optional[ItemCard]) -> None:
        """Show ``card``, or clear the widget when None."""
        if card is None:
            self.title_label.clear()
            self.subtitle_label.clear()
            self.description_label.clear()
            self.subtitle_label.hide()
            self.description_label.hide()
            return

        self.title_label.setText(card.title)
        if card.subtitle:
            if card.subtitle_href:
                self.subtitle_label.setText(
                    f'<a href="{card.subtitle_href}">{card.subtitle}</a>'
                )
            else:
                self.subtitle_label.setText(card.subtitle)
            self.subtitle_label.show()
        else:
            self.subtitle_label.hide()
        if card.description:
            self.description_label.setText(card.description)
            self.description_label.show()
        else:
            self.description_label.hide()

    def mouseReleaseEvent(self, event) -> None:
        if self._clickable and event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit()
        super().mouseReleaseEvent(event)
