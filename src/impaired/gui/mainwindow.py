"""Main GUI window for Impaired."""

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

from typing import Optional, Tuple

from PyQt6 import QtGui, QtWidgets
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QMessageBox

from impaired import APP_NAME, APP_VERSION
from impaired.exceptions import ImpairedException
from impaired.gui.widgets.item_card import ItemCardWidget
from impaired.session import ComparisonSession, SessionConfig, SessionItem
from impaired.utils import setup_logger

logger = setup_logger(__name__)


# --- Main Application Window ---
class ImpairedMainWindow(QtWidgets.QMainWindow):
    """Main application window: set up items, compare pairs, show results."""

    def __init__(self, config: Optional[SessionConfig] = None) -> None:
        super().__init__()
        self.session = ComparisonSession(config)
        self.current_pair: Optional[Tuple[SessionItem, SessionItem]] = None

        self._setup_ui()
        self._update_ui_state()

    def _setup_ui(self):
        self.setWindowTitle(APP_NAME)
        self.setGeometry(100, 100, 900, 600)
        self.stacked_widget = QtWidgets.QStackedWidget()
        self.setCentralWidget(self.stacked_widget)
        self._setup_setup_page()
        self._setup_comparison_page()
        self._setup_results_page()
        self._setup_menu()
        self.statusBar().showMessage("Ready - Add items to compare.")
        logger.info("%s v%s started.", APP_NAME, APP_VERSION)

    def _setup_setup_page(self):
        """Page to queue the items of the next comparison."""
        self.setup_page = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(self.setup_page)

        title = QtWidgets.QLabel("Items to compare")
        font = title.font()
        font.setPointSize(20)
        font.setBold(True)
        title.setFont(font)
        title.setStyleSheet("color: #2d5a27;")
        layout.addWidget(title)

        input_row = QtWidgets.QHBoxLayout()
        self.item_input = QtWidgets.QLineEdit()
        self.item_input.setPlaceholderText(
            "Item title or JSON card, press Enter to add (empty Enter starts)"
        )
        self.item_input.returnPressed.connect(self._on_item_submitted)
        input_row.addWidget(self.item_input)
        add_button = QtWidgets.QPushButton("Add")
        add_button.clicked.connect(self._on_item_submitted)
        input_row.addWidget(add_button)
        layout.addLayout(input_row)

        self.pending_list = QtWidgets.QListWidget()
        layout.addWidget(self.pending_list)

        buttons = QtWidgets.QHBoxLayout()
        buttons.addStretch()
        self.start_button = QtWidgets.QPushButton("Start Comparison")
        self.start_button.clicked.connect(self.start_comparison)
        buttons.addWidget(self.start_button)
        layout.addLayout(buttons)

        self.stacked_widget.addWidget(self.setup_page)

    def _setup_comparison_page(self):
        """Page presenting the current pair as two clickable cards."""
        self.comparison_page = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(self.comparison_page)

        self.progress_label = QtWidgets.QLabel()
        layout.addWidget(self.progress_label)

        cards = QtWidgets.QHBoxLayout()
        left_key = self.session.config.left_key.upper()
        right_key = self.session.config.right_key.upper()
        self.left_card = ItemCardWidget(shortcut_hint=f"Press {left_key}")
        self.left_card.clicked.connect(self.choose_left)
        self.right_card = ItemCardWidget(shortcut_hint=f"Press {right_key}")
        self.right_card.clicked.connect(self.choose_right)
        cards.addWidget(self.left_card)
        cards.addWidget(QtWidgets.QLabel("vs."))
        cards.addWidget(self.right_card)
        layout.addLayout(cards)

        # Shortcuts stay scoped to the comparison page
        for key, slot in ((left_key, self.choose_left), (right_key, self.choose_right)):
            shortcut = QtGui.QShortcut(QtGui.QKeySequence(key), self.comparison_page)
            shortcut.activated.connect(slot)

        self.stacked_widget.addWidget(self.comparison_page)

    def _setup_results_page(self):
        """Page listing the items by score once all pairs are done."""
        self.results_page = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(self.results_page)

        title = QtWidgets.QLabel("Results")
        font = title.font()
        font.setPointSize(20)
        font.setBold(True)
        title.setFont(font)
        title.setStyleSheet("color: #2d5a27;")
        layout.addWidget(title)

        self.results_list = QtWidgets.QListWidget()
        layout.addWidget(self.results_list)

        buttons = QtWidgets.QHBoxLayout()
        buttons.addStretch()
        new_button = QtWidgets.QPushButton("New Comparison")
        new_button.clicked.connect(self.reset_comparison)
        buttons.addWidget(new_button)
        layout.addLayout(buttons)

        self.stacked_widget.addWidget(self.results_page)

    def _setup_menu(self):
        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("&File")
        self.start_action = self._create_action(
            "&Start Comparison", self.start_comparison, "Ctrl+Return"
        )
        self.reset_action = self._create_action(
            "&Reset Comparison", self.reset_comparison, "Ctrl+R"
        )
        self.exit_action = self._create_action("E&xit", self.close, "Ctrl+Q")
        file_menu.addActions([self.start_action, self.reset_action])
        file_menu.addSeparator()
        file_menu.addAction(self.exit_action)

        help_menu = menu_bar.addMenu("&Help")
        help_menu.addAction("About...", self.show_about_dialog)

    def _create_action(self, text: str, slot: callable, shortcut: str = "") -> QAction:
        """Create and configure a QAction."""
        action = QAction(text, self)
        action.triggered.connect(slot)
        if shortcut:
            action.setShortcut(QtGui.QKeySequence(shortcut))
        return action

    def _update_ui_state(self):
        """Switch pages and enable actions according to the session state."""
        if not self.session.has_ongoing:
            self.stacked_widget.setCurrentWidget(self.setup_page)
        elif self.current_pair is None:
            self.stacked_widget.setCurrentWidget(self.results_page)
        else:
            self.stacked_widget.setCurrentWidget(self.comparison_page)

        can_start = (
            not self.session.has_ongoing and len(self.session.pending_items) >= 2
        )
        self.start_action.setEnabled(can_start)
        self.start_button.setEnabled(can_start)
        self.reset_action.setEnabled(self.session.has_ongoing)

    # --- Setup ---

    def _on_item_submitted(self):
        text = self.item_input.text().strip()
        self.item_input.clear()
        self.item_input.setFocus()
        if not text:
            # An empty submission starts the comparison
            if len(self.session.pending_items) >= 2:
                self.start_comparison()
            return
        self.session.push_item(text)
        self._refresh_pending_list()
        self._update_ui_state()

    def _refresh_pending_list(self):
        self.pending_list.clear()
        for item in self.session.pending_items:
            self.pending_list.addItem(item.card.plain_text())

    def start_comparison(self):
        if self.session.has_ongoing or len(self.session.pending_items) < 2:
            return
        try:
            self.session.start()
        except ImpairedException as e:
            logger.error("Could not start comparison: %s", e)
            QMessageBox.critical(self, "Start Error", str(e))
            return
        self._refresh_pending_list()
        self._show_next_comparison()

    def reset_comparison(self):
        self.session.reset()
        self.current_pair = None
        self.statusBar().showMessage("Comparison reset - Add items to compare.")
        self._update_ui_state()

    # --- Comparing ---

    def choose_left(self):
        if self.current_pair is not None:
            left, right = self.current_pair
            self._track(left, right)

    def choose_right(self):
        if self.current_pair is not None:
            left, right = self.current_pair
            self._track(right, left)

    def _track(self, winner: SessionItem, loser: SessionItem):
        try:
            self.session.track_result(winner.handle, loser.handle)
        except ImpairedException as e:
            logger.error("Could not track result: %s", e)
            QMessageBox.warning(self, "Result Error", str(e))
            return
        self._show_next_comparison()

    def _show_next_comparison(self):
        self.current_pair = self.session.next_comparison()
        if self.current_pair is None:
            self.left_card.set_card(None)
            self.right_card.set_card(None)
            self._display_results()
        else:
            left, right = self.current_pair
            self.left_card.set_card(left.card)
            self.right_card.set_card(right.card)
            done, total = self.session.progress
            self.progress_label.setText(f"Comparison {done} of {total}")
            self.statusBar().showMessage(f"{left.card.title} vs. {right.card.title}")
        self._update_ui_state()

    def _display_results(self):
        self.results_list.clear()
        for rank, item, score in self.session.standings():
            self.results_list.addItem(
                f"{rank}. {item.card.plain_text()} ({score} votes)"
            )
        self.statusBar().showMessage("All comparisons done.")

    # --- Dialogs ---

    def show_about_dialog(self):
        QMessageBox.about(
            self,
            f"About {APP_NAME}",
            f"{APP_NAME} v{APP_VERSION}\n\n"
            "Rank items by choosing between two at a time.",
        )
