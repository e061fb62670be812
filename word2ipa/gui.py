#!/usr/bin/env python3
from PyQt6.QtWidgets import (QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
                             QLabel, QLineEdit, QFrame, QGroupBox,
                             QScrollArea, QTabWidget)
from PyQt6.QtCore import Qt
import logging

from .config import AppConfig
from .core import HistoryEntry, IpaSymbolEntry
from .session import (
    PLACEHOLDER,
    LookupSession,
    load_catalog_or_empty,
    format_example_lines,
    format_history_row,
    format_symbol_title,
)

RESULT_STYLE = "font-size: 28px; font-weight: bold; color: #333333; padding: 5px;"
ERROR_STYLE = "font-size: 18px; font-weight: bold; color: #F44336; padding: 5px;"


class HistoryRowWidget(QFrame):
    def __init__(self, entry: HistoryEntry):
        super().__init__()
        self.entry = entry
        self.setStyleSheet("""
            QFrame {
                background: #f5f5f5;
                border: 1px solid #dddddd;
                border-radius: 4px;
            }
            QLabel {
                border: none;
            }
        """)
        row = format_history_row(entry)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 6, 8, 6)
        layout.setSpacing(2)

        title = QLabel(row["title"])
        title.setStyleSheet("font-size: 16px; font-weight: bold; color: #333333;")
        title.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        layout.addWidget(title)

        subtitle = QLabel(row["subtitle"])
        subtitle.setStyleSheet("color: #666666;")
        layout.addWidget(subtitle)


class WordLookupWidget(QWidget):
    """Input field, result label and the session history."""

    def __init__(self, session: LookupSession, parent=None):
        super().__init__(parent)
        self.session = session

        layout = QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(12)
        self.setLayout(layout)

        self.word_input = QLineEdit()
        self.word_input.setPlaceholderText("Enter a word...")
        self.word_input.returnPressed.connect(self._on_submit)
        layout.addWidget(self.word_input)

        self.result_label = QLabel(PLACEHOLDER)
        self.result_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.result_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        self.result_label.setWordWrap(True)
        self.result_label.setStyleSheet(RESULT_STYLE)
        layout.addWidget(self.result_label)

        if session.degraded:
            warning = QLabel(f"✗ {session.load_error}")
            warning.setWordWrap(True)
            warning.setStyleSheet("color: #FF5722; font-weight: bold;")
            layout.addWidget(warning)

        history_group = QGroupBox("History")
        history_outer = QVBoxLayout()
        history_group.setLayout(history_outer)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        content = QWidget()
        self.history_layout = QVBoxLayout(content)
        self.history_layout.setSpacing(6)
        self.history_layout.addStretch()
        scroll.setWidget(content)
        history_outer.addWidget(scroll)

        layout.addWidget(history_group, stretch=1)

    def _on_submit(self):
        outcome = self.session.submit(self.word_input.text())
        self.result_label.setText(outcome.message)
        if outcome.ok:
            self.result_label.setStyleSheet(RESULT_STYLE)
            self._add_history_row(self.session.history[-1])
        elif outcome.word:
            self.result_label.setStyleSheet(ERROR_STYLE)
        else:
            self.result_label.setStyleSheet(RESULT_STYLE)

    def _add_history_row(self, entry: HistoryEntry):
        # Keep the stretch as the last item
        self.history_layout.insertWidget(self.history_layout.count() - 1, HistoryRowWidget(entry))


class SymbolRowWidget(QFrame):
    def __init__(self, entry: IpaSymbolEntry):
        super().__init__()
        self.entry = entry
        self.setStyleSheet("""
            QFrame {
                background: #f5f5f5;
                border: 1px solid #dddddd;
                border-radius: 4px;
            }
            QLabel {
                border: none;
                color: #333333;
            }
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)

        text_layout = QVBoxLayout()
        title = QLabel(format_symbol_title(entry))
        title.setStyleSheet("font-size: 16px; font-weight: bold;")
        text_layout.addWidget(title)
        description = QLabel(entry.description)
        description.setWordWrap(True)
        description.setStyleSheet("color: #666666;")
        text_layout.addWidget(description)
        layout.addLayout(text_layout, stretch=1)

        examples_layout = QVBoxLayout()
        examples_layout.setSpacing(2)
        for line in format_example_lines(entry):
            label = QLabel(line)
            label.setAlignment(Qt.AlignmentFlag.AlignLeft)
            label.setStyleSheet("font-family: monospace;")
            examples_layout.addWidget(label)
        layout.addLayout(examples_layout)


class IpaSymbolWidget(QWidget):
    """Browsable list of IPA symbols with example words."""

    def __init__(self, entries, error=None, parent=None):
        super().__init__(parent)
        self.entries = entries

        layout = QVBoxLayout()
        self.setLayout(layout)

        if error:
            self.status_label = QLabel(f"✗ Error: {error}")
            self.status_label.setWordWrap(True)
            self.status_label.setStyleSheet("color: #F44336; font-weight: bold;")
            layout.addWidget(self.status_label)

        group = QGroupBox("IPA Symbols")
        group_layout = QVBoxLayout()
        group.setLayout(group_layout)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        content = QWidget()
        rows_layout = QVBoxLayout(content)
        rows_layout.setSpacing(6)
        for entry in entries:
            rows_layout.addWidget(SymbolRowWidget(entry))
        rows_layout.addStretch()
        scroll.setWidget(content)
        group_layout.addWidget(scroll)

        layout.addWidget(group)


class MainWindow(QMainWindow):
    def __init__(self, config: AppConfig):
        super().__init__()
        self.config = config
        self.setWindowTitle("IPA Dictionary")

        if config.dictionary_file:
            self.session = LookupSession.from_dictionary_file(config.dictionary_file)
        else:
            self.session = LookupSession.from_locale(config.locale, config.resource_dir)

        entries, error = load_catalog_or_empty(config.resource_dir)
        logging.info(f"Loaded {len(entries)} IPA symbols")

        self.tab_widget = QTabWidget()
        self.setCentralWidget(self.tab_widget)

        self.lookup_tab = WordLookupWidget(self.session)
        self.tab_widget.addTab(self.lookup_tab, "Word to IPA")

        self.symbols_tab = IpaSymbolWidget(entries, error)
        self.tab_widget.addTab(self.symbols_tab, "IPA Dictionary")

        self.resize(config.window_width, config.window_height)
