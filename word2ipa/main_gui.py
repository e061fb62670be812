#!/usr/bin/env python3
import sys
import logging
from PyQt6.QtWidgets import QApplication

from .config import load_config
from .gui import MainWindow

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

def main(config_file=None):
    """Main entry point for the GUI application."""
    try:
        config = load_config(config_file)
    except ValueError as e:
        logging.error(str(e))
        sys.exit(1)
    logging.getLogger().setLevel(config.log_level)

    app = QApplication(sys.argv)

    # Create and show main window
    window = MainWindow(config)
    window.show()

    sys.exit(app.exec())

if __name__ == "__main__":
    main()
