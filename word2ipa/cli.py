#!/usr/bin/env python3
import sys
import argparse
import logging
from typing import List

from .config import AppConfig, load_config
from .core import (
    LoadError,
    available_locales,
    find_symbol,
    load_symbol_catalog,
)
from .session import (
    LookupSession,
    format_example_lines,
    format_symbol_title,
)


def _build_config(args: argparse.Namespace) -> AppConfig:
    try:
        config = load_config(
            args.config,
            locale=getattr(args, "locale", None),
            dictionary_file=getattr(args, "dict", None),
            log_level="DEBUG" if args.verbose else None,
        )
    except ValueError as e:
        logging.error(str(e))
        sys.exit(1)
    logging.getLogger().setLevel(config.log_level)
    return config


def lookup_command(args: argparse.Namespace) -> None:
    """Executes the lookup command.

    Args:
        args (argparse.Namespace): Command-line arguments.
    """
    config = _build_config(args)
    if config.dictionary_file:
        session = LookupSession.from_dictionary_file(config.dictionary_file)
    else:
        session = LookupSession.from_locale(config.locale, config.resource_dir)

    missing: List[str] = []
    for word in args.words:
        outcome = session.submit(word)
        if outcome.ok:
            print(f"{outcome.word}: {outcome.ipa}")
        elif outcome.word:
            missing.append(outcome.word)
        else:
            logging.warning("Skipping empty word.")

    if missing:
        logging.warning(f"Not found: {', '.join(missing)}")
        sys.exit(1)


def symbols_command(args: argparse.Namespace) -> None:
    """Executes the symbols command.

    Args:
        args (argparse.Namespace): Command-line arguments.
    """
    config = _build_config(args)
    try:
        catalog = load_symbol_catalog(config.resource_dir)
    except LoadError as e:
        logging.error(f"Error loading IPA dictionary: {e}")
        sys.exit(1)

    if args.symbol:
        entry = find_symbol(catalog, args.symbol)
        if entry is None:
            logging.error(f"Symbol '{args.symbol}' not found in the IPA dictionary.")
            sys.exit(1)
        catalog = [entry]

    for entry in catalog:
        print(format_symbol_title(entry))
        print(f"  {entry.description}")
        for line in format_example_lines(entry):
            print(f"  {line}")


def locales_command(args: argparse.Namespace) -> None:
    config = _build_config(args)
    locales = available_locales(config.resource_dir)
    if not locales:
        logging.warning("No dictionaries found.")
        return
    logging.info("Available dictionaries:")
    for locale in locales:
        print(f"  - {locale}")


def launch_gui(args: argparse.Namespace) -> None:
    """
    Launch the graphical user interface.

    Args:
        args: Command line arguments containing the optional config file.
    """
    try:
        from PyQt6.QtWidgets import QApplication
        from .gui import MainWindow
    except ImportError:
        logging.error("PyQt6 is required for the GUI. Install it with: pip install PyQt6")
        sys.exit(1)

    config = _build_config(args)
    app = QApplication(sys.argv)

    window = MainWindow(config)
    window.show()

    sys.exit(app.exec())


def main(argv=None) -> None:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="word2ipa - Look up IPA transcriptions and browse IPA symbols.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Lookup command
    lookup_parser = subparsers.add_parser("lookup", help="Look up the IPA transcription of words")
    lookup_parser.add_argument("words", nargs="+", help="Words to look up")
    lookup_parser.add_argument("--locale", help="Dictionary locale (default: en_US)")
    lookup_parser.add_argument("--dict", help="Dictionary JSON file to use instead of a bundled locale")
    lookup_parser.set_defaults(func=lookup_command)

    # Symbols command
    symbols_parser = subparsers.add_parser("symbols", help="Show the IPA symbol table")
    symbols_parser.add_argument("--symbol", help="Show only this symbol")
    symbols_parser.set_defaults(func=symbols_command)

    # Locales command
    locales_parser = subparsers.add_parser("locales", help="List bundled dictionaries")
    locales_parser.set_defaults(func=locales_command)

    # GUI command
    gui_parser = subparsers.add_parser("gui", help="Launch the graphical user interface")
    gui_parser.add_argument("--locale", help="Dictionary locale (default: en_US)")
    gui_parser.set_defaults(func=launch_gui)

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s: %(message)s")

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(0)

    args.func(args)


if __name__ == "__main__":
    main()
