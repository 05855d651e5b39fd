#!/usr/bin/env python3
"""
Interval Tree Inspector - A PySide6 viewer for a left-leaning red-black interval tree.

This is the main entry point for the application.
"""

import sys
import argparse
from pathlib import Path

from itree.config import Config
from itree.interval_tree import RedBlackIntervalTree, set_debug


def parse_interval(text: str) -> tuple[int, int]:
    """Parse a 'start,end' command line argument."""
    parts = text.split(',')
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected START,END but got '{text}'")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"interval bounds must be integers: '{text}'")


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Interval Tree Inspector - build and explore a red-black interval tree"
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Path to configuration file (default: auto-detect)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output"
    )
    parser.add_argument(
        "--print",
        dest="print_only",
        action="store_true",
        help="Print the tree to stdout and exit instead of opening the window"
    )
    parser.add_argument(
        "intervals",
        metavar="INTERVAL",
        nargs="*",
        type=parse_interval,
        help="Interval to insert, written START,END"
    )
    return parser.parse_args(argv)


def build_tree(config: Config, intervals: list[tuple[int, int]]) -> RedBlackIntervalTree:
    """Create a tree holding the configured seed intervals followed by intervals."""
    tree = RedBlackIntervalTree(verify=config.verify_integrity)
    for start, end in list(config.seed_intervals) + list(intervals):
        tree.insert(start, end)
    return tree


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    # Load configuration
    try:
        config = Config.load(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        print(f"\nThe default configuration location is {Config.get_default_config_path()}")
        print("\nExample configuration:")
        print("""
[General]
debug = false
verify_integrity = true
seed_intervals = [[1, 5], [3, 7], [10, 15]]

[Printer]
indent = 4
""")
        return 1
    except Exception as e:
        print(f"Error loading configuration: {e}")
        return 1

    set_debug(args.debug or config.debug)
    tree = build_tree(config, args.intervals)

    if args.print_only:
        tree.print_tree(indent=config.printer.indent)
        print(f"{len(tree)} intervals, height {tree.height()}")
        return 0

    from PySide6.QtWidgets import QApplication
    from gui.main_window import MainWindow, apply_application_font

    # Create application
    app = QApplication(sys.argv[:1])
    app.setApplicationName("Interval Tree Inspector")
    app.setApplicationVersion("0.1")
    app.setStyle("Fusion")
    apply_application_font(config)

    window = MainWindow(config, tree)
    window.show()

    # Run event loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
