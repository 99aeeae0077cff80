"""
Application Initialization
==========================
This module parses the command line, sets up logging and starts the Qt Event
Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging (console + optional file).
2. Creates the Qt application.
3. Instantiates the Main Window with the chosen data source and presets.
"""
import argparse
import sys
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication

from gpdviewer.config import DATA_PATH, DEFAULT_PALETTE
from gpdviewer.logging_config import LEVEL_NAMES, setup_logging
from gpdviewer.model.colormap import PALETTES
from gpdviewer.view.main_window import MainWindow, VISIBLE_APP_NAME
from gpdviewer.view.presets import PRESETS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gpdviewer",
        description="Interactive 3D viewer for 4-D GPD tables sampled over (x, xi, t, Q2)",
        epilog="Example: gpdviewer ./data --preset framed",
    )
    parser.add_argument(
        "data",
        nargs="?",
        default=DATA_PATH,
        help=f"Directory or URL prefix holding x.bin, xi.bin, t.bin, Q2.bin and gpd_4d.bin "
             f"(default: {DATA_PATH})",
    )
    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default="orbit",
        help="Initial camera framing (default: orbit)",
    )
    parser.add_argument(
        "--palette",
        choices=PALETTES,
        default=DEFAULT_PALETTE,
        help=f"Colormap for the surface (default: {DEFAULT_PALETTE})",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=LEVEL_NAMES,
        help="Logging verbosity (default: INFO)",
    )
    parser.add_argument(
        "--log-file",
        help="Also write the log to this file",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=args.log_level, log_file=args.log_file)

    # 2. Create the Qt Application
    app = QApplication(sys.argv[:1])
    app.setApplicationName(VISIBLE_APP_NAME)

    # 3. Initialize the Main Window; data loads in the background
    window = MainWindow(args.data, preset=args.preset, palette=args.palette)
    window.show()

    # 4. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
