"""
Configuration & Path Management
===============================
Central registry for file locations and global constants.

Why is this file needed?
------------------------
1. Abstraction: The five sample files are looked up relative to one data
   source instead of hardcoded paths scattered through the code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find bundled data when the app is frozen into an .exe.

Exports:
    DATA_PATH (str): Default data source (directory or URL prefix).
    AXIS_FILES (dict): Axis name -> file name of the 1-D axis samples.
    GPD_FILE (str): File name of the flattened 4-D GPD samples.
"""
import logging
import os
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # config.py is in src/gpdviewer/
    project_root: Path = Path(__file__).parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Axis order of the flattened GPD array (row-major, last axis fastest)
AXIS_NAMES: tuple[str, ...] = ("x", "xi", "t", "Q2")

AXIS_FILES: dict[str, str] = {name: f"{name}.bin" for name in AXIS_NAMES}
GPD_FILE: str = "gpd_4d.bin"

# Environment override for the data source
DATA_ENV_VAR: str = "GPDVIEWER_DATA"
DATA_PATH: str = os.environ.get(DATA_ENV_VAR) or get_resource_path("data")

DEFAULT_PALETTE: str = "jet"

# Height assigned to every cell when the data has zero span
DEGENERATE_VALUE: float = 0.5

# Render tick of the Qt event loop (~60 Hz)
RENDER_INTERVAL_MS: int = 16

if DATA_ENV_VAR not in os.environ and not os.path.exists(DATA_PATH):
    logger.debug(f"Default data path not found at {DATA_PATH}")
