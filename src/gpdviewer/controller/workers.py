"""
Background Workers (Threading)
==============================
This module contains QThread subclasses for handling long-running tasks.

Why is this file needed?
------------------------
1. Responsiveness: The five sample files can be large (or remote). Reading them
   on the main thread would freeze the window before it is even shown.
2. Signals: They provide a safe way to hand the loaded dataset (or the error)
   back to the GUI thread using Qt Signals.

Classes:
    DatasetLoaderWorker: Loads all sample files and waits for every one.
"""
import logging
import os

from PySide6.QtCore import QThread, Signal

from gpdviewer.model.io import Locator, load_dataset

logger = logging.getLogger(__name__)


class DatasetLoaderWorker(QThread):
    # Signals to update the UI from the background
    loaded = Signal(object)  # GPDDataset
    error_occurred = Signal(str)

    def __init__(self, source: Locator) -> None:
        super().__init__()
        self.source = os.fspath(source)

    def run(self) -> None:
        try:
            logger.info("Loading dataset in background thread...")
            dataset = load_dataset(self.source)
        except Exception as e:
            logger.exception(f"Error in DatasetLoaderWorker: {e}")
            self.error_occurred.emit(str(e))
            return
        self.loaded.emit(dataset)
