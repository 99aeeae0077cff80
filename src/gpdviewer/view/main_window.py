"""
Main Application Window
=======================
The primary GUI container: slider panel on the left, 3D surface on the right.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the sliders to the viewer context and drives the
   render tick that pushes fresh slices to the 3D widget.
3. Startup: It waits for the background loader before building any
   interactive state.
"""
import logging
import os
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QSplitter, QMessageBox
from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QCloseEvent

from gpdviewer.config import RENDER_INTERVAL_MS
from gpdviewer.controller.workers import DatasetLoaderWorker
from gpdviewer.errors import GPDViewerError
from gpdviewer.model.context import ViewerContext
from gpdviewer.model.io import GPDDataset, Locator
from gpdviewer.view.presets import PRESETS
from gpdviewer.view.slice_controls import SliceControlPanel
from gpdviewer.view.widgets.plot_3d import GPDSurfaceWidget

logger = logging.getLogger(__name__)

VISIBLE_APP_NAME = "GPD Viewer"


class MainWindow(QMainWindow):
    def __init__(self, source: Locator, preset: str = "orbit", palette: str = "jet") -> None:
        super().__init__()
        self.source: str = os.fspath(source)
        self.palette: str = palette
        self.context: Optional[ViewerContext] = None
        self.loader_worker: Optional[DatasetLoaderWorker] = None

        self.update_window_title()
        self.resize(1400, 900)

        splitter = QSplitter(Qt.Horizontal)
        self.setCentralWidget(splitter)

        # --- LEFT SIDE: Controls ---
        self.controls = SliceControlPanel(preset, palette)
        splitter.addWidget(self.controls)

        # --- RIGHT SIDE: 3D Visualization ---
        self.visualizer = GPDSurfaceWidget(preset=PRESETS[preset])
        splitter.addWidget(self.visualizer)

        # 1 part sidebar : 4 parts 3D view
        splitter.setSizes([300, 1100])

        # --- SIGNAL CONNECTIONS ---
        self.controls.x_index_changed.connect(self.on_x_index_changed)
        self.controls.t_index_changed.connect(self.on_t_index_changed)
        self.controls.preset_changed.connect(self.on_preset_changed)
        self.controls.palette_changed.connect(self.on_palette_changed)

        # Render tick
        self.timer = QTimer(self)
        self.timer.setInterval(RENDER_INTERVAL_MS)
        self.timer.timeout.connect(self.on_tick)

        self.statusBar().showMessage(f"Loading data from {self.source}...")
        self.start_loading()

    # --- HELPER METHODS ---
    def update_window_title(self) -> None:
        self.setWindowTitle(f"{VISIBLE_APP_NAME} - [{self.source}]")

    def start_loading(self) -> None:
        self.loader_worker = DatasetLoaderWorker(self.source)
        self.loader_worker.loaded.connect(self.on_dataset_loaded)
        self.loader_worker.error_occurred.connect(self.on_load_error)
        self.loader_worker.start()

    def update_status(self) -> None:
        if self.context is None:
            return
        state = self.context.state
        self.statusBar().showMessage(
            f"x = {state.x_value:g}   t = {state.t_value:g}"
        )

    # --- LOADER SLOTS ---

    def on_dataset_loaded(self, dataset: GPDDataset) -> None:
        """All five files are in: build the interactive state."""
        try:
            self.context = ViewerContext(dataset, palette=self.palette)
        except GPDViewerError as e:
            logger.exception("Could not prepare the dataset")
            self.on_load_error(str(e))
            return

        self.controls.bind(dataset)
        self.update_status()
        self.timer.start()

    def on_load_error(self, msg: str) -> None:
        self.controls.show_error(msg)
        self.statusBar().showMessage("Loading failed.")
        QMessageBox.critical(self, "Load Error", msg)

    # --- INTERACTION SLOTS ---

    def on_x_index_changed(self, index: int) -> None:
        if self.context is None:
            return
        self.context.state.select_x_index(index)
        self.update_status()

    def on_t_index_changed(self, index: int) -> None:
        if self.context is None:
            return
        self.context.state.select_t_index(index)
        self.update_status()

    def on_preset_changed(self, name: str) -> None:
        self.visualizer.apply_preset(PRESETS[name])

    def on_palette_changed(self, name: str) -> None:
        self.palette = name
        if self.context is not None:
            self.context.set_palette(name)

    def on_tick(self) -> None:
        """Push a new slice to the widget if the selection changed."""
        if self.context is None:
            return
        try:
            grid = self.context.tick()
        except GPDViewerError as e:
            # Previous slice stays on screen and the selection was rolled back
            logger.exception("Slicing failed")
            state = self.context.state
            self.controls.show_selection(state.x_index, state.t_index)
            self.statusBar().showMessage(
                f"Slicing failed: {e}   (showing x = {state.x_value:g}   t = {state.t_value:g})"
            )
            return
        if grid is not None:
            self.visualizer.show_grid(grid)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.timer.stop()
        if self.loader_worker is not None and self.loader_worker.isRunning():
            self.loader_worker.wait()
        self.visualizer.close()
        event.accept()
