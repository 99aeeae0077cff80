"""
Slice Control Panel
Two index sliders (x and t) plus the view preset and palette selectors.
"""
from typing import Optional

import numpy as np
import numpy.typing as npt
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QSlider, QGroupBox, QFormLayout, QComboBox
)
from PySide6.QtCore import Qt, Signal
import logging

from gpdviewer.model.colormap import PALETTES
from gpdviewer.model.io import GPDDataset
from gpdviewer.view.presets import PRESETS


logger = logging.getLogger(__name__)


class AxisSlider(QWidget):
    """Slider over the indices of one axis, labelled with the selected value."""
    index_changed = Signal(int)

    def __init__(self, name: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.name = name
        self.values: npt.NDArray[np.float64] = np.empty(0)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.slider = QSlider(Qt.Horizontal)
        self.slider.setEnabled(False)
        # Emit only when the handle is released, like a "change" event
        self.slider.setTracking(False)
        self.slider.setSingleStep(1)
        self.slider.setPageStep(1)
        self.slider.valueChanged.connect(self.on_value_changed)
        self.slider.sliderMoved.connect(self._update_label)
        layout.addWidget(self.slider)

        self.lbl_value = QLabel("-")
        self.lbl_value.setMinimumWidth(80)
        self.lbl_value.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        layout.addWidget(self.lbl_value)

    def set_values(self, values: npt.NDArray[np.float64]) -> None:
        """Bind the slider to an axis. Does not emit index_changed."""
        self.values = values
        self.slider.blockSignals(True)
        self.slider.setRange(0, len(values) - 1)
        self.slider.setValue(0)
        self.slider.blockSignals(False)
        self.slider.setEnabled(len(values) > 1)
        self._update_label(0)

    def show_index(self, index: int) -> None:
        """Move the handle without emitting index_changed."""
        self.slider.blockSignals(True)
        self.slider.setValue(index)
        self.slider.blockSignals(False)
        self._update_label(index)

    def on_value_changed(self, index: int) -> None:
        self._update_label(index)
        self.index_changed.emit(index)

    def _update_label(self, index: int) -> None:
        if 0 <= index < len(self.values):
            self.lbl_value.setText(f"{self.values[index]:g}")


class SliceControlPanel(QWidget):
    x_index_changed = Signal(int)
    t_index_changed = Signal(int)
    preset_changed = Signal(str)
    palette_changed = Signal(str)

    def __init__(self, preset: str, palette: str) -> None:
        super().__init__()

        layout = QVBoxLayout(self)

        # --- Slice ---
        grp_slice = QGroupBox("Slice")
        form_slice = QFormLayout(grp_slice)

        self.slider_x = AxisSlider("x")
        self.slider_x.index_changed.connect(self.x_index_changed)
        form_slice.addRow("x:", self.slider_x)

        self.slider_t = AxisSlider("t")
        self.slider_t.index_changed.connect(self.t_index_changed)
        form_slice.addRow("t:", self.slider_t)

        layout.addWidget(grp_slice)

        # --- View ---
        grp_view = QGroupBox("View")
        form_view = QFormLayout(grp_view)

        self.combo_preset = QComboBox()
        for p in PRESETS.values():
            self.combo_preset.addItem(p.title, p.name)
        self.combo_preset.setCurrentIndex(self.combo_preset.findData(preset))
        self.combo_preset.currentIndexChanged.connect(
            lambda _: self.preset_changed.emit(self.combo_preset.currentData())
        )
        form_view.addRow("Camera:", self.combo_preset)

        self.combo_palette = QComboBox()
        self.combo_palette.addItems(PALETTES)
        self.combo_palette.setCurrentText(palette)
        self.combo_palette.setEnabled(False)
        self.combo_palette.currentTextChanged.connect(self.palette_changed)
        form_view.addRow("Colormap:", self.combo_palette)

        layout.addWidget(grp_view)

        self.lbl_info = QLabel("Loading data...")
        self.lbl_info.setWordWrap(True)
        layout.addWidget(self.lbl_info)

        layout.addStretch()

    def bind(self, dataset: GPDDataset) -> None:
        """Enable the controls once the dataset is available."""
        self.slider_x.set_values(dataset.x)
        self.slider_t.set_values(dataset.t)
        self.combo_palette.setEnabled(True)
        n_x, n_xi, n_t, n_Q2 = dataset.shape
        self.lbl_info.setText(
            f"Samples: x={n_x}, xi={n_xi}, t={n_t}, Q2={n_Q2}"
        )
        logger.debug("Slice controls bound to dataset.")

    def show_selection(self, x_index: int, t_index: int) -> None:
        self.slider_x.show_index(x_index)
        self.slider_t.show_index(t_index)

    def show_error(self, msg: str) -> None:
        self.lbl_info.setText(f"<b>Error:</b> {msg}")
