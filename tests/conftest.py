import os

import numpy as np
import pytest

# Qt tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from gpdviewer.model.io import load_dataset


def write_samples(path, values):
    np.asarray(values, dtype="<f8").tofile(path)


@pytest.fixture
def small_axes():
    return {
        "x": [0.0, 1.0],
        "xi": [10.0, 20.0, 30.0],
        "t": [100.0, 200.0],
        "Q2": [1000.0, 2000.0],
    }


@pytest.fixture
def data_dir(tmp_path, small_axes):
    """Shape (2, 3, 2, 2) dataset whose GPD samples are 0..23."""
    for name, values in small_axes.items():
        write_samples(tmp_path / f"{name}.bin", values)
    write_samples(tmp_path / "gpd_4d.bin", np.arange(24, dtype=float))
    return tmp_path


@pytest.fixture
def dataset(data_dir):
    return load_dataset(data_dir)


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtCore import QCoreApplication

    return QCoreApplication.instance() or QCoreApplication([])
