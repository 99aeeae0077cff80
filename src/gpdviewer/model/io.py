"""
Input Manager (raw float64 sample files)
Loads the axis arrays and the flattened 4-D GPD samples.

Every file is a headerless sequence of little-endian IEEE-754 doubles.
A locator is either a filesystem path or a ``file://`` / ``http(s)://`` URL.
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from http.client import HTTPException
import logging
import os
from pathlib import Path
from typing import Union
from urllib.error import URLError
from urllib.parse import urlparse
from urllib.request import urlopen

import numpy as np
import numpy.typing as npt

from gpdviewer.config import AXIS_FILES, AXIS_NAMES, GPD_FILE
from gpdviewer.errors import LoadError
from gpdviewer.model.ndview import NDView

logger = logging.getLogger(__name__)

Locator = Union[str, os.PathLike]

SAMPLE_DTYPE = np.dtype("<f8")

_URL_SCHEMES = ("http", "https", "file")


@dataclass(frozen=True, eq=False)
class GPDDataset:
    """The five sample arrays of one GPD table, loaded once and read-only."""
    x: npt.NDArray[np.float64]
    xi: npt.NDArray[np.float64]
    t: npt.NDArray[np.float64]
    Q2: npt.NDArray[np.float64]
    gpd: NDView
    source: str = ""

    @property
    def shape(self) -> tuple[int, int, int, int]:
        return len(self.x), len(self.xi), len(self.t), len(self.Q2)


def _is_url(locator: str) -> bool:
    return urlparse(locator).scheme in _URL_SCHEMES


def _read_bytes(locator: Locator) -> bytes:
    text = os.fspath(locator)
    if _is_url(text):
        with urlopen(text) as response:
            return response.read()
    return Path(text).read_bytes()


def decode_samples(raw: bytes, locator: str = "<bytes>") -> npt.NDArray[np.float64]:
    """Reinterpret a byte buffer as a read-only float64 array."""
    if len(raw) % SAMPLE_DTYPE.itemsize != 0:
        raise LoadError(
            locator,
            f"byte length {len(raw)} is not a multiple of {SAMPLE_DTYPE.itemsize}",
        )
    samples = np.frombuffer(raw, dtype=SAMPLE_DTYPE).astype(np.float64, copy=False)
    samples.flags.writeable = False
    return samples


def load_array(locator: Locator) -> npt.NDArray[np.float64]:
    """
    Fetch one sample file. Attempted exactly once.

    Raises:
        LoadError: If the resource cannot be read or is not a whole number of doubles.
    """
    text = os.fspath(locator)
    logger.debug(f"Loading samples from: {text}")
    try:
        raw = _read_bytes(text)
    except (OSError, URLError, HTTPException, ValueError) as e:
        raise LoadError(text, str(e)) from e

    samples = decode_samples(raw, text)
    logger.debug(f"Loaded {samples.size} samples from {text}")
    return samples


def resolve_locator(source: Locator, filename: str) -> str:
    """Join a directory or URL prefix with a file name."""
    text = os.fspath(source)
    if _is_url(text):
        return text.rstrip("/") + "/" + filename
    return os.path.join(text, filename)


def load_dataset(source: Locator) -> GPDDataset:
    """
    Load all five sample files from ``source`` and wait for every one of them.

    No partial dataset is returned: if any load fails, the first failure (in
    file order) is raised once all reads have finished.

    Raises:
        LoadError: If a file cannot be loaded.
        ShapeMismatchError: If the GPD sample count does not match the axes.
    """
    source_text = os.fspath(source)
    logger.info(f"Loading GPD dataset from: {source_text}")

    filenames = [AXIS_FILES[name] for name in AXIS_NAMES] + [GPD_FILE]
    locators = [resolve_locator(source_text, name) for name in filenames]

    with ThreadPoolExecutor(max_workers=len(locators)) as pool:
        futures = [pool.submit(load_array, loc) for loc in locators]

    errors = [f.exception() for f in futures if f.exception() is not None]
    if errors:
        for err in errors:
            logger.error(str(err))
        raise errors[0]

    x, xi, t, Q2, flat = (f.result() for f in futures)
    gpd = NDView(flat, (len(x), len(xi), len(t), len(Q2)))

    dataset = GPDDataset(x=x, xi=xi, t=t, Q2=Q2, gpd=gpd, source=source_text)
    logger.info(f"Dataset loaded: shape (x, xi, t, Q2) = {dataset.shape}")
    return dataset
