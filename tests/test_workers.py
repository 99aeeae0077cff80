from http.client import IncompleteRead

from gpdviewer.controller.workers import DatasetLoaderWorker
from gpdviewer.model import io


def run_worker(source):
    worker = DatasetLoaderWorker(source)
    loaded, errors = [], []
    worker.loaded.connect(loaded.append)
    worker.error_occurred.connect(errors.append)
    worker.run()
    return loaded, errors


def test_worker_emits_loaded_dataset(qapp, data_dir):
    loaded, errors = run_worker(data_dir)

    assert errors == []
    assert len(loaded) == 1
    assert loaded[0].shape == (2, 3, 2, 2)


def test_worker_reports_missing_file(qapp, data_dir):
    (data_dir / "gpd_4d.bin").unlink()

    loaded, errors = run_worker(data_dir)

    assert loaded == []
    assert len(errors) == 1
    assert "gpd_4d.bin" in errors[0]


def test_worker_reports_interrupted_read(qapp, data_dir, monkeypatch):
    def incomplete(locator):
        raise IncompleteRead(b"\x00" * 8, 16)

    monkeypatch.setattr(io, "_read_bytes", incomplete)

    loaded, errors = run_worker(data_dir)

    assert loaded == []
    assert len(errors) == 1


def test_worker_reports_unexpected_errors(qapp, data_dir, monkeypatch):
    from gpdviewer.controller import workers

    def explode(source):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(workers, "load_dataset", explode)

    loaded, errors = run_worker(data_dir)

    assert loaded == []
    assert errors == ["disk on fire"]
