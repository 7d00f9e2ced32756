"""Tests for the local file store"""

import os

import pytest

from planui.utils.file_storage.local_storage import LocalStorageAdapter
from planui.utils.file_storage.storage_factory import StorageFactory


@pytest.fixture
def storage(tmp_path):
    return LocalStorageAdapter(str(tmp_path))


class TestResolve:
    def test_relative_path(self, storage, tmp_path):
        assert storage.resolve("p-1/forest.tif") == os.path.join(str(tmp_path), "p-1", "forest.tif")

    def test_normalises_inside_root(self, storage, tmp_path):
        assert storage.resolve("p-1/../p-2/a.tif") == os.path.join(str(tmp_path), "p-2", "a.tif")

    @pytest.mark.parametrize("path", ["", "/etc/passwd", "..", "../x.tif", "p-1/../../x.tif"])
    def test_rejects_paths_outside_root(self, storage, path):
        with pytest.raises(ValueError):
            storage.resolve(path)


class TestOperations:
    def test_create_directory_is_idempotent(self, storage, tmp_path):
        storage.create_directory("p-1")
        storage.create_directory("p-1")

        assert (tmp_path / "p-1").is_dir()
        assert storage.exists("p-1")

    def test_delete_file(self, storage, tmp_path):
        (tmp_path / "a.tif").write_bytes(b"raster")

        storage.delete_file("a.tif")

        assert not storage.exists("a.tif")

    def test_delete_directory_tree(self, storage, tmp_path):
        (tmp_path / "p-1" / "nested").mkdir(parents=True)
        (tmp_path / "p-1" / "nested" / "a.tif").write_bytes(b"raster")

        storage.delete_file("p-1")

        assert not (tmp_path / "p-1").exists()

    def test_delete_missing_file(self, storage):
        with pytest.raises(FileNotFoundError):
            storage.delete_file("missing.tif")

    def test_delete_outside_root(self, storage):
        with pytest.raises(ValueError):
            storage.delete_file("../elsewhere.tif")


class TestStorageFactory:
    def test_local_by_default(self, monkeypatch, storage_root):
        monkeypatch.delenv("STORAGE_BACKEND", raising=False)

        adapter = StorageFactory.get_storage_adapter()

        assert isinstance(adapter, LocalStorageAdapter)
        assert adapter.root == str(storage_root)

    def test_unsupported_backend(self, monkeypatch):
        monkeypatch.setenv("STORAGE_BACKEND", "s3")

        with pytest.raises(ValueError, match="Unsupported storage backend: s3"):
            StorageFactory.get_storage_adapter()
