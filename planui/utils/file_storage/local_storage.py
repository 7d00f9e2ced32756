"""Local filesystem storage adapter"""

import os
import shutil

from planui.utils.file_storage.storage_interface import StorageInterface


class LocalStorageAdapter(StorageInterface):
    """Local filesystem storage rooted at a fixed directory"""

    def __init__(self, root: str):
        self._root = os.path.abspath(root)

    @property
    def root(self) -> str:
        return self._root

    def resolve(self, relative_path: str) -> str:
        """Join the path onto the storage root, refusing anything outside it"""
        if not relative_path or os.path.isabs(relative_path):
            raise ValueError(f"Storage paths must be relative: {relative_path!r}")
        resolved = os.path.abspath(os.path.join(self._root, relative_path))
        if os.path.commonpath([self._root, resolved]) != self._root:
            raise ValueError(f"Path escapes the storage root: {relative_path!r}")
        return resolved

    def delete_file(self, file_path: str) -> None:
        """Delete a local file or directory tree"""
        physical_path = self.resolve(file_path)
        try:
            if os.path.isfile(physical_path):
                os.remove(physical_path)
            elif os.path.isdir(physical_path):
                shutil.rmtree(physical_path)
            else:
                raise FileNotFoundError(f"File not found: {physical_path}")
        except FileNotFoundError:
            raise
        except Exception as e:
            raise IOError(f"Failed to delete file {physical_path}: {str(e)}")

    def exists(self, file_path: str) -> bool:
        """Check if a local file or directory exists"""
        return os.path.exists(self.resolve(file_path))

    def create_directory(self, directory_path: str) -> None:
        """Create a local directory"""
        physical_path = self.resolve(directory_path)
        try:
            os.makedirs(physical_path, exist_ok=True)
        except Exception as e:
            raise IOError(f"Failed to create directory {physical_path}: {str(e)}")
