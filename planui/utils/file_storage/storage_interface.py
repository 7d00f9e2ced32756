"""Abstract interface for the file store backing project files"""

from abc import ABC, abstractmethod


class StorageInterface(ABC):
    """Abstract base class for file storage operations

    Paths handed to the adapter are relative to its storage root;
    `resolve` turns them into the physical location.
    """

    @property
    @abstractmethod
    def root(self) -> str:
        """The storage root every relative path is resolved against"""
        pass

    @abstractmethod
    def resolve(self, relative_path: str) -> str:
        """
        Resolve a path relative to the storage root

        Args:
            relative_path: Path as stored on a File row

        Returns:
            Physical path

        Raises:
            ValueError: If the path is absolute or escapes the storage root
        """
        pass

    @abstractmethod
    def delete_file(self, file_path: str) -> None:
        """
        Delete a file or a directory tree

        Args:
            file_path: Relative path to the file or directory

        Raises:
            FileNotFoundError: If nothing exists at the path
            IOError: If delete operation fails
        """
        pass

    @abstractmethod
    def exists(self, file_path: str) -> bool:
        """
        Check if a file or directory exists

        Args:
            file_path: Relative path to check

        Returns:
            True if exists, False otherwise
        """
        pass

    @abstractmethod
    def create_directory(self, directory_path: str) -> None:
        """
        Create a directory (including parent directories)

        Args:
            directory_path: Relative path to the directory

        Raises:
            IOError: If create operation fails
        """
        pass
