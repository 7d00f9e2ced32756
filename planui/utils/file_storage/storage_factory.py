"""Factory for creating storage adapters based on configuration"""

import os
from enum import Enum

from django.conf import settings

from planui.utils.custom_logger import CustomLogger
from planui.utils.file_storage.storage_interface import StorageInterface
from planui.utils.file_storage.local_storage import LocalStorageAdapter

logger = CustomLogger("planui.storage")


class StorageType(Enum):
    """Supported storage adapter types"""

    LOCAL = "local"


class StorageFactory:
    """Factory class for creating storage adapters"""

    @classmethod
    def get_storage_adapter(cls) -> StorageInterface:
        """
        Get storage adapter based on environment configuration

        Returns:
            StorageInterface: New storage adapter instance

        Environment Variables:
            STORAGE_BACKEND=local
            PLANUI_STORAGE_ROOT=/var/lib/planui/storage
        """
        storage_backend_str = os.getenv("STORAGE_BACKEND", StorageType.LOCAL.value).lower()

        try:
            storage_backend = StorageType(storage_backend_str)
        except ValueError:
            supported_types = [t.value for t in StorageType]
            raise ValueError(
                f"Unsupported storage backend: {storage_backend_str}. Supported types: {supported_types}"
            )

        if storage_backend == StorageType.LOCAL:
            logger.debug("Creating local storage adapter")
            return LocalStorageAdapter(settings.PLANUI_STORAGE_ROOT)

        supported_types = [t.value for t in StorageType]
        raise ValueError(
            f"Unsupported storage backend: {storage_backend}. Supported types: {supported_types}"
        )
