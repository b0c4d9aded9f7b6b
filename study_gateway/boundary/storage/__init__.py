"""Object storage adapter."""

from study_gateway.boundary.storage.object_storage import ObjectStorageClient

__all__ = ["ObjectStorageClient"]
