from __future__ import annotations


class SwapiCacheError(Exception):
    error_type: str = "swapi_cache_error"
    message: str = "Unexpected error"

    def __init__(self, message: str | None = None, *, key: str | None = None):
        self.message = message or self.message
        self.key = key
        super().__init__(self.message)


class TransportError(SwapiCacheError):
    error_type = "transport_error"
    message = "Remote service unreachable"


class ServerError(SwapiCacheError):
    error_type = "server_error"
    message = "Remote service returned an error"

    def __init__(self, message: str | None = None, status_code: int = 500, **kwargs):
        super().__init__(message=message, **kwargs)
        self.status_code = status_code


class StorageError(SwapiCacheError):
    error_type = "storage_error"
    message = "Cache storage failure"


class StorageReadError(StorageError):
    error_type = "storage_read_error"
    message = "Cache storage read failed"


class StorageWriteError(StorageError):
    error_type = "storage_write_error"
    message = "Cache storage write failed"

    def __init__(self, message: str | None = None, failed_keys: list[str] | None = None, **kwargs):
        super().__init__(message=message, **kwargs)
        self.failed_keys = failed_keys or []


class BackendInitError(StorageError):
    error_type = "backend_init_error"
    message = "Cache backend could not be initialized"


class SerializationError(SwapiCacheError):
    error_type = "serialization_error"
    message = "Payload could not be serialized"
