class ServiceError(Exception):
    """Base class for failures the engine reports to its callers.

    ``code`` is the stable machine-readable kind; ``retryable`` tells the
    caller whether repeating the same request may succeed.
    """

    code = 'INTERNAL_ERROR'
    retryable = False

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(ServiceError):
    code = 'NOT_FOUND'


class AlreadyExists(ServiceError):
    code = 'PR_EXISTS'


class AlreadyMerged(ServiceError):
    code = 'PR_MERGED'


class NotAssigned(ServiceError):
    code = 'NOT_ASSIGNED'


class NoCandidate(ServiceError):
    code = 'NO_CANDIDATE'


class InvalidInput(ServiceError):
    code = 'INVALID_INPUT'


class StorageError(ServiceError):
    code = 'STORAGE_ERROR'
    retryable = True
