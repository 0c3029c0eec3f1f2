"""Error taxonomy shared by the share store, the API and the session."""


class ReimagineError(Exception):
    """Base class for application errors."""


class InvalidInputError(ReimagineError):
    """The caller sent an unusable request."""


class InvalidImageError(InvalidInputError):
    """An image payload is not a base64 data URI."""


class PayloadTooLargeError(InvalidInputError):
    """An image payload exceeds the configured ceiling."""


class ShareNotFoundError(ReimagineError):
    """No share exists for the requested id."""

    def __init__(self, share_id: str) -> None:
        super().__init__(f"Share {share_id!r} not found")
        self.share_id = share_id


class StorageError(ReimagineError):
    """The persistence layer failed to read or write."""


class ShareUnavailableError(ReimagineError):
    """The share endpoint could not mint a share."""


class TransformationError(ReimagineError):
    """Base class for user-presentable transformation failures."""


class ProviderError(TransformationError):
    """The provider call itself failed."""


class NoImageReturnedError(TransformationError):
    """The provider answered but produced no image."""
