"""Error types shared across the salad catalog."""


class InvalidInputError(ValueError):
    """Caller-supplied values failed validation before anything was built."""


class StorageError(Exception):
    """A read, write or delete against the backing files failed."""

    def __init__(self, action: str, target: str, cause: OSError) -> None:
        super().__init__(f"Failed to {action} {target}: {cause}")
        self.action = action
        self.target = target
        self.cause = cause


class ProductNotFoundError(LookupError):
    """No catalog product (or salad ingredient) matched the given name."""


class SaladNotFoundError(LookupError):
    """No stored salad matched the given name."""
