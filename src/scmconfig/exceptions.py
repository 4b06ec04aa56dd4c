class SCMError(Exception):
    """Base class for source control management errors."""


class StoreAccessError(SCMError):
    """Repository configuration store could not be opened or read."""


class MalformedValueError(SCMError, ValueError):
    def __init__(self, key: str, value: str, valid):
        self.key = key
        self.value = value
        choices = ", ".join(valid)
        super().__init__(
            f"malformed value for {key}: '{value}', must be one of {choices}"
        )
