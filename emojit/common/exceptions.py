"""Common exceptions."""


class ResourceLoadError(RuntimeError):
    """A bundled or configured language resource could not be loaded."""

    def __init__(self, resource: str, reason: str) -> None:
        self.resource = resource
        self.reason = reason
        super().__init__(f"Failed to load {resource}: {reason}")
