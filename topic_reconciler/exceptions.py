"""Errors raised by the topic reconciler services, clients and repositories."""


class TopicReconcilerError(Exception):
    """Base exception for every reconciler failure."""


class ConfigurationMissingError(TopicReconcilerError):
    """Raised by ``update`` when no record file exists yet."""

    def __init__(self, file_path: str) -> None:
        self.file_path = file_path
        super().__init__(f"Configuration file {file_path} does not exist. Run the init command first.")


class ConfigurationAlreadyExistsError(TopicReconcilerError):
    """Raised by ``init`` when a record file is already present."""

    def __init__(self, file_path: str) -> None:
        self.file_path = file_path
        super().__init__(f"Configuration file {file_path} exists. Remove it before running the init command.")


class RecordNotFoundError(TopicReconcilerError):
    """Raised when the record file cannot be found on disk."""


class RecordLoadError(TopicReconcilerError):
    """Raised when the record file is unreadable or malformed."""


class RecordSaveError(TopicReconcilerError):
    """Raised when the record file cannot be written."""


class RemoteListError(TopicReconcilerError):
    """Raised when listing the owner's repositories fails."""


class RemoteUpdateError(TopicReconcilerError):
    """Raised when replacing the topics of a single repository fails."""


class TopicUpdateError(TopicReconcilerError):
    """Raised after an update run in which some topic replacements failed."""

    def __init__(self, failures: dict[str, str]) -> None:
        self.failures = failures
        names = ", ".join(failures)
        super().__init__(f"Failed to update topics of {len(failures)} repositories: {names}")
