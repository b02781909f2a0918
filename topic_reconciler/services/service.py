import logging
from abc import ABC, abstractmethod
from typing import Callable

from topic_reconciler.clients.github_client import GitHubClient
from topic_reconciler.models import Settings
from topic_reconciler.repositories import RecordRepository
from topic_reconciler.utils.logging import setup_logger


class Service(ABC):
    def __init__(
        self,
        settings: Settings,
        record_repo: RecordRepository | None = None,
        client_factory: Callable[[str], GitHubClient] = GitHubClient,
    ):
        self.settings: Settings = settings
        self.record_repo: RecordRepository = record_repo or RecordRepository(settings.record_file)
        self.client_factory: Callable[[str], GitHubClient] = client_factory
        self.logger: logging.Logger = setup_logger(type(self).__name__)

    @abstractmethod
    def run(self) -> None:
        ...
