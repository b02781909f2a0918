from typing import override

from topic_reconciler.exceptions import ConfigurationAlreadyExistsError, RecordNotFoundError
from topic_reconciler.models import Record
from topic_reconciler.services.service import Service


class InitService(Service):
    @override
    def run(self) -> None:
        if self.record_repo.exists():
            raise ConfigurationAlreadyExistsError(self.settings.record_file)

        try:
            record = self.record_repo.load()
        except RecordNotFoundError:
            record = Record()

        github = self.client_factory(record.access_token)
        repos = github.list_repositories(self.settings.owner)
        for repo in repos:
            has_topic = self.settings.topic in repo.topics
            record.repositories[repo.full_name] = has_topic
            self.logger.info(f"Recorded {repo.full_name} (topic {self.settings.topic}: {has_topic})")

        self.record_repo.save(record)
        self.logger.info(f"Saved {len(repos)} repositories to {self.settings.record_file}")
