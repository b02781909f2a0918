from typing import override

from topic_reconciler.clients.github_client import GitHubClient
from topic_reconciler.exceptions import ConfigurationMissingError, RemoteUpdateError, TopicUpdateError
from topic_reconciler.models import Outcome, Record, RepositorySnapshot
from topic_reconciler.services.reconciler import classify, with_topic, without_topic
from topic_reconciler.services.service import Service


class UpdateService(Service):
    @override
    def run(self) -> None:
        if not self.record_repo.exists():
            raise ConfigurationMissingError(self.settings.record_file)

        record = self.record_repo.load()
        github = self.client_factory(record.access_token)
        failures: dict[str, str] = {}

        for repo in github.list_repositories(self.settings.owner):
            try:
                self.reconcile(github, record, repo)
            except RemoteUpdateError as e:
                # keep going, the record still holds the desired state for the next run
                self.logger.error(str(e))
                failures[repo.full_name] = str(e)

        self.record_repo.save(record)

        if failures:
            raise TopicUpdateError(failures)

    def reconcile(self, github: GitHubClient, record: Record, repo: RepositorySnapshot) -> Outcome:
        topic = self.settings.topic
        outcome = classify(record, repo.full_name, repo.topics, topic)
        match outcome:
            case Outcome.TOPIC_SHOULD_BE_ADDED:
                github.replace_topics(repo.owner_login, repo.name, with_topic(repo.topics, topic))
                self.logger.info(f"Added topic {topic} to {repo.full_name}")
            case Outcome.TOPIC_SHOULD_BE_REMOVED:
                github.replace_topics(repo.owner_login, repo.name, without_topic(repo.topics, topic))
                self.logger.info(f"Removed topic {topic} from {repo.full_name}")
            case Outcome.UNKNOWN_REPOSITORY:
                has_topic = topic in repo.topics
                record.repositories[repo.full_name] = has_topic
                self.logger.info(f"Adopted {repo.full_name} (topic {topic}: {has_topic})")
            case Outcome.UNCHANGED:
                pass
        return outcome
