import logging
import requests
from github import Auth, Github, GithubException
from topic_reconciler.exceptions import RemoteListError, RemoteUpdateError
from topic_reconciler.models import RepositorySnapshot
logger = logging.getLogger(__name__)


class GitHubClient:
    def __init__(self, access_token: str = ""):
        if access_token:
            self.client: Github = Github(auth=Auth.Token(access_token))
        else:
            logger.info("No access token configured, using unauthenticated GitHub access")
            self.client = Github()

    def list_repositories(self, owner: str) -> list[RepositorySnapshot]:
        try:
            return [
                RepositorySnapshot(
                    full_name=repo.full_name,
                    owner_login=repo.owner.login,
                    name=repo.name,
                    topics=list(repo.topics or []),
                )
                for repo in self.client.get_user(owner).get_repos()
            ]
        except (GithubException, requests.RequestException) as e:
            raise RemoteListError(f"Failed to list repositories of {owner}: {e}") from e

    def replace_topics(self, owner: str, name: str, topics: list[str]) -> None:
        try:
            self.client.get_repo(f"{owner}/{name}", lazy=True).replace_topics(topics)
        except (GithubException, requests.RequestException) as e:
            raise RemoteUpdateError(f"Failed to replace topics of {owner}/{name}: {e}") from e
