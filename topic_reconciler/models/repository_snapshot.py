from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class RepositorySnapshot:
    full_name: str
    owner_login: str
    name: str
    topics: list[str]
