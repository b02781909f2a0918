from dataclasses import field
from pydantic.dataclasses import dataclass

@dataclass
class Record:
    access_token: str = ""
    repositories: dict[str, bool] = field(default_factory=dict)
