from pydantic.dataclasses import dataclass

DEFAULT_TOPIC = "hacktoberfest"
DEFAULT_OWNER = "jdecool"
DEFAULT_RECORD_FILE = "config.yaml"

@dataclass(frozen=True)
class Settings:
    topic: str = DEFAULT_TOPIC
    owner: str = DEFAULT_OWNER
    record_file: str = DEFAULT_RECORD_FILE
