from dataclasses import field
from pydantic.dataclasses import dataclass

from topic_reconciler.models.record import Record

# key names match the files written by earlier releases of the tool
@dataclass(frozen=True)
class RecordFile:
    accesstoken: str = ""
    repositories: dict[str, bool] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: Record) -> "RecordFile":
        return cls(accesstoken=record.access_token, repositories=dict(record.repositories))

    def to_record(self) -> Record:
        return Record(access_token=self.accesstoken, repositories=dict(self.repositories))
