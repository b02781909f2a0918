import os
import tempfile
from dataclasses import asdict

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from topic_reconciler.exceptions import RecordLoadError, RecordNotFoundError, RecordSaveError
from topic_reconciler.models import Record, RecordFile
from topic_reconciler.utils.yaml_loader import get_yaml_instance


class RecordRepository:
    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.yaml: YAML = get_yaml_instance()

    def exists(self) -> bool:
        return os.path.isfile(self.file_path)

    def load(self) -> Record:
        if not self.exists():
            raise RecordNotFoundError(f"Record file {self.file_path} not found")
        try:
            with open(self.file_path, "r") as f:
                data = self.yaml.load(f)
        except (OSError, YAMLError) as e:
            raise RecordLoadError(f"Unable to read {self.file_path}: {e}") from e

        if data is None:
            return Record()
        if not isinstance(data, dict):
            raise RecordLoadError(f"Invalid {self.file_path} structure: expected a mapping")
        try:
            # blank keys fall back to their defaults
            parsed = RecordFile(**{k: v for k, v in data.items() if v is not None})
            return parsed.to_record()
        except (ValidationError, TypeError) as e:
            raise RecordLoadError(f"Invalid {self.file_path} structure: {e}") from e

    def save(self, record: Record) -> None:
        directory = os.path.dirname(os.path.abspath(self.file_path))
        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile("w", dir=directory, suffix=".tmp", delete=False) as f:
                tmp_path = f.name
                self.yaml.dump(asdict(RecordFile.from_record(record)), f)
            os.chmod(tmp_path, 0o644)
            os.replace(tmp_path, self.file_path)
        except Exception as e:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise RecordSaveError(f"Error writing {self.file_path}: {e}") from e
