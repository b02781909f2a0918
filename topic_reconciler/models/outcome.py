from enum import Enum


class Outcome(Enum):
    UNCHANGED = "unchanged"
    TOPIC_SHOULD_BE_ADDED = "topic_should_be_added"
    TOPIC_SHOULD_BE_REMOVED = "topic_should_be_removed"
    UNKNOWN_REPOSITORY = "unknown_repository"
