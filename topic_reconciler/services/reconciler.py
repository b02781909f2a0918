"""Decision procedure shared by the ``init`` and ``update`` workflows."""

from topic_reconciler.models import Outcome, Record


def classify(record: Record, full_name: str, topics: list[str], topic: str) -> Outcome:
    """Compare a repository's remote topics with its recorded desired state.

    A repository missing from the record is always ``UNKNOWN_REPOSITORY``,
    whatever its topics are.
    """
    if full_name not in record.repositories:
        return Outcome.UNKNOWN_REPOSITORY

    has_topic = topic in topics
    should_have_topic = record.repositories[full_name]

    if not has_topic and should_have_topic:
        return Outcome.TOPIC_SHOULD_BE_ADDED
    if has_topic and not should_have_topic:
        return Outcome.TOPIC_SHOULD_BE_REMOVED
    return Outcome.UNCHANGED


def with_topic(topics: list[str], topic: str) -> list[str]:
    return [*topics, topic]


def without_topic(topics: list[str], topic: str) -> list[str]:
    return [t for t in topics if t != topic]
