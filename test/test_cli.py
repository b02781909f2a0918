from unittest.mock import MagicMock, patch

import pytest
import reconcile_topics
from topic_reconciler.exceptions import ConfigurationMissingError
from topic_reconciler.models import Settings


@pytest.fixture
def mock_services():
    init_service = MagicMock()
    update_service = MagicMock()
    with patch.dict(reconcile_topics.COMMANDS, {"init": init_service, "update": update_service}):
        yield init_service, update_service

@pytest.mark.parametrize("argv,command", [(["init"], "init"), (["update"], "update"), ([], "update")])
def test_parse_args(argv, command):
    assert reconcile_topics.parse_args(argv).command == command

def test_parse_args_unknown_command():
    with pytest.raises(SystemExit):
        reconcile_topics.parse_args(["sync"])

def test_main_init(mock_services):
    init_service, update_service = mock_services

    assert reconcile_topics.main(["init"]) == 0

    init_service.assert_called_once_with(Settings())
    init_service.return_value.run.assert_called_once()
    update_service.assert_not_called()

def test_main_defaults_to_update(mock_services):
    init_service, update_service = mock_services

    assert reconcile_topics.main([]) == 0

    update_service.return_value.run.assert_called_once()
    init_service.assert_not_called()

def test_main_failure(mock_services):
    _, update_service = mock_services
    update_service.return_value.run.side_effect = ConfigurationMissingError("config.yaml")

    with patch("reconcile_topics.setup_logger") as mock_setup_logger:
        assert reconcile_topics.main(["update"]) == 1

    error_message = mock_setup_logger.return_value.error.call_args[0][0]
    assert error_message.startswith("Topic update failed: Configuration file config.yaml does not exist")

@pytest.fixture
def github_cls(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    github_cls = MagicMock()
    monkeypatch.setattr("topic_reconciler.clients.github_client.Github", github_cls)
    return github_cls

def test_main_update_without_configuration(github_cls, tmp_path):
    with patch("reconcile_topics.setup_logger") as mock_setup_logger:
        assert reconcile_topics.main(["update"]) == 1

    github_cls.assert_not_called()
    assert not (tmp_path / "config.yaml").exists()
    error_message = mock_setup_logger.return_value.error.call_args[0][0]
    assert "Run the init command first" in error_message

def test_main_init_with_existing_configuration(github_cls, tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("accesstoken: ''\nrepositories:\n  jdecool/alpha: true\n")

    with patch("reconcile_topics.setup_logger") as mock_setup_logger:
        assert reconcile_topics.main(["init"]) == 1

    github_cls.assert_not_called()
    assert config_file.read_text() == "accesstoken: ''\nrepositories:\n  jdecool/alpha: true\n"
    error_message = mock_setup_logger.return_value.error.call_args[0][0]
    assert "Remove it before running the init command" in error_message
