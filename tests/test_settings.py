import pytest

from pocbox.streaming.models import AppConfiguration
from pocbox.streaming.settings import ConfigError, load_config

SAMPLE = """\
kafka:
  connection:
    brokers:
      - localhost:19092
  topics:
    default-producer: produce-topic
    default-consumer: consume-topic
    default-consumer-group: consume-group
server:
  port: 8081
  mode: release
  loglevel: info
"""


def _write(directory, text, name="config.yaml"):
    directory.mkdir(parents=True, exist_ok=True)
    (directory / name).write_text(text, encoding="utf-8")


def test_load_from_given_path(tmp_path):
    _write(tmp_path / "configs", SAMPLE)
    config = load_config([tmp_path / "configs"])
    assert config.kafka.connection.brokers == ["localhost:19092"]
    assert config.kafka.topics.default_producer == "produce-topic"
    assert config.kafka.topics.default_consumer_group == "consume-group"
    assert config.server.port == 8081
    assert config.server.mode == "release"


def test_default_paths_use_working_directory(tmp_path, monkeypatch):
    _write(tmp_path / "configs", SAMPLE)
    monkeypatch.chdir(tmp_path)
    assert load_config().kafka.topics.default_consumer == "consume-topic"


def test_yml_extension_is_found(tmp_path):
    _write(tmp_path, SAMPLE, name="config.yml")
    assert load_config([tmp_path]).server.log_level == "info"


def test_first_directory_wins(tmp_path):
    _write(tmp_path / "a", "server:\n  mode: first\n")
    _write(tmp_path / "b", "server:\n  mode: second\n")
    assert load_config([tmp_path / "a", tmp_path / "b"]).server.mode == "first"


def test_empty_file_gives_defaults(tmp_path):
    _write(tmp_path, "")
    assert load_config([tmp_path]) == AppConfiguration()


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="failed to read config file"):
        load_config([tmp_path])


def test_invalid_yaml(tmp_path):
    _write(tmp_path, "server: [unclosed\n")
    with pytest.raises(ConfigError, match="failed to read config file"):
        load_config([tmp_path])


def test_top_level_not_mapping(tmp_path):
    _write(tmp_path, "- one\n- two\n")
    with pytest.raises(ConfigError, match="failed to read config file"):
        load_config([tmp_path])


def test_bad_values(tmp_path):
    _write(tmp_path, "server:\n  port: not-a-number\n")
    with pytest.raises(ConfigError, match="failed to unmarshal config"):
        load_config([tmp_path])