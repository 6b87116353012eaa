"""Tests for configuration loading."""

from pathlib import Path

import pytest
import yaml

from slop.config import Config, load_config
from slop.understanding import MockLLMProvider, OpenAILLMProvider, get_llm_provider


class TestConfig:
    """Tests for Config."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SLOP_LLM_PROVIDER", raising=False)
        config = Config()
        assert config.llm.provider == "openai"
        assert config.llm.model == "gpt-4o-mini"
        assert config.validation.max_length == 400
        assert config.rate_limit.max_requests == 60

    def test_from_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("llm:\n  provider: mock\nrate_limit:\n  max_requests: 5\n")
        config = Config.from_yaml(path)
        assert config.llm.provider == "mock"
        assert config.rate_limit.max_requests == 5
        assert config.validation.max_length == 400

    def test_from_missing_yaml(self, tmp_path: Path) -> None:
        assert Config.from_yaml(tmp_path / "missing.yaml") == Config()

    def test_to_yaml_omits_api_key(self, tmp_path: Path) -> None:
        config = Config()
        config.llm.api_key = "sk-secret"
        path = tmp_path / "out" / "config.yaml"
        config.to_yaml(path)
        data = yaml.safe_load(path.read_text())
        assert "api_key" not in data["llm"]
        assert "sk-secret" not in path.read_text()

    def test_env_overrides_provider(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("llm:\n  provider: openai\n")
        monkeypatch.setenv("SLOP_LLM_PROVIDER", "mock")
        assert load_config(path).llm.provider == "mock"


class TestGetLLMProvider:
    """Tests for get_llm_provider()."""

    def test_mock(self, mock_config: Config) -> None:
        assert isinstance(get_llm_provider(mock_config), MockLLMProvider)

    def test_openai(self, mock_config: Config) -> None:
        mock_config.llm.provider = "openai"
        assert isinstance(get_llm_provider(mock_config), OpenAILLMProvider)

    def test_unknown(self, mock_config: Config) -> None:
        mock_config.llm.provider = "unknown"
        with pytest.raises(ValueError):
            get_llm_provider(mock_config)
