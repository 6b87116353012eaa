"""Configuration loading and management."""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field


class LLMConfig(BaseModel):
    """Completion service configuration."""

    provider: str = Field(
        default_factory=lambda: os.getenv("SLOP_LLM_PROVIDER", "openai")
    )
    api_key: str = Field(default_factory=lambda: os.getenv("OPENAI_API_KEY", ""))
    model: str = "gpt-4o-mini"
    enhancement_model: str = "gpt-4o"
    timeout: float = 60.0
    max_retries: int = 0  # fallbacks replace retries
    max_tokens: int = 800
    temperature: float = 0.7


class ValidationConfig(BaseModel):
    """Prompt validation constraints."""

    min_length: int = 1
    max_length: int = 400  # matches the prompt input maxLength
    forbidden_words: list[str] = Field(default_factory=lambda: ["test-forbidden-word"])


class RateLimitConfig(BaseModel):
    """Per-client request rate limits."""

    enabled: bool = True
    max_requests: int = 60
    window_seconds: int = 60


class Config(BaseModel):
    """Main application configuration."""

    llm: LLMConfig = Field(default_factory=LLMConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    rate_limit: RateLimitConfig = Field(default_factory=RateLimitConfig)

    @classmethod
    def from_yaml(cls, path: Path | str) -> "Config":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f)

        if data is None:
            return cls()

        return cls(**data)

    def to_yaml(self, path: Path | str) -> None:
        """Save configuration to a YAML file (the API key is never written)."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = self.model_dump(exclude={"llm": {"api_key"}})
        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False)


def load_config(config_path: Path | str | None = None) -> Config:
    """Load configuration from file or use defaults."""
    if config_path is None:
        # Look for config.yaml in current directory or project root
        candidates = [Path("config.yaml"), Path(__file__).parent.parent / "config.yaml"]
        for candidate in candidates:
            if candidate.exists():
                config_path = candidate
                break

    config = Config.from_yaml(config_path) if config_path is not None else Config()

    # The environment wins over the file so `--mock` works with any config
    provider_override = os.getenv("SLOP_LLM_PROVIDER")
    if provider_override:
        config.llm.provider = provider_override

    return config
