from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # LLM Provider settings (OpenRouter or OpenAI compatible)
    # For OpenRouter: https://openrouter.ai/api/v1
    # For OpenAI: https://api.openai.com/v1
    llm_api_key: str = ""
    llm_base_url: str = "https://api.openai.com/v1"

    # Model selection per call type - allows mixing cheap/powerful models
    model_reasoning: str = "anthropic/claude-sonnet-4.5"   # Step generation
    model_reflection: str = "google/gemini-2.5-flash"       # Reflection + review (cheap, fast)
    model_synthesis: str = "anthropic/claude-sonnet-4.5"    # Final structured artifact

    # Generation settings
    llm_temperature: float = 0.2
    max_tokens: int = 4096

    # Reasoning loop settings
    reasoning_max_iterations: int = 10
    reasoning_confidence_threshold: float = 0.8
    reasoning_min_thought_words: int = 15
    reasoning_stagnation_window: int = 3
    reasoning_diversity_cutoff: float = 0.3
    reasoning_reflection_interval: int = 3
    reasoning_recent_thoughts_capacity: int = 5
    reasoning_fail_fast: bool = False  # True: external failures abort the session
    reasoning_verbose: bool = False    # Include accepted steps in responses

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    return Settings()
