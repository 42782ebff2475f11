"""Provider credential sources. The core only reads keys, never stores them."""

import os
from typing import Protocol

from skipper.config.schema import SkipperConfig


class CredentialsProvider(Protocol):
    def get_weather_api_key(self) -> str: ...

    def get_text_api_key(self) -> str: ...


class EnvCredentials:
    """Reads API keys from the environment variables named in config."""

    def __init__(self, config: SkipperConfig):
        self.weather_env = config.weather.api_key_env
        self.text_env = config.advisory.api_key_env

    def get_weather_api_key(self) -> str:
        return os.environ.get(self.weather_env, "").strip()

    def get_text_api_key(self) -> str:
        return os.environ.get(self.text_env, "").strip()


class StaticCredentials:
    def __init__(self, weather_api_key: str = "", text_api_key: str = ""):
        self.weather_api_key = weather_api_key
        self.text_api_key = text_api_key

    def get_weather_api_key(self) -> str:
        return self.weather_api_key

    def get_text_api_key(self) -> str:
        return self.text_api_key
