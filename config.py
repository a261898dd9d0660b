"""
config.py — Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks EVALEX_.
"""
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"

    # Potok wyrażeń
    validate_parentheses: bool = True               # walidacja nawiasów przed tokenizacją
    power_associativity: Literal["left", "right"] = "left"

    # API
    max_expression_length: int = 1000

    # App
    app_title: str = "EvalEx"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="EVALEX_", env_file=".env", extra="ignore")
