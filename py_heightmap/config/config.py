from pathlib import Path
from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings

import os

# Load .env for local/dev runs, without overriding values already in the environment
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    # Generation defaults
    default_size: int = Field(default=32, description="Default grid size, a power of two")
    default_samples: int = Field(default=16, description="Default initial lattice step")
    default_blur: int = Field(default=1, description="Default blur radius")
    default_scale: float = Field(default=1.0, description="Default displacement scale")
    default_seed: str = Field(default="heightmap", description="Seed used when none is given")
    max_size: int = Field(default=4096, description="Max allowed grid size")

    # Output
    output_dir: str = Field(default=".", description="Directory for relative output paths")

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Instantiate singleton settings object
settings = Settings()
