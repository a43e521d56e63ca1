from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


RESERVED_NAMESPACES = ("kube-system", "kube-public", "kube-node-lease", "kubernetes-dashboard")


class Settings(BaseSettings):
    """Gateway configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=(".env",), env_file_encoding="utf-8", extra="ignore")

    app_env: Literal["development", "production", "test"] = "development"
    host: str = "0.0.0.0"
    port: int = 8792
    # Logging
    log_level: str = "INFO"
    log_json: bool = False
    log_file: str | None = None
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_date_format: str = "%Y-%m-%d %H:%M:%S"
    # Cluster credentials
    kube_config_path: str | None = Field(default=None, alias="KUBE_CONFIG_PATH")
    kube_context: str | None = None
    in_cluster: bool = Field(default=False, description="Load the pod service-account config instead of a kubeconfig")
    allowed_origins: list[str] = Field(default_factory=lambda: ["*"])
    # Namespace policy
    default_namespace: str = Field(default="default", description="Namespace assigned to created objects that omit one")
    reserved_namespaces: list[str] = Field(
        default_factory=lambda: list(RESERVED_NAMESPACES),
        description="Namespaces hidden from the list endpoints",
    )

    @computed_field
    @property
    def is_debug(self) -> bool:
        return self.app_env == "development"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()  # type: ignore[arg-type]
