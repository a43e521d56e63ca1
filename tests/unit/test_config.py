from kube_gateway.config import RESERVED_NAMESPACES, Settings


def test_defaults(monkeypatch):
    for var in ("PORT", "ALLOWED_ORIGINS", "DEFAULT_NAMESPACE", "RESERVED_NAMESPACES", "IN_CLUSTER"):
        monkeypatch.delenv(var, raising=False)
    settings = Settings(_env_file=None)

    assert settings.port == 8792
    assert settings.allowed_origins == ["*"]
    assert settings.default_namespace == "default"
    assert settings.reserved_namespaces == list(RESERVED_NAMESPACES)
    assert settings.in_cluster is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("KUBE_CONFIG_PATH", "/etc/kube/config")
    monkeypatch.setenv("RESERVED_NAMESPACES", '["kube-system", "monitoring"]')
    monkeypatch.setenv("APP_ENV", "production")
    settings = Settings(_env_file=None)

    assert settings.port == 9000
    assert settings.kube_config_path == "/etc/kube/config"
    assert settings.reserved_namespaces == ["kube-system", "monitoring"]
    assert settings.is_debug is False
