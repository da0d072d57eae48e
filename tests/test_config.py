import pytest

from ruckus_smartzone_api.config import SmartZoneSettings, getenv_bool


def test_from_env_reads_prefixed_variables():
    settings = SmartZoneSettings.from_env({
        "SZ_HOST": "sz.example.net",
        "SZ_USER": "admin",
        "SZ_PASS": "secret",
        "SZ_API_VERSION": "9_1",
        "SZ_VERIFY_SSL": "true",
        "SZ_TIMEOUT": "45",
    })

    assert settings.host == "sz.example.net"
    assert settings.username == "admin"
    assert settings.api_version == "9_1"
    assert settings.verify_ssl is True
    assert settings.timeout == 45.0


def test_from_env_falls_back_to_plain_names():
    settings = SmartZoneSettings.from_env({"HOST": "10.0.0.5", "SZ_USER": "ops", "PASS": "pw"})

    assert settings.host == "10.0.0.5"
    assert settings.api_version == "8_1"
    assert settings.verify_ssl is False
    assert settings.timeout == 30


def test_from_env_reports_missing_values():
    with pytest.raises(ValueError, match="SZ_HOST, SZ_PASS"):
        SmartZoneSettings.from_env({"SZ_USER": "admin"})


def test_repr_hides_password():
    settings = SmartZoneSettings(host="h", username="u", password="topsecret")
    assert "topsecret" not in repr(settings)


@pytest.mark.parametrize("value, expected", [
    ("1", True), ("YES", True), ("false", False), ("0", False), (None, True), ("", True),
])
def test_getenv_bool(value, expected):
    assert getenv_bool(value, True) is expected


def test_create_client_uses_settings():
    settings = SmartZoneSettings(host="h", username="u", password="p",
                                 api_version="v10_0", verify_ssl=True, timeout=12)

    client = settings.create_client()

    assert client.base_url == "https://h:8443/wsg/api/public/v10_0"
    assert client.verify_ssl is True
    assert client.timeout == 12
    assert not client.is_authenticated


def test_from_env_ignores_shell_user():
    with pytest.raises(ValueError, match="SZ_USER"):
        SmartZoneSettings.from_env({"SZ_HOST": "h", "USER": "root", "SZ_PASS": "p"})
