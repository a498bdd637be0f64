"""Tests for settings loading."""

from quadmap.config import Settings


class TestSettings:

    def test_defaults_match_generator_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.default_params() == {
            "ring_count": 10,
            "lattice_spacing": 40.0,
            "random_seed": 0,
            "relaxation_iterations": 500,
            "relaxation_strength": 0.08,
        }

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("QUADMAP_MAX_RING_COUNT", "6")
        monkeypatch.setenv("QUADMAP_LOG_LEVEL", "DEBUG")
        settings = Settings(_env_file=None)
        assert settings.max_ring_count == 6
        assert settings.log_level == "DEBUG"

    def test_server_address(self, monkeypatch):
        monkeypatch.setenv("QUADMAP_API_PORT", "9100")
        settings = Settings(_env_file=None)
        assert settings.api_host == "0.0.0.0"
        assert settings.api_port == 9100
        assert "debug" not in Settings.model_fields
