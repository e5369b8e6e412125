import pytest

from appsec.config import (
    DEFAULT_MAX_BODY,
    HOST_ENDS_WITH_SLASH,
    LOADING_FILE,
    REQUIRED_OPTION_EDGERC,
    REQUIRED_OPTION_ENV,
    SECTION_DOES_NOT_EXIST,
    Config,
)
from appsec.exceptions import ConfigError

EDGERC = """\
[default]
host = akab-default.luna.akamaiapis.net
client_token = akab-ct
client_secret = s3cr%t=
access_token = akab-at

[appsec]
host = akab-appsec.luna.akamaiapis.net
client_token = akab-ct2
client_secret = secret2
access_token = akab-at2
max-body = 65536
account_key = 1-ABCDE

[broken]
host = akab-broken.luna.akamaiapis.net
client_token = akab-ct3

[slash]
host = akab-slash.luna.akamaiapis.net/
client_token = ct
client_secret = cs
access_token = at
"""


@pytest.fixture
def edgerc(tmp_path):
    path = tmp_path / ".edgerc"
    path.write_text(EDGERC)
    return str(path)


class TestEdgerc:
    def test_default_section(self, edgerc):
        config = Config.from_edgerc(edgerc)
        assert config.host == "akab-default.luna.akamaiapis.net"
        assert config.client_token == "akab-ct"
        assert config.max_body == DEFAULT_MAX_BODY
        assert config.account_key is None
        assert config.base_url == "https://akab-default.luna.akamaiapis.net"

    def test_percent_in_secret_is_literal(self, edgerc):
        assert Config.from_edgerc(edgerc).client_secret == "s3cr%t="

    def test_named_section(self, edgerc):
        config = Config.from_edgerc(edgerc, section="appsec")
        assert config.max_body == 65536
        assert config.account_key == "1-ABCDE"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            Config.from_edgerc(str(tmp_path / "nope"))
        assert exc_info.value.reason == LOADING_FILE

    def test_unparseable_file(self, tmp_path):
        """A file EdgeRc cannot parse is a loading error."""
        path = tmp_path / ".edgerc"
        path.write_text("host = no-section-header\n")
        with pytest.raises(ConfigError) as exc_info:
            Config.from_edgerc(str(path))
        assert exc_info.value.reason == LOADING_FILE

    def test_reads_through_edgerc(self, edgerc, monkeypatch):
        """Sections are loaded with akamai.edgegrid.EdgeRc."""
        import appsec.config
        from akamai.edgegrid import EdgeRc

        opened = []

        def recording_edgerc(path):
            opened.append(path)
            return EdgeRc(path)

        monkeypatch.setattr(appsec.config, "EdgeRc", recording_edgerc)
        Config.from_edgerc(edgerc, section="appsec")
        assert opened == [edgerc]

    def test_missing_section(self, edgerc):
        with pytest.raises(ConfigError) as exc_info:
            Config.from_edgerc(edgerc, section="ccu")
        assert exc_info.value.reason == SECTION_DOES_NOT_EXIST

    def test_missing_option(self, edgerc):
        with pytest.raises(ConfigError) as exc_info:
            Config.from_edgerc(edgerc, section="broken")
        assert exc_info.value.reason == REQUIRED_OPTION_EDGERC
        assert "client_secret" in str(exc_info.value)

    def test_host_ending_with_slash(self, edgerc):
        with pytest.raises(ConfigError) as exc_info:
            Config.from_edgerc(edgerc, section="slash")
        assert exc_info.value.reason == HOST_ENDS_WITH_SLASH

    def test_repr_hides_secrets(self, edgerc):
        config = Config.from_edgerc(edgerc)
        assert "s3cr%t=" not in repr(config)
        assert "akab-at" not in repr(config)


class TestEnv:
    def set_credentials(self, monkeypatch, prefix="AKAMAI_"):
        monkeypatch.setenv(prefix + "HOST", "akab-env.luna.akamaiapis.net")
        monkeypatch.setenv(prefix + "CLIENT_TOKEN", "ct")
        monkeypatch.setenv(prefix + "CLIENT_SECRET", "cs")
        monkeypatch.setenv(prefix + "ACCESS_TOKEN", "at")

    def test_default_section(self, monkeypatch):
        self.set_credentials(monkeypatch)
        config = Config.from_env()
        assert config.host == "akab-env.luna.akamaiapis.net"
        assert config.max_body == DEFAULT_MAX_BODY

    def test_named_section(self, monkeypatch):
        self.set_credentials(monkeypatch, prefix="AKAMAI_APPSEC_")
        monkeypatch.setenv("AKAMAI_APPSEC_MAX_BODY", "1024")
        config = Config.from_env(section="appsec")
        assert config.access_token == "at"
        assert config.max_body == 1024

    def test_missing_variable(self, monkeypatch):
        self.set_credentials(monkeypatch)
        monkeypatch.delenv("AKAMAI_ACCESS_TOKEN")
        with pytest.raises(ConfigError) as exc_info:
            Config.from_env()
        assert exc_info.value.reason == REQUIRED_OPTION_ENV
        assert "AKAMAI_ACCESS_TOKEN" in str(exc_info.value)

    def test_bad_max_body(self, monkeypatch):
        self.set_credentials(monkeypatch)
        monkeypatch.setenv("AKAMAI_MAX_BODY", "lots")
        with pytest.raises(ConfigError):
            Config.from_env()
