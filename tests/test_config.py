from rosa_ops.utils.config import ConfigManager


def write_settings(path, text):
    (path / "settings.yaml").write_text(text, encoding="utf-8")


def test_defaults_without_settings_file(config_manager):
    assert config_manager.config == {}
    assert config_manager.get_ocm_url() == "https://api.openshift.com"
    assert config_manager.get_ocm_token() == ""
    assert config_manager.get_aws_region() == ""


def test_reads_settings_file(tmp_path, config_manager):
    write_settings(
        tmp_path,
        "ocm:\n  url: http://localhost:9000/\n  token: t0k\n  timeout: 5\naws:\n  region: eu-west-1\n",
    )
    config = ConfigManager(config_dir=tmp_path)

    assert config.get_ocm_url() == "http://localhost:9000"
    assert config.get_ocm_token() == "t0k"
    assert config.get_ocm_timeout() == 5.0
    assert config.get_aws_region() == "eu-west-1"


def test_environment_overrides_file(tmp_path, config_manager, monkeypatch):
    write_settings(tmp_path, "aws:\n  region: eu-west-1\n")
    monkeypatch.setenv("AWS_REGION", "ap-southeast-2")

    assert ConfigManager(config_dir=tmp_path).get_aws_region() == "ap-southeast-2"


def test_invalid_yaml_degrades_to_empty(tmp_path, config_manager):
    write_settings(tmp_path, "ocm: [unclosed\n")

    assert ConfigManager(config_dir=tmp_path).config == {}


def test_config_dir_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("ROSA_OPS_CONFIG_DIR", str(tmp_path))

    assert ConfigManager().config_dir == tmp_path
