"""
Deployment configuration: defaults, directory resolution, n8nctl.yml overrides.
"""

import pytest

from n8nctl.core.config_loader import StackConfig, load_stack_config, resolve_root
from n8nctl.exceptions import ConfigurationError


def write_overrides(root, text):
    (root / "n8nctl.yml").write_text(text)


class TestDefaults:
    def test_layout(self, tmp_path):
        config = StackConfig.defaults(tmp_path)

        assert config.compose_file == tmp_path / "docker-compose.yml"
        assert config.env_file == tmp_path / ".env"
        assert config.env_template == tmp_path / ".env.example"
        assert config.cert_dir == tmp_path / "files"
        assert config.backup_dir == tmp_path / "backups"
        assert config.required_certificates == ("cert.pem", "key.pem", "mbma-chain.pem")
        assert config.worker_service == "n8n-worker"
        assert config.log_tail == 100

    def test_health_targets(self, tmp_path):
        targets = StackConfig.defaults(tmp_path).health_targets

        assert [(t.name, t.url, t.verify_tls) for t in targets] == [
            ("n8n", "https://localhost:5678/healthz", False),
            ("Nginx", "http://localhost/health", True),
        ]

    def test_no_override_file(self, tmp_path):
        config = load_stack_config(tmp_path)

        assert config.root == tmp_path.resolve()
        assert config.compose_file == tmp_path.resolve() / "docker-compose.yml"


class TestResolveRoot:
    def test_explicit_directory_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv("N8NCTL_DIR", "/somewhere/else")

        assert resolve_root(tmp_path) == tmp_path.resolve()

    def test_environment_variable(self, tmp_path, monkeypatch):
        monkeypatch.setenv("N8NCTL_DIR", str(tmp_path))

        assert resolve_root() == tmp_path.resolve()

    def test_falls_back_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.delenv("N8NCTL_DIR", raising=False)
        monkeypatch.chdir(tmp_path)

        assert resolve_root() == tmp_path.resolve()


class TestOverrides:
    def test_relative_paths_resolve_against_root(self, tmp_path):
        write_overrides(tmp_path, "compose_file: stack/compose.yml\nbackup_dir: /var/backups/n8n\n")

        config = load_stack_config(tmp_path)

        assert config.compose_file == tmp_path.resolve() / "stack" / "compose.yml"
        assert str(config.backup_dir) == "/var/backups/n8n"

    def test_names_and_numbers(self, tmp_path):
        write_overrides(
            tmp_path,
            "worker_service: worker\ndb_user: admin\nlog_tail: 50\nprobe_timeout: 2\n"
            "required_certificates: [tls.crt, tls.key]\n",
        )

        config = load_stack_config(tmp_path)

        assert config.worker_service == "worker"
        assert config.db_user == "admin"
        assert config.log_tail == 50
        assert config.probe_timeout == 2.0
        assert config.required_certificates == ("tls.crt", "tls.key")

    def test_health_targets(self, tmp_path):
        write_overrides(
            tmp_path,
            "health_targets:\n"
            "  - name: n8n\n"
            "    url: https://n8n.internal/healthz\n",
        )

        targets = load_stack_config(tmp_path).health_targets

        assert len(targets) == 1
        assert targets[0].url == "https://n8n.internal/healthz"
        assert targets[0].verify_tls

    def test_empty_file_means_defaults(self, tmp_path):
        write_overrides(tmp_path, "")

        assert load_stack_config(tmp_path).worker_service == "n8n-worker"

    @pytest.mark.parametrize(
        "text, fragment",
        [
            ("replicas: 3\n", "Unknown setting 'replicas'"),
            ("log_tail: 0\n", "log_tail must be a positive number"),
            ("log_tail: true\n", "log_tail must be a positive number"),
            ("worker_service: ''\n", "worker_service must be a non-empty string"),
            ("required_certificates: cert.pem\n", "required_certificates"),
            ("health_targets:\n  - url: http://x\n", "needs 'name' and 'url'"),
            (
                "health_targets:\n  - name: n8n\n    url: http://x\n    verify_tls: 'false'\n",
                "verify_tls must be true or false",
            ),
            ("- just\n- a list\n", "must contain a mapping"),
            ("compose_file: [unclosed\n", "Invalid YAML"),
        ],
    )
    def test_invalid_overrides(self, tmp_path, text, fragment):
        write_overrides(tmp_path, text)

        with pytest.raises(ConfigurationError) as exc_info:
            load_stack_config(tmp_path)

        assert fragment in exc_info.value.message
