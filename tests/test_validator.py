"""
Precondition checks: prerequisites, configuration seeding, certificates,
and the start/check preflight policies.
"""

from unittest.mock import patch

import pytest

from conftest import (
    failed,
    make_compose_mock,
    write_certificates,
    write_descriptor,
    write_env,
    write_template,
)
from n8nctl.core.config_loader import StackConfig
from n8nctl.core.validator import (
    CERTIFICATES,
    CONFIGURATION,
    PREREQUISITES,
    CertificateValidator,
    ConfigMaterializer,
    PreflightEngine,
    PrerequisiteChecker,
)
from n8nctl.exceptions import MissingBinaryError, MissingFileError
from n8nctl.models.results import Outcome


class TestPrerequisiteChecker:
    def test_all_present_is_satisfied(self, tmp_path):
        descriptor = write_descriptor(tmp_path)
        result = PrerequisiteChecker(make_compose_mock(), descriptor).check()

        assert result.outcome == Outcome.SATISFIED

    def test_missing_docker_short_circuits(self, tmp_path):
        compose = make_compose_mock(docker_available=False)
        result = PrerequisiteChecker(compose, tmp_path / "docker-compose.yml").check()

        assert result.is_failed
        assert isinstance(result.error, MissingBinaryError)
        assert "Docker is not installed" in result.message
        compose.version.assert_not_called()

    def test_compose_plugin_failure(self, tmp_path):
        descriptor = write_descriptor(tmp_path)
        compose = make_compose_mock()
        compose.version.return_value = failed("unknown command: compose")

        result = PrerequisiteChecker(compose, descriptor).check()

        assert result.is_failed
        assert isinstance(result.error, MissingBinaryError)
        assert "Docker Compose" in result.message
        assert result.error.context == "unknown command: compose"

    def test_compose_plugin_spawn_error(self, tmp_path):
        compose = make_compose_mock()
        compose.version.side_effect = MissingBinaryError("Docker is not installed or not in PATH")

        result = PrerequisiteChecker(compose, tmp_path / "docker-compose.yml").check()

        assert result.is_failed
        assert isinstance(result.error, MissingBinaryError)

    def test_missing_descriptor(self, tmp_path):
        result = PrerequisiteChecker(
            make_compose_mock(), tmp_path / "docker-compose.yml"
        ).check()

        assert result.is_failed
        assert isinstance(result.error, MissingFileError)
        assert "docker-compose.yml" in result.message


class TestConfigMaterializer:
    def test_existing_env_is_satisfied(self, tmp_path):
        env = write_env(tmp_path, "KEEP=1\n")
        write_template(tmp_path, "TEMPLATE=1\n")

        result = ConfigMaterializer(env, tmp_path / ".env.example").ensure()

        assert result.is_satisfied
        assert env.read_text() == "KEEP=1\n"

    def test_copies_template_and_remediates(self, tmp_path):
        template = write_template(tmp_path, "N8N_HOST=example\n")
        env = tmp_path / ".env"

        result = ConfigMaterializer(env, template).ensure()

        assert result.outcome == Outcome.REMEDIATED
        assert env.read_text() == "N8N_HOST=example\n"
        assert "edit .env" in result.message

    def test_neither_file_fails(self, tmp_path):
        result = ConfigMaterializer(tmp_path / ".env", tmp_path / ".env.example").ensure()

        assert result.is_failed
        assert isinstance(result.error, MissingFileError)
        assert not (tmp_path / ".env").exists()

    def test_second_call_does_not_write(self, tmp_path):
        template = write_template(tmp_path)
        materializer = ConfigMaterializer(tmp_path / ".env", template)

        assert materializer.ensure().is_remediated

        with patch("n8nctl.core.validator.shutil.copyfile") as copyfile:
            assert materializer.ensure().is_satisfied
            assert materializer.ensure().is_satisfied
        copyfile.assert_not_called()

    def test_unwritable_env_fails(self, tmp_path):
        template = write_template(tmp_path)
        (tmp_path / ".env").mkdir()

        result = ConfigMaterializer(tmp_path / ".env", template).ensure()

        assert result.is_failed
        assert isinstance(result.error, MissingFileError)
        assert "Could not create .env" in result.message
        assert result.error.context


class TestCertificateValidator:
    def test_missing_directory(self, tmp_path):
        result = CertificateValidator(tmp_path / "files", ("cert.pem",)).validate()

        assert result.is_failed
        assert "Certificate directory" in result.message

    def test_enumerates_missing_names(self, tmp_path):
        cert_dir = write_certificates(tmp_path, names=("key.pem",))
        validator = CertificateValidator(cert_dir, ("cert.pem", "key.pem", "mbma-chain.pem"))

        result = validator.validate()

        assert result.is_failed
        assert result.details == ["cert.pem", "mbma-chain.pem"]
        assert "cert.pem mbma-chain.pem" in result.message
        assert not validator.certificate_set().is_tls_ready

    def test_empty_directory_lists_everything(self, tmp_path):
        (tmp_path / "files").mkdir()
        result = CertificateValidator(tmp_path / "files", ("a.pem", "b.pem")).validate()

        assert result.details == ["a.pem", "b.pem"]

    def test_all_present(self, tmp_path):
        cert_dir = write_certificates(tmp_path)
        validator = CertificateValidator(cert_dir, ("cert.pem", "key.pem", "mbma-chain.pem"))

        assert validator.validate().is_satisfied
        assert validator.certificate_set().is_tls_ready


class TestPreflightEngine:
    @pytest.fixture
    def broken_prerequisites(self, tmp_path):
        """No docker, but configuration and certificates are fine."""
        write_env(tmp_path)
        write_certificates(tmp_path)
        config = StackConfig.defaults(tmp_path)
        return PreflightEngine(config, make_compose_mock(docker_available=False))

    def test_check_runs_every_validator(self, broken_prerequisites):
        report = broken_prerequisites.for_check()

        assert report.names() == [PREREQUISITES, CONFIGURATION, CERTIFICATES]
        assert report.halted_by.name == PREREQUISITES
        assert report.get(CONFIGURATION).is_satisfied
        assert report.get(CERTIFICATES).is_satisfied
        assert not report.passed

    def test_start_stops_at_first_blocking_failure(self, broken_prerequisites):
        with patch.object(
            broken_prerequisites.certificates, "validate"
        ) as validate_certificates:
            report = broken_prerequisites.for_start()

        assert report.names() == [PREREQUISITES]
        assert not report.can_proceed
        validate_certificates.assert_not_called()

    def test_start_halts_on_remediation(self, tmp_path):
        write_descriptor(tmp_path)
        write_template(tmp_path)
        engine = PreflightEngine(StackConfig.defaults(tmp_path), make_compose_mock())

        report = engine.for_start()

        assert report.names() == [PREREQUISITES, CONFIGURATION]
        assert report.halted_by.is_remediated

    def test_missing_certificates_never_block_start(self, tmp_path):
        write_descriptor(tmp_path)
        write_env(tmp_path)
        (tmp_path / "files").mkdir()
        engine = PreflightEngine(StackConfig.defaults(tmp_path), make_compose_mock())

        report = engine.for_start()

        assert report.can_proceed
        assert report.get(CERTIFICATES).is_failed
        assert not report.passed

    def test_check_continues_past_unwritable_env(self, tmp_path):
        write_descriptor(tmp_path)
        write_template(tmp_path)
        write_certificates(tmp_path)
        (tmp_path / ".env").mkdir()
        engine = PreflightEngine(StackConfig.defaults(tmp_path), make_compose_mock())

        report = engine.for_check()

        assert report.names() == [PREREQUISITES, CONFIGURATION, CERTIFICATES]
        assert report.get(CONFIGURATION).is_failed
        assert report.get(CERTIFICATES).is_satisfied

    def test_everything_satisfied(self, stack_config):
        report = PreflightEngine(stack_config, make_compose_mock()).for_check()

        assert report.passed
        assert all(r.is_satisfied for r in report.results)
