"""Precondition checks run before lifecycle commands touch the stack"""

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Tuple

from n8nctl.core.config_loader import StackConfig
from n8nctl.exceptions import MissingBinaryError, MissingFileError, StackError
from n8nctl.models.deployment import CertificateSet
from n8nctl.models.results import CheckResult, PreflightReport

PREREQUISITES = "prerequisites"
CONFIGURATION = "configuration"
CERTIFICATES = "certificates"


class PrerequisiteChecker:
    """Verifies the orchestration engine is callable and the descriptor exists."""

    def __init__(self, compose, compose_file: Path):
        """
        Args:
            compose: ComposeService used to probe the engine
            compose_file: Path to the compose descriptor
        """
        self.compose = compose
        self.compose_file = Path(compose_file)

    def check(self) -> CheckResult:
        if not self.compose.is_docker_available():
            return CheckResult.failed(
                PREREQUISITES,
                MissingBinaryError("Docker is not installed or not in PATH"),
            )

        try:
            version = self.compose.version()
        except StackError as e:
            return CheckResult.failed(PREREQUISITES, e)
        if version.is_failure:
            return CheckResult.failed(
                PREREQUISITES,
                MissingBinaryError(
                    "Docker Compose is not installed or not in PATH",
                    context=version.stderr.strip() or None,
                ),
            )

        if not self.compose_file.is_file():
            return CheckResult.failed(
                PREREQUISITES,
                MissingFileError(
                    f"Docker Compose file ({self.compose_file.name}) not found",
                    context=str(self.compose_file),
                ),
            )

        return CheckResult.satisfied(PREREQUISITES, "Requirements check passed")


class ConfigMaterializer:
    """Ensures the live configuration file exists, seeding it from the template."""

    def __init__(self, env_file: Path, env_template: Path):
        self.env_file = Path(env_file)
        self.env_template = Path(env_template)

    def ensure(self) -> CheckResult:
        """
        Seed the live file from the template on first run.

        Returns:
            SATISFIED if the live file exists (nothing written),
            REMEDIATED if the template was copied (operator must edit it),
            FAILED if neither file exists or the copy cannot be written
        """
        if self.env_file.is_file():
            return CheckResult.satisfied(
                CONFIGURATION, f"Environment file ({self.env_file.name}) found"
            )

        if not self.env_template.is_file():
            return CheckResult.failed(
                CONFIGURATION,
                MissingFileError(
                    f"Neither {self.env_file.name} nor {self.env_template.name} found",
                    context=str(self.env_file.parent),
                ),
            )

        try:
            shutil.copyfile(self.env_template, self.env_file)
        except OSError as e:
            return CheckResult.failed(
                CONFIGURATION,
                MissingFileError(f"Could not create {self.env_file.name}", context=str(e)),
            )
        return CheckResult.remediated(
            CONFIGURATION,
            f"Copied {self.env_template.name} to {self.env_file.name}; "
            f"please edit {self.env_file.name} with your configuration before starting services",
            details=[str(self.env_file)],
        )


class CertificateValidator:
    """Confirms the proxy's TLS artifacts are all present."""

    def __init__(self, cert_dir: Path, required: Tuple[str, ...]):
        self.cert_dir = Path(cert_dir)
        self.required = tuple(required)

    def certificate_set(self) -> CertificateSet:
        return CertificateSet.scan(self.cert_dir, self.required)

    def validate(self) -> CheckResult:
        if not self.cert_dir.is_dir():
            return CheckResult.failed(
                CERTIFICATES,
                MissingFileError(
                    f"Certificate directory ({self.cert_dir.name}) not found",
                    context=str(self.cert_dir),
                ),
            )

        certificates = self.certificate_set()
        if not certificates.is_tls_ready:
            return CheckResult.failed(
                CERTIFICATES,
                MissingFileError(
                    f"Missing SSL certificate files: {' '.join(certificates.missing)}",
                    context=f"Place the required SSL certificates in {self.cert_dir}",
                ),
                details=list(certificates.missing),
            )

        return CheckResult.satisfied(CERTIFICATES, "SSL certificates found")


@dataclass
class PreflightStep:
    """One check in a preflight sequence."""

    name: str
    run: Callable[[], CheckResult]
    blocking: bool


class PreflightEngine:
    """
    Runs the three validators under one of two policies.

    - start: short-circuit at the first blocking check that is not satisfied;
      certificates are advisory and never halt the run
    - check: run every validator and report them all
    """

    def __init__(self, config: StackConfig, compose):
        self.prerequisites = PrerequisiteChecker(compose, config.compose_file)
        self.materializer = ConfigMaterializer(config.env_file, config.env_template)
        self.certificates = CertificateValidator(
            config.cert_dir, config.required_certificates
        )

    def steps(self) -> List[PreflightStep]:
        return [
            PreflightStep(PREREQUISITES, self.prerequisites.check, blocking=True),
            PreflightStep(CONFIGURATION, self.materializer.ensure, blocking=True),
            PreflightStep(CERTIFICATES, self.certificates.validate, blocking=False),
        ]

    def run(self, exhaustive: bool) -> PreflightReport:
        """
        Args:
            exhaustive: Keep going after a blocking check fails

        Returns:
            PreflightReport with results in execution order
        """
        report = PreflightReport()
        for step in self.steps():
            result = step.run()
            report.results.append(result)
            if step.blocking and result.blocks_start and report.halted_by is None:
                report.halted_by = result
                if not exhaustive:
                    break
        return report

    def for_start(self) -> PreflightReport:
        return self.run(exhaustive=False)

    def for_check(self) -> PreflightReport:
        return self.run(exhaustive=True)
