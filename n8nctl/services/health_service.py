"""Health probes against the stack's network-facing services."""

import warnings
from typing import List, Optional

import requests
from urllib3.exceptions import InsecureRequestWarning

from n8nctl.constants import HEALTH_PROBE_TIMEOUT
from n8nctl.models.deployment import HealthTarget, ServiceHealth


class HealthService:
    """
    Single-attempt liveness checks.

    Transport errors, timeouts and non-success status codes all count as
    unhealthy. There are no retries and nothing is remembered between runs.
    """

    def __init__(
        self,
        targets: List[HealthTarget],
        timeout: float = HEALTH_PROBE_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.targets = targets
        self.timeout = timeout
        self.session = session or requests.Session()

    def probe(self, target: HealthTarget) -> ServiceHealth:
        try:
            with warnings.catch_warnings():
                if not target.verify_tls:
                    warnings.simplefilter("ignore", InsecureRequestWarning)
                response = self.session.get(
                    target.url, timeout=self.timeout, verify=target.verify_tls
                )
        except requests.exceptions.RequestException as e:
            return ServiceHealth(target.name, target.url, False, type(e).__name__)

        if not response.ok:
            return ServiceHealth(
                target.name, target.url, False, f"HTTP {response.status_code}"
            )
        return ServiceHealth(target.name, target.url, True, f"HTTP {response.status_code}")

    def probe_all(self) -> List[ServiceHealth]:
        """Probe every target in order."""
        return [self.probe(target) for target in self.targets]

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HealthService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
