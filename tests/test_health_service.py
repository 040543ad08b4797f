"""
Health probes: one attempt per target, every failure folds into unhealthy.
"""

from unittest.mock import Mock

import pytest
import requests

from n8nctl.models import HealthTarget
from n8nctl.services import HealthService


def response(status_code):
    resp = Mock()
    resp.status_code = status_code
    resp.ok = status_code < 400
    return resp


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


N8N = HealthTarget("n8n", "https://localhost:5678/healthz", verify_tls=False)
NGINX = HealthTarget("Nginx", "http://localhost/health")


class TestHealthService:
    def test_success_is_healthy(self, session):
        session.get.return_value = response(200)

        health = HealthService([N8N], timeout=3, session=session).probe(N8N)

        assert health.healthy
        session.get.assert_called_once_with(N8N.url, timeout=3, verify=False)

    def test_error_status_is_unhealthy(self, session):
        session.get.return_value = response(502)

        health = HealthService([NGINX], session=session).probe(NGINX)

        assert not health.healthy
        assert health.detail == "HTTP 502"

    @pytest.mark.parametrize(
        "error",
        [
            requests.exceptions.ConnectionError("refused"),
            requests.exceptions.Timeout("slow"),
            requests.exceptions.SSLError("bad cert"),
        ],
    )
    def test_transport_errors_are_unhealthy(self, session, error):
        session.get.side_effect = error

        health = HealthService([NGINX], session=session).probe(NGINX)

        assert not health.healthy
        assert health.detail == type(error).__name__

    def test_probe_all_is_one_attempt_each(self, session):
        session.get.side_effect = [requests.exceptions.ConnectionError(), response(200)]

        results = HealthService([N8N, NGINX], session=session).probe_all()

        assert [(h.service, h.healthy) for h in results] == [("n8n", False), ("Nginx", True)]
        assert session.get.call_count == 2

    def test_verify_flag_per_target(self, session):
        session.get.return_value = response(200)

        HealthService([NGINX], timeout=5, session=session).probe(NGINX)

        session.get.assert_called_once_with(NGINX.url, timeout=5, verify=True)

    def test_context_manager_closes_session(self, session):
        session.get.return_value = response(200)

        with HealthService([NGINX], session=session) as prober:
            prober.probe_all()

        session.close.assert_called_once_with()
