"""Project wiring checks that need a fresh interpreter.

The test process has already imported most modules, which hides import
cycles; these run Django in a subprocess instead.
Run with: pytest tests/test_wiring.py -v
"""

import os
import subprocess
import sys
import textwrap
from pathlib import Path

PROJECT_DIR = Path(__file__).resolve().parent.parent


def _run(code: str) -> subprocess.CompletedProcess:
    env = {
        **os.environ,
        "DJANGO_SETTINGS_MODULE": "config.settings",
        "PYTHONPATH": str(PROJECT_DIR),
    }
    return subprocess.run(
        [sys.executable, "-c", textwrap.dedent(code)],
        cwd=PROJECT_DIR,
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )


def test_first_request_in_fresh_interpreter():
    result = _run(
        """
        import django
        django.setup()
        from django.test.utils import setup_test_environment
        setup_test_environment()
        from django.test import Client
        response = Client().get("/api/events/not-a-uuid")
        print(response.status_code, response.json()["code"])
        """
    )

    assert result.returncode == 0, result.stderr
    assert result.stdout.split() == ["400", "INVALID_EVENT_ID"]


def test_authentication_class_resolves_before_views():
    result = _run(
        """
        import django
        django.setup()
        from rest_framework.views import APIView
        print(APIView.authentication_classes[0].__name__)
        """
    )

    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == "GatewayHeaderAuthentication"
