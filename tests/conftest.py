"""Supporting code for tests."""

# locust monkey-patches the stdlib with gevent on import; do it before any test
# starts real threads (the metrics server), or the later import hangs.
import locust  # noqa: F401
import pytest

from requestgen.benchmarker import HttpBenchmarker


@pytest.fixture(autouse=True)
def unregistered():
    """Start every test with no generator registered, and put back whatever was there."""
    previous = HttpBenchmarker.generator
    HttpBenchmarker.generator = None
    yield
    HttpBenchmarker.generator = previous
