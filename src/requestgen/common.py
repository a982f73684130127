import errno
import logging

import prometheus_client
from prometheus_client import Counter, Histogram
from starlette.config import Config


logger = logging.getLogger(__name__)


config = Config()


METRICS_PORT = config("REQUESTGEN_METRICS_PORT", cast=int, default=8005)

SAMPLE_COUNT = config("REQUESTGEN_SAMPLE_COUNT", cast=int, default=10)


requests_generated = Counter(
    "requestgen_requests_generated",
    "Number of requests handed to the benchmarker by method",
    ["method"],
)

invalid_requests = Counter(
    "requestgen_invalid_requests",
    "Number of generated requests rejected as malformed",
)

generate_times = Histogram(
    "requestgen_generate_time_seconds",
    "Histogram of how long generators take to produce a request",
    buckets=[0.00001,0.00005,0.0001,0.0005,0.001,0.005,0.01,0.05,0.1],
)


def start_metrics_server(port=METRICS_PORT):
    # Try ascending port numbers until one is available.
    while True:
        try:
            prometheus_client.start_http_server(port)
            logger.info("Prometheus metrics are available at http://localhost:%s/", port)
        except OSError as e:
            if e.errno == errno.EADDRINUSE:
                port += 1
            else:
                raise
        else:
            return port
