"""The registration point between request generators and the benchmarker."""

import logging
import sys
from typing import Mapping, Optional, Protocol

from .common import (
    SAMPLE_COUNT,
    generate_times,
    invalid_requests,
    requests_generated,
    start_metrics_server,
)
from .request import RequestDescriptor, validate


logger = logging.getLogger(__name__)


class RequestGenerator(Protocol):
    def generate(self, options: Mapping) -> RequestDescriptor:
        ...


class HttpClient(Protocol):
    def request(self, method: str, uri: str, data: Optional[str] = None, **kwargs):
        ...


class HttpBenchmarker:
    # The process-wide active generator. Instances fall back to this unless
    # they were constructed with a generator of their own.
    generator: Optional[RequestGenerator] = None

    def __init__(self, generator: Optional[RequestGenerator] = None):
        if generator is not None:
            self.generator = generator

    def next_request(self, options: Optional[Mapping] = None) -> RequestDescriptor:
        if self.generator is None:
            raise RuntimeError("No request generator is registered")
        if options is None:
            options = {}
        with generate_times.time():
            request = self.generator.generate(options)
        try:
            validate(request)
        except ValueError:
            invalid_requests.inc()
            raise
        logger.debug("Generated %s", request)
        requests_generated.labels(request.method.name).inc()
        return request

    def issue(self, client: HttpClient, options: Optional[Mapping] = None):
        """Perform the next request with an HTTP client.

        Locust's HTTP sessions satisfy ``HttpClient``.
        """
        request = self.next_request(options)
        return client.request(request.method.value, request.uri, data=request.data)


def main(args):
    from .sample import SampleRequestGenerator

    logging.basicConfig(level=logging.DEBUG)

    start_metrics_server()

    benchmarker = HttpBenchmarker(SampleRequestGenerator())
    for _ in range(SAMPLE_COUNT):
        logger.info("Next request: %s", benchmarker.next_request().as_dict())


if __name__ == "__main__":
    main(sys.argv[1:])
