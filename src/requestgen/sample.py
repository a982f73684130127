"""An example generator that always asks for the same request."""

import logging

from .benchmarker import HttpBenchmarker
from .request import Method, RequestDescriptor


logger = logging.getLogger(__name__)


class SampleRequestGenerator:
    def generate(self, options):
        """Called by the benchmarker to determine the next HTTP request to perform."""
        return RequestDescriptor(Method.POST, "/foo/bar", "foo=bar")


HttpBenchmarker.generator = SampleRequestGenerator()
logger.info("Registered %s as the request generator", HttpBenchmarker.generator)
