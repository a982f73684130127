from locust import FastHttpUser, task

from requestgen.benchmarker import HttpBenchmarker
import requestgen.sample  # noqa: F401  registers the sample generator


class GeneratedRequestUser(FastHttpUser):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.benchmarker = HttpBenchmarker()

    @task
    def generated(self):
        parsed_options = self.environment.parsed_options
        options = vars(parsed_options) if parsed_options else {}
        self.benchmarker.issue(self.client, options)
