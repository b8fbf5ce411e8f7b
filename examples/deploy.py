from datetime import timedelta

from argkit import Arity, Runner, usage_error
from argkit.utils import setup_logging

setup_logging()

SERVICES = ("web", "database", "cache")


class Deploy:
    synopsis = "Deploy a service to one or more hosts."
    help_text = "Hosts are contacted in the order given. Use -dry-run to preview."

    def configure(self, options, arguments):
        self.dry_run = options.add_bool("dry-run", False, "Print the plan without deploying.")
        self.retries = options.add_int("retries", 3, "Attempts per host before giving up.")
        self.timeout = options.add_duration(
            "timeout", timedelta(seconds=30), "Per-host deadline."
        )
        self.region = options.add_string("region", "us-east-1", "Target region.")
        self.service = arguments.add_string("service", f"One of: {', '.join(SERVICES)}.")
        self.hosts = arguments.add_remaining(
            "host", str, Arity.at_least(1) & Arity.at_most(8), "Hosts to deploy to."
        )

    def run(self, context):
        if self.service.value not in SERVICES:
            raise usage_error(f"unknown service {self.service.value!r}")
        verb = "Would deploy" if self.dry_run.value else "Deploying"
        for host in self.hosts.value:
            context.console.print(
                f"{verb} {self.service.value} to {host} in {self.region.value} "
                f"(retries={self.retries.value}, timeout={self.timeout.value})"
            )


if __name__ == "__main__":
    Runner("deploy", double_dash=True).main(Deploy())
