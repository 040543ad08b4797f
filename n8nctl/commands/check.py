"""n8nctl - Check command"""

import click

from n8nctl.base import StackCommand
from n8nctl.constants import SUCCESS_ALL_CHECKS
from n8nctl.core.validator import PreflightEngine
from n8nctl.ui_components import report_check_result


class CheckCommand(StackCommand):
    """
    Run every precondition check and report them together.

    Unlike start, a failing check does not stop the others.
    """

    name = "check"

    def execute(self) -> None:
        """Execute check command."""
        self.show_header(
            title="Check Requirements", details={"Directory": str(self.config.root)}
        )

        report = PreflightEngine(self.config, self.compose).for_check()
        for result in report.results:
            report_check_result(self.logger, result)

        if report.passed:
            self.logger.success(SUCCESS_ALL_CHECKS)
            return

        not_passed = [r.name for r in report.results if not r.is_satisfied]
        self.exit_with_error(
            f"{len(not_passed)} of {len(report.results)} checks did not pass: "
            f"{', '.join(not_passed)}"
        )


@click.command("check")
@click.pass_obj
def check(obj):
    """
    Check requirements and configuration

    \b
    Runs all three checks, even after a failure:
    - docker and docker compose are available, docker-compose.yml exists
    - .env exists (copied from .env.example if missing)
    - SSL certificates are present in files/
    """
    cmd = CheckCommand(obj.directory, verbose=obj.verbose)
    cmd.run()
