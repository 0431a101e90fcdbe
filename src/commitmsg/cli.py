"""Command line entry points for the commit message verifier."""
from __future__ import annotations

import logging
import os
import sys

import click

from commitmsg.config import load_config
from commitmsg.engine import verify
from commitmsg.message import load_message
from commitmsg.models import ExitCode
from commitmsg.reporter import Reporter, format_io_error
from commitmsg.rules import RULES
from commitmsg.verbs import load_verbs

logger = logging.getLogger("commitmsg")


def _configure_logging() -> None:
    level = os.environ.get("COMMITMSG_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.command("check")
@click.argument("path")
def hook(path: str):
    """Verify the commit message stored in PATH.

    Meant to be run by git as the commit-msg hook. Prints nothing and exits 0
    when the message passes; otherwise prints the reason on stderr and exits
    with the code of the failed rule.
    """
    _configure_logging()
    config = load_config(os.getcwd())

    try:
        message = load_message(path)
        result = verify(message, config)
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Read failure for %s", path, exc_info=True)
        click.echo(format_io_error(exc), file=config.stream, err=True)
        sys.exit(int(ExitCode.IO_ERROR))

    reporter = Reporter(result)
    reporter.write(config.stream)
    if not result.passed:
        sys.exit(reporter.exit_code())


@click.group()
def main():
    """Commit message verifier - enforce commit message style rules."""
    _configure_logging()


main.add_command(hook)


@main.command("list-rules")
def list_rules():
    """List the rules in evaluation order."""
    click.echo(f"{'#':<3} {'Rule ID':<28} {'Code':<6} Description")
    click.echo("-" * 80)

    for order, rule in enumerate(RULES, start=1):
        click.echo(f"{order:<3} {rule.id:<28} {int(rule.code):<6} {rule.description}")

    click.echo(f"\n{len(RULES)} rules total.")


@main.command()
@click.option("--project-dir", default=None, help="Project directory")
def doctor(project_dir: str | None):
    """Diagnose the environment the commit-msg hook depends on."""
    project_dir = project_dir or os.getcwd()
    config = load_config(project_dir)
    issues: list[str] = []
    checks_ok: list[str] = []

    if config.config_path is not None:
        checks_ok.append(f"Config file: {config.config_path.name} found")
    else:
        checks_ok.append("Config file: none found (using defaults)")
    for problem in config.problems:
        issues.append(f"Config file: {config.config_path.name} {problem}")

    verbs_path = config.verbs_path
    if verbs_path.is_file():
        try:
            verbs = load_verbs(verbs_path)
        except (OSError, UnicodeDecodeError) as exc:
            issues.append(f"Verbs file: {verbs_path} cannot be read ({format_io_error(exc)})")
        else:
            count = sum(1 for verb in verbs if verb.strip())
            if count:
                checks_ok.append(f"Verbs file: {verbs_path} ({count} verbs)")
            else:
                issues.append(f"Verbs file: {verbs_path} is empty. Every subject will be rejected.")
    elif verbs_path.exists():
        issues.append(f"Verbs file: {verbs_path} is not a regular file")
    else:
        issues.append(f"Verbs file: {verbs_path} not found. Every commit will be rejected with code 253.")

    for item in checks_ok:
        click.echo(f"  OK  {item}")
    for item in issues:
        click.echo(f"  !!  {item}")

    if issues:
        click.echo(f"\n{len(issues)} issue(s) found.")
    else:
        click.echo("\nAll checks passed.")


if __name__ == "__main__":
    main()
