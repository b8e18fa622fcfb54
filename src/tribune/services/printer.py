"""Print sink: hand the finished report to the CUPS ``lp`` command."""

from __future__ import annotations

import subprocess

from tribune.errors import PrintError

DEFAULT_COMMAND = "lp"


def build_print_command(printer: str, command: str = DEFAULT_COMMAND) -> list[str]:
    """Argument vector for sending stdin to ``printer``."""
    return [command, "-d", printer]


def send_to_printer(report: str, printer: str, command: str = DEFAULT_COMMAND) -> str:
    """
    Pipe ``report`` into the print command and echo whatever it says.

    Args:
        report: Fully assembled report text.
        printer: Destination printer name.
        command: Print executable (``lp`` unless overridden in settings).

    Returns:
        Combined stdout/stderr of the print command.

    Raises:
        PrintError: The command could not be started or exited non-zero.
    """
    try:
        proc = subprocess.run(
            build_print_command(printer, command),
            input=report,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            check=False,
        )
    except OSError as e:
        print("problem printing")
        msg = f"Could not run {command!r}: {e}"
        raise PrintError(msg) from e

    output = proc.stdout or ""
    print(output)
    if proc.returncode != 0:
        print("problem printing")
        msg = f"{command} exited with status {proc.returncode}"
        raise PrintError(msg)
    return output
