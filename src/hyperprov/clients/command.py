"""Base wrapper for external command-line tools."""

import os
import subprocess

from hyperprov.core.exceptions import CommandError
from hyperprov.utils.logging import get_logger, redact_command

logger = get_logger(__name__)


class CommandRunner:
    """Runs an external executable and translates failures into CommandError."""

    def __init__(self, executable: str):
        """Initialize command runner.

        Args:
            executable: Executable name or path
        """
        self.executable = executable

    def _run_command(
        self,
        args: list[str],
        env: dict[str, str] | None = None,
        check: bool = True,
    ) -> subprocess.CompletedProcess:
        """Run the executable with arguments.

        Args:
            args: Command arguments
            env: Extra environment variables for the child process
            check: Raise exception on non-zero exit code

        Returns:
            CompletedProcess instance

        Raises:
            CommandError: If the command fails or the executable is missing
        """
        cmd = [self.executable] + args
        rendered = redact_command(cmd)

        child_env = None
        if env:
            child_env = {**os.environ, **env}

        logger.debug("running_command", command=rendered)

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=check,
                env=child_env,
            )

            logger.debug(
                "command_completed",
                command=rendered,
                returncode=result.returncode,
            )

            return result

        except subprocess.CalledProcessError as e:
            logger.error(
                "command_failed",
                command=rendered,
                returncode=e.returncode,
                stderr=e.stderr,
            )
            raise CommandError(
                f"{self.executable} exited with {e.returncode}: {(e.stderr or e.stdout or '').strip()}",
                command=cmd,
                returncode=e.returncode,
                stderr=e.stderr,
            ) from e
        except FileNotFoundError as e:
            logger.error("command_not_found", executable=self.executable)
            raise CommandError(
                f"{self.executable} command not found",
                command=cmd,
            ) from e
