"""
Source formatters applied to rendered templates.

``basic`` normalizes whitespace in-process, ``gofmt`` pipes the source
through the Go formatter, ``none`` returns the text unchanged.
"""

import shutil
import subprocess
from typing import Protocol

from .generator import FormatterError
from ...logging_config import get_logger

logger = get_logger(__name__)


class CodeFormatter(Protocol):
    """Anything that turns rendered text into final source text."""

    def format(self, code: str) -> str:
        ...


class PassthroughFormatter:
    """Returns code unchanged."""

    def format(self, code: str) -> str:
        return code


class BasicFormatter:
    """Strip trailing whitespace and collapse runs of blank lines."""

    def __init__(self, max_blank_lines: int = 1):
        self.max_blank_lines = max_blank_lines

    def format(self, code: str) -> str:
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= self.max_blank_lines and formatted_lines:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        while formatted_lines and not formatted_lines[-1]:
            formatted_lines.pop()

        return "\n".join(formatted_lines) + "\n"


class GofmtFormatter:
    """Format Go source by running ``gofmt`` on standard input."""

    def __init__(self, executable: str = "gofmt", timeout: float = 30.0):
        self.executable = executable
        self.timeout = timeout

    def format(self, code: str) -> str:
        try:
            result = subprocess.run(
                [self.executable],
                input=code,
                capture_output=True,
                text=True,
                check=False,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise FormatterError(
                f"{self.executable} not found; install Go or use the basic formatter"
            ) from e
        except subprocess.SubprocessError as e:
            raise FormatterError(f"Error running {self.executable}: {e}") from e

        if result.returncode != 0:
            logger.debug("Rejected source:\n%s", code)
            raise FormatterError(
                f"{self.executable} rejected generated code: {result.stderr.strip()}"
            )

        return result.stdout

    @staticmethod
    def is_available(executable: str = "gofmt") -> bool:
        return shutil.which(executable) is not None


def create_formatter(name: str = "basic") -> CodeFormatter:
    """
    Create a formatter by configuration name.

    Raises:
        FormatterError: If the name is unknown
    """
    if name == "basic":
        return BasicFormatter()
    if name == "gofmt":
        return GofmtFormatter()
    if name == "none":
        return PassthroughFormatter()
    raise FormatterError(f"Unknown formatter: {name}")
