"""Run settings parsed from the command line, and verbose logging."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

_VERBOSE_OPTIONS = frozenset({"-v", "--verbose"})
_HELP_OPTIONS = frozenset({"-h", "--help"})
_VALUE_OPTIONS = {
    "-mrsigner": "mrsigner",
    "-mrenclave": "mrenclave",
    "-productid": "productid",
    "-svn": "svn",
    "-isdebuggable": "debuggable",
}


class _ShowHelp(Exception):
    """Signals that the help text should be printed and the run ended."""


def usage() -> str:
    """Return the help text."""
    lines = [
        "",
        "Usage: maavalidatejwt [options] file",
        "",
        "Arguments:",
        "    -mrsigner <value>        Verify MAA MRSIGNER value is <value>",
        "    -mrenclave <value>       Verify MAA MRENCLAVE value is <value>",
        "    -productid <value>       Verify MAA PRODUCTID value is <value>",
        "    -svn <value>             Verify MAA SVN value is <value>",
        "    -isdebuggable <value>    Verify MAA ISDEBUGGABLE value is <value>",
        "    -v or --verbose          Include verbose messages during validation",
        "    -h or --help             Print Help (this message) and exit",
        "",
    ]
    return "\n".join(lines) + "\n"


@dataclass
class Context:
    """Settings for one validation run."""

    verbose: bool = False
    jwt_filename: str = ""
    mrsigner: str = ""
    productid: str = ""
    mrenclave: str = ""
    svn: str = ""
    debuggable: int = -1

    def set(self, args: Sequence[str]) -> None:
        """Parse a full argument vector (program name first).

        Prints the help text and raises SystemExit(0) on help requests
        and on malformed command lines.
        """
        try:
            self._parse(list(args))
        except _ShowHelp:
            print(usage(), end="")
            raise SystemExit(0) from None

    def _parse(self, args: list[str]) -> None:
        if len(args) < 2:
            raise _ShowHelp
        self.reset()
        remaining = iter(args[1:])
        for arg in remaining:
            option = arg.lower()
            if option in _VERBOSE_OPTIONS:
                self.verbose = True
            elif option in _HELP_OPTIONS:
                raise _ShowHelp
            elif option in _VALUE_OPTIONS:
                value = next(remaining, None)
                if value is None:
                    raise _ShowHelp
                field = _VALUE_OPTIONS[option]
                if field == "debuggable":
                    self.debuggable = int(bool(value))
                else:
                    setattr(self, field, value)
            elif not self.jwt_filename:
                self.jwt_filename = arg
            else:
                raise _ShowHelp

    def dump(self) -> None:
        """Print the settings when running verbosely."""
        if not self.verbose:
            return
        print()
        print("Arguments for this run:")
        for label, value in (
            ("jwt_filename ", self.jwt_filename),
            ("mrsigner     ", self.mrsigner),
            ("productid    ", self.productid),
            ("mrenclave    ", self.mrenclave),
            ("svn          ", self.svn),
            ("debuggable   ", self.debuggable),
        ):
            print(f"\t{label}\t:\t{value}")

    def reset(self) -> None:
        """Restore every setting to its default."""
        self.verbose = False
        self.jwt_filename = ""
        self.mrsigner = ""
        self.productid = ""
        self.mrenclave = ""
        self.svn = ""
        self.debuggable = -1


_current = Context()


def current() -> Context:
    """Return the process-wide context."""
    return _current


def log(message: object) -> None:
    """Print a message only when the current context is verbose."""
    if _current.verbose:
        print(f"\t---\t{message}")


def always_log(message: object) -> None:
    """Print a message unconditionally."""
    print(f"---\t{message}")