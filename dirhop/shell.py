"""Hand-off of the committed directory to the invoking shell.

A child process cannot change its parent shell's working directory, so dirhop
writes the committed path to a file (or stdout) and a small shell function
performs the ``cd``. ``shell_init_script`` prints that function.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import TextIO

from .errors import CommitError

logger = logging.getLogger(__name__)

DEFAULT_FUNCTION_NAME = "dh"

_POSIX_TEMPLATE = """\
{function}() {{
    local dirhop_out
    dirhop_out="$(mktemp)" || return 1
    command {command} --output-file "$dirhop_out" "$@"
    local dirhop_status=$?
    if [ $dirhop_status -eq 0 ] && [ -s "$dirhop_out" ]; then
        cd -- "$(cat -- "$dirhop_out")" || dirhop_status=$?
    fi
    rm -f -- "$dirhop_out"
    return $dirhop_status
}}
"""

_FISH_TEMPLATE = """\
function {function}
    set -l dirhop_out (mktemp); or return 1
    command {command} --output-file $dirhop_out $argv
    set -l dirhop_status $status
    if test $dirhop_status -eq 0; and test -s $dirhop_out
        cd (cat $dirhop_out); or set dirhop_status $status
    end
    rm -f $dirhop_out
    return $dirhop_status
end
"""

SHELL_TEMPLATES: dict[str, str] = {
    "bash": _POSIX_TEMPLATE,
    "zsh": _POSIX_TEMPLATE,
    "fish": _FISH_TEMPLATE,
}


def supported_shells() -> tuple[str, ...]:
    return tuple(sorted(SHELL_TEMPLATES))


def shell_init_script(shell: str, command: str = "dirhop", function: str = DEFAULT_FUNCTION_NAME) -> str:
    """Return the wrapper function source for ``shell``.

    Raises ``ValueError`` for shells without a template.
    """
    template = SHELL_TEMPLATES.get(shell.strip().lower())
    if template is None:
        raise ValueError(f"unsupported shell: {shell!r} (choose from {', '.join(supported_shells())})")
    return template.format(function=function, command=command)


def write_committed_path(path: Path, output_file: Path | None = None, stream: TextIO | None = None) -> None:
    """Publish ``path`` for the shell wrapper.

    Writes ``path`` plus a newline to ``output_file`` when given, otherwise to
    ``stream``, or as raw bytes to stdout. Raises ``CommitError`` on failure.
    """
    text = os.fsdecode(os.fspath(path)) + "\n"
    if output_file is not None:
        try:
            with open(output_file, "w", encoding="utf-8", errors="surrogateescape") as handle:
                handle.write(text)
        except OSError as exc:
            raise CommitError(str(output_file), exc.strerror or str(exc)) from exc
        logger.debug("Wrote committed path to %s", output_file)
        return

    try:
        if stream is not None:
            stream.write(text)
            stream.flush()
        else:
            # Raw bytes so undecodable names survive a strict stdout encoding.
            sys.stdout.flush()
            sys.stdout.buffer.write(os.fsencode(path) + b"\n")
            sys.stdout.buffer.flush()
    except (OSError, ValueError) as exc:
        raise CommitError("stdout", str(exc)) from exc


__all__ = [
    "DEFAULT_FUNCTION_NAME",
    "SHELL_TEMPLATES",
    "shell_init_script",
    "supported_shells",
    "write_committed_path",
]
