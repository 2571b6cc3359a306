# src/catr/core/runner.py
import logging
import sys
from typing import BinaryIO, Optional, TextIO

from catr.core.render import render
from catr.core.sources import Opened, resolve_all
from catr.errors import StreamReadError, describe_os_error
from catr.models import CatConfig, Diagnostic, LineCounter, RunReport

logger = logging.getLogger("catr.runner")


def _report(report: RunReport, out: BinaryIO, err: TextIO, token: str, message: str):
    # Flush first so the diagnostic lands after the lines already emitted
    out.flush()
    diagnostic = Diagnostic(token=token, message=message)
    report.diagnostics.append(diagnostic)
    print(diagnostic, file=err)


def run(config: CatConfig,
        out: Optional[BinaryIO] = None,
        err: Optional[TextIO] = None,
        stdin: Optional[BinaryIO] = None) -> RunReport:
    """
    Streams every token of `config` to `out`, in order.

    A token that cannot be opened, or that fails part-way through reading,
    gets one diagnostic line on `err`; the remaining tokens still run.
    Lines already written for a failing token stay written.
    """
    if out is None:
        out = sys.stdout.buffer
    if err is None:
        err = sys.stderr

    counter = LineCounter()
    mode = config.numbering
    report = RunReport()

    for result in resolve_all(config.files, stdin=stdin):
        if not isinstance(result, Opened):
            _report(report, out, err, result.token,
                    f"Failed to open {result.token}: {describe_os_error(result.cause)}")
            continue

        with result.source as source:
            produced = False
            try:
                for rendered in render(source.lines(), mode, counter):
                    out.write(rendered)
                    produced = True
            except StreamReadError as e:
                if produced:
                    report.recovered.append(result.token)
                _report(report, out, err, e.token, f"Failed to read {e.token}: {describe_os_error(e.cause)}")
                continue
        report.streamed.append(result.token)
        report.recovered.append(result.token)
        logger.debug("streamed %s (next line number %d)", result.token, counter.value)

    out.flush()
    report.next_number = counter.value
    return report
