import logging

import numpy as np
import pytest

from trisolver import AngleSet, Inputs, solve
from trisolver.logging_utils import debug_log_call, summarize


def test_summarize_solve_result_lists_tags():
    text = summarize(solve("angles", Inputs(A=100, Aext=70)))
    assert text.startswith("SolveResult(status=Bad value")
    assert "A:bad" in text


def test_summarize_other_values():
    assert summarize(AngleSet(60.0, None, 60.0)) == "AngleSet(A=60, B=-, C=60)"
    assert summarize(Inputs(a=2)) == "Inputs({'a': 2.0})"
    assert summarize(np.zeros((3, 2))) == "ndarray(shape=(3, 2), dtype=float64)"
    assert summarize("x" * 1000, max_length=10).endswith("... (truncated)")


def test_debug_log_call_logs_entry_and_exit(caplog):
    logger = logging.getLogger("trisolver.tests")

    @debug_log_call(logger)
    def double(value):
        return value * 2

    with caplog.at_level(logging.DEBUG, logger="trisolver.tests"):
        assert double(4) == 8

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("Entering") and "double" in message for message in messages)
    assert "Exiting test_debug_log_call_logs_entry_and_exit.<locals>.double -> 8" in messages


def test_debug_log_call_logs_and_reraises_exceptions(caplog):
    logger = logging.getLogger("trisolver.tests")

    @debug_log_call(logger)
    def explode():
        raise ValueError("boom")

    with caplog.at_level(logging.DEBUG, logger="trisolver.tests"):
        with pytest.raises(ValueError, match="boom"):
            explode()

    failures = [record for record in caplog.records if record.levelno == logging.ERROR]
    assert len(failures) == 1
    assert failures[0].getMessage() == "Exception in test_debug_log_call_logs_and_reraises_exceptions.<locals>.explode"
    assert failures[0].exc_info[0] is ValueError
    assert not any(record.getMessage().startswith("Exiting") for record in caplog.records)
