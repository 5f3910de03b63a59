import io
from rpsadventure.core.logging import Logger


def test_threshold_filters_lower_levels():
    buf = io.StringIO()
    log = Logger("WARN", stream=buf)
    log.info("Hidden")
    log.warn("ResultsSaveFailed", file="r.txt", error="denied")
    out = buf.getvalue()
    assert "Hidden" not in out
    assert "[WARN] ResultsSaveFailed file=r.txt error=denied" in out


def test_set_level_unknown_defaults_to_info():
    buf = io.StringIO()
    log = Logger("ERROR", stream=buf)
    log.set_level("LOUD")
    log.debug("NoDebug")
    log.info("RunStart")
    assert "NoDebug" not in buf.getvalue()
    assert "[INFO] RunStart" in buf.getvalue()


def test_levels_are_ordered():
    assert Logger._order == {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}
