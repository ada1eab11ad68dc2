import io
import json

import pytest

from randgraph import ConfigError, NoopLogger, StdLogger


def test_text_format_and_level_filter():
    buf = io.StringIO()
    log = StdLogger(level="info", stream=buf)
    log.debug("hidden", x=1)
    log.info("custom_tree", size=3, edges=2)
    assert buf.getvalue() == "info custom_tree size=3 edges=2\n"


def test_json_format():
    buf = io.StringIO()
    log = StdLogger(level="debug", json_fmt=True, stream=buf)
    log.debug("bipartite_graph", size=4, prob=0.5)
    assert json.loads(buf.getvalue()) == {
        "level": "debug",
        "event": "bipartite_graph",
        "size": 4,
        "prob": 0.5,
    }


def test_default_level_is_quiet():
    buf = io.StringIO()
    StdLogger(stream=buf).info("uniform_tree", size=2)
    assert buf.getvalue() == ""


def test_warning_passes_default_level():
    buf = io.StringIO()
    StdLogger(stream=buf).warning("bipartite_dense_rejection", absent=10, added=8)
    assert buf.getvalue() == "warning bipartite_dense_rejection absent=10 added=8\n"


def test_unknown_level_is_rejected():
    with pytest.raises(ConfigError):
        StdLogger(level="verbose")


def test_bind_prefixes_fields_and_keeps_parent_unchanged():
    buf = io.StringIO()
    parent = StdLogger(level="info", stream=buf)
    child = parent.bind(run=7)
    child.info("uniform_tree", size=2)
    parent.info("uniform_tree", size=3)
    assert buf.getvalue().splitlines() == [
        "info uniform_tree run=7 size=2",
        "info uniform_tree size=3",
    ]
    assert parent.context == {}


def test_event_fields_override_bound_fields_in_json():
    buf = io.StringIO()
    log = StdLogger(level="info", json_fmt=True, stream=buf).bind(run=1, size=0)
    log.info("custom_tree", size=5)
    assert json.loads(buf.getvalue()) == {
        "level": "info",
        "event": "custom_tree",
        "run": 1,
        "size": 5,
    }


def test_default_stream_is_stderr_at_write_time(capsys):
    StdLogger().warning("bipartite_dense_rejection", absent=4, added=3)
    assert capsys.readouterr().err == "warning bipartite_dense_rejection absent=4 added=3\n"


def test_noop_bind_returns_itself():
    log = NoopLogger()
    assert log.bind(run=1) is log
