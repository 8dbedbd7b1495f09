"""Unit tests for console adapters."""

import pytest
from unittest.mock import Mock, call
from source_mover.adapters import (
    BufferedFileSink,
    FileConsole,
    MessageFormatter,
    StdoutConsole
)
from source_mover.exceptions import IllegalStateError
from source_mover.interfaces import Message, MessageType

EXPECTED = [
    "INFO: Copybara source mover (Version: v1)",
    "INFO: This is info",
    "WARNING: This is warning",
    "ERROR: This is error",
    "VERBOSE: This is verbose",
    "PROGRESS: This is progress",
]


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "tmp" / "foo.txt"
    path.parent.mkdir()
    return path


def read_lines(path):
    return path.read_text(encoding="utf-8").splitlines()


def assert_all_lines(path):
    lines = read_lines(path)
    assert len(lines) == 6
    for line, expected in zip(lines, EXPECTED):
        assert expected in line


def write_all(console):
    console.startup_message("v1")
    console.info("This is info")
    console.warn("This is warning")
    console.error("This is error")
    console.verbose("This is verbose")
    console.progress("This is progress")


def test_formatter_startup_banner():
    """Startup renders the version banner."""
    line = MessageFormatter().format(MessageType.STARTUP, "v1")
    assert "Copybara source mover (Version: v1)" in line
    assert line.startswith("INFO: ")


def test_formatter_labels():
    """Other severities render as LABEL: text."""
    formatter = MessageFormatter()
    assert formatter.format(MessageType.WARNING, "w") == "WARNING: w"
    assert formatter.render(Message(MessageType.PROGRESS, "p")) == "PROGRESS: p"


def test_file_console_new_file(log_file):
    """All messages reach both the delegate and the file."""
    delegate = Mock()
    with FileConsole(delegate, log_file, 0) as console:
        write_all(console)

    assert_all_lines(log_file)
    assert delegate.mock_calls == [
        call.startup_message("v1"),
        call.info("This is info"),
        call.warn("This is warning"),
        call.error("This is error"),
        call.verbose("This is verbose"),
        call.progress("This is progress"),
    ]


def test_file_console_truncates_existing_file(log_file):
    """Previous file content is discarded."""
    log_file.write_text("Previous content", encoding="utf-8")

    with FileConsole(Mock(), log_file, 0) as console:
        write_all(console)

    assert_all_lines(log_file)
    assert "Previous content" not in log_file.read_text(encoding="utf-8")


def test_file_console_flushing_frequency(log_file):
    """Threshold 5 writes after the fifth message."""
    with FileConsole(Mock(), log_file, 5) as console:
        console.startup_message("v1")
        console.info("This is info")
        console.warn("This is warning")
        assert read_lines(log_file) == []
        console.error("This is error")
        console.verbose("This is verbose")

        lines = read_lines(log_file)
        assert len(lines) == 5
        for line, expected in zip(lines, EXPECTED):
            assert expected in line

        console.progress("This is progress")

    assert_all_lines(log_file)


def test_file_console_flushing_disabled(log_file):
    """Threshold 0 writes nothing until close."""
    with FileConsole(Mock(), log_file, 0) as console:
        write_all(console)
        assert read_lines(log_file) == []

    assert_all_lines(log_file)


def test_file_console_closes_on_exception(log_file):
    """File is flushed even if the block raises."""
    with pytest.raises(KeyError):
        with FileConsole(Mock(), log_file, 0) as console:
            console.info("before failure")
            raise KeyError("boom")

    assert read_lines(log_file) == ["INFO: before failure"]
    assert console.sink.closed


def test_file_console_close_failure_keeps_block_error(log_file):
    """A failed final write does not hide the error raised in the block."""
    console = FileConsole(Mock(), log_file, 0)
    real_file = console.sink._file
    broken = Mock(wraps=real_file)
    broken.write.side_effect = OSError("disk full")
    console.sink._file = broken

    with pytest.raises(KeyError) as exc_info:
        with console:
            console.info("before failure")
            raise KeyError("block failure")

    assert "disk full" in exc_info.value.__notes__[0]
    assert console.sink.closed
    real_file.close()


def test_file_console_close_failure_without_block_error(log_file):
    """With a clean block the close error reaches the caller."""
    console = FileConsole(Mock(), log_file, 0)
    real_file = console.sink._file
    broken = Mock(wraps=real_file)
    broken.write.side_effect = OSError("disk full")
    console.sink._file = broken

    with pytest.raises(OSError, match="disk full"):
        with console:
            console.info("line")
    real_file.close()


def test_file_console_does_not_close_delegate(log_file):
    """Delegate lifecycle is not owned."""
    delegate = Mock()
    with FileConsole(delegate, log_file, 0):
        pass

    delegate.close.assert_not_called()


def test_file_console_delegate_failure_still_writes_file(log_file):
    """Delegate error propagates, the line is still buffered."""
    delegate = Mock()
    delegate.info.side_effect = RuntimeError("terminal gone")

    console = FileConsole(delegate, log_file, 0)
    with pytest.raises(RuntimeError, match="terminal gone"):
        console.info("hello")
    console.close()

    assert read_lines(log_file) == ["INFO: hello"]


def test_file_console_delegate_failure_notes_sink_failure(log_file):
    """When both sides fail the delegate error wins."""
    delegate = Mock()
    delegate.info.side_effect = RuntimeError("terminal gone")

    console = FileConsole(delegate, log_file, 0)
    console.close()

    with pytest.raises(RuntimeError) as exc_info:
        console.info("hello")
    assert "also failed" in exc_info.value.__notes__[0]


def test_file_console_after_close_raises(log_file):
    """Closed console rejects messages and keeps the file as is."""
    delegate = Mock()
    with FileConsole(delegate, log_file, 0) as console:
        console.info("only line")

    with pytest.raises(IllegalStateError):
        console.warn("too late")

    delegate.warn.assert_called_once_with("too late")
    assert read_lines(log_file) == ["INFO: only line"]


def test_sink_threshold_cadence(log_file):
    """With threshold 3 the file grows in steps of 3."""
    sink = BufferedFileSink.open(log_file, 3)
    for i in range(1, 8):
        sink.append(f"line {i}")
        assert len(read_lines(log_file)) == (i // 3) * 3
    sink.close()

    assert read_lines(log_file) == [f"line {i}" for i in range(1, 8)]


def test_sink_flush_is_idempotent(log_file):
    """Second flush adds nothing."""
    sink = BufferedFileSink(log_file)
    sink.append("a")
    sink.flush()
    sink.flush()
    sink.close()

    assert read_lines(log_file) == ["a"]


def test_sink_rejects_after_close(log_file):
    """append and flush fail on a closed sink; close is repeatable."""
    sink = BufferedFileSink(log_file, 0)
    sink.append("kept")
    sink.close()
    sink.close()

    with pytest.raises(IllegalStateError):
        sink.append("lost")
    with pytest.raises(IllegalStateError):
        sink.flush()
    assert read_lines(log_file) == ["kept"]


def test_sink_failed_flush_keeps_buffer(log_file):
    """A failed write keeps the lines for the next flush."""
    sink = BufferedFileSink(log_file, 0)
    sink.append("one")
    sink.append("two")

    real_file = sink._file
    broken = Mock(wraps=real_file)
    broken.write.side_effect = OSError("disk full")
    sink._file = broken
    with pytest.raises(OSError, match="disk full"):
        sink.flush()
    assert sink.buffered == 2

    sink._file = real_file
    sink.close()
    assert read_lines(log_file) == ["one", "two"]


def test_sink_escapes_unencodable_text(log_file):
    """A line that cannot be encoded does not block the others."""
    sink = BufferedFileSink(log_file, 0)
    sink.append("good line")
    sink.append("bad \ud800 line")
    sink.append("another good line")
    sink.close()

    assert read_lines(log_file) == [
        "good line",
        "bad \\ud800 line",
        "another good line",
    ]


def test_sink_marked_closed_when_release_fails(log_file):
    """A failing handle close still leaves the sink closed."""
    sink = BufferedFileSink(log_file, 0)
    real_file = sink._file
    broken = Mock(wraps=real_file)
    broken.close.side_effect = OSError("close failed")
    sink._file = broken

    with pytest.raises(OSError, match="close failed"):
        sink.close()

    assert sink.closed
    with pytest.raises(IllegalStateError):
        sink.append("late")
    real_file.close()


def test_sink_missing_directory(tmp_path):
    """Opening under a missing directory raises OSError."""
    with pytest.raises(OSError):
        BufferedFileSink(tmp_path / "missing" / "log.txt")


def test_sink_negative_threshold(log_file):
    """Negative threshold is rejected."""
    with pytest.raises(ValueError):
        BufferedFileSink(log_file, -1)


def test_stdout_console_prints(capsys):
    """Stdout console prints labels, hides verbose by default."""
    console = StdoutConsole()
    console.startup_message("v2")
    console.warn("careful")
    console.verbose("hidden")
    console.error("bad")

    out, err = capsys.readouterr()
    assert "INFO: Copybara source mover (Version: v2)" in out
    assert "WARNING: careful" in out
    assert "hidden" not in out
    assert "ERROR: bad" in err


def test_stdout_console_verbose(capsys):
    """Verbose messages shown when enabled."""
    StdoutConsole(verbose=True).verbose("details")

    out, _ = capsys.readouterr()
    assert "VERBOSE: details" in out
