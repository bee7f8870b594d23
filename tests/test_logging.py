import logging

from rich.logging import RichHandler

from josephus_simulator import get_crossed_out_persons
from josephus_simulator.engine.logging import RichMarkupFormatter, configure_logging


def test_elimination_is_logged_with_context(caplog):
    with caplog.at_level(logging.DEBUG, logger="josephus_simulator"):
        order = list(get_crossed_out_persons(3, 2))

    assert order == [2, 1]
    messages = [r.getMessage() for r in caplog.records]
    assert messages == [
        "Eliminated person 2 (2 left)",
        "Eliminated person 1 (1 left)",
        "Survivor is person 3",
    ]
    first = caplog.records[0]
    assert (first.count, first.crossed_out, first.round) == (3, 2, 1)
    assert caplog.records[0].engine_id == caplog.records[-1].engine_id


def test_formatter_adds_prefix_and_markup():
    record = logging.LogRecord(
        "josephus_simulator", logging.DEBUG, __file__, 1,
        "Eliminated person %d (%d left)", (6, 5), None,
    )
    record.engine_id = 4
    record.count = 7
    record.crossed_out = 3
    record.round = 2

    text = RichMarkupFormatter().format(record)

    assert text.startswith("[dim]4:7/3 2[/dim]")
    assert "[bold red]Eliminated[/bold red]" in text
    assert "person [yellow]6[/yellow]" in text


def test_formatter_without_context():
    record = logging.LogRecord(
        "josephus_simulator", logging.WARNING, __file__, 1, "!!! oops", (), None,
    )

    text = RichMarkupFormatter().format(record)

    assert text == "[dim]0:_/_ 0[/dim]  [bold red]!!! oops[/bold red]"


def test_configure_logging_installs_rich_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging(logging.DEBUG)

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], RichHandler)
        assert isinstance(root.handlers[0].formatter, RichMarkupFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
