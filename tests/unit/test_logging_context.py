import logging

from infrastructure.observability import (
    clear_user_context,
    configure_logging,
    get_log_context,
    make_request_tag,
    set_log_context,
)


def test_request_tag_is_stable_and_short() -> None:
    assert make_request_tag("run-1") == make_request_tag("run-1")
    assert make_request_tag("run-1") != make_request_tag("run-2")
    assert len(make_request_tag("run-1")) == 8
    assert len(make_request_tag("run-1", length=12)) == 12


def test_context_round_trip() -> None:
    set_log_context(request_id_full="run-abc", user_id="u1")
    ctx = get_log_context()
    assert ctx["request_tag"] == make_request_tag("run-abc")
    assert ctx["user_id"] == "u1"

    clear_user_context()
    ctx = get_log_context()
    assert ctx["user_id"] == "-"
    assert ctx["request_id_full"] == "run-abc"


def test_file_log_lines_carry_context(tmp_path) -> None:
    log_file = tmp_path / "logs" / "run.log"
    configure_logging(log_file=log_file, console_level=logging.WARNING)
    try:
        set_log_context(request_id_full="run-xyz", user_id="u7")
        logging.getLogger("tests.logging").info("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()

        text = log_file.read_text(encoding="utf-8")
        assert f"r={make_request_tag('run-xyz')} u=u7" in text
        assert "hello" in text
    finally:
        root = logging.getLogger()
        for handler in list(root.handlers):
            handler.close()
        root.handlers.clear()
