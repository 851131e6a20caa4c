# tests/test_console.py

from __future__ import annotations

from task_manager.cli.bootstrap import create_initial_state, describe_load
from task_manager.connectors.console_connector import run_console_loop

from .fakes import CapturingEmitter, ScriptedAsk


def test_session_add_complete_save_then_reload(settings) -> None:
    state, report = create_initial_state(settings=settings)
    assert report.missing is True
    assert describe_load(report) == []
    assert not settings.data_dir.exists()

    ask = ScriptedAsk(
        [
            "1", "Pay rent", "", "4", "02/01/2030",
            "1", "Gym", "legs", "2", "02/02/2030",
            "5", "1",
            "7",
        ]
    )
    emit = CapturingEmitter()
    run_console_loop(state, ask=ask, emit=emit)

    assert ask.remaining == 0
    assert "Thank you for using TaskManager. Goodbye!" in emit.lines

    reloaded, report2 = create_initial_state(settings=settings)
    assert describe_load(report2) == ["Loaded 2 tasks from file."]
    assert [t.completed for t in reloaded.task_store] == [True, False]


def test_eof_exits_without_saving(settings) -> None:
    state, _ = create_initial_state(settings=settings)
    ask = ScriptedAsk(["1", "Draft", "", "3", "01/01/2030"])

    run_console_loop(state, ask=ask, emit=CapturingEmitter())

    assert state.task_store.count_tasks() == 1
    assert not settings.data_file.exists()


def test_invalid_choice_and_crashing_handler_keep_loop_running(state) -> None:
    from task_manager.cli.commands import CommandRegistry

    reg = CommandRegistry()

    def boom(state, ask, emit):
        raise RuntimeError("boom")

    def stop(state, ask, emit):
        state.running = False
        return "bye"

    reg.register("boom", boom, "Boom", aliases=["1"])
    reg.register("stop", stop, "Stop", aliases=["2"])

    emit = CapturingEmitter()
    run_console_loop(state, ask=ScriptedAsk(["9", "", "1", "2"]), emit=emit, registry=reg)

    assert "Invalid choice. Please try again." in emit.lines
    assert "Internal error while handling the command." in emit.lines
    assert emit.lines[-1] == "bye"


def test_describe_load_reports_skipped_lines(settings) -> None:
    settings.data_file.write_text("1|A|d|3|01/01/2030|false\nbad|line\n", encoding="utf-8")

    _, report = create_initial_state(settings=settings)

    assert describe_load(report) == ["Error parsing task: bad|line", "Loaded 1 tasks from file."]


def test_task_file_directory_is_created_for_nested_data_file(settings) -> None:
    settings.data_file = settings.data_dir / "nested" / "tasks.txt"

    state, report = create_initial_state(settings=settings)

    assert report.missing is True
    assert settings.data_file.parent.is_dir()
    assert state.task_store.save_to_file().ok
