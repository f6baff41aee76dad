import io

from todo_tui import app_main
from todo_tui.db import Store
from todo_tui.demo import seed_demo_data
from todo_tui.terminal.keys import Key, KeyDecoder
from todo_tui.ui_state import Screen


def test_process_key_clears_the_notice_first(state):
    state.set_message("old", "success")
    app_main.process_key(state, Key.IGNORED)
    assert state.message is None


def test_process_key_notice_set_by_handler_survives(state):
    app_main.process_key(state, "e")
    assert state.message == "No item selected"


def test_renderer_converts_newlines_in_raw_mode():
    out = io.StringIO()
    renderer = app_main.Renderer(out, raw=True, width=40)
    renderer.draw("[bold]one[/bold]\ntwo")
    text = out.getvalue()
    assert text.startswith(app_main.CLEAR_SCREEN)
    assert "one" in text
    assert "\r\ntwo" in text


def test_renderer_keeps_newlines_when_cooked():
    renderer = app_main.Renderer(io.StringIO(), raw=False, width=40)
    assert "\r\n" not in renderer.to_ansi("one\ntwo")


def test_loop_runs_until_quit(state, store, feed):
    store.create_item("a")
    store.create_item("b")
    state.refresh_data()
    out = io.StringIO()
    decoder = KeyDecoder(feed(b"j\rbq"), esc_timeout=0)

    app_main.loop(state, decoder, app_main.Renderer(out, raw=True, width=100))

    assert state.running is False
    assert state.current_screen == Screen.ITEM_LIST
    assert state.selected_index == 2
    assert out.getvalue().count(app_main.CLEAR_SCREEN) == 4


def test_loop_stops_at_end_of_input(state, feed):
    decoder = KeyDecoder(feed(b""), esc_timeout=0)
    app_main.loop(state, decoder, app_main.Renderer(io.StringIO(), raw=False, width=80))
    assert state.running is False


def test_main_seeds_demo_data(tmp_path, monkeypatch):
    seen = {}

    def fake_run(store):
        seen["titles"] = [i.title for i in store.list_items()]
        seen["groups"] = [g.name for g in store.list_groups()]

    monkeypatch.setattr(app_main, "run", fake_run)
    db_path = tmp_path / "data" / "todos.db"
    code = app_main.main(["--db", str(db_path), "--demo", "--log-file", str(tmp_path / "tui.log")])

    assert code == 0
    assert "Buy milk" in seen["titles"]
    assert seen["groups"] == ["Home Renovation", "Work Tasks"]


def test_main_reports_unopenable_database(tmp_path, capsys):
    code = app_main.main(["--db", str(tmp_path), "--log-file", str(tmp_path / "tui.log")])
    assert code == 1
    assert "Could not open database" in capsys.readouterr().err


def test_main_returns_1_on_crash(tmp_path, monkeypatch):
    def broken_run(store):
        raise RuntimeError("boom")

    monkeypatch.setattr(app_main, "run", broken_run)
    code = app_main.main(["--db", str(tmp_path / "t.db"), "--log-file", str(tmp_path / "tui.log")])
    assert code == 1


def test_demo_seed_only_fills_empty_store(tmp_path):
    store = Store.open(str(tmp_path / "t.db"))
    try:
        assert seed_demo_data(store) is True
        count = len(store.list_items())
        assert seed_demo_data(store) is False
        assert len(store.list_items()) == count
    finally:
        store.close()
