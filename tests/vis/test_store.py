"""Unit tests for the application store commits and observers."""

import threading

import pytest

from glance_session.schemas import DatasetRecord, Route, RouteChange


def test_initial_state(store) -> None:
    state = store.state.value
    assert state.route == Route.LANDING
    assert state.panels == []
    assert state.collapse_dataset_panels is False
    assert state.suppress_browser_warning is False


def test_route_commits_emit_typed_events(store) -> None:
    events: list[RouteChange] = []
    store.on_route_change(events.append)

    store.show_app()
    store.show_app()
    store.show_landing()

    assert events == [
        RouteChange(previous=Route.LANDING, current=Route.APP),
        RouteChange(previous=Route.APP, current=Route.LANDING),
    ]


def test_listener_sees_committed_state(store) -> None:
    seen = []
    store.on_route_change(lambda change: seen.append(store.route))
    store.show_app()
    assert seen == [Route.APP]


def test_remove_route_listener(store) -> None:
    events = []
    remove = store.on_route_change(events.append)
    remove()
    remove()
    store.show_app()
    assert events == []


def test_add_panel_rejects_duplicates(store, panel_factory) -> None:
    store.add_panel(panel_factory("info"))
    store.add_panel(panel_factory("stats", title="Statistics"))
    assert [p.component for p in store.state.value.panels] == ["info", "stats"]

    with pytest.raises(ValueError):
        store.add_panel(panel_factory("info"))


def test_flag_dispatches(store) -> None:
    store.collapse_dataset_panels(True)
    store.suppress_browser_warning(1)
    assert store.state.value.collapse_dataset_panels is True
    assert store.state.value.suppress_browser_warning is True


def test_subscribe_receives_new_state(store) -> None:
    states = []
    unsubscribe = store.subscribe(states.append)
    store.add_dataset(DatasetRecord(name="a", url="u", group="g"))
    unsubscribe()
    store.show_app()

    assert len(states) == 1
    assert states[0].datasets[0].name == "a"


def test_concurrent_dataset_commits_are_not_lost(store) -> None:
    def add_many(worker: int) -> None:
        for i in range(50):
            store.add_dataset(DatasetRecord(name=f"{worker}-{i}", url="u", group="g"))

    threads = [threading.Thread(target=add_many, args=(w,)) for w in range(4)]
    for thread in threads:
        thread.start()
    store.show_app()
    for thread in threads:
        thread.join()

    assert len(store.state.value.datasets) == 200
    assert store.route == Route.APP


def test_subscribe_change_receives_old_and_new(store) -> None:
    changes = []
    unsubscribe = store.subscribe_change(lambda new, old: changes.append((old.route, new.route)))
    store.show_app()
    unsubscribe()
    store.show_landing()
    assert changes == [(Route.LANDING, Route.APP)]
