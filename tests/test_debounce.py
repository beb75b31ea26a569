from movieFinder.gui.debounce import DebounceGate


def _gate(timer):
    gate = DebounceGate(timer=timer)
    emitted: list[str] = []
    gate.settled.connect(lambda text: emitted.append(text))
    return gate, timer, emitted


def test_burst_collapses_to_last_value(fake_timer):
    gate, timer, emitted = _gate(fake_timer)

    gate.push("b")
    gate.push("ba")
    gate.push("batman")

    assert timer.started_with == [500, 500, 500]
    assert emitted == []

    timer.fire()
    assert emitted == ["batman"]
    timer.fire()
    assert emitted == ["batman"]


def test_timer_without_pending_value_emits_nothing(fake_timer):
    _gate_obj, timer, emitted = _gate(fake_timer)
    timer.fire()
    assert emitted == []


def test_flush_emits_immediately(fake_timer):
    gate, timer, emitted = _gate(fake_timer)
    gate.push("alien")
    gate.flush()
    assert emitted == ["alien"]
    assert timer.stopped == 1
    timer.fire()
    assert emitted == ["alien"]


def test_real_timer_waits_for_quiet_period(qtbot):
    gate = DebounceGate(interval_ms=50)
    emitted: list[str] = []
    gate.settled.connect(lambda text: emitted.append(text))

    with qtbot.waitSignal(gate.settled, timeout=1000):
        gate.push("he")
        gate.push("hello")

    assert emitted == ["hello"]
