from oop_concepts.domain.counter import Counter


def test_counter_starts_at_zero():
    assert Counter().count == 0


def test_increment_returns_new_value():
    counter = Counter()

    assert counter.increment() == 1
    assert counter.increment() == 2
    assert counter.count == 2


def test_counters_do_not_share_state():
    first = Counter()
    second = Counter()

    first.increment()
    first.increment()

    assert first.count == 2
    assert second.count == 0


def test_reset():
    counter = Counter()
    counter.increment()

    counter.reset()

    assert counter.count == 0
    assert counter.increment() == 1
