from adept.nvtx import COLOURS, NVTXTracer


def test_initial_range_is_open():
    tracer = NVTXTracer("setup")
    assert tracer.name == "setup"
    assert [r.name for r in tracer.ranges] == ["setup"]
    assert tracer.ranges[0].end is None


def test_same_tag_keeps_range():
    tracer = NVTXTracer("phase")
    tracer.set_tag("phase")
    assert len(tracer.ranges) == 1


def test_new_tag_closes_previous_range():
    tracer = NVTXTracer("one")
    tracer.set_tag("two")
    first, second = tracer.ranges
    assert first.end is not None and first.end >= first.start
    assert second.name == "two" and second.end is None


def test_close_and_context_manager():
    with NVTXTracer("work") as tracer:
        assert tracer.ranges[-1].end is None
    assert [r.name for r in tracer.ranges] == ["work"]
    closed = tracer.ranges[-1]
    assert closed.end >= closed.start


def test_explicit_close_ends_open_range():
    tracer = NVTXTracer("job")
    tracer.set_tag("next")
    tracer.close()
    assert [r.name for r in tracer.ranges] == ["job", "next"]
    assert all(r.end >= r.start for r in tracer.ranges)


def test_colours_come_from_palette():
    tracer = NVTXTracer("a")
    tracer.set_tag("b")
    assert all(r.colour in COLOURS for r in tracer.ranges)


def test_next_colour_cycles_through_all():
    colours = [NVTXTracer.next_colour() for _ in range(len(COLOURS))]
    assert set(colours) == set(COLOURS)


def test_occupancy_rising_peak_falling():
    tracer = NVTXTracer("start")
    tracer.set_occupancy(100)
    assert tracer.name == "occupancy rising"
    tracer.set_occupancy(0)
    assert tracer.name == "peak occupancy (0 in-flight)"
    tracer.set_occupancy(0)
    assert tracer.name == "occupancy falling"


def test_occupancy_needs_majority():
    tracer = NVTXTracer("start")
    for _ in range(10):
        tracer.set_occupancy(50)
    # 51 is not more than one above 50, so nothing counts as rising
    tracer.set_occupancy(51)
    assert tracer.name == "occupancy falling"
    tracer.set_occupancy(52)
    assert tracer.name == "occupancy rising"