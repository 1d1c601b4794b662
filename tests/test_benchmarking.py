import time

from adept.benchmarking import BenchmarkManager, BenchmarkStore, TimeInfo


def test_timer_accumulates_time():
    manager = BenchmarkManager()
    manager.timer_start("run")
    time.sleep(0.002)
    manager.timer_stop("run")
    first = manager.get_duration_seconds("run")
    assert first > 0.0
    manager.timer_start("run")
    time.sleep(0.002)
    manager.timer_stop("run")
    assert manager.get_duration_seconds("run") > first


def test_stop_without_start_creates_zero_timer():
    manager = BenchmarkManager()
    manager.timer_stop("idle")
    assert manager.has_timer("idle")
    assert manager.get_duration_seconds("idle") == 0.0


def test_second_stop_adds_nothing():
    manager = BenchmarkManager()
    manager.timer_start("t")
    manager.timer_stop("t")
    value = manager.get_duration_seconds("t")
    time.sleep(0.001)
    manager.timer_stop("t")
    assert manager.get_duration_seconds("t") == value


def test_running_flag():
    manager = BenchmarkManager()
    manager.timer_start("t")
    assert manager.timers["t"].counting is True
    manager.timer_stop("t")
    assert manager.timers["t"].counting is False


def test_time_info_defaults():
    info = TimeInfo()
    assert (info.accumulated, info.counting) == (0, False)


def test_accumulators():
    manager = BenchmarkManager()
    manager.add_to_accumulator("hits", 2.0)
    manager.add_to_accumulator("hits", 3.0)
    assert manager.get_accumulator("hits") == 5.0
    manager.set_accumulator("hits", 1.0)
    assert manager.get_accumulator("hits") == 1.0


def test_get_missing_accumulator_creates_zero():
    manager = BenchmarkManager()
    assert manager.get_accumulator("missing") == 0.0
    assert manager.has_accumulator("missing")


def test_remove_and_reset():
    manager = BenchmarkManager()
    manager.timer_start("a")
    manager.set_accumulator("b", 1.0)
    manager.remove_timer("a")
    manager.remove_accumulator("b")
    assert not manager.has_timer("a")
    assert not manager.has_accumulator("b")
    manager.timer_start("c")
    manager.set_accumulator("d", 2.0)
    manager.reset()
    assert manager.timers == {} and manager.accumulators == {}


def test_export_csv_overwrite(tmp_path):
    manager = BenchmarkManager()
    manager.output_directory = str(tmp_path / "out")
    manager.output_filename = "result"
    manager.timer_stop("time")
    manager.set_accumulator("energy", 1.5)
    path = manager.export_csv()
    assert path == tmp_path / "out" / "result.csv"
    assert path.read_text() == "time, energy\n0.000000, 1.500000\n"
    manager.export_csv()
    assert path.read_text() == "time, energy\n0.000000, 1.500000\n"


def test_export_csv_append(tmp_path):
    manager = BenchmarkManager()
    manager.output_directory = str(tmp_path)
    manager.output_filename = "log"
    manager.set_accumulator("x", 2.0)
    manager.export_csv(overwrite=False)
    manager.set_accumulator("x", 3.0)
    manager.export_csv(overwrite=False)
    lines = (tmp_path / "log.csv").read_text().splitlines()
    assert lines == ["x", "2.000000", "3.000000"]


def test_export_csv_default_location(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    manager = BenchmarkManager()
    manager.set_accumulator("b", 1.0)
    manager.set_accumulator("a", 2.0)
    path = manager.export_csv()
    written = (tmp_path / "benchmark" / "benchmark.csv").read_text()
    assert str(path) == "benchmark/benchmark.csv" or path.name == "benchmark.csv"
    assert written.splitlines()[0] == "a, b"


def test_store_is_singleton():
    first = BenchmarkStore.get_instance()
    second = BenchmarkStore.get_instance()
    assert first is second
    first.reset()
    manager = BenchmarkManager()
    manager.set_accumulator("shared", 7.0)
    first.record_state(manager)
    assert second.states == [{"shared": 7.0}]
    second.reset()
    assert first.states == []


def test_store_records_and_resets():
    store = BenchmarkStore.get_instance()
    store.reset()
    manager = BenchmarkManager()
    manager.timer_stop("t")
    manager.set_accumulator("n", 4.0)
    store.record_state(manager)
    manager.set_accumulator("n", 6.0)
    store.record_state(manager)
    assert store.states == [{"t": 0.0, "n": 4.0}, {"t": 0.0, "n": 6.0}]
    store.reset()
    assert store.states == []


def test_store_accumulator_overrides_timer_of_same_tag():
    store = BenchmarkStore.get_instance()
    store.reset()
    manager = BenchmarkManager()
    manager.timer_stop("x")
    manager.set_accumulator("x", 9.0)
    store.record_state(manager)
    assert store.states[-1] == {"x": 9.0}
    store.reset()