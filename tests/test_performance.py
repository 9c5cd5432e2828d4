import threading

import pytest

from logworks.performance import (
    MeanReport,
    WorstReport,
    WriteMode,
    bucket_measurements,
    format_buckets,
    mean,
    measure_peak,
    run_mean,
    run_worst,
    write_text_to_file,
)


def test_write_append_concatenates(tmp_path):
    target = tmp_path / "result.txt"
    write_text_to_file(target, "first", WriteMode.APPEND, False)
    write_text_to_file(target, "second", WriteMode.APPEND, False)
    assert target.read_text(encoding="utf-8") == "firstsecond"


def test_write_truncate_replaces(tmp_path):
    target = tmp_path / "result.txt"
    write_text_to_file(target, "old content", WriteMode.APPEND, False)
    write_text_to_file(target, "new", WriteMode.TRUNCATE, False)
    assert target.read_text(encoding="utf-8") == "new"


def test_write_push_out_echoes(tmp_path, capsys):
    write_text_to_file(tmp_path / "a.txt", "hello", WriteMode.APPEND, True)
    assert capsys.readouterr().out == "hello"


def test_write_without_push_out_is_silent(tmp_path, capsys):
    write_text_to_file(tmp_path / "a.txt", "hello", WriteMode.APPEND, False)
    assert capsys.readouterr().out == ""


def test_write_to_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        write_text_to_file(tmp_path / "missing" / "a.txt", "x", WriteMode.APPEND, False)


def test_mean_of_equal_values():
    assert mean([7, 7, 7]) == 7


def test_mean_is_integer_floor():
    values = [1, 2]
    assert mean(values) == sum(values) // len(values)


def test_mean_empty_raises():
    with pytest.raises(ValueError):
        mean([])


def test_measure_peak_calls_each_iteration():
    seen = []
    results = measure_peak(seen.append, 5)
    assert seen == list(range(5))
    assert len(results) == 5
    assert all(value >= 0 for value in results)


def test_run_mean_calls_action_for_every_thread_and_iteration():
    lock = threading.Lock()
    calls = []

    def action(name, count):
        with lock:
            calls.append((name, count))

    report = run_mean(action, 2, 4)
    assert isinstance(report, MeanReport)
    assert len(calls) == 8
    assert {name for name, _ in calls} == {"LOGWORKS_T1", "LOGWORKS_T2"}
    assert sorted(count for name, count in calls if name == "LOGWORKS_T1") == list(range(4))
    assert report.number_of_threads == 2
    assert report.iterations == 4
    assert report.average_us == report.application_time_us // 8


def test_run_mean_report_text():
    report = run_mean(lambda name, count: None, 1, 3)
    text = str(report)
    assert "1*3 log entries took" in text
    assert f"[Application: {report.average_us} us]" in text


@pytest.mark.parametrize("threads,iterations", [(0, 5), (2, 0)])
def test_run_mean_rejects_bad_counts(threads, iterations):
    with pytest.raises(ValueError):
        run_mean(lambda name, count: None, threads, iterations)


def test_run_worst_keeps_every_measurement():
    report = run_worst(lambda name, count: None, 3, 6)
    assert isinstance(report, WorstReport)
    assert [len(results) for results in report.per_thread] == [6, 6, 6]
    assert report.worst_per_thread == [max(r) for r in report.per_thread]
    assert len(report.all_measurements) == 18
    assert report.all_measurements == sorted(report.all_measurements)


def test_run_worst_report_lists_each_thread():
    report = run_worst(lambda name, count: None, 2, 2)
    text = str(report)
    assert "[Application t1 worst took:" in text
    assert "[Application t2 worst took:" in text
    assert "[Application t3" not in text


def test_run_worst_rejects_zero_threads():
    with pytest.raises(ValueError):
        run_worst(lambda name, count: None, 0, 1)


def test_bucket_measurements_invariants():
    values = [2500, 5, 999, 1000, 2999, 40]
    ms_buckets, us_buckets = bucket_measurements(values)
    assert sum(ms_buckets.values()) == len(values)
    assert list(ms_buckets) == sorted(ms_buckets)
    assert sum(us_buckets.values()) == ms_buckets[0]
    assert all(value < 1000 for value in us_buckets)
    assert list(us_buckets) == sorted(us_buckets)


def test_bucket_measurements_pinned():
    ms_buckets, us_buckets = bucket_measurements([5, 5, 1000])
    assert ms_buckets == {0: 2, 1: 1}
    assert us_buckets == {5: 2}


def test_bucket_measurements_empty():
    assert bucket_measurements([]) == ({}, {})


def test_format_buckets_single_bucket_shows_microseconds():
    values = [3, 3, 7]
    text = format_buckets(values)
    ms_buckets, us_buckets = bucket_measurements(values)
    assert "Microsecond bucket measurement" in text
    for us, count in us_buckets.items():
        assert f"{us}\t{count}\n" in text
    for ms, count in ms_buckets.items():
        assert text.endswith(f"{ms}\t, {count}\n")


def test_format_buckets_many_buckets_lists_milliseconds_only():
    values = [10, 1500, 1600, 3200]
    text = format_buckets(values)
    ms_buckets, _ = bucket_measurements(values)
    assert text.startswith("Format:bucket_of_ms, number_of_values_in_bucket")
    assert "Microsecond bucket measurement" not in text
    for ms, count in ms_buckets.items():
        assert f"{ms}\t, {count}\n" in text