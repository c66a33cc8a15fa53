import pytest

from ossim.models import Process, ProcessResult, Schedule, make_processes


def test_make_processes_numbers_from_one():
    procs = make_processes([0, 1, 2], [5, 3, 1], [2, 1, 3])
    assert [p.pid for p in procs] == [1, 2, 3]
    assert procs[1] == Process(2, 1, 3, 1)


def test_make_processes_default_priority_is_zero():
    procs = make_processes([0, 4], [2, 2])
    assert all(p.priority == 0 for p in procs)


def test_make_processes_length_mismatch():
    with pytest.raises(ValueError):
        make_processes([0, 1], [3])


def test_result_invariants():
    r = ProcessResult(pid=1, arrival=2, burst=3, start=4, completion=9)
    assert r.waiting + r.burst == r.turnaround
    assert r.completion - r.turnaround == r.arrival
    assert r.start - r.response == r.arrival


def test_single_process_averages_match_the_process():
    r = ProcessResult(pid=1, arrival=1, burst=2, start=3, completion=5)
    sched = Schedule([r])
    assert sched.average_waiting() == r.waiting
    assert sched.average_turnaround() == r.turnaround
    assert sched.average_response() == r.response


def test_full_utilization_without_idle():
    sched = Schedule([ProcessResult(1, 0, 4, 0, 4)])
    assert sched.cpu_utilization() == 100.0


def test_throughput_from_earliest_arrival():
    sched = Schedule([ProcessResult(1, 0, 4, 0, 4)])
    assert sched.throughput() == 0.25


def test_idle_lowers_utilization():
    busy = Schedule([ProcessResult(1, 2, 4, 2, 6)], idle=0)
    lazy = Schedule([ProcessResult(1, 2, 4, 2, 6)], idle=2)
    assert lazy.cpu_utilization() < busy.cpu_utilization()


def test_by_pid_sorts():
    sched = Schedule(
        [ProcessResult(3, 0, 1, 0, 1), ProcessResult(1, 0, 1, 1, 2), ProcessResult(2, 0, 1, 2, 3)]
    )
    assert [r.pid for r in sched.by_pid()] == [1, 2, 3]


def test_table_has_header_and_one_row_per_process():
    sched = Schedule([ProcessResult(2, 0, 1, 0, 1), ProcessResult(1, 0, 1, 1, 2)])
    lines = sched.table().splitlines()
    assert lines[0].split("\t") == ["Pid", "AT", "BT", "ST", "CT", "TAT", "WT", "RT"]
    assert len(lines) == 3
    assert lines[1].split("\t")[0] == "1"


def test_empty_schedule_raises():
    sched = Schedule([])
    with pytest.raises(ValueError):
        sched.average_waiting()
    with pytest.raises(ValueError):
        sched.throughput()