import pytest

from ossim.models import Process, make_processes
from ossim.nonpreemptive import fcfs
from ossim.priority import preemptive_priority


def _busy(schedule):
    return schedule.end - schedule.idle


def test_higher_number_preempts_when_higher_is_better():
    procs = make_processes([0, 1], [5, 2], [1, 3])
    schedule = preemptive_priority(procs, higher_is_better=True)
    assert [r.pid for r in schedule.results] == [2, 1]
    second = schedule.by_pid()[1]
    assert second.completion == 3
    assert second.response == 0


def test_lower_number_wins_by_default():
    procs = make_processes([0, 1], [5, 2], [1, 3])
    schedule = preemptive_priority(procs)
    assert [r.pid for r in schedule.results] == [1, 2]
    first = schedule.by_pid()[0]
    assert first.waiting == 0


def test_equal_priorities_match_first_come_first_served():
    procs = make_processes([0, 2, 3, 7], [3, 4, 1, 2], [2, 2, 2, 2])
    schedule = preemptive_priority(procs)
    expected = fcfs(procs)
    assert [r.completion for r in schedule.by_pid()] == [
        r.completion for r in expected.by_pid()
    ]
    assert schedule.idle == expected.idle


def test_tie_goes_to_earlier_arrival():
    procs = [Process(1, 2, 3, 5), Process(2, 0, 3, 5)]
    schedule = preemptive_priority(procs, higher_is_better=True)
    assert [r.pid for r in schedule.results] == [2, 1]


def test_idle_gap_is_counted():
    procs = make_processes([0, 5], [2, 1], [1, 1])
    schedule = preemptive_priority(procs)
    assert schedule.idle == 3
    assert _busy(schedule) == sum(p.burst for p in procs)


@pytest.mark.parametrize("higher", [True, False])
def test_invariants_hold(higher):
    procs = make_processes([0, 1, 2, 4, 6], [4, 3, 1, 5, 2], [3, 1, 4, 2, 5])
    schedule = preemptive_priority(procs, higher_is_better=higher)
    assert sorted(r.pid for r in schedule.results) == [1, 2, 3, 4, 5]
    assert _busy(schedule) == sum(p.burst for p in procs)
    for r in schedule.results:
        assert r.start >= r.arrival
        assert r.waiting >= 0
        assert r.response <= r.waiting
    completions = [r.completion for r in schedule.results]
    assert completions == sorted(completions)


def test_empty_input_is_rejected():
    with pytest.raises(ValueError):
        preemptive_priority([])


def test_zero_burst_is_rejected():
    with pytest.raises(ValueError):
        preemptive_priority([Process(1, 0, 0, 1)])