import pytest

from dsakit.greedy import (
    Item,
    Job,
    fractional_knapsack,
    job_sequencing,
    optimal_merge_cost,
)

ITEMS = [Item(100, 10), Item(280, 40), Item(120, 20), Item(120, 24)]

JOBS = [
    Job("a", 20, 2),
    Job("b", 15, 2),
    Job("c", 10, 1),
    Job("d", 5, 3),
    Job("e", 1, 3),
]

FILES = [5, 10, 20, 30, 30]


def test_fractional_knapsack_worked_example():
    assert fractional_knapsack(ITEMS, 60) == pytest.approx(440)


def test_knapsack_large_capacity_takes_everything():
    total_weight = sum(item.weight for item in ITEMS)
    total_profit = sum(item.profit for item in ITEMS)
    assert fractional_knapsack(ITEMS, total_weight + 5) == pytest.approx(total_profit)


def test_knapsack_zero_capacity():
    assert fractional_knapsack(ITEMS, 0) == 0


def test_knapsack_takes_best_ratio_first():
    best = max(ITEMS, key=lambda item: item.ratio)
    assert fractional_knapsack(ITEMS, best.weight) == pytest.approx(best.profit)
    assert fractional_knapsack(ITEMS, best.weight / 2) == pytest.approx(
        best.profit / 2
    )


def test_knapsack_is_monotone_in_capacity():
    profits = [fractional_knapsack(ITEMS, c) for c in range(0, 100, 7)]
    assert profits == sorted(profits)


def test_knapsack_rejects_bad_input():
    with pytest.raises(ValueError):
        fractional_knapsack(ITEMS, -1)
    with pytest.raises(ValueError):
        fractional_knapsack([Item(5, 0)], 10)


def test_job_sequencing_worked_example():
    assert [job.id for job in job_sequencing(JOBS)] == ["b", "a", "d"]


def test_job_sequencing_respects_deadlines():
    schedule = job_sequencing(JOBS)
    for slot, job in enumerate(schedule):
        assert job.deadline >= slot + 1
    assert len({job.id for job in schedule}) == len(schedule)


def test_job_sequencing_keeps_all_when_deadlines_allow():
    jobs = [Job(i, i * 3, len(FILES)) for i in range(len(FILES))]
    assert sorted(job.id for job in job_sequencing(jobs)) == [j.id for j in jobs]


def test_job_sequencing_empty():
    assert job_sequencing([]) == []


def test_optimal_merge_worked_example():
    assert optimal_merge_cost(FILES) == 205


def test_optimal_merge_trivial_cases():
    assert optimal_merge_cost([]) == 0
    assert optimal_merge_cost([FILES[0]]) == 0
    assert optimal_merge_cost(FILES[:2]) == FILES[0] + FILES[1]


def test_optimal_merge_ignores_order():
    assert optimal_merge_cost(reversed(FILES)) == optimal_merge_cost(FILES)