import random
import threading

import pytest

from annosum import pipeline
from annosum.aggregate import AggregateResult
from annosum.errors import NumeralConversionError
from annosum.extraction.tokenizer import Category
from annosum.pipeline import aggregate_lines, iter_chunks, scan_line


def _corpus() -> list[str]:
    rng = random.Random(7)
    templates = [
        "Skill [{a}] flaw [-{b}] costs ${a}K and weighs {b} lbs.",
        "Ammo {b} oz. at ${a}.50, bonus <{a}> {{-{b}}} |{a}|",
        "Armor {a} kg. plus {b},000 g. for $1,{b}00",
        "plain text without annotations",
        "",
    ]
    return [
        rng.choice(templates).format(a=rng.randint(1, 999), b=rng.randint(1, 99))
        for _ in range(500)
    ]


def _assert_close(left: AggregateResult, right: AggregateResult) -> None:
    for category in Category:
        assert getattr(left, category.value) == pytest.approx(getattr(right, category.value))


def test_scan_line_scenario(scenario_line: str) -> None:
    result = scan_line(scenario_line)
    assert result.points == 10.0
    assert result.disads == -5.0
    assert result.total_points == 5.0
    assert result.money == 200.0
    assert result.weight == 3.0
    assert round(result.weight_kg, 2) == 1.36
    assert (result.angle, result.curly, result.pipe) == (90.0, 45.0, 7.0)


def test_empty_input_yields_zero() -> None:
    assert aggregate_lines([]) == AggregateResult()
    assert aggregate_lines(["", "nothing to see"]) == AggregateResult()
    assert aggregate_lines([], workers=4) == AggregateResult()


def test_parallel_matches_sequential() -> None:
    lines = _corpus()
    sequential = aggregate_lines(lines)
    for workers, chunk_size in [(2, 1), (4, 7), (8, 64), (3, 1000)]:
        _assert_close(aggregate_lines(iter(lines), workers=workers, chunk_size=chunk_size), sequential)


def test_line_order_does_not_matter() -> None:
    lines = _corpus()
    shuffled = list(lines)
    random.Random(11).shuffle(shuffled)
    _assert_close(aggregate_lines(shuffled, workers=3, chunk_size=16), aggregate_lines(lines))


def test_each_annotation_counted_once() -> None:
    result = aggregate_lines(["[1] [1]", "[1]", "<2> <2>"])
    assert result.points == 3.0
    assert result.angle == 4.0


@pytest.mark.parametrize("workers", [1, 4])
def test_conversion_error_aborts_run(workers: int) -> None:
    lines = ["[1]"] * 50 + ["[" + "9" * 400 + "]"] + ["[1]"] * 50
    with pytest.raises(NumeralConversionError):
        aggregate_lines(lines, workers=workers, chunk_size=10)


def test_iter_chunks() -> None:
    assert list(iter_chunks(["a", "b", "c"], 2)) == [["a", "b"], ["c"]]
    assert list(iter_chunks([], 3)) == []
    with pytest.raises(ValueError):
        list(iter_chunks(["a"], 0))


def test_non_ascii_digits_are_not_counted() -> None:
    assert scan_line("[٣] [５] [2]") == AggregateResult(points=2.0)


def test_parallel_scan_streams_input(monkeypatch) -> None:
    workers = 2
    completed = []
    lock = threading.Lock()
    original = pipeline.scan_chunk

    def tracking_chunk(lines):
        result = original(lines)
        with lock:
            completed.append(1)
        return result

    monkeypatch.setattr(pipeline, "scan_chunk", tracking_chunk)
    in_flight = []

    def lines():
        for index in range(200):
            with lock:
                in_flight.append(index - len(completed))
            yield "[1]"

    result = aggregate_lines(lines(), workers=workers, chunk_size=1)
    assert result.points == 200.0
    assert max(in_flight) <= workers * 2
