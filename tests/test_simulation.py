import io
import random

import pytest

from repartovan.package import Package, Zone
from repartovan.simulation import (
    ZoneDispatch,
    busiest_zone,
    create_packages,
    run,
)


def _always_enter():
    return ""


def test_create_packages_numbered_in_order():
    queue = create_packages(12, random.Random(2))
    assert len(queue) == 12
    numbers = [int(p.id[3:]) for p in queue]
    assert numbers == list(range(1, 13))


def test_receive_sends_full_van():
    rng = random.Random(8)
    dispatch = ZoneDispatch(Zone.NO)
    out = io.StringIO()
    packages = [Package.generate(n, rng) for n in range(1, 7)]
    for p in packages:
        dispatch.receive(p, out)
    assert dispatch.packages_received == 6
    assert dispatch.vans_used == 1
    assert list(dispatch.delivered) == packages[4::-1]
    assert list(dispatch.van) == [packages[5]]
    assert "La furgoneta de la zona NO llena." in out.getvalue()


def test_flush_empties_van():
    rng = random.Random(9)
    dispatch = ZoneDispatch(Zone.SE)
    for n in range(1, 3):
        dispatch.receive(Package.generate(n, rng), io.StringIO())
    assert dispatch.flush() is True
    assert dispatch.van.is_empty()
    assert len(dispatch.delivered) == 2
    assert dispatch.vans_used == 1
    assert dispatch.flush() is False
    assert dispatch.vans_used == 1


def _with_counts(no, ne, so, se):
    result = {}
    for zone, count in zip((Zone.NO, Zone.NE, Zone.SO, Zone.SE), (no, ne, so, se)):
        d = ZoneDispatch(zone)
        d.packages_received = count
        result[zone] = d
    return result


@pytest.mark.parametrize(
    "counts, expected",
    [
        ((5, 5, 5, 5), Zone.NO),
        ((1, 5, 5, 5), Zone.NE),
        ((1, 2, 7, 7), Zone.SE),
        ((1, 2, 9, 3), Zone.SO),
    ],
)
def test_busiest_zone_tie_order(counts, expected):
    assert busiest_zone(_with_counts(*counts)) is expected


def test_run_dispatches_every_package():
    out = io.StringIO()
    dispatches = run(random.Random(1), _always_enter, out)
    assert sum(d.packages_received for d in dispatches.values()) == 100
    assert sum(len(d.delivered) for d in dispatches.values()) == 100
    for d in dispatches.values():
        assert d.van.is_empty()
        assert len(d.delivered) == d.packages_received
        assert d.vans_used == -(-d.packages_received // 5)
    text = out.getvalue()
    busiest = busiest_zone(dispatches)
    assert f"La zona que mas paquetes ha recibido es la zona {busiest.name}." in text
    assert text.count("Si se ha pulsado ENTER.") == 10


def test_run_ignores_non_empty_lines():
    lines = iter(["x", "abc"] + [""] * 10)
    out = io.StringIO()
    run(random.Random(3), lambda: next(lines), out)
    text = out.getvalue()
    assert text.count("No se ha pulsado ENTER.") == 2
    assert text.count("Pulse ENTER para mandar 10 paquetes a repartir.") == 12


def test_run_is_reproducible():
    first, second = io.StringIO(), io.StringIO()
    run(random.Random(5), _always_enter, first)
    run(random.Random(5), _always_enter, second)
    assert first.getvalue() == second.getvalue()