# repartovan

A small console simulation of a parcel delivery depot.

One hundred parcels are created at random. Each parcel carries a label with
an identifier, a DNI-style recipient number and a destination given as
latitude and longitude in degrees, minutes and seconds. The destination
places the parcel in one of four delivery zones: NO, NE, SO or SE.

Parcels leave the depot in batches of ten. Each zone has a van that holds
five parcels, loaded like a stack. When a full van gets another parcel, the
van is dispatched: its parcels move to the zone's delivery queue in the order
they come out of the van, and the van is loaded again. After ten batches,
any van that still holds parcels is dispatched as well.

At the end the program shows each zone's delivery queue, how many parcels
each zone received, how many vans it used, and which zone received the most
(ties are settled in the order NO, NE, SE, SO).

## Installation

```
pip install .
```

## Running

```
repartovan
repartovan --seed 7
```

The program asks you to press ENTER before each batch of ten parcels. Any
other input is reported and the prompt is shown again. `--seed` makes the
random parcels reproducible.

## Using it from Python

```python
import random
import sys

from repartovan.package import Package, Zone
from repartovan.simulation import busiest_zone, run

rng = random.Random(7)
parcel = Package.generate(1, rng)
print(parcel.label_text())
print(parcel.zone())

dispatches = run(random.Random(7), read_line=lambda: "", out=sys.stdout)
print(dispatches[Zone.NO].packages_received, dispatches[Zone.NO].vans_used)
print(busiest_zone(dispatches))
```

`run` writes its report to `out` and returns a mapping from each `Zone` to
its `ZoneDispatch`, which holds the zone's van (`van`), its delivery queue
(`delivered`) and the counters `packages_received` and `vans_used`.
`create_packages(count, rng)` builds a queue of numbered random parcels.

`repartovan.package` also offers `generate_id`, `generate_dni`,
`generate_coordinates` and `zone_for` for building labels by hand.

`repartovan.stack.Stack` and `repartovan.queue.Queue` are the van and
delivery-queue containers. They raise `StackFullError`, `StackEmptyError` and
`QueueEmptyError` when used past their limits.

## Tests

```
pip install .[test]
pytest
```