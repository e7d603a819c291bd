"""Interactive delivery simulation: packages are sorted into vans by zone."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TextIO

from repartovan.package import Package, Zone
from repartovan.queue import Queue
from repartovan.stack import Stack

TOTAL_PACKAGES = 100
BATCH_SIZE = 10
ROUNDS = 10


@dataclass
class ZoneDispatch:
    """The van being loaded for a zone and the packages already sent out."""

    zone: Zone
    van: Stack = field(default_factory=Stack)
    delivered: Queue = field(default_factory=Queue)
    packages_received: int = 0
    vans_used: int = 0

    def receive(self, package: Package, out: TextIO) -> None:
        """Load a package, sending the van out first if it is full."""
        if self.van.is_full():
            out.write(
                f"La furgoneta de la zona {self.zone.name} llena. Contiene los paquetes:\n"
            )
            out.write(self.van.describe())
            out.write("Se va a proceder a repartir estos paquetes.\n\n")
            while not self.van.is_empty():
                self.delivered.insert(self.van.pop())
            self.vans_used += 1
        self.van.push(package)
        self.packages_received += 1

    def flush(self) -> bool:
        """Send out a partly loaded van; return whether one was sent."""
        if self.van.is_empty():
            return False
        while not self.van.is_empty():
            self.delivered.insert(self.van.pop())
        self.vans_used += 1
        return True


def create_packages(count: int, rng: random.Random) -> Queue:
    """Return a queue of ``count`` random packages numbered from 1."""
    queue = Queue()
    for n in range(1, count + 1):
        queue.insert(Package.generate(n, rng))
    return queue


def busiest_zone(dispatches: Mapping[Zone, ZoneDispatch]) -> Zone:
    """Return the zone that received most packages; ties go NO, NE, SE, SO."""
    most = max(d.packages_received for d in dispatches.values())
    for zone in (Zone.NO, Zone.NE, Zone.SE, Zone.SO):
        if zone in dispatches and dispatches[zone].packages_received >= most:
            return zone
    raise ValueError("no zones given")


def run(
    rng: random.Random,
    read_line: Callable[[], str],
    out: TextIO,
) -> dict[Zone, ZoneDispatch]:
    """Run the simulation, writing the report to ``out``."""
    out.write("Creando paquetes aleatorios...\n")
    pending = create_packages(TOTAL_PACKAGES, rng)
    out.write(pending.describe())
    out.write("Creacion de paquetes terminada.\n\n")

    dispatches = {zone: ZoneDispatch(zone) for zone in Zone}

    rounds = 0
    while rounds < ROUNDS:
        out.write("Pulse ENTER para mandar 10 paquetes a repartir.\n")
        if read_line() == "":
            out.write("Si se ha pulsado ENTER.\n\n")
            for _ in range(BATCH_SIZE):
                package = pending.remove()
                dispatches[package.zone()].receive(package, out)
            rounds += 1
        else:
            out.write("No se ha pulsado ENTER.\n")

    for dispatch in dispatches.values():
        dispatch.flush()

    out.write("Todos los paquetes procesados.\n\n")

    for zone in Zone:
        out.write(f"Se va a mostrar la cola {zone.name}.\n")
        out.write(dispatches[zone].delivered.describe())
        out.write("\n")

    for zone in Zone:
        d = dispatches[zone]
        out.write(
            f"La zona {zone.name} ha recibido {d.packages_received} paquetes "
            f"y se han utilizado {d.vans_used} furgonetas.\n"
        )

    out.write(
        f"La zona que mas paquetes ha recibido es la zona {busiest_zone(dispatches).name}.\n"
    )
    out.write("\n")
    return dispatches


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Delivery van simulation.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    def read_line() -> str:
        return sys.stdin.readline().rstrip("\n")

    run(random.Random(args.seed), read_line, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())