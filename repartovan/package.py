"""Delivery packages: labels, random generation and zone assignment."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

LETTERS = "TRWAGMYFPDXBNJZSQVHLCKE"

LATITUDE_DEGREES = 40
LONGITUDE_DEGREES = -3


class Zone(Enum):
    """Delivery zones, numbered as the dispatcher expects."""

    NO = 1
    NE = 2
    SO = 3
    SE = 4


@dataclass(frozen=True)
class Coordinates:
    """A position in degrees, minutes and seconds."""

    lat_degrees: int
    lat_minutes: int
    lat_seconds: int
    lon_degrees: int
    lon_minutes: int
    lon_seconds: int


@dataclass(frozen=True)
class Label:
    """The shipping label attached to a package."""

    id: str
    dni: str
    coordinates: Coordinates


def generate_dni(rng: random.Random) -> str:
    """Return a random national identity number with its check letter."""
    dni = 9088570
    weight = 10_000_000
    for _ in range(8):
        dni += rng.randrange(9) * weight
        weight //= 10
    return f"{dni}{LETTERS[dni % 23]}"


def generate_id(n: int, rng: random.Random) -> str:
    """Return a package identifier ending with the zero-padded sequence number."""
    prefix = 10 + rng.randrange(90)
    letter = LETTERS[rng.randrange(23)]
    if 0 <= n < 10:
        padding = "000"
    elif 10 <= n < 100:
        padding = "00"
    else:
        padding = "0"
    return f"{prefix}{letter}{padding}{n}"


def generate_coordinates(rng: random.Random) -> Coordinates:
    """Return random coordinates inside the delivery area."""
    lat_minutes = 46 + rng.randrange(6)
    if lat_minutes == 46:
        lat_seconds = 5 + rng.randrange(56)
    elif lat_minutes == 51:
        lat_seconds = rng.randrange(7)
    else:
        lat_seconds = rng.randrange(61)

    lon_minutes = 32 + rng.randrange(10)
    if lon_minutes == 32:
        lon_seconds = 2 + rng.randrange(59)
    elif lon_minutes == 41:
        lon_seconds = rng.randrange(2)
    else:
        lon_seconds = rng.randrange(61)

    return Coordinates(
        LATITUDE_DEGREES,
        lat_minutes,
        lat_seconds,
        LONGITUDE_DEGREES,
        lon_minutes,
        lon_seconds,
    )


def zone_for(coordinates: Coordinates) -> Zone:
    """Return the delivery zone that contains the given coordinates."""
    north = coordinates.lat_minutes > 48 or (
        coordinates.lat_minutes == 48 and coordinates.lat_seconds >= 36
    )
    west = coordinates.lon_minutes > 37 or (
        coordinates.lon_minutes == 37 and coordinates.lon_seconds >= 3
    )
    if north:
        return Zone.NO if west else Zone.NE
    return Zone.SO if west else Zone.SE


@dataclass(frozen=True)
class Package:
    """A package carrying a label."""

    label: Label

    @classmethod
    def generate(cls, n: int, rng: random.Random | None = None) -> Package:
        """Create a package with sequence number ``n`` and random label data."""
        rng = rng or random.Random()
        dni = generate_dni(rng)
        coordinates = generate_coordinates(rng)
        package_id = generate_id(n, rng)
        return cls(Label(package_id, dni, coordinates))

    @property
    def id(self) -> str:
        return self.label.id

    def zone(self) -> Zone:
        """Return the zone this package is delivered to."""
        return zone_for(self.label.coordinates)

    def label_text(self) -> str:
        """Return the printable label, one field per line."""
        c = self.label.coordinates
        return "\n".join(
            [
                "Paquete:",
                f"ID: {self.label.id}",
                f"Con latitud: {c.lat_degrees} grados {c.lat_minutes}' {c.lat_seconds}\" ",
                f"Con longitud: {c.lon_degrees} grados {c.lon_minutes}' {c.lon_seconds}\" ",
                f"DNI: {self.label.dni}",
            ]
        )