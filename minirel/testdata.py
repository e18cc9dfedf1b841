"""Sample soap-opera relations used to exercise the loader."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path

_SOAP = struct.Struct("<i28s4sf")
_STAR = struct.Struct("<i20s12si")


@dataclass(frozen=True)
class Soap:
    soapid: int
    sname: str
    network: str
    rating: float


@dataclass(frozen=True)
class Star:
    starid: int
    stname: str
    plays: str
    soapid: int


_SOAPS = [
    (0, "Days of Our Lives", "NBC", 7.02),
    (1, "General Hospital", "ABC", 9.81),
    (2, "Guiding Light", "CBS", 4.02),
    (3, "One Life to Live", "ABC", 2.31),
    (4, "Santa Barbara", "NBC", 6.44),
    (5, "The Young and the Restless", "CBS", 5.50),
    (6, "As the World Turns", "CBS", 7.00),
    (7, "Another World", "NBC", 1.97),
    (8, "All My Children", "ABC", 8.82),
]

_STARS = [
    (0, "Hayes, Kathryn", "Kim", 6),
    (1, "DeFreitas, Scott", "Andy", 6),
    (2, "Grahn, Nancy", "Julia", 4),
    (3, "Linder, Kate", "Esther", 5),
    (4, "Cooper, Jeanne", "Katherine", 5),
    (5, "Ehlers, Beth", "Harley", 2),
    (6, "Novak, John", "Keith", 4),
    (7, "Elliot, Patricia", "Renee", 3),
    (8, "Hutchinson, Fiona", "Gabrielle", 5),
    (9, "Carey, Phil", "Asa", 5),
    (10, "Walker, Nicholas", "Max", 3),
    (11, "Ross, Charlotte", "Eve", 0),
    (12, "Anthony, Eugene", "Stan", 8),
    (13, "Douglas, Jerry", "John", 5),
    (14, "Holbrook, Anna", "Sharlene", 7),
    (15, "Hammer, Jay", "Fletcher", 2),
    (16, "Sloan, Tina", "Lillian", 2),
    (17, "DuClos, Danielle", "Lisa", 3),
    (18, "Tuck, Jessica", "Megan", 3),
    (19, "Ashford, Matthew", "Jack", 0),
    (20, "Novak, John", "Keith", 4),
    (21, "Larson, Jill", "Opal", 8),
    (22, "McKinnon, Mary", "Denise", 7),
    (23, "Barr, Julia", "Brooke", 8),
    (24, "Borlenghi, Matt", "Brian", 8),
    (25, "Hughes, Finola", "Anna", 1),
    (26, "Rogers, Tristan", "Robert", 1),
    (27, "Richardson, Cheryl", "Jenny", 1),
    (28, "Evans, Mary Beth", "Kayla", 0),
]


def soaps() -> list[Soap]:
    """The nine rows of the Soaps relation."""
    return [Soap(*row) for row in _SOAPS]


def stars() -> list[Star]:
    """The twenty-nine rows of the Stars relation."""
    return [Star(*row) for row in _STARS]


def _text(value: str) -> bytes:
    return value.encode("latin-1")


def pack_soap(soap: Soap) -> bytes:
    """Encode a Soap as a 40-byte binary tuple."""
    return _SOAP.pack(soap.soapid, _text(soap.sname), _text(soap.network), soap.rating)


def pack_star(star: Star) -> bytes:
    """Encode a Star as a 40-byte binary tuple."""
    return _STAR.pack(star.starid, _text(star.stname), _text(star.plays), star.soapid)


def write_test_data(directory: str | Path) -> tuple[Path, Path]:
    """Write stars.data and soaps.data into ``directory``; return their paths."""
    directory = Path(directory)
    stars_path = directory / "stars.data"
    soaps_path = directory / "soaps.data"
    stars_path.write_bytes(b"".join(pack_star(s) for s in stars()))
    soaps_path.write_bytes(b"".join(pack_soap(s) for s in soaps()))
    return stars_path, soaps_path