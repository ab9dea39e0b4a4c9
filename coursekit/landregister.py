"""A land register indexed by address, by region and id, and by owner."""

from __future__ import annotations

from dataclasses import dataclass

from coursekit.sortedvec import SortedVec


def _fold(text: str) -> str:
    """Lower-case ASCII letters only."""
    return "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in text)


def _cmp_pair(a: tuple, b: tuple) -> int:
    return (a > b) - (a < b)


@dataclass(frozen=True)
class Parcel:
    """A snapshot of one registered parcel."""

    city: str
    addr: str
    region: str
    parcel_id: int
    owner: str


@dataclass(eq=False)
class _Record:
    owner: str
    counter: int
    parcel_id: int
    city: str
    addr: str
    region: str

    def snapshot(self) -> Parcel:
        return Parcel(self.city, self.addr, self.region, self.parcel_id, self.owner)


def _by_region_id(a: _Record, b: _Record) -> int:
    return _cmp_pair((a.region, a.parcel_id), (b.region, b.parcel_id))


def _by_city_addr(a: _Record, b: _Record) -> int:
    return _cmp_pair((a.city, a.addr), (b.city, b.addr))


def _by_owner_counter(a: _Record, b: _Record) -> int:
    return _cmp_pair((_fold(a.owner), a.counter), (_fold(b.owner), b.counter))


class LandRegister:
    """Parcels keyed uniquely by (city, addr) and by (region, id).

    Owners are matched case-insensitively; parcels of one owner are listed in
    the order they were acquired.
    """

    def __init__(self) -> None:
        self._counter = 0
        self._region_id: SortedVec[_Record] = SortedVec(_by_region_id)
        self._city_addr: SortedVec[_Record] = SortedVec(_by_city_addr)
        self._owner_counter: SortedVec[_Record] = SortedVec(_by_owner_counter)

    @staticmethod
    def _address_probe(city: str, addr: str) -> _Record:
        return _Record("", 0, 0, city, addr, "")

    @staticmethod
    def _region_probe(region: str, parcel_id: int) -> _Record:
        return _Record("", 0, parcel_id, "", "", region)

    def _next_counter(self) -> int:
        value = self._counter
        self._counter += 1
        return value

    def add(self, city: str, addr: str, region: str, parcel_id: int) -> bool:
        """Register a parcel with no owner; False if either key is taken."""
        record = _Record("", self._counter, parcel_id, city, addr, region)
        by_region = self._region_id.find(record)
        by_address = self._city_addr.find(record)
        if by_region.found or by_address.found:
            return False
        self._region_id.insert_at(by_region, record)
        self._city_addr.insert_at(by_address, record)
        self._owner_counter.insert(record)
        self._counter += 1
        return True

    def _drop(self, record: _Record) -> None:
        self._region_id.remove(record)
        self._city_addr.remove(record)
        self._owner_counter.remove(record)

    def delete_by_address(self, city: str, addr: str) -> bool:
        """Remove the parcel at ``city``/``addr``; False if there is none."""
        position = self._city_addr.find(self._address_probe(city, addr))
        if not position.found:
            return False
        self._drop(self._city_addr[position.index])
        return True

    def delete_by_region(self, region: str, parcel_id: int) -> bool:
        """Remove the parcel ``parcel_id`` in ``region``; False if there is none."""
        position = self._region_id.find(self._region_probe(region, parcel_id))
        if not position.found:
            return False
        self._drop(self._region_id[position.index])
        return True

    def _lookup(self, index: SortedVec[_Record], probe: _Record) -> _Record | None:
        position = index.find(probe)
        return index[position.index] if position.found else None

    def owner_by_address(self, city: str, addr: str) -> str | None:
        """Owner of the parcel at ``city``/``addr``, or None if not registered."""
        record = self._lookup(self._city_addr, self._address_probe(city, addr))
        return None if record is None else record.owner

    def owner_by_region(self, region: str, parcel_id: int) -> str | None:
        """Owner of parcel ``parcel_id`` in ``region``, or None if not registered."""
        record = self._lookup(self._region_id, self._region_probe(region, parcel_id))
        return None if record is None else record.owner

    def _set_owner(self, record: _Record | None, owner: str) -> bool:
        if record is None or record.owner == owner:
            return False
        self._owner_counter.remove(record)
        record.owner = owner
        record.counter = self._next_counter()
        self._owner_counter.insert(record)
        return True

    def new_owner_by_address(self, city: str, addr: str, owner: str) -> bool:
        """Transfer the parcel at ``city``/``addr``; False if missing or unchanged."""
        record = self._lookup(self._city_addr, self._address_probe(city, addr))
        return self._set_owner(record, owner)

    def new_owner_by_region(self, region: str, parcel_id: int, owner: str) -> bool:
        """Transfer parcel ``parcel_id`` in ``region``; False if missing or unchanged."""
        record = self._lookup(self._region_id, self._region_probe(region, parcel_id))
        return self._set_owner(record, owner)

    def count(self, owner: str) -> int:
        """Number of parcels held by ``owner`` (case-insensitive)."""
        return len(self._owner_range(owner))

    def list_by_addr(self) -> list[Parcel]:
        """All parcels ordered by city, then address."""
        return [record.snapshot() for record in self._city_addr]

    def _owner_range(self, owner: str) -> range:
        return self._owner_counter.find_range_by_key(
            _fold(owner), lambda record: _fold(record.owner)
        )

    def list_by_owner(self, owner: str) -> list[Parcel]:
        """Parcels of ``owner`` (case-insensitive) in order of acquisition."""
        return [self._owner_counter[i].snapshot() for i in self._owner_range(owner)]