"""
Fallback Dataset
================

Built-in sightings used only when both the primary and the alternate remote
endpoints fail. Latin names come from the species lookup table.
"""

from typing import Any, Dict, List

from ticksight.core.constants import get_latin_name
from ticksight.models.sighting import Sighting


def _record(
    sighting_id: str,
    date: str,
    location: str,
    species: str,
    lat: float,
    lng: float,
) -> Dict[str, Any]:
    return {
        "id": sighting_id,
        "date": date,
        "location": location,
        "species": species,
        "latinName": get_latin_name(species),
        "lat": lat,
        "lng": lng,
    }


FALLBACK_RECORDS: List[Dict[str, Any]] = [
    _record("01", "2024-11-15T14:30:00", "London", "Fox/badger tick", 51.5074, -0.1278),
    _record("02", "2024-11-10T09:15:00", "London", "Southern rodent tick", 51.5155, -0.0922),
    _record("03", "2024-10-28T16:45:00", "London", "Marsh tick", 51.4893, -0.1440),
    _record("51", "2024-11-16T10:30:00", "London", "Tree-hole tick", 51.5200, -0.1500),
    _record("04", "2024-11-12T11:20:00", "Manchester", "Marsh tick", 53.4808, -2.2426),
    _record("05", "2024-10-05T13:00:00", "Manchester", "Fox/badger tick", 53.4630, -2.2910),
    _record("06", "2024-09-18T10:30:00", "Manchester", "Passerine tick", 53.5070, -2.2280),
    _record("52", "2024-10-20T14:15:00", "Manchester", "Tree-hole tick", 53.4900, -2.2500),
    _record("07", "2024-11-08T08:45:00", "Glasgow", "Passerine tick", 55.8642, -4.2518),
    _record("08", "2024-10-22T15:00:00", "Glasgow", "Marsh tick", 55.8555, -4.2407),
    _record("09", "2024-09-30T12:15:00", "Glasgow", "Southern rodent tick", 55.8730, -4.2620),
    _record("53", "2024-09-22T11:45:00", "Glasgow", "Tree-hole tick", 55.8700, -4.2600),
    _record("10", "2024-11-14T10:00:00", "Birmingham", "Fox/badger tick", 52.4862, -1.8904),
    _record("11", "2024-10-19T14:30:00", "Birmingham", "Southern rodent tick", 52.4800, -1.9025),
    _record("12", "2024-09-25T09:45:00", "Birmingham", "Marsh tick", 52.4920, -1.8790),
    _record("13", "2024-11-11T13:20:00", "Liverpool", "Southern rodent tick", 53.4084, -2.9916),
    _record("14", "2024-10-16T11:00:00", "Liverpool", "Passerine tick", 53.4150, -2.9770),
    _record("15", "2024-09-12T16:30:00", "Liverpool", "Fox/badger tick", 53.4020, -3.0050),
    _record("16", "2024-11-13T10:45:00", "Edinburgh", "Marsh tick", 55.9533, -3.1883),
    _record("17", "2024-10-20T15:15:00", "Edinburgh", "Fox/badger tick", 55.9480, -3.2000),
    _record("18", "2024-09-08T12:00:00", "Edinburgh", "Southern rodent tick", 55.9600, -3.1750),
    _record("54", "2024-08-15T13:30:00", "Edinburgh", "Tree-hole tick", 55.9550, -3.1900),
    _record("19", "2024-11-09T09:30:00", "Leeds", "Passerine tick", 53.8008, -1.5491),
    _record("20", "2024-10-14T14:00:00", "Leeds", "Marsh tick", 53.7950, -1.5600),
    _record("21", "2024-09-20T11:45:00", "Leeds", "Fox/badger tick", 53.8070, -1.5380),
    _record("22", "2024-11-07T12:30:00", "Bristol", "Southern rodent tick", 51.4545, -2.5879),
    _record("23", "2024-10-11T10:15:00", "Bristol", "Fox/badger tick", 51.4600, -2.5950),
    _record("24", "2024-09-17T15:00:00", "Bristol", "Marsh tick", 51.4490, -2.5800),
    _record("55", "2024-07-10T16:00:00", "Bristol", "Tree-hole tick", 51.4520, -2.5900),
    _record("25", "2024-11-06T11:00:00", "Sheffield", "Fox/badger tick", 53.3811, -1.4701),
    _record("26", "2024-10-10T13:45:00", "Sheffield", "Marsh tick", 53.3750, -1.4850),
    _record("27", "2024-09-15T09:00:00", "Sheffield", "Passerine tick", 53.3880, -1.4550),
    _record("28", "2024-11-05T14:20:00", "Newcastle", "Marsh tick", 54.9783, -1.6178),
    _record("29", "2024-10-09T12:00:00", "Newcastle", "Southern rodent tick", 54.9720, -1.6300),
    _record("30", "2024-09-14T10:30:00", "Newcastle", "Fox/badger tick", 54.9850, -1.6050),
    _record("31", "2024-11-04T15:30:00", "Cardiff", "Passerine tick", 51.4816, -3.1791),
    _record("32", "2024-10-08T11:30:00", "Cardiff", "Marsh tick", 51.4750, -3.1900),
    _record("33", "2024-09-13T14:15:00", "Cardiff", "Fox/badger tick", 51.4880, -3.1680),
    _record("34", "2024-11-03T10:15:00", "Nottingham", "Southern rodent tick", 52.9548, -1.1581),
    _record("35", "2024-10-07T13:00:00", "Nottingham", "Fox/badger tick", 52.9600, -1.1700),
    _record("36", "2024-09-11T11:30:00", "Nottingham", "Marsh tick", 52.9490, -1.1460),
    _record("37", "2024-11-02T12:45:00", "Southampton", "Marsh tick", 50.9097, -1.4044),
    _record("38", "2024-10-06T09:30:00", "Southampton", "Passerine tick", 50.9150, -1.4150),
    _record("39", "2024-09-10T15:45:00", "Southampton", "Southern rodent tick", 50.9040, -1.3930),
    _record("40", "2024-11-01T11:15:00", "Leicester", "Fox/badger tick", 52.6369, -1.1398),
    _record("41", "2024-10-05T14:45:00", "Leicester", "Marsh tick", 52.6420, -1.1500),
    _record("42", "2024-09-09T10:00:00", "Leicester", "Southern rodent tick", 52.6310, -1.1290),
    _record("43", "2023-06-15T12:00:00", "Oxford", "Marsh tick", 51.7520, -1.2577),
    _record("44", "2023-07-20T14:30:00", "Cambridge", "Passerine tick", 52.2053, 0.1218),
    _record("45", "2022-08-10T11:15:00", "Brighton", "Southern rodent tick", 50.8225, -0.1372),
    _record("46", "2022-09-05T13:45:00", "Plymouth", "Fox/badger tick", 50.3755, -4.1427),
    _record("47", "2021-05-22T10:30:00", "Aberdeen", "Marsh tick", 57.1497, -2.0943),
    _record("48", "2021-06-18T15:00:00", "Inverness", "Fox/badger tick", 57.4778, -4.2247),
    _record("49", "2020-07-12T12:30:00", "York", "Southern rodent tick", 53.9591, -1.0815),
    _record("50", "2020-08-25T14:00:00", "Bath", "Passerine tick", 51.3758, -2.3599),
]


def fallback_sightings() -> List[Sighting]:
    """Fresh Sighting objects for the fallback dataset."""
    return [Sighting.from_api_response(record) for record in FALLBACK_RECORDS]
