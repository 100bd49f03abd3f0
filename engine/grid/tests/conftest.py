"""
Grid engine test configuration.

Shared record collections. Every fixture returns fresh dicts so identity-keyed
selection tests never see records from another test.
"""

import pytest

NATO = [
    "Alpha", "Bravo", "Charlie", "Delta", "Echo", "Foxtrot", "Golf", "Hotel",
    "India", "Juliett", "Kilo", "Lima", "Mike", "November", "Oscar", "Papa",
    "Quebec", "Romeo", "Sierra", "Tango", "Uniform", "Victor", "Whiskey", "Xray",
    "Yankee",
]


def make_nato_rows(order=None):
    """25 records {"id", "name"}; `order` is a permutation of indices into NATO."""
    indices = order if order is not None else range(len(NATO))
    return [{"id": i + 1, "name": NATO[i]} for i in indices]


@pytest.fixture
def nato_rows():
    """NATO alphabet records, shuffled deterministically (reverse-interleaved)."""
    order = list(range(24, -1, -2)) + list(range(23, -1, -2))
    return make_nato_rows(order)


@pytest.fixture
def staff_rows():
    """Small mixed-type collection with ties and absent values."""
    return [
        {"id": "u1", "name": "Marco Rossi", "role": "chef", "age": 41, "active": True},
        {"id": "u2", "name": "Sarah Chen", "role": "editor", "age": 9, "active": False},
        {"id": "u3", "name": "Pierre Dubois", "role": "chef", "age": 10, "active": True},
        {"id": "u4", "name": "Ana Lopez", "role": "editor", "active": True},
        {"id": "u5", "name": "Kenji Sato", "role": "chef", "age": 2, "active": False},
    ]


@pytest.fixture
def nato_names():
    """The 25 names in alphabetical order."""
    return list(NATO)
