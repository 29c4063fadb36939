# tests/test_ledger_service.py

"""
Unit tests for the ledger arithmetic and audit snapshots.
"""

from datetime import date
from decimal import Decimal

import pytest

from models import Unit, UnitStatus
from services.audit_service import _json_safe, snapshot
from services.exceptions import VersionConflictError
from services.ledger_service import compute_balance
from services.ownership import check_version


@pytest.mark.parametrize(
    "due, paid, expected",
    [
        (Decimal("450000"), Decimal("400000"), Decimal("50000.00")),
        (Decimal("450000"), Decimal("450000"), Decimal("0.00")),
        (Decimal("450000"), Decimal("500000"), Decimal("-50000.00")),
        (Decimal("100.10"), Decimal("0.05"), Decimal("100.05")),
    ],
)
def test_compute_balance(due, paid, expected):
    assert compute_balance(due, paid) == expected


def test_check_version_passes_when_unset_or_equal():
    unit = Unit(unit_number="Unit 1", version=3)

    check_version("unit", unit, None)
    check_version("unit", unit, 3)


def test_check_version_conflict():
    unit = Unit(unit_number="Unit 1", version=3)

    with pytest.raises(VersionConflictError) as excinfo:
        check_version("unit", unit, 2)

    assert excinfo.value.status_code == 409
    assert excinfo.value.expected == 2
    assert excinfo.value.current == 3


def test_json_safe_converts_domain_values():
    value = {
        "status": UnitStatus.OCCUPIED,
        "rent": Decimal("12.50"),
        "day": date(2026, 3, 1),
        "items": (1, Decimal("2")),
    }

    assert _json_safe(value) == {"status": "OCCUPIED", "rent": 12.5, "day": "2026-03-01", "items": [1, 2.0]}


def test_snapshot_lists_columns():
    unit = Unit(id="u1", property_id="p1", unit_number="Unit 1", rent_amount=Decimal("100"), status=UnitStatus.VACANT)

    snap = snapshot(unit)

    assert snap["id"] == "u1"
    assert snap["rent_amount"] == 100.0
    assert snap["status"] == "VACANT"
    assert "deleted_at" in snap
