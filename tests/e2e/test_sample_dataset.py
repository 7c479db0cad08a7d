"""
E2E tests billing the bundled sample dataset (data/data.json).

Expected documents are the reference outputs for that dataset:
- rentals: ledger of each of the 3 rentals
- rental_modifications: ledger delta of the 2 modifications
"""

import json
import pytest
from pathlib import Path
from carshare_billing.cli.main import main

SAMPLE_DATASET = Path(__file__).resolve().parents[2] / "data" / "data.json"


EXPECTED_RENTALS = {
    "rentals": [
        {
            "id": 1,
            "actions": [
                {"who": "driver", "type": "debit", "amount": 3400},
                {"who": "owner", "type": "credit", "amount": 2100},
                {"who": "insurance", "type": "credit", "amount": 450},
                {"who": "assistance", "type": "credit", "amount": 100},
                {"who": "drivy", "type": "credit", "amount": 750},
            ],
        },
        {
            "id": 2,
            "actions": [
                {"who": "driver", "type": "debit", "amount": 6800},
                {"who": "owner", "type": "credit", "amount": 4760},
                {"who": "insurance", "type": "credit", "amount": 1020},
                {"who": "assistance", "type": "credit", "amount": 200},
                {"who": "drivy", "type": "credit", "amount": 820},
            ],
        },
        {
            "id": 3,
            "actions": [
                {"who": "driver", "type": "debit", "amount": 32600},
                {"who": "owner", "type": "credit", "amount": 19460},
                {"who": "insurance", "type": "credit", "amount": 4170},
                {"who": "assistance", "type": "credit", "amount": 1200},
                {"who": "drivy", "type": "credit", "amount": 7770},
            ],
        },
    ]
}

EXPECTED_MODIFICATIONS = {
    "rental_modifications": [
        {
            "id": 1,
            "rental_id": 1,
            "actions": [
                {"who": "driver", "type": "debit", "amount": 4900},
                {"who": "owner", "type": "credit", "amount": 2870},
                {"who": "insurance", "type": "credit", "amount": 615},
                {"who": "assistance", "type": "credit", "amount": 200},
                {"who": "drivy", "type": "credit", "amount": 1215},
            ],
        },
        {
            "id": 2,
            "rental_id": 3,
            "actions": [
                {"who": "driver", "type": "credit", "amount": 1400},
                {"who": "owner", "type": "debit", "amount": 700},
                {"who": "insurance", "type": "debit", "amount": 150},
                {"who": "assistance", "type": "debit", "amount": 100},
                {"who": "drivy", "type": "debit", "amount": 450},
            ],
        },
    ]
}


pytestmark = pytest.mark.usefixtures("restore_root_logger")


@pytest.mark.integration
def test_sample_rentals(tmp_path):
    """Sample dataset: full rentals output document"""
    output = tmp_path / "output.json"

    assert main(["rentals", str(SAMPLE_DATASET), "-o", str(output)]) == 0
    assert json.loads(output.read_text(encoding="utf-8")) == EXPECTED_RENTALS


@pytest.mark.integration
def test_sample_modifications(tmp_path):
    """Sample dataset: full rental modifications output document"""
    output = tmp_path / "output.json"

    assert main(["modifications", str(SAMPLE_DATASET), "-o", str(output)]) == 0
    assert json.loads(output.read_text(encoding="utf-8")) == EXPECTED_MODIFICATIONS
