"""JSON file reader/writer for billing datasets"""

import json
import sys
from pathlib import Path
from pydantic import BaseModel, ValidationError
from carshare_billing.domain.models import Dataset
from carshare_billing.domain.exceptions import InvalidDatasetError
from carshare_billing.infrastructure.storage.schemas import DatasetSchema

# Output path meaning "write to stdout"
STDOUT = "-"


def load_dataset(path: Path) -> Dataset:
    """
    Read and validate a dataset document.

    Raises:
        InvalidDatasetError: On unreadable file, invalid JSON or invalid records
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return DatasetSchema.model_validate(data).to_domain()

    except OSError as e:
        raise InvalidDatasetError(f"Cannot read dataset {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise InvalidDatasetError(f"Dataset {path} is not valid JSON: {e}") from e
    except ValidationError as e:
        raise InvalidDatasetError(f"Dataset {path} has invalid records: {e}") from e


def write_document(document: BaseModel, path: str | Path) -> None:
    """Serialize an output document as indented JSON, to stdout when path is '-'"""
    payload = json.dumps(document.model_dump(mode="json", exclude_none=True), indent=2)

    if str(path) == STDOUT:
        sys.stdout.write(payload + "\n")
        return

    with open(path, "w", encoding="utf-8") as f:
        f.write(payload + "\n")
