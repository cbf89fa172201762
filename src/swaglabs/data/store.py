"""Static test data loading.

The data file is read once per session and handed to fixtures as an
explicit, frozen ``TestData`` object.
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path

import structlog
from pydantic import ValidationError

from swaglabs.core.exceptions import TestDataError
from swaglabs.data.models import TestData

log = structlog.get_logger(__name__)

PACKAGED_DATA_FILE = "test_data.json"


def _read_packaged() -> str:
    return resources.files("swaglabs.data").joinpath(PACKAGED_DATA_FILE).read_text(
        encoding="utf-8"
    )


def load_test_data(path: Path | None = None) -> TestData:
    """Load and validate the test data file.

    Args:
        path: JSON file to read; the packaged default when None.

    Returns:
        Validated, immutable test data.

    Raises:
        TestDataError: If the file is missing or does not validate.
    """
    source = str(path) if path is not None else f"swaglabs.data/{PACKAGED_DATA_FILE}"
    try:
        raw = path.read_text(encoding="utf-8") if path is not None else _read_packaged()
    except OSError as e:
        raise TestDataError(f"Cannot read test data {source}: {e}") from e

    try:
        data = TestData.model_validate_json(raw)
    except ValidationError as e:
        raise TestDataError(f"Invalid test data {source}: {e}") from e

    log.info(
        "test_data_loaded",
        source=source,
        users=len(data.users),
        products=len(data.products),
    )
    return data
