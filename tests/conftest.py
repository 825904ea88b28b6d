"""
Shared test fixtures and path constants for axon-parser tests.

All input file paths are defined here as module-level constants for
easy discovery and modification. If input files move or new ones are
added, update this file.
"""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Input file paths -- edit here if files move or new ones are added
# ---------------------------------------------------------------------------
INPUT_DIR = Path(__file__).resolve().parent.parent / "inputs"

USERS_AXON = INPUT_DIR / "users.axon"
LENIENT_AXON = INPUT_DIR / "lenient.axon"

# The end-to-end document used throughout the unit tests.
USER_DOC = """\
@schema User
id:I
name:S
active:B
age:I?
@end
@data User[2]
1|Alice|1|28
2|Bob|0|_
@end
"""


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs against sample input files)",
    )


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def user_doc() -> str:
    return USER_DOC
