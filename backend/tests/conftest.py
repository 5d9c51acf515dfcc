import os
import tempfile

# Point the service at a throwaway database before dlr.config is imported
_DB_DIR = tempfile.mkdtemp(prefix="dlr-tests-")
os.environ.setdefault("DLR_DATABASE_URL", f"sqlite:///{os.path.join(_DB_DIR, 'dlr.db')}")

import pytest  # noqa: E402

from dlr.database import init_db  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def _database():
    init_db()
    yield
