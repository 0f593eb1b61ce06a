"""
Root conftest.py for the coins service repository.

Makes every service directory importable so its 'app' package resolves
when pytest is run from the repository root.
"""

import sys
from pathlib import Path


def pytest_configure(config):
    """
    Configure pytest to add service directories to sys.path.

    Each service ships its own 'app' package; only directories containing
    one are added.
    """
    root_dir = Path(__file__).parent
    services_dir = root_dir / "services"

    for service_path in sorted(services_dir.iterdir()):
        if (service_path / "app").is_dir() and str(service_path) not in sys.path:
            sys.path.insert(0, str(service_path))
