"""
Tests for loading the static catalogs.
"""

from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest

from risk_worksheet.components.base.config import PACKAGE_DATA_DIR
from risk_worksheet.components.base.exceptions import CatalogLoadError
from risk_worksheet.services.catalog_store import CatalogStore


@pytest.fixture
def catalog_dir(tmp_path: Path) -> Path:
    for name in ("risk_sources.json", "risk_events.json", "mitigation_measures.json"):
        shutil.copy(PACKAGE_DATA_DIR / name, tmp_path / name)
    return tmp_path


def test_packaged_catalogs_load():
    catalogs = CatalogStore()
    summary = catalogs.summary()
    assert summary["risk_source_indicators"] == 72
    assert summary["risk_events"] > 0
    assert summary["mitigation_measures"] > 0


def test_risk_sources_are_copies():
    catalogs = CatalogStore()
    working = catalogs.risk_sources()
    working.technical.risks[0].value = 1
    assert catalogs.risk_sources().technical.risks[0].value == 0


def test_risk_events_are_copies():
    catalogs = CatalogStore()
    events = catalogs.risk_events()
    first = events.technical[0].name
    events.technical[0].name = "renamed"
    events.cost.clear()

    fresh = catalogs.risk_events()
    assert fresh.technical[0].name == first
    assert fresh.cost


def test_find_measure():
    catalogs = CatalogStore()
    assert catalogs.find_measure("m1").name == "Risk avoidance"
    assert catalogs.find_measure("missing") is None


def test_measures_keep_free_form_fields():
    measure = CatalogStore().find_measure("m2")
    assert measure.model_dump()["category"] == "transfer"


def test_short_category_is_rejected(catalog_dir):
    path = catalog_dir / "risk_sources.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    data["schedule"]["risks"] = data["schedule"]["risks"][:17]
    path.write_text(json.dumps(data), encoding="utf-8")

    with pytest.raises(CatalogLoadError) as exc_info:
        CatalogStore(catalog_dir=catalog_dir)
    assert exc_info.value.details["category"] == "schedule"


def test_missing_file_is_rejected(catalog_dir):
    (catalog_dir / "risk_events.json").unlink()
    with pytest.raises(CatalogLoadError):
        CatalogStore(catalog_dir=catalog_dir)


def test_malformed_json_is_rejected(catalog_dir):
    (catalog_dir / "mitigation_measures.json").write_text("[{", encoding="utf-8")
    with pytest.raises(CatalogLoadError):
        CatalogStore(catalog_dir=catalog_dir)
