# tests/unit/test_dataset.py
import json

import pytest

from content_api.core.config import DEFAULT_DATA_FILE
from content_api.core.exceptions import DataSourceUnavailableError
from content_api.data.dataset import Dataset, load_dataset


@pytest.mark.unit
class TestDataset:
    """Unit tests for Dataset"""

    def test_preserves_source_order(self, scenario_dataset):
        assert [r.id for r in scenario_dataset] == ["a", "b", "c"]
        assert len(scenario_dataset) == 3

    def test_duplicate_id_rejected(self, scenario_records):
        """Test id uniqueness is enforced"""
        records = scenario_records + [dict(scenario_records[0], name="Again")]

        with pytest.raises(DataSourceUnavailableError, match="Duplicate resource id: a"):
            Dataset.from_records(records)

    def test_invalid_record_rejected(self, scenario_records):
        scenario_records[1]["type"] = "widget"

        with pytest.raises(DataSourceUnavailableError, match="index 1") as exc_info:
            Dataset.from_records(scenario_records)

        assert exc_info.value.details == {"index": 1}

    def test_out_of_range_epoch_rejected(self, scenario_records):
        scenario_records[2]["updated_at"] = 10**20

        with pytest.raises(DataSourceUnavailableError, match="index 2"):
            Dataset.from_records(scenario_records)

    def test_non_object_record_rejected(self):
        with pytest.raises(DataSourceUnavailableError, match="Record 0 is not an object"):
            Dataset.from_records(["a"])

    def test_empty_dataset(self):
        assert len(Dataset([])) == 0


@pytest.mark.unit
class TestLoadDataset:
    """Unit tests for load_dataset"""

    def test_load_list(self, tmp_path, scenario_records):
        path = tmp_path / "resources.json"
        path.write_text(json.dumps(scenario_records), encoding="utf-8")

        dataset = load_dataset(path)

        assert [r.id for r in dataset] == ["a", "b", "c"]

    def test_load_wrapped_object(self, tmp_path, scenario_records):
        path = tmp_path / "resources.json"
        path.write_text(json.dumps({"resources": scenario_records}), encoding="utf-8")

        assert len(load_dataset(path)) == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataSourceUnavailableError, match="not found"):
            load_dataset(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(DataSourceUnavailableError, match="could not be read"):
            load_dataset(path)

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "shape.json"
        path.write_text(json.dumps({"items": []}), encoding="utf-8")

        with pytest.raises(DataSourceUnavailableError, match="must contain a list"):
            load_dataset(path)

    def test_bundled_catalog_loads(self):
        """Test the shipped catalog is valid"""
        dataset = load_dataset(DEFAULT_DATA_FILE)

        assert len(dataset) > 0
        assert len({r.id for r in dataset}) == len(dataset)
