import json
import tempfile
import unittest
from pathlib import Path
from mealbudget.domain.errors import InvalidInputError
from mealbudget.infra.Catalog_Repository import load_catalog, load_expense_history, load_pantry


class TestStarterData(unittest.TestCase):

    def test_starter_catalog(self):
        catalog = load_catalog()
        self.assertEqual(len(catalog), 6)
        toast = catalog.get(1)
        self.assertEqual(toast.name, "Avocado Toast")
        self.assertEqual(toast.cost, 5.50)
        self.assertEqual({r.type for r in catalog}, {"breakfast", "lunch", "dinner"})

    def test_starter_pantry(self):
        self.assertEqual(load_pantry().get_items(),
                         ["bread", "eggs", "rice", "pasta", "olive oil", "salt", "pepper", "garlic"])

    def test_expense_history(self):
        history = load_expense_history()
        self.assertEqual(len(history), 8)
        self.assertEqual(history[3], {"week": 4, "amount": 105})


class TestCatalogFiles(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, name, data):
        path = self.dir / name
        with open(path, 'w', encoding='utf-8') as f:
            f.write(data if isinstance(data, str) else json.dumps(data))
        return path

    def test_missing_file_gives_empty_catalog(self):
        self.assertEqual(len(load_catalog(self.dir / "nope.json")), 0)

    def test_invalid_json(self):
        with self.assertRaises(InvalidInputError):
            load_catalog(self._write("recipes.json", "{not json"))

    def test_invalid_record(self):
        path = self._write("recipes.json", [{"id": 1, "name": "", "type": "lunch", "cost": 1}])
        with self.assertRaises(InvalidInputError):
            load_catalog(path)

    def test_pantry_skips_blank_entries(self):
        path = self._write("pantry.json", ["salt", "", 3, "pepper"])
        self.assertEqual(load_pantry(path).get_items(), ["salt", "pepper"])

    def test_expense_history_sorted_by_week(self):
        path = self._write("history.json", [{"week": 2, "amount": 10}, {"week": 1, "amount": 5}])
        self.assertEqual([e["week"] for e in load_expense_history(path)], [1, 2])
