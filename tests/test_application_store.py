import os
import shutil
import tempfile
import unittest

from pydantic import ValidationError

from models.application import JobApplication
from models.extraction import ExtractionResult
from tools.application_store import (
    create_application,
    find_by_link,
    get_application,
    get_application_count,
    init_db,
    update_application,
)


class TestApplicationStore(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.db_path = os.path.join(self.tmpdir, "nested", "applications.db")
        init_db(self.db_path)

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def _application(self, **overrides):
        fields = {
            "company": "Acme",
            "role": "Engineer",
            "link": "https://www.linkedin.com/jobs/view/4257191625",
            "location": "Remote",
        }
        fields.update(overrides)
        return JobApplication(**fields)

    def test_create_and_get(self):
        application_id = create_application(self._application(notes="Build things."), self.db_path)

        stored = get_application(application_id, self.db_path)

        self.assertEqual(stored.id, application_id)
        self.assertEqual(stored.company, "Acme")
        self.assertEqual(stored.status, "applied")
        self.assertEqual(stored.notes, "Build things.")
        self.assertEqual(get_application_count(self.db_path), 1)

    def test_ids_are_distinct(self):
        first = create_application(self._application(), self.db_path)
        second = create_application(self._application(role="Manager"), self.db_path)

        self.assertNotEqual(first, second)
        self.assertEqual(get_application_count(self.db_path), 2)

    def test_get_missing_returns_none(self):
        self.assertIsNone(get_application(999, self.db_path))

    def test_find_by_link(self):
        create_application(self._application(), self.db_path)
        create_application(self._application(link="https://www.linkedin.com/jobs/view/1"), self.db_path)

        matches = find_by_link("https://www.linkedin.com/jobs/view/4257191625", self.db_path)

        self.assertEqual(len(matches), 1)
        self.assertEqual(matches[0].company, "Acme")
        self.assertEqual(find_by_link("https://nowhere", self.db_path), [])

    def test_update_status_and_notes(self):
        application_id = create_application(self._application(), self.db_path)

        updated = update_application(application_id, self.db_path, status="offer", notes="Negotiating")

        self.assertTrue(updated)
        stored = get_application(application_id, self.db_path)
        self.assertEqual(stored.status, "offer")
        self.assertEqual(stored.notes, "Negotiating")
        self.assertEqual(stored.company, "Acme")

    def test_update_missing_record(self):
        self.assertFalse(update_application(42, self.db_path, status="rejected"))

    def test_update_rejects_unknown_field(self):
        application_id = create_application(self._application(), self.db_path)

        with self.assertRaises(ValueError):
            update_application(application_id, self.db_path, salary="lots")

    def test_update_rejects_invalid_status(self):
        application_id = create_application(self._application(), self.db_path)

        with self.assertRaises(ValidationError):
            update_application(application_id, self.db_path, status="ghosted")
        self.assertEqual(get_application(application_id, self.db_path).status, "applied")

    def test_saves_extraction_as_application(self):
        result = ExtractionResult(
            organization="Initech",
            role_title="Backend Engineer",
            location="Austin",
            description="Own the API",
            posting_url="https://www.linkedin.com/jobs/view/77",
        )

        application_id = create_application(JobApplication.from_extraction(result), self.db_path)
        stored = get_application(application_id, self.db_path)

        self.assertEqual(stored.company, "Initech")
        self.assertEqual(stored.role, "Backend Engineer")
        self.assertEqual(stored.link, "https://www.linkedin.com/jobs/view/77")
        self.assertEqual(stored.notes, "Own the API")


if __name__ == "__main__":
    unittest.main()
