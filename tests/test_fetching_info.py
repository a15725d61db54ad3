"""
Tests for FetchingInfo header mapping.
"""

import unittest

from requests.structures import CaseInsensitiveDict

from nuage_session.models import FetchingInfo


class TestApplyToHeaders(unittest.TestCase):
    def test_defaults_set_nothing(self):
        headers = {}
        FetchingInfo().apply_to_headers(headers)
        self.assertEqual(headers, {})

    def test_page_values(self):
        for page in (0, 1, 17):
            headers = {}
            FetchingInfo(page=page).apply_to_headers(headers)
            self.assertEqual(headers["X-Nuage-Page"], str(page))

    def test_non_positive_page_size_skipped(self):
        headers = {"X-Nuage-PageSize": "50"}
        FetchingInfo(page_size=0).apply_to_headers(headers)
        self.assertEqual(headers["X-Nuage-PageSize"], "50")

    def test_page_size_overrides(self):
        headers = {"X-Nuage-PageSize": "50"}
        FetchingInfo(page_size=500).apply_to_headers(headers)
        self.assertEqual(headers["X-Nuage-PageSize"], "500")

    def test_group_by(self):
        headers = {}
        FetchingInfo(group_by=["name", "type"]).apply_to_headers(headers)
        self.assertEqual(headers["X-Nuage-GroupBy"], "true")
        self.assertEqual(headers["X-Nuage-Attributes"], "name, type")

    def test_filter_and_order(self):
        headers = {}
        FetchingInfo(filter="name == 'x'", order_by="name DESC").apply_to_headers(headers)
        self.assertEqual(headers["X-Nuage-Filter"], "name == 'x'")
        self.assertEqual(headers["X-Nuage-OrderBy"], "name DESC")
        self.assertNotIn("X-Nuage-FilterType", headers)


class TestUpdateFromHeaders(unittest.TestCase):
    def test_reads_mirrored_headers(self):
        info = FetchingInfo(filter="old")
        info.update_from_headers(CaseInsensitiveDict({
            "x-nuage-filter": "name == 'x'",
            "X-Nuage-FilterType": "predicate",
            "X-Nuage-OrderBy": "name",
            "X-Nuage-Page": "3",
            "X-Nuage-PageSize": "25",
            "X-Nuage-Count": "80",
        }))
        self.assertEqual(info.filter, "name == 'x'")
        self.assertEqual(info.filter_type, "predicate")
        self.assertEqual(info.order_by, "name")
        self.assertEqual((info.page, info.page_size, info.total_count), (3, 25, 80))

    def test_missing_or_invalid_numbers_become_zero(self):
        info = FetchingInfo(page=4, page_size=10, total_count=99, order_by="name")
        info.update_from_headers({"X-Nuage-Page": "abc"})
        self.assertEqual((info.page, info.page_size, info.total_count), (0, 0, 0))
        self.assertEqual(info.order_by, "")

    def test_group_by_untouched(self):
        info = FetchingInfo(group_by=["name"])
        info.update_from_headers({})
        self.assertEqual(info.group_by, ["name"])


if __name__ == "__main__":
    unittest.main()
