"""
Application page tests.

Contract
--------
- `GET /` as JSON returns `{}` and never touches the settings template;
  any other format is served the settings page.
- `GET /settings` renders the settings template for HTML; every other format
  gets a 406 page naming HTML.
- Both pages carry `Vary: Content-Type` (GET and HEAD).
"""

from django.test import TestCase
from rest_framework.test import APIClient

SETTINGS_TEMPLATE = "base/settings.html"


class IndexTests(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_json_index_is_empty_object(self):
        for kwargs in ({"path": "/", "data": {"format": "json"}}, {"path": "/.json"}):
            with self.subTest(**kwargs):
                r = self.client.get(**kwargs)
                self.assertEqual(r.status_code, 200)
                self.assertEqual(r.json(), {})
                self.assertTemplateNotUsed(r, SETTINGS_TEMPLATE)

    def test_json_index_via_accept_header(self):
        r = self.client.get("/", HTTP_ACCEPT="application/json")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), {})
        self.assertTemplateNotUsed(r, SETTINGS_TEMPLATE)

    def test_html_index_serves_settings(self):
        r = self.client.get("/")
        self.assertEqual(r.status_code, 200)
        self.assertTemplateUsed(r, SETTINGS_TEMPLATE)
        self.assertContains(r, "<h1>Settings</h1>", html=False)

    def test_index_varies_on_content_type(self):
        r = self.client.get("/", HTTP_ACCEPT="application/json")
        self.assertIn("Content-Type", r.headers.get("Vary", ""))


class SettingsTests(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_html_settings_page(self):
        r = self.client.get("/settings")
        self.assertEqual(r.status_code, 200)
        self.assertTemplateUsed(r, SETTINGS_TEMPLATE)
        self.assertContains(r, 'name="language"')
        self.assertContains(r, 'value="nl"')

    def test_html_suffix(self):
        r = self.client.get("/settings.html")
        self.assertEqual(r.status_code, 200)
        self.assertTemplateUsed(r, SETTINGS_TEMPLATE)

    def test_json_accept_is_not_acceptable(self):
        r = self.client.get("/settings", HTTP_ACCEPT="application/json")
        self.assertEqual(r.status_code, 406)
        self.assertTemplateUsed(r, "errors/406.html")
        self.assertTemplateNotUsed(r, SETTINGS_TEMPLATE)
        self.assertContains(r, "Settings is only available as HTML.", status_code=406)

    def test_json_suffix_and_override_are_not_acceptable(self):
        for path in ("/settings.json", "/settings?format=json"):
            with self.subTest(path=path):
                r = self.client.get(path)
                self.assertEqual(r.status_code, 406)
                self.assertContains(r, "Settings is only available as HTML.", status_code=406)

    def test_unknown_format_is_not_acceptable(self):
        r = self.client.get("/settings", {"format": "xml"})
        self.assertEqual(r.status_code, 406)
        self.assertTemplateUsed(r, "errors/406.html")
        self.assertContains(r, "Settings is only available as HTML.", status_code=406)

    def test_unmatched_accept_names_html_only(self):
        for path in ("/settings", "/"):
            with self.subTest(path=path):
                r = self.client.get(path, HTTP_ACCEPT="text/csv")
                self.assertEqual(r.status_code, 406)
                self.assertNotContains(r, "HTML, JSON", status_code=406)
        r = self.client.get("/settings", HTTP_ACCEPT="text/csv")
        self.assertContains(r, "Settings is only available as HTML.", status_code=406)

    def test_get_and_head_vary_on_content_type(self):
        for method in ("get", "head"):
            with self.subTest(method=method):
                r = getattr(self.client, method)("/settings")
                self.assertEqual(r.status_code, 200)
                self.assertIn("Content-Type", r.headers.get("Vary", ""))

    def test_not_acceptable_response_varies_on_content_type(self):
        r = self.client.get("/settings", HTTP_ACCEPT="application/json")
        self.assertIn("Content-Type", r.headers.get("Vary", ""))

    def test_unknown_suffix_is_not_acceptable(self):
        r = self.client.get("/settings.xml")
        self.assertEqual(r.status_code, 406)
        self.assertContains(r, "Settings is only available as HTML.", status_code=406)


class ApplicationLoggingTests(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_settings_render_is_logged(self):
        with self.assertLogs("base.views", level="DEBUG") as cap:
            self.client.get("/settings")
        self.assertIn("DEBUG:base.views:Rendering settings page!", cap.output)

    def test_not_acceptable_is_logged_with_format(self):
        with self.assertLogs("core.controllers", level="WARNING") as cap:
            self.client.get("/settings.json")
        self.assertIn(
            "WARNING:core.controllers:Returning 406 (Not Acceptable) for '/settings.json' with format 'json'! [session: -]",
            cap.output,
        )


class SchemaTests(TestCase):
    def test_schema_lists_application_pages(self):
        r = self.client.get("/schema/", HTTP_ACCEPT="application/vnd.oai.openapi+json")
        self.assertEqual(r.status_code, 200)
        paths = r.json()["paths"]
        self.assertIn("/", paths)
        self.assertIn("/settings", paths)
