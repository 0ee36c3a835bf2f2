import unittest

from window_switcher.engine.models import WindowRecord, clean_title


class CleanTitleTests(unittest.TestCase):
    def test_em_dash_prefix_is_removed(self):
        self.assertEqual(clean_title("MyApp — report.txt"), "report.txt")

    def test_en_dash_and_hyphen_are_separators(self):
        self.assertEqual(clean_title("Editor – notes.md"), "notes.md")
        self.assertEqual(clean_title("Browser - Inbox"), "Inbox")

    def test_text_after_last_separator_is_kept(self):
        self.assertEqual(clean_title("a-b-c"), "c")
        self.assertEqual(clean_title("no-separator-here"), "here")
        self.assertEqual(clean_title("x — y - z"), "z")

    def test_title_without_separator_is_unchanged(self):
        self.assertEqual(clean_title("Terminal"), "Terminal")
        self.assertEqual(clean_title(" padded "), " padded ")

    def test_trailing_separator_leaves_empty_title(self):
        self.assertEqual(clean_title("Untitled -"), "")


class WindowRecordTests(unittest.TestCase):
    def test_from_json_cleans_title(self):
        record = WindowRecord.from_json(
            {"id": 7, "app": "Code", "title": "Code — main.py", "space": 2}
        )
        self.assertEqual(record, WindowRecord(id=7, app="Code", title="main.py", space=2))

    def test_space_is_optional(self):
        record = WindowRecord.from_json({"id": 7, "app": "Code", "title": "main.py"})
        self.assertIsNone(record.space)

    def test_invalid_objects_are_rejected(self):
        for data in (
            [],
            "window",
            {"app": "Code", "title": "x"},
            {"id": "7", "app": "Code", "title": "x"},
            {"id": True, "app": "Code", "title": "x"},
            {"id": 7, "app": None, "title": "x"},
            {"id": 7, "app": "Code"},
            {"id": 7, "app": "Code", "title": "x", "space": "1"},
            {"id": 7, "app": "Code", "title": "x", "space": False},
        ):
            with self.assertRaises(ValueError, msg=repr(data)):
                WindowRecord.from_json(data)

    def test_records_are_immutable(self):
        record = WindowRecord(id=1, app="A", title="t")
        with self.assertRaises(AttributeError):
            record.title = "other"

    def test_label_names_untitled_windows(self):
        self.assertEqual(WindowRecord(id=1, app="A", title="").label, "(Untitled)")
        self.assertEqual(WindowRecord(id=1, app="A", title="doc").label, "doc")


if __name__ == "__main__":
    unittest.main()
