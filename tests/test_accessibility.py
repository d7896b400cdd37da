"""
Static HTML accessibility checks for the available-updates report.

Parses the rendered page and asserts that:
  - every form input except hidden ones has a <label for="…">
  - the search box label is visually hidden but still in the markup
  - the report table has column headers
"""
import sys
from html.parser import HTMLParser
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))


class _LabelCollector(HTMLParser):
    def __init__(self):
        super().__init__()
        self.inputs: list[dict] = []
        self.labels: dict[str, dict] = {}
        self.label_text: dict[str, str] = {}
        self.ths: list[dict] = []
        self._open_label: str | None = None

    def handle_starttag(self, tag, attrs):
        attrs = dict(attrs)
        if tag == "input":
            self.inputs.append(attrs)
        elif tag == "label" and "for" in attrs:
            self.labels[attrs["for"]] = attrs
            self._open_label = attrs["for"]
            self.label_text[attrs["for"]] = ""
        elif tag == "th":
            self.ths.append(attrs)

    def handle_endtag(self, tag):
        if tag == "label":
            self._open_label = None

    def handle_data(self, data):
        if self._open_label:
            self.label_text[self._open_label] += data


def _collect(html: str) -> _LabelCollector:
    c = _LabelCollector()
    c.feed(html)
    return c


class TestReportAccessibility:
    def test_all_visible_inputs_labelled(self, app_client):
        c = _collect(app_client.get("/admin/reports/updates").text)
        visible = [i for i in c.inputs if i.get("type") != "hidden"]
        assert visible
        for inp in visible:
            assert inp.get("id") in c.labels, f"input {inp} has no label"

    def test_search_label_hidden_but_present(self, app_client):
        c = _collect(app_client.get("/admin/reports/updates").text)
        label = c.labels["edit-text"]
        assert label.get("class") == "visually-hidden"
        assert c.label_text["edit-text"].strip() == "Filter projects"

    def test_radio_labels_visible(self, app_client):
        c = _collect(app_client.get("/admin/reports/updates").text)
        assert c.label_text["edit-show-security"].strip() == "Security update"
        assert "class" not in c.labels["edit-show-security"]

    def test_table_headers_scoped(self, app_client):
        c = _collect(app_client.get("/admin/reports/updates").text)
        assert len(c.ths) == 5
        assert all(th.get("scope") == "col" for th in c.ths)
