from content_vault.notion.property_parser import (
    checkbox_value,
    date_start,
    first_plain_text,
    multi_select_names,
    page_cover,
    page_icon,
    page_title,
    select_name,
    url_value,
)


def _title(text: str) -> dict:
    return {"type": "title", "title": [{"plain_text": text}]}


class TestColumnReaders:
    def test_first_plain_text(self):
        prop = {"type": "rich_text", "rich_text": [{"plain_text": "a"}, {"plain_text": "b"}]}
        assert first_plain_text(prop, "rich_text") == "a"
        assert first_plain_text({"type": "rich_text", "rich_text": []}, "rich_text") is None

    def test_select(self):
        assert select_name({"type": "select", "select": {"name": "Video"}}) == "Video"
        assert select_name({"type": "select", "select": None}) is None

    def test_multi_select(self):
        prop = {"type": "multi_select", "multi_select": [{"name": "ai"}, {"name": "ml"}]}
        assert multi_select_names(prop) == ["ai", "ml"]

    def test_url_checkbox_date(self):
        assert url_value({"type": "url", "url": "https://x"}) == "https://x"
        assert checkbox_value({"type": "checkbox", "checkbox": True}) is True
        assert date_start({"type": "date", "date": {"start": "2024-01-02"}}) == "2024-01-02"
        assert date_start({"type": "date", "date": None}) is None

    def test_other_column_types_read_as_empty(self):
        number = {"type": "number", "number": 2}
        assert select_name(number) is None
        assert multi_select_names({"type": "select", "select": {"name": "ai"}}) == []
        assert url_value({"type": "rich_text", "rich_text": [{"plain_text": "x"}]}) is None
        assert checkbox_value({"type": "select", "select": {"name": "Yes"}}) is False
        assert date_start({"type": "rich_text", "rich_text": []}) is None

    def test_missing(self):
        assert select_name(None) is None
        assert multi_select_names(None) == []
        assert checkbox_value(None) is False


class TestPageMetadata:
    def test_title_uses_first_run(self):
        prop = {"type": "title", "title": [{"plain_text": "Part one"}, {"plain_text": " and two"}]}
        assert page_title({"properties": {"Name": prop}}) == "Part one"

    def test_title_property_first(self):
        page = {"properties": {"title": _title("From title"), "Name": _title("From name")}}
        assert page_title(page) == "From title"

    def test_name_fallback(self):
        assert page_title({"properties": {"Name": _title("Named")}}) == "Named"

    def test_untitled(self):
        assert page_title({"properties": {}}) == "Untitled"
        assert page_title({}) == "Untitled"

    def test_icon(self):
        assert page_icon({"icon": {"type": "emoji", "emoji": "📚"}}) == "📚"
        assert page_icon({"icon": None}) is None

    def test_cover_external_then_file(self):
        assert page_cover({"cover": {"external": {"url": "https://e"}}}) == "https://e"
        assert page_cover({"cover": {"file": {"url": "https://f"}}}) == "https://f"
        assert page_cover({"cover": None}) is None
