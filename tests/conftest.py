"""Shared fixtures for codec tests."""

import copy
from typing import Any, Dict

import pytest


def make_annotations(**overrides: Any) -> Dict[str, Any]:
    annotations = {
        "bold": False,
        "italic": False,
        "strikethrough": False,
        "underline": False,
        "code": False,
        "color": "default",
    }
    annotations.update(overrides)
    return annotations


def make_text_span(content: str, **overrides: Any) -> Dict[str, Any]:
    span = {
        "type": "text",
        "text": {"content": content, "link": None},
        "annotations": make_annotations(),
        "plain_text": content,
        "href": None,
    }
    span.update(overrides)
    return span


def make_mention_span(mention: Dict[str, Any], plain_text: str) -> Dict[str, Any]:
    return {
        "type": "mention",
        "mention": mention,
        "annotations": make_annotations(),
        "plain_text": plain_text,
        "href": None,
    }


@pytest.fixture
def annotations():
    return make_annotations()


@pytest.fixture
def text_span():
    return make_text_span("Hello world")


@pytest.fixture
def sample_rich_text():
    """One span of every kind, in reading order."""
    return [
        make_text_span("Price: ", annotations=make_annotations(bold=True)),
        {
            "type": "text",
            "text": {"content": "docs", "link": {"url": "https://example.com/docs"}},
            "annotations": make_annotations(color="blue_background"),
            "plain_text": "docs",
            "href": "https://example.com/docs",
        },
        {
            "type": "equation",
            "equation": {"expression": "E = mc^2"},
            "annotations": make_annotations(italic=True, color="red"),
            "plain_text": "E = mc^2",
            "href": None,
        },
        make_mention_span(
            {"type": "user", "user": {"object": "user", "id": "user-1"}}, "@Ada"
        ),
        make_mention_span(
            {"type": "page", "page": {"id": "page-1"}}, "Roadmap"
        ),
        make_mention_span(
            {"type": "database", "database": {"id": "db-1"}}, "Tasks"
        ),
        make_mention_span(
            {"type": "date", "date": {"start": "2024-05-01", "end": None}}, "May 1, 2024"
        ),
        make_mention_span(
            {"type": "link_preview", "link_preview": {"url": "https://github.com/x/y"}},
            "https://github.com/x/y",
        ),
        make_mention_span(
            {
                "type": "template_mention",
                "template_mention": {
                    "type": "template_mention_date",
                    "template_mention_date": "today",
                },
            },
            "@Today",
        ),
    ]


# Minimal well-formed definition of every property type
MINIMAL_PROPERTIES = {
    "title": {"id": "title", "name": "Name", "type": "title", "title": {}},
    "rich_text": {"id": "a%3Ab", "name": "Notes", "type": "rich_text", "rich_text": {}},
    "number": {"id": "num", "name": "Price", "type": "number", "format": "dollar"},
    "select": {
        "id": "sel",
        "name": "Stage",
        "type": "select",
        "select": {"options": [{"id": "o1", "name": "Draft", "color": "gray"}]},
    },
    "multi_select": {
        "id": "ms",
        "name": "Tags",
        "type": "multi_select",
        "multi_select": {"options": []},
    },
    "status": {"id": "st", "name": "Status", "type": "status"},
    "date": {"id": "dt", "name": "Due", "type": "date", "date": {}},
    "people": {"id": "pp", "name": "Owner", "type": "people", "people": {}},
    "files": {"id": "fl", "name": "Attachments", "type": "files", "files": {}},
    "checkbox": {"id": "cb", "name": "Done", "type": "checkbox", "checkbox": {}},
    "url": {"id": "ur", "name": "Website", "type": "url", "url": {}},
    "email": {"id": "em", "name": "Email", "type": "email", "email": {}},
    "phone_number": {"id": "ph", "name": "Phone", "type": "phone_number", "phone_number": {}},
    "formula": {
        "id": "fm",
        "name": "Total",
        "type": "formula",
        "formula": {"expression": "prop(\"Price\") * 2"},
    },
    "relation": {"id": "rl", "name": "Projects", "type": "relation"},
    "rollup": {
        "id": "ru",
        "name": "Project count",
        "type": "rollup",
        "rollup": {
            "rollup_property_name": "Name",
            "relation_property_name": "Projects",
            "rollup_property_id": "title",
            "relation_property_id": "rl",
            "function": "count",
        },
    },
    "created_time": {"id": "ct", "name": "Created", "type": "created_time", "created_time": {}},
    "created_by": {"id": "cby", "name": "Creator", "type": "created_by", "created_by": {}},
    "last_edited_time": {
        "id": "let",
        "name": "Edited",
        "type": "last_edited_time",
        "last_edited_time": {},
    },
    "last_edited_by": {
        "id": "leb",
        "name": "Editor",
        "type": "last_edited_by",
        "last_edited_by": {},
    },
}


@pytest.fixture
def minimal_properties():
    return copy.deepcopy(MINIMAL_PROPERTIES)


@pytest.fixture
def sample_schema():
    """Database properties keyed by name, as the API returns them."""
    return {
        definition["name"]: definition
        for definition in copy.deepcopy(MINIMAL_PROPERTIES).values()
    }


@pytest.fixture
def sample_database(sample_schema):
    return {
        "object": "database",
        "id": "bc1211ca-e3f1-4939-ae34-5260b16f627c",
        "created_time": "2021-07-08T23:50:00.000Z",
        "created_by": {"object": "user", "id": "user-1"},
        "last_edited_time": "2021-07-08T23:50:00.000Z",
        "last_edited_by": {"object": "user", "id": "user-2"},
        "title": [make_text_span("Grocery List")],
        "description": [],
        "icon": {"type": "emoji", "emoji": "🎉"},
        "cover": {
            "type": "external",
            "external": {"url": "https://website.domain/images/image.png"},
        },
        "properties": sample_schema,
        "parent": {"type": "page_id", "page_id": "98ad959b-2b6a-4774-80ee-00246fb0ea9b"},
        "url": "https://www.notion.so/bc1211cae3f14939ae34260b16f627c",
        "archived": False,
        "is_inline": False,
    }
