"""Shared fixtures for core unit tests"""

import copy

import pytest


FM_CHAPTER = """\
---
title: Intro
tags: [a, b]
---

# Intro

Welcome.
"""

PLAIN_CHAPTER = "# Plain\n\nNo header here.\n"


def chapter(name: str, content: str, sub_items: list = None) -> dict:
    return {"Chapter": {
        "name": name,
        "content": content,
        "number": None,
        "sub_items": sub_items or [],
        "path": f"{name.lower()}.md",
        "source_path": f"{name.lower()}.md",
        "parent_names": [],
    }}


SAMPLE_BOOK = {
    "sections": [
        chapter("Intro", FM_CHAPTER, sub_items=[
            chapter("Nested", "---\nslug: nested\n---\nNested body\n"),
        ]),
        "Separator",
        {"PartTitle": "Part One"},
        chapter("Plain", PLAIN_CHAPTER),
    ],
    "__non_exhaustive": None,
}

SAMPLE_CONTEXT = {
    "root": "/tmp/book",
    "config": {"book": {"title": "Test"}, "preprocessor": {"frontmatter-strip": {}}},
    "renderer": "html",
    "mdbook_version": "0.4.40",
}


@pytest.fixture(name="book")
def book_fixture():
    return copy.deepcopy(SAMPLE_BOOK)


@pytest.fixture(name="context")
def context_fixture():
    return copy.deepcopy(SAMPLE_CONTEXT)
