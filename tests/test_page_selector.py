"""Tests for selecting published documents and building the catalogue."""

import pytest

from models import PublicationConfig, RawDocument
from orchestrator import PageSelector


def unreadable(key):
    def load():
        raise AssertionError(f"{key} should never be read")
    return RawDocument(key=key, loader=load)


class TestSelection:
    """Test filtering of candidate documents."""

    def test_default_config_selects_everything(self):
        documents = [
            RawDocument.from_text('A.md', 'alpha'),
            RawDocument.from_text('B.md', 'beta'),
        ]

        selected = PageSelector().select(documents, PublicationConfig())

        assert selected == {'A.md': 'alpha', 'B.md': 'beta'}

    def test_both_filters_must_pass(self):
        config = PublicationConfig(
            title_filter=lambda t: t.startswith('Pub'),
            content_filter=lambda c: '#ok' in c
        )
        documents = [
            RawDocument.from_text('Pub one.md', '#ok'),
            RawDocument.from_text('Pub two.md', 'draft'),
            RawDocument.from_text('Private.md', '#ok'),
        ]

        selected = PageSelector().select(documents, config)

        assert list(selected) == ['Pub one.md']

    @pytest.mark.parametrize('max_workers', [1, 4])
    def test_rejected_titles_are_never_read(self, max_workers):
        """Bodies of title-rejected documents never reach the content filter."""
        seen = []

        def content_filter(body):
            if body == 'secret':
                raise AssertionError("content filter ran on an excluded page")
            seen.append(body)
            return True

        config = PublicationConfig(
            title_filter=lambda t: not t.startswith('Private'),
            content_filter=content_filter
        )
        documents = [
            RawDocument.from_text('Public.md', 'hello'),
            RawDocument.from_text('Private notes.md', 'secret'),
            unreadable('Private diary.md'),
        ]

        selected = PageSelector(max_workers=max_workers).select(documents, config)

        assert selected == {'Public.md': 'hello'}
        assert seen == ['hello']

    def test_title_filter_sees_page_name(self):
        titles = []

        def title_filter(title):
            titles.append(title)
            return title == 'Home'

        config = PublicationConfig(index='Home', title_filter=title_filter)
        documents = [
            RawDocument.from_text('Home.md', 'welcome'),
            RawDocument.from_text('roam/js/public-garden.md', '- index'),
        ]

        selected = PageSelector().select(documents, config)

        assert sorted(titles) == ['Home', 'roam/js/public-garden']
        assert list(selected) == ['Home.md']

    def test_no_documents(self):
        assert PageSelector(max_workers=4).select([], PublicationConfig()) == {}


class TestCatalogue:

    def test_catalogue_strips_suffix(self):
        selected = {'My Page.md': '', 'Website Index.md': '', 'roam/js/x.md': ''}

        catalogue = PageSelector().build_catalogue(selected)

        assert catalogue == ('My Page', 'Website Index', 'roam/js/x')

    def test_custom_suffix(self):
        catalogue = PageSelector(page_suffix='.txt').build_catalogue({'Note.txt': ''})

        assert catalogue == ('Note',)
