"""
Tests for page-number pagination.
"""

import math

import pytest

from postgraph.errors import InvalidPage, InvalidPageSize
from postgraph.graphql.loaders import BatchLoader
from postgraph.graphql.pagination import load_page, paginate

IDS = [f"id-{i}" for i in range(25)]


@pytest.mark.unit
class TestPaginate:
    def test_first_page(self):
        page = paginate(IDS, 1, 10)

        assert page.ids == IDS[0:10]
        assert page.has_next_page is True
        assert page.has_previous_page is False

    def test_last_partial_page(self):
        page = paginate(IDS, 3, 10)

        assert page.ids == IDS[20:25]
        assert page.has_next_page is False
        assert page.has_previous_page is True

    def test_page_past_the_end_is_empty(self):
        page = paginate(IDS, 5, 10)

        assert page.ids == []
        assert page.has_next_page is False
        assert page.has_previous_page is True

    def test_default_page_size_is_ten(self):
        assert paginate(IDS, 2).ids == IDS[10:20]

    def test_page_number_below_one(self):
        with pytest.raises(InvalidPage) as exc_info:
            paginate(IDS, 0, 10)
        assert exc_info.value.page_number == 0

        with pytest.raises(InvalidPage):
            paginate(IDS, -3, 10)

    def test_non_positive_page_size(self):
        with pytest.raises(InvalidPageSize):
            paginate(IDS, 1, 0)
        with pytest.raises(InvalidPageSize):
            paginate(IDS, 1, -1)

    def test_page_number_checked_before_page_size(self):
        with pytest.raises(InvalidPage):
            paginate(IDS, 0, 0)

    def test_empty_sequence(self):
        page = paginate([], 1, 10)

        assert page.ids == []
        assert page.has_next_page is False
        assert page.has_previous_page is False

    def test_exact_multiple_has_no_next_page(self):
        page = paginate(IDS[:20], 2, 10)

        assert page.ids == IDS[10:20]
        assert page.has_next_page is False

    @pytest.mark.parametrize("length", [0, 1, 9, 10, 11, 25, 100])
    @pytest.mark.parametrize("page_size", [1, 3, 10, 50])
    def test_pages_concatenate_to_the_original_sequence(self, length, page_size):
        ids = [f"id-{i}" for i in range(length)]
        pages = [paginate(ids, n, page_size) for n in range(1, math.ceil(length / page_size) + 1)]

        assert [i for page in pages for i in page.ids] == ids
        if pages:
            assert pages[-1].has_next_page is False
            assert all(page.has_next_page for page in pages[:-1])


@pytest.mark.unit
class TestLoadPage:
    @pytest.mark.asyncio
    async def test_loads_page_entities_in_slice_order(self):
        calls = []

        def fetch(keys):
            calls.append(list(keys))
            return [key.upper() for key in keys]

        loader = BatchLoader("ids", fetch)

        loaded = await load_page(loader, IDS, 2, 5)

        assert loaded.page.ids == IDS[5:10]
        assert loaded.entities == [i.upper() for i in IDS[5:10]]
        assert loaded.items()[0] == ("id-5", "ID-5")
        assert calls == [IDS[5:10]]

    @pytest.mark.asyncio
    async def test_empty_page_does_not_dispatch(self):
        loader = BatchLoader("ids", lambda keys: [None for _ in keys])

        loaded = await load_page(loader, IDS, 9, 10)

        assert loaded.entities == []
        assert loader.dispatch_count == 0

    @pytest.mark.asyncio
    async def test_invalid_arguments_raise_before_loading(self):
        loader = BatchLoader("ids", lambda keys: [None for _ in keys])

        with pytest.raises(InvalidPageSize):
            await load_page(loader, IDS, 1, 0)
        assert loader.dispatch_count == 0
