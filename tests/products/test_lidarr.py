"""
Tests for the Lidarr block list bindings.
"""

import pytest

from helpers import PagedServer, make_response
from starr_client.client.requests import PageReq, Sorting
from starr_client.lidarr import BlockList, Filter, Lidarr
from starr_client.runtime.errors import InvalidStatusError


def block_list_items(count):
    return [{"id": i, "artistId": 100 + i, "sourceTitle": f"Release {i}", "protocol": "torrent"}
            for i in range(1, count + 1)]


@pytest.fixture
def lidarr(api):
    return Lidarr(api)


class TestBlockList:

    def test_get_all(self, lidarr, fake_session):
        server = PagedServer(block_list_items(1203))
        fake_session.queue(*([server] * 5))

        result = lidarr.get_block_list()

        assert isinstance(result, BlockList)
        assert [r.id for r in result.records] == list(range(1, 1204))
        assert result.total_records == 1203
        assert result.page == 1
        assert result.page_size == 1203
        assert server.fetches == [(1, 500), (2, 500), (3, 500)]

    def test_get_some(self, lidarr, fake_session):
        server = PagedServer(block_list_items(50))
        fake_session.queue(server)

        result = lidarr.get_block_list(7)

        assert [r.id for r in result.records] == list(range(1, 8))
        assert server.fetches == [(1, 7)]

    def test_page_request(self, lidarr, fake_session):
        fake_session.queue(PagedServer(block_list_items(30)))

        page = lidarr.get_block_list_page(PageReq(page=2, page_size=10))

        assert [r.id for r in page.records] == list(range(11, 21))
        sent = fake_session.last
        assert sent.path == "/api/v1/blocklist"
        assert sent.query == {
            "page": "2",
            "pageSize": "10",
            "sortKey": "date",
            "sortDirection": "descending",
        }

    def test_page_request_keeps_caller_sort_and_filter(self, lidarr, fake_session):
        fake_session.queue(PagedServer(block_list_items(3)))

        lidarr.get_block_list_page(PageReq(sort_key="sourceTitle", sort_dir=Sorting.ASCENDING,
                                           filter=Filter.GRABBED))

        assert fake_session.last.query["sortKey"] == "sourceTitle"
        assert fake_session.last.query["sortDirection"] == "ascending"
        assert fake_session.last.query["eventType"] == "1"

    def test_records_decode(self, lidarr, fake_session):
        fake_session.queue_json({
            "page": 1,
            "pageSize": 10,
            "totalRecords": 1,
            "records": [{
                "id": 5,
                "artistId": 9,
                "albumIds": [1, 2],
                "customFormats": [{"id": 3, "name": "FLAC"}],
                "quality": {"quality": {"id": 6, "name": "FLAC"}, "revision": {"version": 1, "isRepack": True}},
                "date": "2023-01-02T03:04:05Z",
                "unknownField": "ignored",
            }],
        })

        record = lidarr.get_block_list_page(PageReq()).records[0]

        assert record.album_ids == [1, 2]
        assert record.custom_formats[0].name == "FLAC"
        assert record.quality.quality.id == 6
        assert record.quality.revision.is_repack is True
        assert record.date.year == 2023

    def test_error_stops_aggregation(self, lidarr, fake_session):
        server = PagedServer(block_list_items(1200))
        fake_session.queue(server, make_response(500, b"boom"))

        with pytest.raises(InvalidStatusError):
            lidarr.get_block_list()

        assert len(fake_session.requests) == 2

    def test_delete_one(self, lidarr, fake_session):
        lidarr.delete_block_list(12)
        assert fake_session.last.method == "DELETE"
        assert fake_session.last.path == "/api/v1/blocklist/12"

    def test_delete_bulk(self, lidarr, fake_session):
        lidarr.delete_block_lists([1, 2, 3])
        sent = fake_session.last
        assert sent.method == "DELETE"
        assert sent.path == "/api/v1/blocklist/bulk"
        assert sent.json() == {"ids": [1, 2, 3]}
