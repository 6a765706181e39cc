from .fakes import FakeSession, RecordedRequest, make_response, PagedServer

__all__ = [
    "FakeSession",
    "RecordedRequest",
    "make_response",
    "PagedServer",
]
