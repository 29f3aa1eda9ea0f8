from types import SimpleNamespace

from codeblog.dependencies import get_content_index
from codeblog.services.content_index import ContentIndex
from tests.conftest import FakeRepo


def test_get_content_index_reads_app_state():
    index = ContentIndex(FakeRepo({}))
    request = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(content_index=index)))

    assert get_content_index(request) is index
