from fastapi import Request

from codeblog.services.content_index import ContentIndex


def get_content_index(request: Request) -> ContentIndex:
    return request.app.state.content_index
