import copy

import yaml

MISSING = object()

DEFAULT_HEADER = {
    "title": "Memory Management in Swift",
    "excerpt": "How ARC decides when an object goes away.",
    "coverImage": "/assets/blog/memory/cover.png",
    "date": "2024-01-10T05:35:07.322Z",
    "author": {
        "name": "Imra",
        "picture": "/assets/blog/authors/imra.png",
    },
    "ogImage": {"url": "/assets/blog/memory/cover.png"},
}


def make_header(**overrides) -> dict:
    """
    Copy of DEFAULT_HEADER with overrides applied.
    Pass MISSING as a value to drop that key.
    """
    header = copy.deepcopy(DEFAULT_HEADER)
    for key, value in overrides.items():
        if value is MISSING:
            header.pop(key, None)
        else:
            header[key] = value
    return header


def make_post(header: dict | None = None, body: str = "Body of the post.") -> str:
    header = make_header() if header is None else header
    return f"---\n{yaml.safe_dump(header, sort_keys=False)}---\n{body}"


class FakeRepo:
    """
    Minimal in-memory stand-in for FilePostsRepo.
    Records every read so tests can assert lookups stay off disk.
    """

    def __init__(self, files: dict[str, str]):
        self.files = files
        self.reads = []

    def list_post_files(self):
        return sorted(self.files)

    def read_post(self, name: str) -> str:
        self.reads.append(name)
        if name not in self.files:
            raise FileNotFoundError(name)
        return self.files[name]
