"""Test helpers shared across unit and integration tests."""

from __future__ import annotations


class FakeClock:
    """Callable clock for TTL tests; time only moves when advance() is called."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_project(
    title: str = "Redis clone",
    published_at: str = "2023-01-01",
    summary: str = "A toy key-value store",
    body: str = "Some body text.",
    **extra: str,
) -> str:
    """Render a content file with a quoted and an unquoted header value."""
    lines = [
        "---",
        f"title: {title}",
        f"publishedAt: '{published_at}'",
        f'summary: "{summary}"',
    ]
    lines += [f"{key}: {value}" for key, value in extra.items()]
    lines += ["---", "", body, ""]
    return "\n".join(lines)
