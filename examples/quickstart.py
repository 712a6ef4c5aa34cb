"""Gravy Quickstart Example.

Demonstrates basic serializer usage:
- Model definition with relations and numeric widths
- Encoding with case conversion and UniqueIndex relationships
- Decoding through an identity store
- Payload decoding with class inference

Usage:
    python examples/quickstart.py
"""

from __future__ import annotations

from datetime import datetime, timezone

from gravy import (
    CaseMode,
    ConversionOptions,
    MemoryStore,
    Object,
    UInt32,
    decode,
    from_json,
    to_json,
)


# =============================================================================
# Model Definitions
# =============================================================================

class Author(Object):
    """Author of posts; referenced by identifier from other models."""

    name: str
    email: str


class Post(Object):
    """Post with a relation to Author."""

    title: str
    content: str = ""
    view_count: UInt32 = 0
    published_at: datetime | None = None
    author: Author | None = None


class Comment(Object):
    """Comment on a post."""

    body: str
    post: Post | None = None

    @classmethod
    def corresponds_to_key(cls, key, context):
        return key in ("replies", "reply")


# =============================================================================
# Examples
# =============================================================================

def encode_example(post: Post) -> str:
    print("\n--- Encode ---")
    options = ConversionOptions(case=CaseMode.TO_CAMEL)
    text = to_json(post, options, indent=2)
    print(text)

    full = to_json(post, ConversionOptions(case=CaseMode.TO_CAMEL, recursive_relationships=True))
    print(f"With recursive relationships: {len(full)} characters instead of {len(text)}")
    return text


def decode_example(text: str, store: MemoryStore) -> None:
    print("\n--- Decode ---")
    options = ConversionOptions(case=CaseMode.TO_CAMEL, store=store)
    post = from_json(text, Post, options)
    print(post)
    print(f"Author resolved from the store: {post.author.name}")


def payload_example(store: MemoryStore) -> None:
    print("\n--- Payload ---")
    payload = {
        "posts": [{"title": "Second post", "viewCount": 3}],
        "replies": [{"body": "Nice!"}, {"body": "Thanks"}],
    }
    decoded = decode(payload, Object, ConversionOptions(case=CaseMode.TO_CAMEL, store=store))
    for key, items in decoded.items():
        print(f"{key}: {[type(item).__name__ for item in items]}")


def main() -> None:
    author = Author(name="Alice", email="alice@example.com")
    post = Post(
        title="Hello Gravy",
        content="Serializing pydantic models",
        view_count=42,
        published_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
        author=author,
    )

    store = MemoryStore()
    store.add(author, post)

    text = encode_example(post)
    decode_example(text, store)
    payload_example(store)


if __name__ == "__main__":
    main()
