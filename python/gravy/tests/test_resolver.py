"""Tests for payload key class inference."""

from __future__ import annotations

import pytest

from gravy import Object, Serializable
from gravy.exceptions import AmbiguousOrUnknownKey
from gravy.serialization.resolver import (
    pluralized_candidates,
    resolve,
    singularized_candidates,
)


class Author(Object):
    name: str = ""

    @classmethod
    def corresponds_to_key(cls, key, context):
        return key in ("writer", "writers")


class Post(Object):
    text: str = ""


class BlogPost(Object):
    text: str = ""


class Category(Serializable):
    label: str = ""


class Matrix(Serializable):
    rows: int = 0


class Index(Serializable):
    term: str = ""


class Archive(Serializable):
    @classmethod
    def corresponds_to_key(cls, key, context):
        return context == "disk" and key == "posts"


class TestRuleTables:
    """Test the fixed pluralization and singularization tables."""

    @pytest.mark.parametrize(
        ("plural", "singular"),
        [
            ("Cats", "Cat"),
            ("Boxes", "Box"),
            ("Categories", "Category"),
            ("Wives", "Wife"),
            ("Dwarves", "Dwarf"),
            ("Men", "Man"),
            ("People", "Person"),
            ("Children", "Child"),
            ("Diagnoses", "Diagnosis"),
            ("Matrices", "Matrix"),
            ("Indices", "Index"),
            ("Quizzes", "Quiz"),
            ("Fish", "Fish"),
        ],
    )
    def test_singular_among_candidates(self, plural, singular):
        """Test each rule produces the expected singular."""
        assert singular in singularized_candidates(plural)

    @pytest.mark.parametrize(
        ("singular", "plural"),
        [
            ("Cat", "Cats"),
            ("Box", "Boxes"),
            ("Category", "Categories"),
            ("Wife", "Wives"),
            ("Dwarf", "Dwarves"),
            ("Man", "Men"),
            ("Person", "People"),
            ("Child", "Children"),
            ("Diagnosis", "Diagnoses"),
            ("Matrix", "Matrices"),
            ("Index", "Indices"),
            ("Quiz", "Quizzes"),
            ("Fish", "Fish"),
        ],
    )
    def test_plural_among_candidates(self, singular, plural):
        """Test each rule produces the expected plural."""
        assert plural in pluralized_candidates(singular)

    def test_key_itself_is_first_candidate(self):
        """Test the unchanged key is always tried first."""
        assert singularized_candidates("posts")[0] == "posts"
        assert pluralized_candidates("post")[0] == "post"

    def test_short_keys_skip_long_chops(self):
        """Test rules chopping more than the key length are skipped."""
        assert all(len(variant) <= 3 for variant in singularized_candidates("ab")[:3])
        assert "Child" not in singularized_candidates("abc")


class TestResolve:
    """Test class inference order and failure."""

    def test_explicit_correspondence(self):
        """Test corresponds_to_key() wins for the key and its plural."""
        assert resolve("writer", [Post, Author]) is Author
        assert resolve("writers", [Post, Author]) is Author

    def test_correspondence_checked_before_names(self):
        """Test a name match does not shadow an explicit correspondence."""
        assert resolve("posts", [Post, Archive], context="disk") is Archive
        assert resolve("posts", [Post, Archive]) is Post

    def test_name_match(self):
        """Test singularized keys match class names by substring."""
        assert resolve("posts", [Author, Post]) is Post
        assert resolve("categories", [Category]) is Category
        assert resolve("matrices", [Matrix]) is Matrix
        assert resolve("indices", [Post, Index]) is Index

    def test_name_match_is_case_insensitive(self):
        """Test case differences do not prevent a match."""
        assert resolve("POSTS", [Post]) is Post
        assert resolve("blogPosts", [BlogPost]) is BlogPost

    def test_first_declared_candidate_wins(self):
        """Test ties go to the earlier candidate."""
        assert resolve("post", [Post, BlogPost]) is Post
        assert resolve("post", [BlogPost, Post]) is BlogPost

    def test_deterministic(self):
        """Test repeated calls give the same answer."""
        assert {resolve("posts", [BlogPost, Post]) for _ in range(10)} == {BlogPost}

    def test_unknown_key(self):
        """Test keys matching no candidate raise AmbiguousOrUnknownKey."""
        with pytest.raises(AmbiguousOrUnknownKey) as exc_info:
            resolve("invoices", [Author, Post])
        assert exc_info.value.keys == ("invoices",)

    def test_no_candidates(self):
        """Test an empty candidate list never resolves."""
        with pytest.raises(AmbiguousOrUnknownKey):
            resolve("posts", [])

    def test_empty_variants_ignored(self):
        """Test variants chopped to nothing do not match every class."""
        with pytest.raises(AmbiguousOrUnknownKey):
            resolve("es", [Post])
