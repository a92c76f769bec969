"""
Request models and text helpers
===============================

What we test:
    ✅ trim / to_lower_case normalizers
    ✅ Mention id parsing from list, JSON string and comma-separated string
    ✅ Shape errors stay pydantic errors (not rule violations)
    ✅ Hashtag extraction and username generation
    ✅ Post draft normalization
"""

import random

import pytest
from pydantic import ValidationError

from socialnet.models.requests import CreatePostRequest, PostType, UpdateUserRequest
from socialnet.models.transforms import parse_id_list, to_lower_case, trim
from socialnet.services.posts import build_post_draft
from socialnet.services.text import extract_hashtags, generate_username


class TestTransforms:

    def test_trim(self):
        assert trim("  hello  ") == "hello"
        assert trim(42) == 42
        assert trim(None) is None

    def test_to_lower_case(self):
        assert to_lower_case("HeLLo") == "hello"
        assert to_lower_case(["A"]) == ["A"]

    @pytest.mark.parametrize("raw, expected", [
        ([1, 2, 3], [1, 2, 3]),
        ("[1,2,3]", [1, 2, 3]),
        ("1, 2,3", ["1", "2", "3"]),
        ('"4,5"', ["4", "5"]),
        ("7", ["7"]),
        ("", None),
        (None, None),
    ])
    def test_parse_id_list(self, raw, expected):
        assert parse_id_list(raw) == expected


class TestUpdateUserRequest:

    def test_email_and_username_are_normalized(self):
        request = UpdateUserRequest(email="  John@Example.COM ", username=" John_Doe ")
        assert request.email == "john@example.com"
        assert request.username == "john_doe"

    def test_name_is_trimmed_not_lowercased(self):
        assert UpdateUserRequest(name="  José Núñez ").name == "José Núñez"

    @pytest.mark.parametrize("username", ["ab", "1john", "john__doe", "john.", "jo hn"])
    def test_bad_usernames_are_rejected(self, username):
        with pytest.raises(ValidationError):
            UpdateUserRequest(username=username)

    def test_non_ascii_email_is_rejected(self):
        with pytest.raises(ValidationError):
            UpdateUserRequest(email="jöhn@example.com")

    def test_bio_length(self):
        with pytest.raises(ValidationError):
            UpdateUserRequest(bio="x" * 161)


class TestCreatePostRequest:

    def test_mentions_from_comma_string(self):
        request = CreatePostRequest(type="POST", visibility="EVERY_ONE", content="hi", mentions_ids="1,2")
        assert request.mentions_ids == [1, 2]

    def test_non_numeric_mentions_rejected(self):
        with pytest.raises(ValidationError):
            CreatePostRequest(type="POST", visibility="EVERY_ONE", content="hi", mentions_ids="a,b")

    def test_content_length_limit(self):
        with pytest.raises(ValidationError):
            CreatePostRequest(type="POST", visibility="EVERY_ONE", content="x" * 501)

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            CreatePostRequest(type="STORY", visibility="EVERY_ONE", content="hi")


class TestExtractHashtags:

    def test_extracts_lowercased_unique_tags_in_order(self):
        content = "Shipping #Python and #FastAPI today #python #new_release"
        assert extract_hashtags(content) == ["python", "fastapi", "new_release"]

    @pytest.mark.parametrize("content", [None, "", "no tags here", "# alone"])
    def test_empty_results(self, content):
        assert extract_hashtags(content) == []


class TestGenerateUsername:

    def test_two_part_name(self):
        username = generate_username("John Doe", rng=random.Random(7))
        assert username.startswith("doejo")
        assert 0 <= int(username[len("doejo"):]) <= 9999

    def test_single_name_is_used_twice(self):
        assert generate_username("  Cher ", rng=random.Random(1)).startswith("cherch")

    def test_extra_whitespace_between_parts(self):
        assert generate_username("Ada    Lovelace King", rng=random.Random(3)).startswith("lovelacead")

    def test_deterministic_with_seeded_rng(self):
        assert generate_username("John Doe", rng=random.Random(42)) == generate_username("John Doe", rng=random.Random(42))


class TestBuildPostDraft:

    def test_draft_carries_hashtags_and_unique_mentions(self):
        request = CreatePostRequest(
            type="POST",
            visibility="EVERY_ONE",
            content="  Hello #World  ",
            mentions_ids=[3, 1, 3],
        )
        draft = build_post_draft(request)

        assert draft.type == PostType.POST
        assert draft.content == "Hello #World"
        assert draft.hashtags == ["world"]
        assert draft.mentions_ids == [3, 1]

    def test_media_only_post(self):
        request = CreatePostRequest(type="POST", visibility="EVERY_ONE", media=["uploads/1.png"])
        draft = build_post_draft(request)

        assert draft.content is None
        assert draft.hashtags == []
        assert draft.media == ["uploads/1.png"]
