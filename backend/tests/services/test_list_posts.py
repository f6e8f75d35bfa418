"""List Posts - GET /posts?sort=recent ordering, projection and parameter checks."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession


async def test_posts_sorted_newest_first(client, seed_posts):
    """Posts come back in strictly descending creation order."""
    res = await client.get("/posts", params={"sort": "recent"})
    assert res.status_code == 200
    posts = res.json()["data"]["posts"]
    assert [p["title"] for p in posts] == ["newest", "middle", "oldest"]
    dates = [p["dateCreated"] for p in posts]
    assert dates == sorted(dates, reverse=True)


async def test_posts_include_votes_member_and_comments(client, seed_posts):
    """Each post carries its votes, author (with user) and comments."""
    res = await client.get("/posts", params={"sort": "recent"})
    middle = res.json()["data"]["posts"][1]

    assert {v["voteType"] for v in middle["votes"]} == {"Upvote", "Downvote"}
    assert len(middle["comments"]) == 2
    reply = next(c for c in middle["comments"] if c["parentCommentId"])
    assert reply["text"] == "reply"

    author = middle["memberPostedBy"]
    assert author["id"] == middle["memberId"]
    assert author["user"]["username"] == "author"
    assert "password" not in author["user"]


async def test_posts_without_votes_or_comments_have_empty_lists(client, seed_posts):
    """Posts with no votes or comments return empty lists, not null."""
    res = await client.get("/posts", params={"sort": "recent"})
    newest = res.json()["data"]["posts"][0]
    assert newest["votes"] == []
    assert newest["comments"] == []


async def test_no_posts_returns_empty_list(client):
    """An empty store returns an empty posts list."""
    res = await client.get("/posts", params={"sort": "recent"})
    assert res.status_code == 200
    assert res.json() == {"error": None, "data": {"posts": []}, "success": True}


async def test_unsupported_sort_returns_client_error(client):
    """sort=oldest is not supported."""
    res = await client.get("/posts", params={"sort": "oldest"})
    assert res.status_code == 400
    assert res.json() == {"error": "ClientError", "data": None, "success": False}


async def test_missing_sort_returns_client_error(client):
    """Omitting sort is a client error."""
    res = await client.get("/posts")
    assert res.status_code == 400
    assert res.json()["error"] == "ClientError"


async def test_repeated_sort_returns_client_error(client, seed_posts):
    """sort given more than once is rejected even if one value is recent."""
    res = await client.get("/posts?sort=oldest&sort=recent")
    assert res.status_code == 400
    assert res.json() == {"error": "ClientError", "data": None, "success": False}

    res = await client.get("/posts?sort=recent&sort=recent")
    assert res.status_code == 400


async def test_store_failure_is_logged(client, monkeypatch, caplog):
    """A failing query yields 500 ServerError and is logged."""
    async def broken_execute(self, *args, **kwargs):
        raise RuntimeError("timeout")

    monkeypatch.setattr(AsyncSession, "execute", broken_execute)

    with caplog.at_level(logging.ERROR):
        res = await client.get("/posts", params={"sort": "recent"})

    assert res.status_code == 500
    assert res.json()["error"] == "ServerError"
    assert any("Failed to list posts" in r.getMessage() for r in caplog.records)
