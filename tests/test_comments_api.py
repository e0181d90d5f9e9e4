from datetime import datetime

from blogapi.modules.posts.comments.models.comment import Comment

from conftest import API


def test_create_comment(client, bob, alice_post):
    response = client.post(
        f"{API}/{alice_post['id']}/comment",
        json={"content": "Nice post"},
        headers=bob.headers,
    )
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Comment added"
    assert body["comment"]["content"] == "Nice post"
    assert body["comment"]["userId"] == bob.id
    assert body["comment"]["postId"] == alice_post["id"]


def test_empty_comment_is_bad_request(client, bob, alice_post):
    for body in ({}, {"content": ""}, {"content": "   "}):
        response = client.post(f"{API}/{alice_post['id']}/comment", json=body, headers=bob.headers)
        assert response.status_code == 400, body
        assert response.json() == {"error": "Content cannot be empty."}


def test_comment_on_missing_post_is_not_found(client, bob):
    response = client.post(f"{API}/missing/comment", json={"content": "hi"}, headers=bob.headers)
    assert response.status_code == 404


def test_comment_requires_auth(client, alice_post):
    response = client.post(f"{API}/{alice_post['id']}/comment", json={"content": "hi"})
    assert response.status_code == 401


def test_list_comments_with_commenter_names(client, alice, bob, alice_post):
    client.post(f"{API}/{alice_post['id']}/comment", json={"content": "one"}, headers=bob.headers)
    client.post(f"{API}/{alice_post['id']}/comment", json={"content": "two"}, headers=alice.headers)

    response = client.get(f"{API}/{alice_post['id']}/comments")
    assert response.status_code == 200
    comments = response.json()["comments"]
    assert len(comments) == 2
    names = {c["content"]: c["user"]["name"] for c in comments}
    assert names == {"one": "Bob", "two": "Alice"}


def test_comments_are_listed_newest_first(client, db, alice, bob, alice_post):
    post_id = alice_post["id"]
    db.add(Comment(id="c-mid", content="mid", user_id=bob.id, post_id=post_id, created_at=datetime(2024, 1, 2)))
    db.add(Comment(id="c-new", content="new", user_id=alice.id, post_id=post_id, created_at=datetime(2024, 1, 3)))
    db.add(Comment(id="c-old", content="old", user_id=bob.id, post_id=post_id, created_at=datetime(2024, 1, 1)))
    db.commit()

    comments = client.get(f"{API}/{post_id}/comments").json()["comments"]
    assert [c["id"] for c in comments] == ["c-new", "c-mid", "c-old"]


def test_comments_created_together_are_ordered_by_id(client, db, bob, alice_post):
    post_id = alice_post["id"]
    same_second = datetime(2024, 1, 1, 12, 0, 0)
    for comment_id in ("c-b", "c-c", "c-a"):
        db.add(Comment(id=comment_id, content=comment_id, user_id=bob.id, post_id=post_id, created_at=same_second))
    db.commit()

    comments = client.get(f"{API}/{post_id}/comments").json()["comments"]
    assert [c["id"] for c in comments] == ["c-a", "c-b", "c-c"]


def test_list_comments_of_post_without_comments(client, alice_post):
    response = client.get(f"{API}/{alice_post['id']}/comments")
    assert response.status_code == 200
    assert response.json() == {"comments": []}


def _comment(client, account, post_id, content="hello"):
    response = client.post(f"{API}/{post_id}/comment", json={"content": content}, headers=account.headers)
    return response.json()["comment"]


def test_author_can_delete_comment(client, bob, alice_post):
    comment = _comment(client, bob, alice_post["id"])

    response = client.delete(f"{API}/comments/{comment['id']}", headers=bob.headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Comment deleted successfully."}
    assert client.get(f"{API}/{alice_post['id']}/comments").json()["comments"] == []


def test_other_user_cannot_delete_comment(client, alice, bob, alice_post):
    comment = _comment(client, bob, alice_post["id"])

    response = client.delete(f"{API}/comments/{comment['id']}", headers=alice.headers)
    assert response.status_code == 403
    assert response.json() == {"error": "You do not have permission to delete this comment."}
    assert len(client.get(f"{API}/{alice_post['id']}/comments").json()["comments"]) == 1


def test_delete_missing_comment_is_not_found(client, alice):
    response = client.delete(f"{API}/comments/missing", headers=alice.headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Comment not found."}
