def _payload(author_id, **overrides):
    payload = {
        "title": "Sapiens",
        "authorId": author_id,
        "datePublished": "2023-01-02",
        "isFiction": False,
    }
    payload.update(overrides)
    return payload


def test_get_books_returns_list(client):
    r = client.get("/api/books")
    assert r.status_code == 200
    assert r.json() == []


def test_post_book_embeds_author(client, create_author):
    author = create_author("Yuval Noah", "Harari")

    r = client.post("/api/books", json=_payload(author["id"]))
    assert r.status_code == 201
    body = r.json()
    assert body["title"] == "Sapiens"
    assert body["isFiction"] is False
    assert body["author"] == {"id": author["id"], "firstName": "Yuval Noah", "lastName": "Harari"}
    assert "authorId" not in body

    r2 = client.get(f"/api/books/{body['id']}")
    assert r2.status_code == 200
    assert r2.json() == body


def test_list_books_embeds_author(client, create_author, create_book):
    author = create_author("Yuval Noah", "Harari")
    create_book(author_id=author["id"])

    books = client.get("/api/books").json()
    assert len(books) == 1
    assert books[0]["author"]["firstName"] == "Yuval Noah"
    assert books[0]["author"]["lastName"] == "Harari"


def test_date_published_round_trip(client, create_author):
    author = create_author()

    r = client.post("/api/books", json=_payload(author["id"], datePublished="2023-01-02"))
    assert r.status_code == 201
    assert r.json()["datePublished"] == "2023-01-02"

    fetched = client.get(f"/api/books/{r.json()['id']}").json()
    assert fetched["datePublished"] == "2023-01-02"


def test_date_published_accepts_datetime(client, create_author):
    author = create_author()
    r = client.post("/api/books", json=_payload(author["id"], datePublished="2023-01-02T10:30:00Z"))
    assert r.status_code == 201
    assert r.json()["datePublished"] == "2023-01-02"


def test_malformed_date_returns_400_and_creates_nothing(client, create_author):
    author = create_author()
    r = client.post("/api/books", json=_payload(author["id"], datePublished="not a date"))
    assert r.status_code == 400
    assert r.json()["code"] == "MALFORMED_DATE"
    assert client.get("/api/books").json() == []


def test_post_book_missing_field_returns_400(client, create_author):
    author = create_author()
    payload = _payload(author["id"])
    del payload["isFiction"]

    r = client.post("/api/books", json=payload)
    assert r.status_code == 400
    assert any(e["field"].endswith("isFiction") for e in r.json()["errors"])
    assert client.get("/api/books").json() == []


def test_post_book_wrong_types_return_400(client, create_author):
    author = create_author()

    assert client.post("/api/books", json=_payload(author["id"], authorId="abc")).status_code == 400
    assert client.post("/api/books", json=_payload(author["id"], datePublished=20230102)).status_code == 400
    assert client.post("/api/books", json=_payload(author["id"], isFiction="maybe")).status_code == 400
    assert client.get("/api/books").json() == []


def test_post_book_with_unknown_author_returns_409(client):
    r = client.post("/api/books", json=_payload(999999999))
    assert r.status_code == 409
    assert r.json()["detail"] == "author 999999999 does not exist"
    assert client.get("/api/books").json() == []


def test_get_book_404(client):
    r = client.get("/api/books/999999999")
    assert r.status_code == 404
    assert r.json()["detail"] == "book 999999999 could not be found"


def test_get_book_non_numeric_id_is_not_found(client):
    assert client.get("/api/books/abc").status_code == 404


def test_put_book_replaces_fields(client, create_author, create_book):
    book = create_book()
    new_author = create_author("Antoine", "de Saint-Exupery")

    payload = _payload(
        new_author["id"],
        title="The Little Prince",
        datePublished="1943-04-06",
        isFiction=True,
    )
    r = client.put(f"/api/books/{book['id']}", json=payload)
    assert r.status_code == 200
    body = r.json()
    assert body == {
        "id": book["id"],
        "title": "The Little Prince",
        "datePublished": "1943-04-06",
        "isFiction": True,
        "author": {"id": new_author["id"], "firstName": "Antoine", "lastName": "de Saint-Exupery"},
    }
    assert client.get(f"/api/books/{book['id']}").json() == body


def test_put_book_with_unknown_author_returns_409(client, create_book):
    book = create_book()
    r = client.put(f"/api/books/{book['id']}", json=_payload(424242))
    assert r.status_code == 409
    assert client.get(f"/api/books/{book['id']}").json() == book


def test_put_unknown_book_returns_404(client, create_author):
    author = create_author()
    r = client.put("/api/books/31337", json=_payload(author["id"]))
    assert r.status_code == 404
    assert r.json()["code"] == "BOOK_NOT_FOUND"


def test_delete_book_removes_it(client, create_book):
    book = create_book()

    r = client.delete(f"/api/books/{book['id']}")
    assert r.status_code == 200
    assert r.json() == {"message": "book was deleted"}

    assert client.get(f"/api/books/{book['id']}").status_code == 404


def test_delete_unknown_book_returns_404(client):
    assert client.delete("/api/books/31337").status_code == 404


def test_author_can_be_deleted_after_its_books(client, create_author, create_book):
    author = create_author()
    book = create_book(author_id=author["id"])

    assert client.delete(f"/api/books/{book['id']}").status_code == 200
    assert client.delete(f"/api/authors/{author['id']}").status_code == 204


def test_get_book_id_out_of_integer_range_is_not_found(client, create_book):
    create_book()
    assert client.get("/api/books/99999999999999999999").status_code == 404
    assert client.delete("/api/books/99999999999999999999").status_code == 404


def test_get_book_id_with_numeric_prefix(client, create_book):
    book = create_book()
    assert client.get(f"/api/books/{book['id']}xyz").json() == book


def test_post_book_author_id_out_of_integer_range_returns_400(client):
    r = client.post("/api/books", json=_payload(99999999999999999999))
    assert r.status_code == 400
    assert any(e["field"].endswith("authorId") for e in r.json()["errors"])

    assert client.post("/api/books", json=_payload(0)).status_code == 400
    assert client.get("/api/books").json() == []
