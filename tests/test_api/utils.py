# tests/test_api/utils.py

# Session cookies are marked Secure, so the client has to talk https
BASE_URL = "https://testserver"

def register(client, email="a@x.com", password="pw123"):
    return client.post("/auth/register", json={"email": email, "password": password})

def add_book(client, book_id, **details):
    if details:
        return client.post(f"/mybooks/{book_id}", json=details)
    return client.post(f"/mybooks/{book_id}")
