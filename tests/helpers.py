"""
Request helpers shared by the API integration tests.
"""


def register(client, name="Test User", email="test@example.com", password="password123"):
    """Register through the API and return (user dict, token)."""
    response = client.post(
        "/api/v1/auth/register",
        json={"name": name, "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    data = response.json()
    return data["user"], data["token"]


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}
