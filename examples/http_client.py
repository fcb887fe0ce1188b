"""
HTTP Client Example - Cookie session flow against a running server.

Needs httpx: pip install -e ".[examples]"

Start the server first:
    SEED_EMAIL=test@example.com SEED_PASSWORD=password python -m session_gate
"""

import os

import httpx

BASE_URL = os.getenv("SESSION_GATE_URL", "http://127.0.0.1:8000")


def main():
    with httpx.Client(base_url=BASE_URL) as client:
        response = client.get("/login")
        print(f"GET /login -> {response.status_code} {response.json()}")

        # Prime the CSRF cookie, then echo it back in a header
        client.get("/csrf-cookie")
        headers = {"X-XSRF-TOKEN": client.cookies["XSRF-TOKEN"]}

        response = client.post(
            "/login",
            json={"email": "test@example.com", "password": "password"},
            headers=headers,
        )
        print(f"POST /login -> {response.status_code} {response.json()}")

        response = client.get("/user")
        print(f"GET /user -> {response.status_code} {response.json()}")

        headers = {"X-XSRF-TOKEN": client.cookies["XSRF-TOKEN"]}
        response = client.post("/logout", headers=headers)
        print(f"POST /logout -> {response.status_code} {response.json()}")

        response = client.get("/user")
        print(f"GET /user -> {response.status_code} {response.json()}")


if __name__ == "__main__":
    main()
