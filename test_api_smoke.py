"""Smoke test against a running server: auth, role guard, profiles, media, admin gate."""
import io
import os
import sys
import time

import requests

BASE = os.environ.get("SMOKE_BASE_URL", "http://localhost:8000/api")
AUTH = f"{BASE}/auth"
passed = 0
failed = 0
TS = str(int(time.time()))  # unique suffix for idempotency

# Smallest valid JPEG header; the server checks type and size, not pixels
JPEG = b"\xff\xd8\xff\xe0" + b"0" * 64


def check(label, condition, detail=""):
    global passed, failed
    if condition:
        passed += 1
        print(f"  PASS  {label}")
    else:
        failed += 1
        print(f"  FAIL  {label} — {detail}")


def register_and_login(name, role):
    email = f"{name}_{TS}@example.com"
    requests.post(f"{AUTH}/register", json={
        "username": f"{name}_{TS}",
        "email": email,
        "password": "Secret1",
        "confirmPassword": "Secret1",
        "role": role,
    })
    r = requests.post(f"{AUTH}/login", json={"email": email, "password": "Secret1"})
    return {"Authorization": f"Bearer {r.json()['data']['token']}"}


def photo(name):
    return ("photos", (name, io.BytesIO(JPEG), "image/jpeg"))


def main():
    # ==================================================================
    print("\n=== AUTH ===")
    # ==================================================================
    payload = {
        "username": f"smoke_{TS}",
        "email": f"smoke_{TS}@example.com",
        "password": "Secret1",
        "confirmPassword": "Secret1",
        "role": "musician",
    }
    r = requests.post(f"{AUTH}/register", json=payload)
    check("Register", r.status_code == 201, f"{r.status_code} {r.text}")

    r = requests.post(f"{AUTH}/register", json=payload)
    check("Duplicate register is 409", r.status_code == 409, f"{r.status_code}")

    r = requests.post(f"{AUTH}/login", json={"email": payload["email"], "password": "Wrong1"})
    check("Wrong password is 401", r.status_code == 401, f"{r.status_code}")

    r = requests.post(f"{AUTH}/login", json={"email": f"nobody_{TS}@x.com", "password": "Secret1"})
    check("Unknown email is 404", r.status_code == 404, f"{r.status_code}")

    r = requests.post(f"{AUTH}/login", json={"email": payload["email"], "password": "Secret1"})
    check("Login", r.status_code == 200 and "token" in r.json()["data"], f"{r.status_code}")
    musician = {"Authorization": f"Bearer {r.json()['data']['token']}"}

    r = requests.get(f"{AUTH}/me", headers=musician)
    check("Me", r.status_code == 200 and r.json()["data"]["role"] == "musician")

    r = requests.get(f"{AUTH}/me", headers={"Authorization": "Bearer nope"})
    check("Bad token is 401", r.status_code == 401, f"{r.status_code}")

    organizer = register_and_login("smoke_org", "organizer")

    # ==================================================================
    print("\n=== MUSICIAN PROFILE ===")
    # ==================================================================
    profile = {
        "stageName": f"Smoke {TS}",
        "phone": "9800000000",
        "location": {"city": "Kathmandu", "state": "Bagmati", "country": "Nepal"},
        "genres": ["Rock"],
        "instruments": ["Guitar"],
        "experienceYears": 4,
    }
    r = requests.post(f"{BASE}/musicians/profile", json=profile, headers=organizer)
    check("Organizer cannot create musician profile", r.status_code == 403, f"{r.status_code}")

    r = requests.post(f"{BASE}/musicians/profile", json=profile, headers=musician)
    check("Create musician profile", r.status_code == 201, f"{r.status_code} {r.text}")
    profile_id = r.json()["data"]["id"]

    r = requests.post(f"{BASE}/musicians/profile", json=profile, headers=musician)
    check("Second profile is 409", r.status_code == 409, f"{r.status_code}")

    r = requests.get(f"{BASE}/musicians/profile/{profile_id}")
    check("Public read", r.status_code == 200)

    r = requests.get(f"{BASE}/musicians/search", params={"genres": "rock", "limit": 5})
    check("Search", r.status_code == 200 and r.json()["data"]["total"] >= 1, f"{r.status_code}")

    r = requests.patch(f"{BASE}/musicians/availability", json={"isAvailable": "yes"}, headers=musician)
    check("Non-boolean availability is 400", r.status_code == 400, f"{r.status_code}")

    # ==================================================================
    print("\n=== MEDIA ===")
    # ==================================================================
    r = requests.post(
        f"{BASE}/musicians/photos",
        files=[photo(f"p{i}.jpg") for i in range(9)],
        headers=musician,
    )
    check("Add 9 photos", r.status_code == 200 and len(r.json()["data"]["photos"]) == 9)
    photos = r.json()["data"]["photos"]

    r = requests.post(
        f"{BASE}/musicians/photos",
        files=[photo("x.jpg"), photo("y.jpg")],
        headers=musician,
    )
    check("Cap of 10 enforced", r.status_code == 400, f"{r.status_code} {r.text}")

    r = requests.get(f"{BASE}/musicians/profile", headers=musician)
    check("Still 9 photos", len(r.json()["data"]["photos"]) == 9)

    r = requests.delete(f"{BASE}/musicians/photos", json={"photoUrl": photos[0]}, headers=musician)
    check("Remove photo", r.status_code == 200 and len(r.json()["data"]["photos"]) == 8)

    r = requests.delete(f"{BASE}/musicians/photos", json={"photoUrl": photos[0]}, headers=musician)
    check("Removed photo is 404", r.status_code == 404, f"{r.status_code}")

    r = requests.delete(f"{BASE}/musicians/profile", headers=musician)
    check("Delete profile", r.status_code == 200)

    # ==================================================================
    print("\n=== ADMIN ===")
    # ==================================================================
    r = requests.get(f"{BASE}/admin/users", headers=musician)
    check("Musician cannot list users", r.status_code == 403, f"{r.status_code}")

    r = requests.get(f"{BASE}/admin/users")
    check("Anonymous admin access is 401", r.status_code == 401, f"{r.status_code}")

    # ==================================================================
    print(f"\n{'='*50}")
    print(f"Results: {passed} passed, {failed} failed out of {passed + failed} tests")
    if failed:
        print("SOME TESTS FAILED")
        sys.exit(1)
    else:
        print("ALL TESTS PASSED")


if __name__ == "__main__":
    main()
